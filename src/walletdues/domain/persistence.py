"""Snapshot persistence on top of an opaque key-value store."""

import json
from datetime import datetime
from typing import Callable, Iterable

import structlog

from walletdues.database.base import KeyValueStore
from walletdues.domain.entities import Contact, Expense, Snapshot
from walletdues.domain.errors import PersistenceError, ValidationError
from walletdues.domain.serialization import snapshot_from_dict, snapshot_to_dict, utc_now

STORAGE_KEY = "walletdues.snapshot"

logger = structlog.get_logger(__name__)


class SnapshotRepository:
    """Reads and writes the whole ledger as one JSON document."""

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], datetime] = utc_now,
        key: str = STORAGE_KEY,
    ):
        """Initialize snapshot repository.

        Args:
            store: Key-value store holding the snapshot
            clock: Source of the ``lastUpdated`` timestamp
            key: Storage key for the snapshot
        """
        self.store = store
        self.clock = clock
        self.key = key

    def load(self) -> Snapshot:
        """Load the stored snapshot.

        Returns:
            The stored snapshot, or an empty one if nothing usable is stored.
            Never raises.
        """
        try:
            raw = self.store.get(self.key)
        except PersistenceError as e:
            logger.warning("snapshot_load_failed", key=self.key, reason=str(e))
            return Snapshot()

        if raw is None:
            return Snapshot()

        try:
            return snapshot_from_dict(json.loads(raw.decode("utf-8")))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError, ValidationError) as e:
            logger.warning("snapshot_load_failed", key=self.key, reason=str(e))
            return Snapshot()

    def save(self, contacts: Iterable[Contact], expenses: Iterable[Expense]) -> Snapshot:
        """Write contacts and expenses, stamped with the current time.

        Returns:
            The snapshot that was written

        Raises:
            PersistenceError: If the store rejects the write
        """
        snapshot = Snapshot(
            contacts=tuple(contacts),
            expenses=tuple(expenses),
            last_updated=self.clock(),
        )
        try:
            payload = json.dumps(snapshot_to_dict(snapshot), ensure_ascii=False, allow_nan=False)
        except ValueError as e:
            raise PersistenceError(f"Snapshot is not serializable: {e}") from e
        self.store.set(self.key, payload.encode("utf-8"))
        return snapshot
