"""SQLAlchemy key-value store implementation."""

from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from walletdues.database.base import KeyValueStore
from walletdues.database.models import KeyValueEntry, create_session_factory
from walletdues.domain.errors import PersistenceError


class SQLAlchemyStore(KeyValueStore):
    """SQLAlchemy-based implementation of KeyValueStore."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def get(self, key: str) -> Optional[bytes]:
        """Return the blob stored under key, or None."""
        session = self._get_session()
        try:
            entry = session.get(KeyValueEntry, key)
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not read '{key}': {e}") from e
        if entry is None:
            return None
        return bytes(entry.value)

    def set(self, key: str, value: bytes) -> None:
        """Insert or replace the blob stored under key."""
        session = self._get_session()
        try:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                session.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not write '{key}': {e}") from e
