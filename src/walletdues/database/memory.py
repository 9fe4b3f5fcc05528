"""In-memory key-value store."""

from typing import Optional

from walletdues.database.base import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Dictionary-backed store, used for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, bytes]] = None):
        self._data: dict[str, bytes] = dict(initial or {})

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)
