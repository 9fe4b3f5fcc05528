"""Key-value storage layer for walletdues."""

from walletdues.database.base import KeyValueStore
from walletdues.database.memory import InMemoryStore
from walletdues.database.factories import create_sqlite_store

__all__ = ["KeyValueStore", "InMemoryStore", "create_sqlite_store"]
