"""Shared pytest fixtures for walletdues tests."""

import tempfile
import os
from datetime import datetime, timedelta, UTC
import pytest

from walletdues.database.factories import create_sqlite_store
from walletdues.database.memory import InMemoryStore
from walletdues.domain.ledger import open_ledger


class FixedClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, 0, tzinfo=UTC)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


class SequentialIds:
    """Deterministic id factory: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


@pytest.fixture
def temp_db():
    """Create a temporary SQLite-backed store for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()

    yield store

    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_store():
    """Create an empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def ledger(memory_store, clock, ids):
    """Create a ledger over an in-memory store with deterministic clock and ids."""
    return open_ledger(memory_store, clock=clock, id_factory=ids)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
