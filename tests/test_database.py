"""Tests for key-value store implementations."""

import pytest

from walletdues.database.base import KeyValueStore
from walletdues.database.factories import create_sqlite_store
from walletdues.database.memory import InMemoryStore
from walletdues.database.sqlalchemy_db import SQLAlchemyStore


class TestSQLAlchemyStore:
    """Tests for the SQLite-backed store."""

    def test_is_key_value_store(self, temp_db):
        assert isinstance(temp_db, KeyValueStore)

    def test_missing_key_returns_none(self, temp_db):
        assert temp_db.get("missing") is None

    def test_set_and_get(self, temp_db):
        temp_db.set("state", b'{"contacts": []}')
        assert temp_db.get("state") == b'{"contacts": []}'

    def test_set_overwrites(self, temp_db):
        temp_db.set("state", b"first")
        temp_db.set("state", b"second")
        assert temp_db.get("state") == b"second"

    def test_keys_are_independent(self, temp_db):
        temp_db.set("a", b"1")
        temp_db.set("b", b"2")
        assert temp_db.get("a") == b"1"
        assert temp_db.get("b") == b"2"

    def test_value_survives_reconnect(self, temp_db):
        temp_db.set("state", b"persisted")
        temp_db.disconnect()

        reopened = create_sqlite_store(database_path=temp_db.database_path)
        try:
            assert reopened.get("state") == b"persisted"
        finally:
            reopened.disconnect()


class TestInMemoryStore:
    """Tests for the in-memory store."""

    def test_initial_values(self):
        store = InMemoryStore({"state": b"x"})
        assert store.get("state") == b"x"
        assert store.get("other") is None

    def test_set_overwrites(self, memory_store):
        memory_store.set("state", b"first")
        memory_store.set("state", b"second")
        assert memory_store.get("state") == b"second"


class TestFactory:
    """Tests for create_sqlite_store path resolution."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "ledger.db"
        store = create_sqlite_store(database_path=str(path))
        assert isinstance(store, SQLAlchemyStore)
        assert store.database_url == f"sqlite:///{path}"

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "from_env.db"
        monkeypatch.setenv("WALLETDUES_DB_PATH", str(path))
        store = create_sqlite_store()
        assert store.database_url == f"sqlite:///{path}"

    def test_default_path_in_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv("WALLETDUES_DB_PATH", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        store = create_sqlite_store()
        assert store.database_url == f"sqlite:///{tmp_path / '.walletdues' / 'walletdues.db'}"
        assert (tmp_path / ".walletdues").is_dir()
