"""Store factory functions."""

import os
from pathlib import Path
from typing import Optional

from walletdues.database.sqlalchemy_db import SQLAlchemyStore

DB_PATH_ENV = "WALLETDUES_DB_PATH"


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyStore:
    """Create a SQLite-backed key-value store.

    Args:
        database_path: Path to SQLite database file. If None, checks WALLETDUES_DB_PATH
            environment variable, then defaults to ~/.walletdues/walletdues.db

    Returns:
        SQLAlchemyStore instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        db_dir = Path.home() / ".walletdues"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "walletdues.db")

    return SQLAlchemyStore(f"sqlite:///{database_path}")
