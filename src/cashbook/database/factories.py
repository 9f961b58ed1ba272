"""Construction of the ledger store."""

import os
from pathlib import Path
from typing import Optional

from cashbook.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV_VAR = "CASHBOOK_DB_PATH"
DEFAULT_DB_PATH = Path.home() / ".cashbook" / "cashbook.db"
IN_MEMORY = ":memory:"


def resolve_database_path(database_path: Optional[str] = None) -> str:
    """Pick the ledger file: explicit path, then CASHBOOK_DB_PATH, then ~/.cashbook.

    An empty environment variable counts as unset. The parent directory of a
    file path is created if needed; ``:memory:`` is returned unchanged.
    """
    chosen = database_path or os.environ.get(DB_PATH_ENV_VAR) or str(DEFAULT_DB_PATH)
    if chosen == IN_MEMORY:
        return chosen

    path = Path(chosen).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return str(path)


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create the SQLite-backed store for a ledger file.

    Args:
        database_path: Ledger file, or None to resolve it from the environment

    Returns:
        SQLAlchemyDatabase, not yet connected
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
