"""Database infrastructure for the FinVault dashboard.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine holding ledger tables. It belongs to the infrastructure layer because
it deals with external systems (SQLite or PostgreSQL).
"""

import os
from pathlib import Path
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a local ``.env`` file are loaded first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    url = make_url(db_url)
    if not url.drivername.startswith("sqlite"):
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    _ensure_sqlite_directory(db_url)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_finance_engine: Optional[Engine] = None


def get_finance_engine(db_url: str | None = None) -> Engine:
    """Get a singleton SQLAlchemy engine for the finance database.

    Args:
        db_url: Optional URL; ``FINVAULT_DB_URL`` is read when omitted.

    Returns:
        Engine: Lazily initialized engine connected to the ledger storage.
    """
    global _finance_engine
    if _finance_engine is None:
        resolved_url = db_url or _get_env_var("FINVAULT_DB_URL")
        _finance_engine = _create_engine(resolved_url)
    return _finance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application code can depend only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger storage.
        """
        return get_finance_engine(self._db_url)


__all__ = [
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
