"""SQLAlchemy engine for the showroom database.

The database URL is read from ``LEDGER_DB_URL`` (or a local ``.env``) the
first time an engine is requested and the engine is reused afterwards.
"""

import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


LEDGER_DB_URL_ENV = "LEDGER_DB_URL"

_POOL_OPTIONS = {
    "poolclass": QueuePool,
    "pool_size": 5,
    "max_overflow": 5,
    "pool_pre_ping": True,
}

_engines: dict[str, Engine] = {}


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` first.

    Raises:
        RuntimeError: If the variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    return create_engine(db_url, future=True, **_POOL_OPTIONS)


def get_ledger_engine() -> Engine:
    """Return the shared engine for the showroom database."""
    engine = _engines.get(LEDGER_DB_URL_ENV)
    if engine is None:
        engine = _create_engine(_get_env_var(LEDGER_DB_URL_ENV))
        _engines[LEDGER_DB_URL_ENV] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the shared showroom engine."""

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()


__all__ = [
    "LEDGER_DB_URL_ENV",
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
