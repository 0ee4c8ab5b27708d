"""Database ports for the showroom ledger.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the showroom database engine.

    Application code can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the showroom database.

        Returns:
            Engine: SQLAlchemy engine holding customers, journal entries
            and receipts.
        """


__all__ = ["DatabaseEnginePort"]
