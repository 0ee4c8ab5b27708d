"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_ledger_summary import (
    GetLedgerSummaryUseCase,
)
from src.application.use_cases.get_party_ledger import GetPartyLedgerUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_party_ledger_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetPartyLedgerUseCase:
    """Return the party ledger use case configured from settings."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetPartyLedgerUseCase(
        ledger_repository=repository or build_ledger_repository(),
        logger=get_app_logger(),
        strict_amounts=resolved_settings.strict_amounts,
    )


def build_ledger_summary_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetLedgerSummaryUseCase:
    """Return the ledger summary use case."""
    return GetLedgerSummaryUseCase(
        ledger_repository=repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_party_ledger_use_case",
    "build_ledger_summary_use_case",
]
