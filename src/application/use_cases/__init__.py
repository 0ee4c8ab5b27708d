"""Application use cases package."""

from .get_ledger_summary import GetLedgerSummaryUseCase, LedgerSummary
from .get_party_ledger import GetPartyLedgerUseCase, PartyLedgerView

__all__ = [
    "GetLedgerSummaryUseCase",
    "LedgerSummary",
    "GetPartyLedgerUseCase",
    "PartyLedgerView",
]
