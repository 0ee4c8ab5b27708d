"""Domain models package."""

from .ledger import (
    AccountSummary,
    EntryType,
    LedgerPage,
    LedgerProjection,
    LedgerSummary,
    Movement,
    MovementWithBalance,
    Party,
    PartyLedgerView,
    Receipt,
    SummaryTotals,
)

__all__ = [
    "AccountSummary",
    "EntryType",
    "LedgerPage",
    "LedgerProjection",
    "LedgerSummary",
    "Movement",
    "MovementWithBalance",
    "Party",
    "PartyLedgerView",
    "Receipt",
    "SummaryTotals",
]
