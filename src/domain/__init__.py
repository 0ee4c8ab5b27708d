"""Domain package for ledger rules and core models."""

from .constants import CREDIT_LABEL, DEBIT_LABEL, DEFAULT_BREAKDOWN_FIELDS
from .errors import LedgerValidationError
from .models import (
    AccountSummary,
    EntryType,
    LedgerProjection,
    LedgerSummary,
    Movement,
    MovementWithBalance,
    Party,
    Receipt,
    SummaryTotals,
)
from .policies import AccountTypeFilter, parse_account_filter
from .services import (
    aggregate_ledger_summary,
    build_ledger_projection,
    build_ledger_summary,
    closing_balance,
    compute_summary_totals,
    format_balance,
    project_ledger,
)

__all__ = [
    "CREDIT_LABEL",
    "DEBIT_LABEL",
    "DEFAULT_BREAKDOWN_FIELDS",
    "LedgerValidationError",
    "AccountSummary",
    "EntryType",
    "LedgerProjection",
    "LedgerSummary",
    "Movement",
    "MovementWithBalance",
    "Party",
    "Receipt",
    "SummaryTotals",
    "AccountTypeFilter",
    "parse_account_filter",
    "aggregate_ledger_summary",
    "build_ledger_projection",
    "build_ledger_summary",
    "closing_balance",
    "compute_summary_totals",
    "format_balance",
    "project_ledger",
]
