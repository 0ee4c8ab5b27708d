"""Domain services package."""

from .ledger import (
    build_ledger_projection,
    closing_balance,
    order_movements,
    paginate,
    project_ledger,
)
from .normalization import coerce_entry_type, normalize_text
from .presentation import balance_label, format_amount, format_balance
from .summary import (
    aggregate_ledger_summary,
    build_ledger_summary,
    compute_summary_totals,
)
from .validation import (
    breakdown_total,
    validate_breakdown,
    validate_movement_amount,
)

__all__ = [
    "build_ledger_projection",
    "closing_balance",
    "order_movements",
    "paginate",
    "project_ledger",
    "coerce_entry_type",
    "normalize_text",
    "balance_label",
    "format_amount",
    "format_balance",
    "aggregate_ledger_summary",
    "build_ledger_summary",
    "compute_summary_totals",
    "breakdown_total",
    "validate_breakdown",
    "validate_movement_amount",
]
