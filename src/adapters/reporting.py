"""Display rows for party ledger and ledger summary reports."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models.ledger import LedgerSummary, PartyLedgerView
from src.domain.services.presentation import format_amount, format_balance


LEDGER_CLOSING_LABEL = "CLOSING BALANCE"
SUMMARY_TOTAL_LABEL = "GRAND TOTAL"


def build_ledger_rows(
    view: PartyLedgerView,
    breakdown_fields: Sequence[tuple[str, str]],
) -> list[dict[str, str]]:
    """Return ledger display rows followed by the closing balance row.

    Args:
        view: Projected party ledger.
        breakdown_fields: (field id, label) pairs shown as columns.

    Returns:
        list[dict[str, str]]: One row per entry plus a closing row.
    """
    rows: list[dict[str, str]] = []
    for entry in view.entries:
        movement = entry.movement
        row = {
            "Date": movement.date.isoformat(),
            "Party Name": view.party.name,
            "Model Name": movement.model_name or "",
            "Chassis No": movement.chassis_no or "",
            "Invoice No": movement.invoice_no or "",
            "Particulars": movement.particulars or "",
        }
        for field_id, label in breakdown_fields:
            row[label] = format_amount(
                movement.breakdown.get(field_id) or Decimal("0")
            )
        row["Debit"] = format_amount(movement.debit)
        row["Credit"] = format_amount(movement.credit)
        row["Balance"] = format_balance(entry.balance)
        rows.append(row)
    rows.append(
        {
            "Particulars": LEDGER_CLOSING_LABEL,
            "Balance": format_balance(view.closing_balance),
        }
    )
    return rows


def build_summary_rows(summary: LedgerSummary) -> list[dict[str, str]]:
    """Return summary display rows followed by the grand total row."""
    rows = [
        {
            "Customer Name": row.account_name,
            "Receivable (Dr)": format_amount(row.receivable_amount),
            "Payable (Cr)": format_amount(row.payable_amount),
            "Net Balance": format_balance(row.net_balance),
        }
        for row in summary.rows
    ]
    rows.append(
        {
            "Customer Name": SUMMARY_TOTAL_LABEL,
            "Receivable (Dr)": format_amount(summary.totals.total_receivable),
            "Payable (Cr)": format_amount(summary.totals.total_payable),
            "Net Balance": format_balance(summary.totals.grand_total),
        }
    )
    return rows


def render_table(rows: list[dict[str, str]]) -> str:
    """Render rows as a plain text table using the union of their keys."""
    if not rows:
        return ""
    columns: list[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    widths = {
        column: max(len(column), *(len(row.get(column, "")) for row in rows))
        for column in columns
    }
    header = " | ".join(column.ljust(widths[column]) for column in columns)
    separator = "-+-".join("-" * widths[column] for column in columns)
    lines = [header, separator]
    for row in rows:
        lines.append(
            " | ".join(
                row.get(column, "").ljust(widths[column]) for column in columns
            )
        )
    return "\n".join(lines)


__all__ = [
    "LEDGER_CLOSING_LABEL",
    "SUMMARY_TOTAL_LABEL",
    "build_ledger_rows",
    "build_summary_rows",
    "render_table",
]
