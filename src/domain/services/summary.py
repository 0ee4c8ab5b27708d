"""Domain services for receivable/payable ledger summaries."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.ledger import (
    AccountSummary,
    EntryType,
    LedgerSummary,
    Movement,
    Party,
    Receipt,
    SummaryTotals,
)
from src.domain.policies.account_filters import (
    AccountTypeFilter,
    filter_parties,
)


def aggregate_ledger_summary(
    accounts: Iterable[Party],
    movements: Iterable[Movement],
    receipts: Iterable[Receipt],
    account_filter: AccountTypeFilter | None = None,
) -> list[AccountSummary]:
    """Compute receivable and payable totals per account.

    Debit movements add to receivable. Credit movements and receipts add to
    payable. Movements and receipts of accounts outside the filtered
    universe are ignored, and accounts without any activity are dropped.

    Args:
        accounts: Account universe with metadata used by the filter.
        movements: Journal movements of any account.
        receipts: Receipts of any account.
        account_filter: Optional customer type restriction.

    Returns:
        list[AccountSummary]: Summaries in account universe order.
    """
    universe = filter_parties(accounts, account_filter)
    receivable: dict[str, Decimal] = {}
    payable: dict[str, Decimal] = {}
    for party in universe:
        receivable[party.id] = Decimal("0")
        payable[party.id] = Decimal("0")

    for movement in movements:
        if movement.account_ref not in receivable:
            continue
        if movement.kind is EntryType.DEBIT:
            receivable[movement.account_ref] += movement.amount
        else:
            payable[movement.account_ref] += movement.amount

    for receipt in receipts:
        if receipt.account_ref not in payable:
            continue
        payable[receipt.account_ref] += receipt.amount

    summaries: list[AccountSummary] = []
    seen: set[str] = set()
    for party in universe:
        if party.id in seen:
            continue
        seen.add(party.id)
        if receivable[party.id] == 0 and payable[party.id] == 0:
            continue
        summaries.append(
            AccountSummary(
                account_ref=party.id,
                account_name=party.name,
                receivable_amount=receivable[party.id],
                payable_amount=payable[party.id],
            )
        )
    return summaries


def compute_summary_totals(rows: Iterable[AccountSummary]) -> SummaryTotals:
    """Fold summary rows into grand totals."""
    total_receivable = Decimal("0")
    total_payable = Decimal("0")
    for row in rows:
        total_receivable += row.receivable_amount
        total_payable += row.payable_amount
    return SummaryTotals(
        total_receivable=total_receivable,
        total_payable=total_payable,
    )


def build_ledger_summary(
    accounts: Iterable[Party],
    movements: Iterable[Movement],
    receipts: Iterable[Receipt],
    account_filter: AccountTypeFilter | None = None,
) -> LedgerSummary:
    """Aggregate summary rows and fold them into grand totals."""
    rows = aggregate_ledger_summary(
        accounts,
        movements,
        receipts,
        account_filter=account_filter,
    )
    return LedgerSummary(rows=rows, totals=compute_summary_totals(rows))


__all__ = [
    "aggregate_ledger_summary",
    "compute_summary_totals",
    "build_ledger_summary",
]
