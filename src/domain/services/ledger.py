"""Domain services for party ledger projection."""

from collections.abc import Iterable
from decimal import Decimal
from math import ceil

from src.domain.errors import LedgerValidationError
from src.domain.models.ledger import (
    LedgerPage,
    LedgerProjection,
    Movement,
    MovementWithBalance,
)


def order_movements(movements: Iterable[Movement]) -> list[Movement]:
    """Return movements ascending by date, ties broken by creation order.

    The sort is stable, so movements sharing date and sequence keep their
    input order.
    """
    return sorted(movements, key=lambda item: (item.date, item.sequence))


def project_ledger(movements: Iterable[Movement]) -> list[MovementWithBalance]:
    """Attach a running balance to each movement of a single account.

    Movements must already be in ledger order. None are skipped, merged or
    reordered: each one moves the balance by its signed amount.

    Args:
        movements: Ordered movements of one account.

    Returns:
        list[MovementWithBalance]: Movements with the balance after each.
    """
    balance = Decimal("0")
    projected: list[MovementWithBalance] = []
    for movement in movements:
        balance += movement.signed_amount
        projected.append(MovementWithBalance(movement=movement, balance=balance))
    return projected


def closing_balance(entries: list[MovementWithBalance]) -> Decimal:
    """Return the balance after the last entry, or zero for no entries."""
    if not entries:
        return Decimal("0")
    return entries[-1].balance


def build_ledger_projection(movements: Iterable[Movement]) -> LedgerProjection:
    """Project movements and compute the closing balance."""
    entries = project_ledger(movements)
    return LedgerProjection(
        entries=entries,
        closing_balance=closing_balance(entries),
    )


def paginate(
    entries: list[MovementWithBalance],
    page: int,
    page_size: int,
) -> LedgerPage:
    """Slice projected entries into a 1-based page.

    Balances are computed over the full ledger before paging, so a page
    shows the true running balance of each row.

    Args:
        entries: Projected ledger rows.
        page: 1-based page number.
        page_size: Rows per page.

    Returns:
        LedgerPage: Rows of the page and the total number of pages.

    Raises:
        LedgerValidationError: If page_size is lower than 1.
    """
    if page_size < 1:
        raise LedgerValidationError(f"Invalid page size: {page_size}")
    total_pages = ceil(len(entries) / page_size)
    if page < 1:
        return LedgerPage(entries=[], page=page, total_pages=total_pages)
    start = (page - 1) * page_size
    return LedgerPage(
        entries=entries[start:start + page_size],
        page=page,
        total_pages=total_pages,
    )


__all__ = [
    "order_movements",
    "project_ledger",
    "closing_balance",
    "build_ledger_projection",
    "paginate",
]
