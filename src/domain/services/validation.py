"""Domain validation helpers."""

from collections.abc import Mapping
from decimal import Decimal
from logging import Logger

from src.domain.errors import LedgerValidationError
from src.domain.models.ledger import Movement


def breakdown_total(breakdown: Mapping[str, Decimal | None]) -> Decimal:
    """Return the sum of breakdown values, skipping missing ones."""
    return sum(
        (value for value in breakdown.values() if value is not None),
        Decimal("0"),
    )


def validate_movement_amount(
    movement: Movement,
    logger: Logger,
    *,
    strict: bool = False,
) -> None:
    """Check a movement amount for a negative value.

    Negative amounts are propagated mathematically by the ledger services.
    In strict mode they are rejected instead.

    Args:
        movement: Movement to check.
        logger: Logger used for warnings.
        strict: Raise instead of warning.

    Raises:
        LedgerValidationError: If strict and the amount is negative.
    """
    if movement.amount >= 0:
        return
    message = (
        f"Negative {movement.kind.value} amount for "
        f"account={movement.account_ref} on {movement.date}: {movement.amount}"
    )
    if strict:
        raise LedgerValidationError(message)
    logger.warning(message)


def validate_breakdown(movement: Movement, logger: Logger) -> None:
    """Warn when a non-empty breakdown does not add up to the amount.

    Args:
        movement: Movement carrying the breakdown.
        logger: Logger used for warnings.
    """
    if not movement.breakdown:
        return
    total = breakdown_total(movement.breakdown)
    if total != movement.amount:
        logger.warning(
            f"Breakdown total {total} differs from amount {movement.amount} "
            f"for account={movement.account_ref} on {movement.date}"
        )


__all__ = [
    "breakdown_total",
    "validate_movement_amount",
    "validate_breakdown",
]
