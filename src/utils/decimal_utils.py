"""Helpers for turning raw showroom amounts into Decimal."""

from decimal import Decimal, InvalidOperation

from src.domain.errors import LedgerValidationError


def coerce_decimal(value) -> Decimal:
    """Normalize a raw amount to Decimal.

    Amounts come from NUMERIC columns or from ``price_breakdown`` JSON,
    where they may be numbers or strings such as ``"1,20,000"``. Missing
    and blank values count as zero.

    Args:
        value: Raw amount from SQL or JSON.

    Returns:
        Decimal: Normalized amount.

    Raises:
        LedgerValidationError: If the value is not a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    raw = str(value).strip().replace(",", "")
    if not raw:
        return Decimal("0")
    try:
        return Decimal(raw)
    except InvalidOperation as exc:
        raise LedgerValidationError(f"Invalid amount: {value!r}") from exc


__all__ = ["coerce_decimal"]
