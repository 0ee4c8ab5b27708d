"""Tests for Decimal normalization helpers."""

from decimal import Decimal

import pytest

from src.domain.errors import LedgerValidationError
from src.utils.decimal_utils import coerce_decimal


def test_coerce_decimal_handles_sql_and_json_values() -> None:
    """Numeric columns, JSON numbers and strings become Decimal."""
    existing = Decimal("12.50")

    assert coerce_decimal(existing) is existing
    assert coerce_decimal(200) == Decimal("200")
    assert coerce_decimal(0.1) == Decimal("0.1")
    assert coerce_decimal(" 1,20,000.50 ") == Decimal("120000.50")


def test_coerce_decimal_treats_missing_values_as_zero() -> None:
    """None and blank strings count as zero."""
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal("") == Decimal("0")
    assert coerce_decimal("   ") == Decimal("0")


def test_coerce_decimal_rejects_text() -> None:
    """Non-numeric strings are validation errors."""
    with pytest.raises(LedgerValidationError, match="Invalid amount"):
        coerce_decimal("n/a")
