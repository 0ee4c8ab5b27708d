"""Tests for Dr/Cr balance display rules."""

from decimal import Decimal

from src.domain.services.presentation import (
    balance_label,
    format_amount,
    format_balance,
)


def test_positive_balance_is_debit() -> None:
    """Positive balances mean the party owes the business."""
    assert balance_label(Decimal("0.01")) == "Dr"
    assert format_balance(Decimal("800")) == "800.00 Dr"


def test_zero_and_negative_balances_are_credit() -> None:
    """Zero and negative balances are labelled Cr with their magnitude."""
    assert balance_label(Decimal("0")) == "Cr"
    assert format_balance(Decimal("0")) == "0.00 Cr"
    assert format_balance(Decimal("-1234.5")) == "1234.50 Cr"


def test_format_amount_uses_two_decimals() -> None:
    """Amounts are displayed with two decimals."""
    assert format_amount(Decimal("7")) == "7.00"
    assert format_amount(Decimal("7.456")) == "7.46"
