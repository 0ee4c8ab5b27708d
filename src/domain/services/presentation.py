"""Display rules for ledger balances."""

from decimal import Decimal

from src.domain.constants import CREDIT_LABEL, DEBIT_LABEL


def balance_label(balance: Decimal) -> str:
    """Return "Dr" for a positive balance and "Cr" otherwise."""
    return DEBIT_LABEL if balance > 0 else CREDIT_LABEL


def format_amount(amount: Decimal) -> str:
    """Format an amount with two decimals."""
    return f"{amount:.2f}"


def format_balance(balance: Decimal) -> str:
    """Format a balance as its magnitude followed by its Dr/Cr label.

    Args:
        balance: Signed balance (positive means the party owes the business).

    Returns:
        str: Display value such as ``"800.00 Dr"`` or ``"0.00 Cr"``.
    """
    return f"{format_amount(abs(balance))} {balance_label(balance)}"


__all__ = ["balance_label", "format_amount", "format_balance"]
