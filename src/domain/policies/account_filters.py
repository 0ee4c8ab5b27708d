"""Account universe filters for ledger summaries."""

from collections.abc import Iterable
from enum import Enum

from src.domain.errors import LedgerValidationError
from src.domain.models.ledger import Party


class AccountTypeFilter(str, Enum):
    """Customer type selector based on GST registration."""

    ALL = "all"
    REGISTERED = "registered"
    NON_REGISTERED = "non-registered"


def parse_account_filter(
    value: str | AccountTypeFilter | None,
) -> AccountTypeFilter:
    """Parse a customer type value into an AccountTypeFilter.

    Args:
        value: Raw filter value such as ``"registered"``. None means all.

    Returns:
        AccountTypeFilter: Parsed filter.

    Raises:
        LedgerValidationError: If the value is not a known customer type.
    """
    if value is None:
        return AccountTypeFilter.ALL
    if isinstance(value, AccountTypeFilter):
        return value
    cleaned = value.strip().lower().replace("_", "-")
    try:
        return AccountTypeFilter(cleaned)
    except ValueError as exc:
        raise LedgerValidationError(
            f"Unknown customer type: {value!r}"
        ) from exc


def matches_account_filter(
    party: Party,
    account_filter: AccountTypeFilter | None,
) -> bool:
    """Return True when the party belongs to the filtered universe."""
    if account_filter is None or account_filter is AccountTypeFilter.ALL:
        return True
    if account_filter is AccountTypeFilter.REGISTERED:
        return party.is_registered
    return not party.is_registered


def filter_parties(
    parties: Iterable[Party],
    account_filter: AccountTypeFilter | None,
) -> list[Party]:
    """Return parties matching the filter, preserving input order."""
    return [
        party
        for party in parties
        if matches_account_filter(party, account_filter)
    ]


__all__ = [
    "AccountTypeFilter",
    "parse_account_filter",
    "matches_account_filter",
    "filter_parties",
]
