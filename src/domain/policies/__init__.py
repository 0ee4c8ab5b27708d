"""Domain policies package."""

from .account_filters import (
    AccountTypeFilter,
    filter_parties,
    matches_account_filter,
    parse_account_filter,
)

__all__ = [
    "AccountTypeFilter",
    "filter_parties",
    "matches_account_filter",
    "parse_account_filter",
]
