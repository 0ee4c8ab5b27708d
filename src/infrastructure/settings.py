"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_BREAKDOWN_FIELDS, DEFAULT_PAGE_SIZE
from src.domain.errors import LedgerValidationError
from src.domain.policies.account_filters import (
    AccountTypeFilter,
    parse_account_filter,
)
from src.infrastructure.logging.logger import get_app_logger


_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for ledger computations and adapters.

    Attributes:
        strict_amounts: Reject negative amounts instead of warning.
        default_customer_type: Customer type used by the summary CLI.
        breakdown_fields: (field id, label) pairs shown as ledger columns.
        page_size: Number of ledger rows per page.
    """

    strict_amounts: bool = False
    default_customer_type: AccountTypeFilter = AccountTypeFilter.ALL
    breakdown_fields: tuple[tuple[str, str], ...] = DEFAULT_BREAKDOWN_FIELDS
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        strict = (
            os.getenv("LEDGER_STRICT_AMOUNTS", "false").strip().lower()
            in _TRUE_VALUES
        )
        return cls(
            strict_amounts=strict,
            default_customer_type=cls._parse_customer_type(
                os.getenv("LEDGER_CUSTOMER_TYPE"),
                logger=logger,
            ),
            breakdown_fields=cls._parse_breakdown_fields(
                os.getenv("LEDGER_BREAKDOWN_FIELDS"),
            ),
            page_size=cls._parse_page_size(
                os.getenv("LEDGER_PAGE_SIZE"),
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_customer_type(raw: str | None, logger) -> AccountTypeFilter:
        try:
            return parse_account_filter(raw)
        except LedgerValidationError:
            logger.warning(
                f"Invalid LEDGER_CUSTOMER_TYPE '{raw}'. Falling back to 'all'."
            )
            return AccountTypeFilter.ALL

    @staticmethod
    def _parse_breakdown_fields(
        raw: str | None,
    ) -> tuple[tuple[str, str], ...]:
        """Parse ``id:Label`` pairs separated by commas.

        Args:
            raw: Raw environment value, e.g. ``vehicle_price:Vehicle,rto_price``.

        Returns:
            tuple[tuple[str, str], ...]: Parsed fields. A missing label
            defaults to the field id.
        """
        if not raw or not raw.strip():
            return DEFAULT_BREAKDOWN_FIELDS
        fields = []
        for chunk in raw.split(","):
            field_id, _, label = chunk.partition(":")
            field_id = field_id.strip()
            if not field_id:
                continue
            fields.append((field_id, label.strip() or field_id))
        return tuple(fields)

    @staticmethod
    def _parse_page_size(raw: str | None, logger) -> int:
        if not raw:
            return DEFAULT_PAGE_SIZE
        try:
            value = int(raw)
        except ValueError:
            value = 0
        if value < 1:
            logger.warning(
                f"Invalid LEDGER_PAGE_SIZE '{raw}'. "
                f"Using {DEFAULT_PAGE_SIZE}."
            )
            return DEFAULT_PAGE_SIZE
        return value


__all__ = ["LedgerSettings"]
