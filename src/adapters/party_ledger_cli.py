"""CLI adapter to print the ledger of a single party.

Reads ``LEDGER_PARTY_ID`` and the optional ``LEDGER_START_DATE`` and
``LEDGER_END_DATE`` (YYYY-MM-DD) from the environment. When
``LEDGER_PAGE`` is set only that page of rows is printed, sized by
``LEDGER_PAGE_SIZE``.
"""

from dataclasses import replace
from datetime import date
import os

from src.adapters.reporting import build_ledger_rows, render_table
from src.domain.errors import LedgerValidationError
from src.domain.models.ledger import PartyLedgerView
from src.domain.services.ledger import paginate
from src.infrastructure.container import build_party_ledger_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import LedgerSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_page(value: str | None, logger) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid page '{value}'. Printing all rows.")
        return None


def _select_page(
    view: PartyLedgerView,
    page: int | None,
    page_size: int,
) -> tuple[PartyLedgerView, str]:
    """Return the view restricted to one page and a page caption."""
    if page is None:
        return view, ""
    ledger_page = paginate(view.entries, page, page_size)
    caption = f" page {ledger_page.page}/{ledger_page.total_pages}"
    return replace(view, entries=ledger_page.entries), caption


def main() -> None:
    """Print the party ledger with running and closing balances."""
    logger = get_app_logger()
    party_id = os.getenv("LEDGER_PARTY_ID")
    if not party_id:
        logger.warning("LEDGER_PARTY_ID is required to print a party ledger.")
        return

    start_date = _parse_date(os.getenv("LEDGER_START_DATE"), logger)
    end_date = _parse_date(os.getenv("LEDGER_END_DATE"), logger)
    page = _parse_page(os.getenv("LEDGER_PAGE"), logger)
    settings = LedgerSettings.from_env()
    use_case = build_party_ledger_use_case(settings=settings)
    try:
        view = use_case.execute(
            party_id,
            start_date=start_date,
            end_date=end_date,
        )
    except (RuntimeError, LedgerValidationError) as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"party_ledger_cli party={party_id} rows={len(view.entries)}"
    )
    view, caption = _select_page(view, page, settings.page_size)
    print(
        f"Party Ledger - {view.party.name} "
        f"(start={start_date}, end={end_date}){caption}"
    )
    print(render_table(build_ledger_rows(view, settings.breakdown_fields)))


if __name__ == "__main__":  # pragma: no cover
    main()
