"""Use case to summarize receivables and payables across parties."""

from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.ledger import LedgerSummary, SummaryTotals
from src.domain.policies.account_filters import (
    AccountTypeFilter,
    filter_parties,
    parse_account_filter,
)
from src.domain.services.summary import build_ledger_summary
from src.infrastructure.logging.logger import get_app_logger


class GetLedgerSummaryUseCase:
    """Compute per-party receivable/payable totals and grand totals."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing parties, entries and receipts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_type: str | AccountTypeFilter = AccountTypeFilter.ALL,
    ) -> LedgerSummary:
        """Return the ledger summary for a customer type.

        Args:
            customer_type: ``all``, ``registered`` or ``non-registered``.

        Returns:
            LedgerSummary: Rows with activity and their grand totals.
        """
        account_filter = parse_account_filter(customer_type)
        parties = filter_parties(
            self._ledger_repository.fetch_parties(),
            account_filter,
        )
        if not parties:
            self._logger.info(
                f"No parties for customer_type={account_filter.value}"
            )
            return LedgerSummary(
                rows=[],
                totals=SummaryTotals(
                    total_receivable=Decimal("0"),
                    total_payable=Decimal("0"),
                ),
            )

        party_ids = [party.id for party in parties]
        movements = self._ledger_repository.fetch_movements(party_ids)
        receipts = self._ledger_repository.fetch_receipts(party_ids)
        summary = build_ledger_summary(
            parties,
            movements,
            receipts,
            account_filter=account_filter,
        )
        self._logger.info(
            f"Ledger summary computed: parties={len(summary.rows)}, "
            f"receivable={summary.totals.total_receivable}, "
            f"payable={summary.totals.total_payable}, "
            f"customer_type={account_filter.value}"
        )
        return summary


__all__ = ["GetLedgerSummaryUseCase", "LedgerSummary"]
