"""Use case to project the ledger of a single party."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.ledger import PartyLedgerView
from src.domain.services.ledger import build_ledger_projection, order_movements
from src.domain.services.presentation import format_balance
from src.domain.services.validation import (
    validate_breakdown,
    validate_movement_amount,
)
from src.infrastructure.logging.logger import get_app_logger


class GetPartyLedgerUseCase:
    """Compute running balances for one party over a date range."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        strict_amounts: bool = False,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing parties, entries and receipts.
            logger: Optional logger compatible with logging.Logger-like API.
            strict_amounts: Reject negative amounts instead of warning.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._strict_amounts = strict_amounts

    def execute(
        self,
        party_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
        include_receipts: bool = True,
    ) -> PartyLedgerView:
        """Return the party ledger with running and closing balances.

        Args:
            party_id: Identifier of the party.
            start_date: Optional lower bound for entry dates.
            end_date: Optional upper bound for entry dates.
            include_receipts: Show receipts as Credit rows in the ledger.

        Returns:
            PartyLedgerView: Projected rows and closing balance.
        """
        party = self._ledger_repository.fetch_party(party_id)
        movements = list(
            self._ledger_repository.fetch_party_movements(
                party_id,
                start_date,
                end_date,
            )
        )
        if include_receipts:
            receipts = self._ledger_repository.fetch_party_receipts(
                party_id,
                start_date,
                end_date,
            )
            movements.extend(receipt.as_movement() for receipt in receipts)
            movements = order_movements(movements)

        for movement in movements:
            validate_movement_amount(
                movement,
                self._logger,
                strict=self._strict_amounts,
            )
            validate_breakdown(movement, self._logger)

        projection = build_ledger_projection(movements)
        self._logger.info(
            f"Projected {len(projection.entries)} ledger rows for "
            f"party={party_id}, closing={format_balance(projection.closing_balance)}"
        )
        return PartyLedgerView(
            party=party,
            entries=projection.entries,
            closing_balance=projection.closing_balance,
            start_date=start_date,
            end_date=end_date,
        )


__all__ = ["GetPartyLedgerUseCase", "PartyLedgerView"]
