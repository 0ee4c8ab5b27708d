"""Application port for party ledger data access."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from src.domain.models.ledger import Movement, Party, Receipt


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to parties, journal entries and receipts.

    Movement and receipt lists are returned in ledger order: ascending by
    date, then by creation time.
    """

    def fetch_party(self, party_id: str) -> Party:
        """Return a single party, raising RuntimeError when missing."""

    def fetch_parties(self) -> list[Party]:
        """Return every party."""

    def fetch_party_movements(
        self,
        party_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Movement]:
        """Return journal movements of a party within the date range."""

    def fetch_party_receipts(
        self,
        party_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Receipt]:
        """Return receipts of a party within the date range."""

    def fetch_movements(self, party_ids: Sequence[str]) -> list[Movement]:
        """Return journal movements of the given parties."""

    def fetch_receipts(self, party_ids: Sequence[str]) -> list[Receipt]:
        """Return receipts of the given parties."""


__all__ = ["LedgerRepositoryPort"]
