"""Domain models for party ledgers and ledger summaries."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.constants import JOURNAL_SOURCE, RECEIPT_SOURCE


class EntryType(str, Enum):
    """Journal entry direction."""

    DEBIT = "Debit"
    CREDIT = "Credit"


@dataclass(frozen=True)
class Movement:
    """A single Debit or Credit movement posted against an account.

    Attributes:
        date: Posting date of the movement.
        kind: Debit increases receivable, Credit decreases it.
        amount: Movement amount.
        account_ref: Identifier of the account (party) the movement belongs to.
        breakdown: Named sub-amounts of ``amount``. Informational only.
        particulars: Free text description.
        sequence: Creation order, used to break ties between equal dates.
        source: Origin of the movement (journal entry or receipt).
    """

    date: date
    kind: EntryType
    amount: Decimal
    account_ref: str
    breakdown: Mapping[str, Decimal] = field(default_factory=dict)
    particulars: str | None = None
    sequence: int = 0
    source: str = JOURNAL_SOURCE
    invoice_no: str | None = None
    chassis_no: str | None = None
    model_name: str | None = None

    @property
    def signed_amount(self) -> Decimal:
        """Return the amount signed by direction (Credit is negative)."""
        if self.kind is EntryType.DEBIT:
            return self.amount
        return -self.amount

    @property
    def debit(self) -> Decimal:
        return self.amount if self.kind is EntryType.DEBIT else Decimal("0")

    @property
    def credit(self) -> Decimal:
        return self.amount if self.kind is EntryType.CREDIT else Decimal("0")


@dataclass(frozen=True)
class Receipt:
    """A payment received from an account; always reduces what it owes."""

    date: date
    amount: Decimal
    account_ref: str
    narration: str | None = None
    sequence: int = 0

    def as_movement(self) -> Movement:
        """Return the receipt as a Credit movement for ledger display."""
        return Movement(
            date=self.date,
            kind=EntryType.CREDIT,
            amount=self.amount,
            account_ref=self.account_ref,
            particulars=self.narration,
            sequence=self.sequence,
            source=RECEIPT_SOURCE,
        )


@dataclass(frozen=True)
class MovementWithBalance:
    """A movement together with the running balance after it."""

    movement: Movement
    balance: Decimal


@dataclass(frozen=True)
class LedgerProjection:
    """Projected ledger rows and the closing balance."""

    entries: list[MovementWithBalance]
    closing_balance: Decimal


@dataclass(frozen=True)
class LedgerPage:
    """A single page of projected ledger rows."""

    entries: list[MovementWithBalance]
    page: int
    total_pages: int


@dataclass(frozen=True)
class Party:
    """Account metadata for a customer party."""

    id: str
    name: str
    gst: str | None = None
    mobile: str | None = None

    @property
    def is_registered(self) -> bool:
        """Return True when the party has a GST registration number."""
        return bool(self.gst and self.gst.strip())


@dataclass(frozen=True)
class PartyLedgerView:
    """Projected ledger of one party over a date range."""

    party: Party
    entries: list[MovementWithBalance]
    closing_balance: Decimal
    start_date: date | None = None
    end_date: date | None = None


@dataclass(frozen=True)
class AccountSummary:
    """Receivable and payable totals for one account."""

    account_ref: str
    account_name: str
    receivable_amount: Decimal
    payable_amount: Decimal

    @property
    def net_balance(self) -> Decimal:
        """Return receivable minus payable."""
        return self.receivable_amount - self.payable_amount


@dataclass(frozen=True)
class SummaryTotals:
    """Grand totals folded over summary rows."""

    total_receivable: Decimal
    total_payable: Decimal

    @property
    def grand_total(self) -> Decimal:
        """Return total receivable minus total payable."""
        return self.total_receivable - self.total_payable


@dataclass(frozen=True)
class LedgerSummary:
    """Summary rows and their grand totals."""

    rows: list[AccountSummary]
    totals: SummaryTotals


__all__ = [
    "EntryType",
    "Movement",
    "Receipt",
    "MovementWithBalance",
    "LedgerProjection",
    "LedgerPage",
    "Party",
    "PartyLedgerView",
    "AccountSummary",
    "SummaryTotals",
    "LedgerSummary",
]
