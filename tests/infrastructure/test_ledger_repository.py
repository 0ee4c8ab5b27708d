"""Tests for the SqlAlchemyLedgerRepository."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.domain.models import EntryType
from src.domain.services.ledger import order_movements, project_ledger
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows

    def first(self):
        return self._rows[0] if self._rows else None


def _build_db_port(results: list[list[SimpleNamespace]]) -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]

    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    return db_port, conn


def _journal_row(**overrides) -> SimpleNamespace:
    values = {
        "party_id": "p1",
        "entry_type": "Debit",
        "price": Decimal("1200.00"),
        "price_breakdown": None,
        "entry_date": date(2024, 1, 5),
        "created_at": None,
        "particulars": "Vehicle sale",
        "invoice_no": "INV-7",
        "chassis_no": " MB8DP12 ",
        "model_name": "Access 125",
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_fetch_party_maps_row() -> None:
    """Customers rows should map to Party with blank GST normalized."""
    db_port, conn = _build_db_port(
        [
            [
                SimpleNamespace(
                    id=42,
                    customer_name="Ravi",
                    gst="  ",
                    mobile1="9876543210",
                )
            ]
        ]
    )
    repository = SqlAlchemyLedgerRepository(db_port)

    party = repository.fetch_party("42")

    assert party.id == "42"
    assert party.name == "Ravi"
    assert party.gst is None
    assert party.is_registered is False
    params = conn.execute.call_args.args[1]
    assert params == {"party_id": "42"}


def test_fetch_party_raises_when_missing() -> None:
    """Unknown parties should raise a RuntimeError."""
    db_port, _ = _build_db_port([[]])
    repository = SqlAlchemyLedgerRepository(db_port)

    with pytest.raises(RuntimeError):
        repository.fetch_party("missing")


def test_fetch_party_movements_maps_rows_and_filters_dates() -> None:
    """Journal rows should map to movements with parsed breakdowns."""
    created = datetime(2024, 1, 5, 10, 30)
    rows = [
        _journal_row(
            price_breakdown='{"vehicle_price": "1000", "rto_price": 200, '
            '"warranty_price": null}',
            created_at=created,
        ),
        _journal_row(
            entry_type="credit",
            price=300,
            entry_date="2024-01-06",
            particulars="  ",
            price_breakdown={"insurance_price": "300"},
        ),
    ]
    db_port, conn = _build_db_port([rows])
    repository = SqlAlchemyLedgerRepository(db_port)

    movements = repository.fetch_party_movements(
        "p1",
        date(2024, 1, 1),
        date(2024, 1, 31),
    )

    first, second = movements
    assert first.kind is EntryType.DEBIT
    assert first.amount == Decimal("1200.00")
    assert first.breakdown == {
        "vehicle_price": Decimal("1000"),
        "rto_price": Decimal("200"),
        "warranty_price": Decimal("0"),
    }
    assert first.chassis_no == "MB8DP12"
    assert first.sequence == int(created.timestamp() * 1_000_000)
    assert second.kind is EntryType.CREDIT
    assert second.amount == Decimal("300")
    assert second.date == date(2024, 1, 6)
    assert second.particulars is None
    assert second.sequence > first.sequence
    assert second.breakdown == {"insurance_price": Decimal("300")}

    query, params = conn.execute.call_args.args
    assert params == {
        "party_id": "p1",
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 1, 31),
    }
    sql = str(query)
    assert "entry_date >= :start_date" in sql
    assert "entry_date <= :end_date" in sql
    assert "ORDER BY entry_date, created_at" in sql


def test_fetch_party_receipts_without_dates() -> None:
    """Receipts should map to Receipt records without date bounds."""
    rows = [
        SimpleNamespace(
            customer_id="p1",
            amount="2500.50",
            receipt_date=datetime(2024, 2, 1, 9, 0),
            created_at=None,
            narration="UPI",
        )
    ]
    db_port, conn = _build_db_port([rows])
    repository = SqlAlchemyLedgerRepository(db_port)

    receipts = repository.fetch_party_receipts("p1", None, None)

    assert receipts[0].amount == Decimal("2500.50")
    assert receipts[0].date == date(2024, 2, 1)
    assert receipts[0].narration == "UPI"
    query, params = conn.execute.call_args.args
    assert params == {"party_id": "p1"}
    assert ":start_date" not in str(query)


def test_fetch_movements_and_receipts_by_party_ids() -> None:
    """Bulk fetches should bind the party ids as an expanding list."""
    db_port, conn = _build_db_port(
        [
            [_journal_row(party_id="p2")],
            [
                SimpleNamespace(
                    customer_id="p2",
                    amount=Decimal("10"),
                    receipt_date=date(2024, 1, 1),
                    created_at=None,
                    narration=None,
                )
            ],
        ]
    )
    repository = SqlAlchemyLedgerRepository(db_port)

    movements = repository.fetch_movements(("p1", "p2"))
    receipts = repository.fetch_receipts(["p1", "p2"])

    assert [item.account_ref for item in movements] == ["p2"]
    assert [item.account_ref for item in receipts] == ["p2"]
    first_call, second_call = conn.execute.call_args_list
    assert first_call.args[1] == {"party_ids": ["p1", "p2"]}
    assert second_call.args[1] == {"party_ids": ["p1", "p2"]}


def test_bulk_fetches_skip_queries_for_no_parties() -> None:
    """Empty party id lists should not hit the database."""
    db_port, _ = _build_db_port([])
    repository = SqlAlchemyLedgerRepository(db_port)

    assert repository.fetch_movements([]) == []
    assert repository.fetch_receipts([]) == []
    db_port.get_ledger_engine.assert_not_called()


def test_rows_without_created_at_keep_store_order_on_same_date() -> None:
    """Rows without a creation time stay after timestamped rows, NULLS LAST."""
    rows = [
        _journal_row(
            entry_type="Credit",
            price=Decimal("500"),
            created_at=datetime(2024, 1, 5, 10, 0),
        ),
        _journal_row(entry_type="Debit", price=Decimal("1000")),
        _journal_row(entry_type="Debit", price=Decimal("50")),
    ]
    db_port, _ = _build_db_port([rows])
    repository = SqlAlchemyLedgerRepository(db_port)

    movements = repository.fetch_party_movements("p1", None, None)
    ordered = order_movements(movements)

    assert ordered == movements
    assert [entry.balance for entry in project_ledger(ordered)] == [
        Decimal("-500"),
        Decimal("500"),
        Decimal("550"),
    ]


def test_breakdown_blank_values_count_as_zero() -> None:
    """Blank and formatted breakdown amounts are normalized to Decimal."""
    rows = [
        _journal_row(
            price_breakdown='{"vehicle_price": "1,20,000", "rto_price": " "}',
        )
    ]
    db_port, _ = _build_db_port([rows])
    repository = SqlAlchemyLedgerRepository(db_port)

    movement = repository.fetch_party_movements("p1", None, None)[0]

    assert movement.breakdown == {
        "vehicle_price": Decimal("120000"),
        "rto_price": Decimal("0"),
    }
