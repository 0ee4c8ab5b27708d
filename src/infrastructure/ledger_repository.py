"""SQLAlchemy-backed repository for party ledger data."""

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
import json

from sqlalchemy import bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.ledger import Movement, Party, Receipt
from src.domain.services.normalization import coerce_entry_type, normalize_text
from src.utils.decimal_utils import coerce_decimal


_UNTIMED_SEQUENCE_BASE = 1 << 62


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository reading customers, journal entries and receipts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the showroom engine.
        """
        self._db_port = db_port

    def fetch_party(self, party_id: str) -> Party:
        query = text(
            """
            SELECT id, customer_name, gst, mobile1
            FROM customers
            WHERE id = :party_id
            LIMIT 1
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"party_id": party_id}).first()
        if not row:
            raise RuntimeError(f"Missing party in customers: {party_id}")
        return self._to_party(row)

    def fetch_parties(self) -> list[Party]:
        query = text(
            """
            SELECT id, customer_name, gst, mobile1
            FROM customers
            ORDER BY customer_name, id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_party(row) for row in rows]

    def fetch_party_movements(
        self,
        party_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Movement]:
        query = self._build_journal_query(
            "party_id = :party_id",
            start_date,
            end_date,
        )
        params = self._build_date_params(start_date, end_date)
        params["party_id"] = party_id
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [
            self._to_movement(row, index) for index, row in enumerate(rows)
        ]

    def fetch_party_receipts(
        self,
        party_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Receipt]:
        query = self._build_receipt_query(
            "customer_id = :party_id",
            start_date,
            end_date,
        )
        params = self._build_date_params(start_date, end_date)
        params["party_id"] = party_id
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_receipt(row, index) for index, row in enumerate(rows)]

    def fetch_movements(self, party_ids: Sequence[str]) -> list[Movement]:
        if not party_ids:
            return []
        query = self._build_journal_query(
            "party_id IN :party_ids",
            None,
            None,
        ).bindparams(bindparam("party_ids", expanding=True))
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"party_ids": list(party_ids)}).all()
        return [
            self._to_movement(row, index) for index, row in enumerate(rows)
        ]

    def fetch_receipts(self, party_ids: Sequence[str]) -> list[Receipt]:
        if not party_ids:
            return []
        query = self._build_receipt_query(
            "customer_id IN :party_ids",
            None,
            None,
        ).bindparams(bindparam("party_ids", expanding=True))
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"party_ids": list(party_ids)}).all()
        return [self._to_receipt(row, index) for index, row in enumerate(rows)]

    @staticmethod
    def _build_journal_query(
        party_clause: str,
        start_date: date | None,
        end_date: date | None,
    ):
        base_sql = f"""
        SELECT party_id, entry_type, price, price_breakdown, entry_date,
               created_at, particulars, invoice_no, chassis_no, model_name
        FROM journal_entries
        WHERE {party_clause}
        """
        if start_date:
            base_sql += " AND entry_date >= :start_date"
        if end_date:
            base_sql += " AND entry_date <= :end_date"
        base_sql += " ORDER BY entry_date, created_at"
        return text(base_sql)

    @staticmethod
    def _build_receipt_query(
        party_clause: str,
        start_date: date | None,
        end_date: date | None,
    ):
        base_sql = f"""
        SELECT customer_id, amount, receipt_date, created_at, narration
        FROM receipts
        WHERE {party_clause}
        """
        if start_date:
            base_sql += " AND receipt_date >= :start_date"
        if end_date:
            base_sql += " AND receipt_date <= :end_date"
        base_sql += " ORDER BY receipt_date, created_at"
        return text(base_sql)

    @staticmethod
    def _build_date_params(
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, object]:
        params: dict[str, object] = {}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        return params

    @staticmethod
    def _to_party(row) -> Party:
        return Party(
            id=str(row.id),
            name=row.customer_name,
            gst=normalize_text(row.gst),
            mobile=normalize_text(row.mobile1),
        )

    @classmethod
    def _to_movement(cls, row, index: int) -> Movement:
        return Movement(
            date=cls._to_date(row.entry_date),
            kind=coerce_entry_type(row.entry_type),
            amount=coerce_decimal(row.price),
            account_ref=str(row.party_id),
            breakdown=cls._parse_breakdown(row.price_breakdown),
            particulars=normalize_text(row.particulars),
            sequence=cls._sequence(row.created_at, index),
            invoice_no=normalize_text(row.invoice_no),
            chassis_no=normalize_text(row.chassis_no),
            model_name=normalize_text(row.model_name),
        )

    @classmethod
    def _to_receipt(cls, row, index: int) -> Receipt:
        return Receipt(
            date=cls._to_date(row.receipt_date),
            amount=coerce_decimal(row.amount),
            account_ref=str(row.customer_id),
            narration=normalize_text(row.narration),
            sequence=cls._sequence(row.created_at, index),
        )

    @staticmethod
    def _to_date(value) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value)[:10])

    @staticmethod
    def _sequence(created_at, index: int) -> int:
        """Return a tie-breaking key comparable across journal and receipts.

        Creation timestamps map to epoch microseconds. Rows without one
        sort after every timestamped row, in result set order, matching
        the NULLS LAST order of ``ORDER BY created_at``.
        """
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        if isinstance(created_at, datetime):
            return int(created_at.timestamp() * 1_000_000)
        return _UNTIMED_SEQUENCE_BASE + index

    @staticmethod
    def _parse_breakdown(raw) -> dict[str, Decimal]:
        if not raw:
            return {}
        if isinstance(raw, str):
            raw = json.loads(raw)
        return {str(key): coerce_decimal(value) for key, value in raw.items()}


__all__ = ["SqlAlchemyLedgerRepository"]
