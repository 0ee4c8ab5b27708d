"""Domain normalization helpers."""

from src.domain.errors import LedgerValidationError
from src.domain.models.ledger import EntryType


def coerce_entry_type(raw: str | EntryType) -> EntryType:
    """Normalize a raw entry type value.

    Args:
        raw: Entry type from a repository row (``"Debit"``, ``"credit"``...).

    Returns:
        EntryType: Parsed entry type.

    Raises:
        LedgerValidationError: If the value is not Debit or Credit.
    """
    if isinstance(raw, EntryType):
        return raw
    cleaned = (raw or "").strip().capitalize()
    try:
        return EntryType(cleaned)
    except ValueError as exc:
        raise LedgerValidationError(f"Unknown entry type: {raw!r}") from exc


def normalize_text(value: str | None) -> str | None:
    """Strip free text values, mapping blanks to None.

    Args:
        value: Raw text value from a repository.

    Returns:
        str | None: Normalized text value.
    """
    if not value:
        return None
    cleaned = value.strip()
    return cleaned or None


__all__ = ["coerce_entry_type", "normalize_text"]
