"""Domain constants for party ledgers."""

DEBIT_LABEL = "Dr"
CREDIT_LABEL = "Cr"

JOURNAL_SOURCE = "journal"
RECEIPT_SOURCE = "receipt"

DEFAULT_PAGE_SIZE = 100

# (field id, display label) pairs for journal entry price breakdowns.
DEFAULT_BREAKDOWN_FIELDS = (
    ("vehicle_price", "Vehicle Price"),
    ("rto_price", "RTO Price"),
    ("insurance_price", "Insurance Price"),
    ("accessories_price", "Accessories Price"),
    ("warranty_price", "Extended Warranty Price"),
)


__all__ = [
    "DEBIT_LABEL",
    "CREDIT_LABEL",
    "JOURNAL_SOURCE",
    "RECEIPT_SOURCE",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_BREAKDOWN_FIELDS",
]
