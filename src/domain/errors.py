"""Domain errors for ledger computations."""


class LedgerValidationError(ValueError):
    """Raised when ledger input data violates a strict validation rule."""


__all__ = ["LedgerValidationError"]
