"""Validation errors raised by the cash ledger domain."""


class LedgerValidationError(ValueError):
    """Input rejected before any computation or write happens."""


class InvalidDateRangeError(LedgerValidationError):
    """Date range is malformed or ends before it starts."""


class InvalidBalanceAmountError(LedgerValidationError):
    """Balance amount is not a finite number."""


__all__ = [
    "LedgerValidationError",
    "InvalidDateRangeError",
    "InvalidBalanceAmountError",
]
