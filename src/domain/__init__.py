"""Domain package for business rules and core models."""

from .constants import DEFAULT_CURRENCY, DEFAULT_MISMATCH_TOLERANCE
from .exceptions import (
    InvalidBalanceAmountError,
    InvalidDateRangeError,
    LedgerValidationError,
)
from .models import (
    BalanceReport,
    BalanceReportSummary,
    DailyBalanceRecord,
    RecordedBalance,
    Transaction,
)
from .policies import resolve_carry_forward
from .services import (
    bucket_transactions_by_day,
    normalize_note,
    parse_balance_amount,
    reconcile,
    split_totals,
    summarize_report,
    validate_date_range,
)

__all__ = [
    "BalanceReport",
    "BalanceReportSummary",
    "DailyBalanceRecord",
    "RecordedBalance",
    "Transaction",
    "DEFAULT_CURRENCY",
    "DEFAULT_MISMATCH_TOLERANCE",
    "InvalidBalanceAmountError",
    "InvalidDateRangeError",
    "LedgerValidationError",
    "bucket_transactions_by_day",
    "normalize_note",
    "parse_balance_amount",
    "reconcile",
    "resolve_carry_forward",
    "split_totals",
    "summarize_report",
    "validate_date_range",
]
