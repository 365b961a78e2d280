"""Domain services package."""

from .normalization import normalize_note
from .reconciliation import bucket_transactions_by_day, reconcile, split_totals
from .report_summary import summarize_report
from .validation import parse_balance_amount, validate_date_range

__all__ = [
    "bucket_transactions_by_day",
    "normalize_note",
    "parse_balance_amount",
    "reconcile",
    "split_totals",
    "summarize_report",
    "validate_date_range",
]
