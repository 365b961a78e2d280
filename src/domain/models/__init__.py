"""Domain models package."""

from .balances import (
    BalanceReport,
    BalanceReportSummary,
    DailyBalanceRecord,
    RecordedBalance,
    Transaction,
)

__all__ = [
    "BalanceReport",
    "BalanceReportSummary",
    "DailyBalanceRecord",
    "RecordedBalance",
    "Transaction",
]
