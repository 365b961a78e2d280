"""Application use cases package."""

from .get_daily_balances_report import (
    BalanceReport,
    GetDailyBalancesReportUseCase,
)
from .record_daily_balance import RecordDailyBalanceUseCase

__all__ = [
    "BalanceReport",
    "GetDailyBalancesReportUseCase",
    "RecordDailyBalanceUseCase",
]
