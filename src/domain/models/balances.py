"""Domain models for transactions, recorded balances and daily reports."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """Monetary movement owned by the broader ledger.

    Attributes:
        timestamp: Moment the movement was booked.
        amount: Signed amount; negative values are outflows.
    """

    timestamp: datetime
    amount: Decimal


@dataclass(frozen=True)
class RecordedBalance:
    """Cash balance counted and entered manually for a calendar day."""

    date: date
    amount: Decimal
    note: str | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class DailyBalanceRecord:
    """Reconciled view of a single calendar day.

    Attributes:
        date: Day the record describes.
        total_in: Sum of non-negative transaction amounts.
        total_out: Sum of absolute values of negative amounts.
        net_change: total_in minus total_out.
        expected_balance: Previous running balance plus net_change.
        recorded_balance: Counted balance for the day, if one was recorded.
        difference: recorded_balance minus expected_balance, if recorded.
        note: Note attached to the recorded balance.
        has_cashback: Reserved flag, always False for now.
    """

    date: date
    total_in: Decimal
    total_out: Decimal
    net_change: Decimal
    expected_balance: Decimal
    recorded_balance: Decimal | None = None
    difference: Decimal | None = None
    note: str | None = None
    has_cashback: bool = False


@dataclass(frozen=True)
class BalanceReport:
    """Chronological daily records for a date range plus its anchor."""

    start_date: date
    end_date: date
    previous: RecordedBalance | None
    days: list[DailyBalanceRecord] = field(default_factory=list)

    @property
    def opening_balance(self) -> Decimal:
        """Return the running balance the first day starts from."""
        if self.previous is None:
            return Decimal("0")
        return self.previous.amount


@dataclass(frozen=True)
class BalanceReportSummary:
    """Headline figures of a report for review screens."""

    has_recorded_balances: bool
    last_recorded: DailyBalanceRecord | None
    last_expected: DailyBalanceRecord | None
    mismatch_days: list[DailyBalanceRecord]
    total_difference: Decimal
    tolerance: Decimal


__all__ = [
    "Transaction",
    "RecordedBalance",
    "DailyBalanceRecord",
    "BalanceReport",
    "BalanceReportSummary",
]
