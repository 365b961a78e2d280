"""Ports for reading the ledger and recording daily balances."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models.balances import RecordedBalance, Transaction


@dataclass(frozen=True)
class LedgerWindow:
    """Raw rows needed to reconcile a date range.

    Attributes:
        previous: Most recent recorded balance strictly before the range.
        transactions: Transactions booked inside the range.
        recorded_balances: Recorded balances inside the range keyed by day.
    """

    previous: RecordedBalance | None
    transactions: list[Transaction] = field(default_factory=list)
    recorded_balances: dict[date, RecordedBalance] = field(
        default_factory=dict
    )


class LedgerReaderPort(Protocol):
    """Port exposing read access to transactions and recorded balances."""

    def load_window(self, start_date: date, end_date: date) -> LedgerWindow:
        """Return the anchor balance and the rows inside the range."""


class BalanceRecorderPort(Protocol):
    """Port exposing write access to recorded daily balances."""

    def prepare_storage(self) -> None:
        """Ensure the balance store is ready to receive data."""

    def upsert_daily_balance(
        self,
        balance_date: date,
        amount: Decimal,
        note: str | None = None,
    ) -> RecordedBalance:
        """Create or overwrite the recorded balance of a day."""


__all__ = ["LedgerWindow", "LedgerReaderPort", "BalanceRecorderPort"]
