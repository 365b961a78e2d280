"""SQLAlchemy-backed adapters for the ledger reader and balance recorder."""

from collections.abc import Callable
from datetime import date, datetime, tzinfo
from decimal import Decimal

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    BalanceRecorderPort,
    LedgerReaderPort,
    LedgerWindow,
)
from src.domain.models.balances import RecordedBalance, Transaction
from src.utils.date_utils import end_of_day, start_of_day, to_day
from src.utils.decimal_utils import coerce_decimal


SELECT_PREVIOUS_BALANCE_SQL = text(
    """
    SELECT balance_date, balance, note, updated_at
    FROM daily_balances
    WHERE balance_date < :start_date
    ORDER BY balance_date DESC
    LIMIT 1
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT transaction_date, transaction_amount
    FROM transactions
    WHERE transaction_date >= :start_ts AND transaction_date <= :end_ts
    ORDER BY transaction_date
    """
)

SELECT_RECORDED_BALANCES_SQL = text(
    """
    SELECT balance_date, balance, note, updated_at
    FROM daily_balances
    WHERE balance_date >= :start_date AND balance_date <= :end_date
    ORDER BY balance_date
    """
)

UPSERT_DAILY_BALANCE_SQL = text(
    """
    INSERT INTO daily_balances (
        balance_date,
        balance,
        note,
        created_at,
        updated_at
    )
    VALUES (
        :balance_date,
        :balance,
        :note,
        :updated_at,
        :updated_at
    )
    ON CONFLICT (balance_date) DO UPDATE SET
        balance = excluded.balance,
        note = excluded.note,
        updated_at = excluded.updated_at
    """
)

CREATE_DAILY_BALANCES_SQL = """
CREATE TABLE IF NOT EXISTS daily_balances (
    balance_date DATE PRIMARY KEY,
    balance NUMERIC(15, 2) NOT NULL,
    note TEXT,
    created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""


def _to_recorded_balance(row) -> RecordedBalance:
    return RecordedBalance(
        date=to_day(row.balance_date),
        amount=coerce_decimal(row.balance),
        note=row.note,
        updated_at=row.updated_at,
    )


class SqlAlchemyLedgerReader(LedgerReaderPort):
    """Ledger reader backed by the SQL ledger database."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        tz: tzinfo | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            db_port: Port providing access to the ledger engine.
            tz: Optional ledger timezone the day boundaries are drawn in.
        """
        self._db_port = db_port
        self._tz = tz

    def load_window(self, start_date: date, end_date: date) -> LedgerWindow:
        """Return the anchor balance and the rows inside the range.

        Transactions are matched up to the end of ``end_date`` so that late
        movements on the last day are included. With a ledger timezone the
        bounds are aware, so the window matches the days transactions are
        grouped into. Database errors propagate.

        Args:
            start_date: First day of the range.
            end_date: Last day of the range, included.

        Returns:
            LedgerWindow: Previous balance, transactions and recorded
            balances indexed by day.
        """
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            previous_row = conn.execute(
                SELECT_PREVIOUS_BALANCE_SQL,
                {"start_date": start_date},
            ).first()
            transaction_rows = conn.execute(
                SELECT_TRANSACTIONS_SQL,
                {
                    "start_ts": start_of_day(start_date, self._tz),
                    "end_ts": end_of_day(end_date, self._tz),
                },
            ).all()
            balance_rows = conn.execute(
                SELECT_RECORDED_BALANCES_SQL,
                {"start_date": start_date, "end_date": end_date},
            ).all()

        transactions = [
            Transaction(
                timestamp=row.transaction_date,
                amount=coerce_decimal(row.transaction_amount),
            )
            for row in transaction_rows
        ]
        recorded_balances = {}
        for row in balance_rows:
            balance = _to_recorded_balance(row)
            recorded_balances[balance.date] = balance
        return LedgerWindow(
            previous=(
                _to_recorded_balance(previous_row) if previous_row else None
            ),
            transactions=transactions,
            recorded_balances=recorded_balances,
        )


class SqlAlchemyBalanceRecorder(BalanceRecorderPort):
    """Recorded balance store backed by SQLAlchemy.

    Concurrent writes to the same day are last-write-wins.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the recorder.

        Args:
            db_port: Port providing access to the ledger engine.
            clock: Callable returning the current time for updated_at.
        """
        self._db_port = db_port
        self._clock = clock

    def prepare_storage(self) -> None:
        """Ensure the daily_balances table exists."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_DAILY_BALANCES_SQL)

    def upsert_daily_balance(
        self,
        balance_date: date,
        amount: Decimal,
        note: str | None = None,
    ) -> RecordedBalance:
        """Create or overwrite the recorded balance of a day.

        Args:
            balance_date: Day the balance was counted.
            amount: Validated balance amount.
            note: Optional normalized note.

        Returns:
            RecordedBalance: The stored balance.
        """
        updated_at = self._clock()
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                UPSERT_DAILY_BALANCE_SQL,
                {
                    "balance_date": balance_date,
                    "balance": amount,
                    "note": note,
                    "updated_at": updated_at,
                },
            )
        return RecordedBalance(
            date=balance_date,
            amount=amount,
            note=note,
            updated_at=updated_at,
        )


__all__ = [
    "SqlAlchemyLedgerReader",
    "SqlAlchemyBalanceRecorder",
    "SELECT_PREVIOUS_BALANCE_SQL",
    "SELECT_TRANSACTIONS_SQL",
    "SELECT_RECORDED_BALANCES_SQL",
    "UPSERT_DAILY_BALANCE_SQL",
    "CREATE_DAILY_BALANCES_SQL",
]
