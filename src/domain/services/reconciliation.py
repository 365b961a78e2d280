"""Daily cash reconciliation.

The reconciler turns transactions and sparse recorded balances into one
record per calendar day. Each day's expected balance is the running balance
plus that day's net change; the running balance carried into the next day is
chosen by :func:`resolve_carry_forward`.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date, tzinfo
from decimal import Decimal

from src.domain.models.balances import (
    DailyBalanceRecord,
    RecordedBalance,
    Transaction,
)
from src.domain.policies.carry_forward import resolve_carry_forward
from src.domain.services.validation import validate_date_range
from src.utils.date_utils import iter_days, to_day
from src.utils.decimal_utils import coerce_decimal


def bucket_transactions_by_day(
    transactions: Iterable[Transaction],
    tz: tzinfo | None = None,
) -> dict[date, list[Decimal]]:
    """Group transaction amounts by the calendar day they were booked on.

    Args:
        transactions: Transactions to group.
        tz: Optional ledger timezone for aware timestamps.

    Returns:
        dict[date, list[Decimal]]: Amounts keyed by day, in input order.
    """
    buckets: dict[date, list[Decimal]] = defaultdict(list)
    for transaction in transactions:
        day = to_day(transaction.timestamp, tz)
        buckets[day].append(coerce_decimal(transaction.amount))
    return dict(buckets)


def split_totals(amounts: Iterable[Decimal]) -> tuple[Decimal, Decimal]:
    """Return (total_in, total_out) for one day's amounts.

    Zero amounts count as inflows; outflows are summed as magnitudes.
    """
    total_in = Decimal("0")
    total_out = Decimal("0")
    for amount in amounts:
        if amount >= 0:
            total_in += amount
        else:
            total_out += abs(amount)
    return total_in, total_out


def reconcile(
    start_date: date,
    end_date: date,
    previous: RecordedBalance | None,
    transactions: Iterable[Transaction],
    recorded_balances: Mapping[date, RecordedBalance],
    *,
    tz: tzinfo | None = None,
    logger=None,
) -> list[DailyBalanceRecord]:
    """Build the gap-free daily ledger for ``[start_date, end_date]``.

    Args:
        start_date: First day of the report.
        end_date: Last day of the report, included.
        previous: Most recent recorded balance before start_date.
        transactions: Transactions booked inside the range.
        recorded_balances: Recorded balances inside the range keyed by day.
        tz: Optional ledger timezone used when bucketing aware timestamps.
        logger: Optional logger-like object with a ``warning`` method for
            out-of-range transactions.

    Returns:
        list[DailyBalanceRecord]: One record per day in ascending order.

    Raises:
        InvalidDateRangeError: If end_date is before start_date.
    """
    validate_date_range(start_date, end_date)
    running_balance = (
        coerce_decimal(previous.amount) if previous else Decimal("0")
    )
    buckets = bucket_transactions_by_day(transactions, tz)

    records: list[DailyBalanceRecord] = []
    for current in iter_days(start_date, end_date):
        total_in, total_out = split_totals(buckets.pop(current, []))
        net_change = total_in - total_out
        expected_balance = running_balance + net_change

        recorded = recorded_balances.get(current)
        recorded_amount = (
            coerce_decimal(recorded.amount) if recorded else None
        )
        records.append(
            DailyBalanceRecord(
                date=current,
                total_in=total_in,
                total_out=total_out,
                net_change=net_change,
                expected_balance=expected_balance,
                recorded_balance=recorded_amount,
                difference=(
                    recorded_amount - expected_balance
                    if recorded_amount is not None
                    else None
                ),
                note=recorded.note if recorded else None,
            )
        )
        running_balance = resolve_carry_forward(
            recorded_amount,
            expected_balance,
        )

    if buckets and logger is not None:
        outside = sorted(buckets)
        logger.warning(
            f"Ignored transactions on {len(outside)} day(s) outside "
            f"{start_date}..{end_date}: first={outside[0]}"
        )
    return records


__all__ = ["bucket_transactions_by_day", "split_totals", "reconcile"]
