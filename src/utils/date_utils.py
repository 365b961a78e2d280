"""Calendar-day helpers used by the reconciliation engine."""

from collections.abc import Iterator
from datetime import date, datetime, time, timedelta, tzinfo


def next_day(day: date) -> date:
    """Return the calendar day following ``day``."""
    return day + timedelta(days=1)


def iter_days(start_date: date, end_date: date) -> Iterator[date]:
    """Yield every calendar day from start_date to end_date inclusive.

    Args:
        start_date: First day to yield.
        end_date: Last day to yield.

    Yields:
        date: Consecutive calendar days. Nothing when end_date < start_date.
    """
    current = start_date
    while current <= end_date:
        yield current
        current = next_day(current)


def start_of_day(day: date, tz: tzinfo | None = None) -> datetime:
    """Return midnight at the start of ``day``, aware when ``tz`` is given."""
    return datetime.combine(day, time.min, tzinfo=tz)


def end_of_day(day: date, tz: tzinfo | None = None) -> datetime:
    """Return the last representable instant of ``day``.

    Args:
        day: Calendar day.
        tz: Optional timezone the day is drawn in.

    Returns:
        datetime: ``day`` at ``time.max``, aware when ``tz`` is given.
    """
    return datetime.combine(day, time.max, tzinfo=tz)


def to_day(value: date | datetime | str, tz: tzinfo | None = None) -> date:
    """Strip time-of-day from a date-like value.

    Args:
        value: A date, datetime or ISO formatted string.
        tz: Optional timezone aware datetimes are converted into before the
            calendar date is taken.

    Returns:
        date: The calendar day the value falls on.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def count_days(start_date: date, end_date: date) -> int:
    """Return how many calendar days the inclusive range covers."""
    return (end_date - start_date).days + 1


__all__ = [
    "next_day",
    "iter_days",
    "start_of_day",
    "end_of_day",
    "to_day",
    "count_days",
]
