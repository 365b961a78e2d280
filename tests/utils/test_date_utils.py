"""Tests for calendar-day helpers."""

from datetime import date, datetime, time, timedelta, timezone

from src.utils.date_utils import (
    count_days,
    end_of_day,
    iter_days,
    next_day,
    start_of_day,
    to_day,
)


def test_iter_days_includes_both_ends_over_leap_day() -> None:
    days = list(iter_days(date(2024, 2, 27), date(2024, 3, 1)))

    assert days == [
        date(2024, 2, 27),
        date(2024, 2, 28),
        date(2024, 2, 29),
        date(2024, 3, 1),
    ]
    assert count_days(date(2024, 2, 27), date(2024, 3, 1)) == 4


def test_iter_days_yields_nothing_for_inverted_range() -> None:
    assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []


def test_next_day_crosses_year_boundary() -> None:
    assert next_day(date(2023, 12, 31)) == date(2024, 1, 1)


def test_day_bounds_cover_the_whole_day() -> None:
    day = date(2024, 6, 30)

    assert start_of_day(day) == datetime(2024, 6, 30, 0, 0)
    assert end_of_day(day).time() == time.max
    assert end_of_day(day) < start_of_day(next_day(day))


def test_to_day_strips_time_and_parses_strings() -> None:
    assert to_day(datetime(2024, 6, 30, 23, 59)) == date(2024, 6, 30)
    assert to_day(date(2024, 6, 30)) == date(2024, 6, 30)
    assert to_day("2024-06-30") == date(2024, 6, 30)


def test_to_day_converts_aware_values_when_timezone_given() -> None:
    minus_three = timezone(timedelta(hours=-3))
    moment = datetime(2024, 7, 1, 1, 0, tzinfo=timezone.utc)

    assert to_day(moment) == date(2024, 7, 1)
    assert to_day(moment, minus_three) == date(2024, 6, 30)


def test_day_bounds_are_aware_when_timezone_given() -> None:
    minus_three = timezone(timedelta(hours=-3))

    assert start_of_day(date(2024, 1, 10), minus_three) == datetime(
        2024, 1, 10, 3, 0, tzinfo=timezone.utc
    )
    assert end_of_day(date(2024, 1, 10), minus_three).tzinfo is minus_three
