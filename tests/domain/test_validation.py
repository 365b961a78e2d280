"""Tests for domain validation and normalization helpers."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.exceptions import (
    InvalidBalanceAmountError,
    InvalidDateRangeError,
    LedgerValidationError,
)
from src.domain.services.normalization import normalize_note
from src.domain.services.validation import (
    parse_balance_amount,
    validate_date_range,
)


def test_validate_date_range_accepts_single_day() -> None:
    validate_date_range(date(2024, 1, 1), date(2024, 1, 1))


def test_validate_date_range_rejects_inverted_range() -> None:
    with pytest.raises(InvalidDateRangeError):
        validate_date_range(date(2024, 1, 2), date(2024, 1, 1))


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (1000, Decimal("1000.00")),
        ("  2500.5 ", Decimal("2500.50")),
        (Decimal("-12.345"), Decimal("-12.35")),
        (19.99, Decimal("19.99")),
    ],
)
def test_parse_balance_amount_normalizes_numbers(raw, expected) -> None:
    """Numbers and numeric strings become Decimals rounded to cents."""
    assert parse_balance_amount(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [None, True, "", "abc", "NaN", "Infinity", float("inf"), float("nan")],
)
def test_parse_balance_amount_rejects_non_finite_values(raw) -> None:
    """Missing, boolean and non-finite values never reach storage."""
    with pytest.raises(InvalidBalanceAmountError):
        parse_balance_amount(raw)


def test_validation_errors_are_value_errors() -> None:
    assert issubclass(InvalidBalanceAmountError, LedgerValidationError)
    assert issubclass(LedgerValidationError, ValueError)


def test_normalize_note_trims_and_drops_blank_values() -> None:
    assert normalize_note("  cierre caja  ") == "cierre caja"
    assert normalize_note("   ") is None
    assert normalize_note("") is None
    assert normalize_note(None) is None
