"""Domain validation helpers."""

from datetime import date
from decimal import Decimal, InvalidOperation

from src.domain.exceptions import (
    InvalidBalanceAmountError,
    InvalidDateRangeError,
)
from src.utils.decimal_utils import quantize_cents


def validate_date_range(start_date: date, end_date: date) -> None:
    """Reject ranges that end before they start.

    Args:
        start_date: First day of the range.
        end_date: Last day of the range.

    Raises:
        InvalidDateRangeError: If end_date is before start_date.
    """
    if end_date < start_date:
        raise InvalidDateRangeError(
            f"Invalid date range: end {end_date} is before start {start_date}"
        )


def parse_balance_amount(value) -> Decimal:
    """Convert a raw balance into a finite Decimal rounded to cents.

    Args:
        value: Number or numeric string supplied by a caller.

    Returns:
        Decimal: Normalized balance amount.

    Raises:
        InvalidBalanceAmountError: If the value is missing, boolean,
            non-numeric, NaN or infinite.
    """
    if value is None or isinstance(value, bool):
        raise InvalidBalanceAmountError(f"Invalid balance amount: {value!r}")
    if isinstance(value, str):
        value = value.strip()
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidBalanceAmountError(
            f"Invalid balance amount: {value!r}"
        ) from exc
    if not amount.is_finite():
        raise InvalidBalanceAmountError(f"Invalid balance amount: {value!r}")
    try:
        return quantize_cents(amount)
    except InvalidOperation as exc:
        # Beyond the Decimal context precision.
        raise InvalidBalanceAmountError(
            f"Balance amount out of range: {value!r}"
        ) from exc


__all__ = ["validate_date_range", "parse_balance_amount"]
