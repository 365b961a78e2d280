"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_cents(value: Decimal) -> Decimal:
    """Round a Decimal to two decimal places, half up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_json_number(value: Decimal | None) -> int | float | None:
    """Convert a Decimal into a plain JSON number.

    Integral values become ``int`` so that whole amounts survive transport
    without a trailing fraction.
    """
    if value is None:
        return None
    if value == value.to_integral_value():
        return int(value)
    return float(value)


__all__ = ["CENT", "coerce_decimal", "quantize_cents", "to_json_number"]
