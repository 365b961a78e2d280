"""Policy deciding which balance seeds the next reconciled day."""

from decimal import Decimal


def resolve_carry_forward(
    recorded: Decimal | None,
    expected: Decimal,
) -> Decimal:
    """Return the running balance the following day starts from.

    A recorded balance is a confirmed count and replaces the projection, so a
    discrepancy on one day does not leak into the next. Without a recorded
    balance the projection itself is carried.

    Args:
        recorded: Balance counted for the day, if any.
        expected: Projected balance for the day.

    Returns:
        Decimal: Balance to use as the next day's baseline.
    """
    if recorded is not None:
        return recorded
    return expected


__all__ = ["resolve_carry_forward"]
