"""Domain constants for cash reconciliation."""

from decimal import Decimal

# Differences at or below this absolute amount are not reported as mismatches.
DEFAULT_MISMATCH_TOLERANCE = Decimal("1")

DEFAULT_CURRENCY = "CLP"


__all__ = ["DEFAULT_MISMATCH_TOLERANCE", "DEFAULT_CURRENCY"]
