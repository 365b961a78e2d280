"""Summary figures computed from a reconciled balance report."""

from decimal import Decimal

from src.domain.constants import DEFAULT_MISMATCH_TOLERANCE
from src.domain.models.balances import BalanceReport, BalanceReportSummary


def summarize_report(
    report: BalanceReport,
    tolerance: Decimal = DEFAULT_MISMATCH_TOLERANCE,
) -> BalanceReportSummary:
    """Summarize recorded balances and mismatches of a report.

    Args:
        report: Reconciled report.
        tolerance: Absolute difference a day may have before it counts as a
            mismatch.

    Returns:
        BalanceReportSummary: Last recorded and expected days, mismatching
        days in chronological order and the total difference.
    """
    mismatch_days = [
        day
        for day in report.days
        if day.difference is not None and abs(day.difference) > tolerance
    ]
    recorded_days = [
        day for day in report.days if day.recorded_balance is not None
    ]
    total_difference = sum(
        (day.difference for day in report.days if day.difference is not None),
        start=Decimal("0"),
    )
    return BalanceReportSummary(
        has_recorded_balances=bool(recorded_days),
        last_recorded=recorded_days[-1] if recorded_days else None,
        last_expected=report.days[-1] if report.days else None,
        mismatch_days=mismatch_days,
        total_difference=total_difference,
        tolerance=tolerance,
    )


__all__ = ["summarize_report"]
