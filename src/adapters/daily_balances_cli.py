"""CLI adapter printing the daily cash balance report.

The range is read from ``REPORT_START_DATE`` and ``REPORT_END_DATE``
(YYYY-MM-DD). Without them the report covers the current month to date.
"""

from datetime import date
import os

from src.domain.exceptions import LedgerValidationError
from src.domain.services.report_summary import summarize_report
from src.infrastructure.container import build_report_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def _parse_date(value: str | None, default: date, logger) -> date:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        default: Date used when the value is missing or invalid.
        logger: Logger used for warnings.

    Returns:
        date: Parsed date or the default.
    """
    if not value:
        return default
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return default


def _fmt(value) -> str:
    return "-" if value is None else f"{value:,.2f}"


def main() -> None:
    """Compute and print the reconciled daily balances."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    today = date.today()
    start_date = _parse_date(
        os.getenv("REPORT_START_DATE"),
        date(today.year, today.month, 1),
        logger,
    )
    end_date = _parse_date(os.getenv("REPORT_END_DATE"), today, logger)

    use_case = build_report_use_case(settings=settings)
    try:
        report = use_case.execute(start_date, end_date)
    except LedgerValidationError as exc:
        logger.error(str(exc))
        return

    print(
        f"Daily balances {start_date}..{end_date} "
        f"({settings.currency_code}), opening={_fmt(report.opening_balance)}"
    )
    for day in report.days:
        print(
            f"{day.date} in={_fmt(day.total_in)} out={_fmt(day.total_out)} "
            f"net={_fmt(day.net_change)} "
            f"expected={_fmt(day.expected_balance)} "
            f"recorded={_fmt(day.recorded_balance)} "
            f"diff={_fmt(day.difference)}"
            + (f" note={day.note}" if day.note else "")
        )

    summary = summarize_report(report, settings.mismatch_tolerance)
    if not summary.has_recorded_balances:
        print("No recorded balances in range.")
    elif summary.mismatch_days:
        print(
            f"{len(summary.mismatch_days)} day(s) differ by more than "
            f"{summary.tolerance}: total difference "
            f"{_fmt(summary.total_difference)}"
        )
    else:
        print("Recorded balances match the transactions in range.")


if __name__ == "__main__":  # pragma: no cover
    main()
