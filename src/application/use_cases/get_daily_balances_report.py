"""Use case to build the daily cash balance report for a date range."""

from datetime import date, tzinfo

from src.application.ports.ledger_repository import LedgerReaderPort
from src.domain.models.balances import BalanceReport
from src.domain.services.reconciliation import reconcile
from src.domain.services.validation import validate_date_range
from src.infrastructure.logging.logger import get_app_logger


class GetDailyBalancesReportUseCase:
    """Reconcile transactions against recorded balances day by day.

    Reports are computed from the current stored state on every call.
    """

    def __init__(
        self,
        ledger_reader: LedgerReaderPort,
        logger=None,
        tz: tzinfo | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_reader: Port loading transactions and recorded balances.
            logger: Optional logger compatible with logging.Logger-like API.
            tz: Optional ledger timezone for bucketing aware timestamps.
        """
        self._ledger_reader = ledger_reader
        self._logger = logger or get_app_logger()
        self._tz = tz

    def execute(self, start_date: date, end_date: date) -> BalanceReport:
        """Return one reconciled record per day of the range.

        Args:
            start_date: First day of the report.
            end_date: Last day of the report, included.

        Returns:
            BalanceReport: Anchor balance and chronological daily records.

        Raises:
            InvalidDateRangeError: If end_date is before start_date.
        """
        validate_date_range(start_date, end_date)
        window = self._ledger_reader.load_window(start_date, end_date)
        self._logger.info(
            f"Loaded {len(window.transactions)} transactions and "
            f"{len(window.recorded_balances)} recorded balances "
            f"for {start_date}..{end_date}"
        )

        days = reconcile(
            start_date,
            end_date,
            window.previous,
            window.transactions,
            window.recorded_balances,
            tz=self._tz,
            logger=self._logger,
        )
        self._logger.info(
            f"Reconciled {len(days)} days, anchor="
            f"{window.previous.amount if window.previous else None}"
        )
        return BalanceReport(
            start_date=start_date,
            end_date=end_date,
            previous=window.previous,
            days=days,
        )


__all__ = ["GetDailyBalancesReportUseCase", "BalanceReport"]
