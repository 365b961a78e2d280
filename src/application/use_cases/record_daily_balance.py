"""Use case to record the counted cash balance of a day."""

from datetime import date

from src.application.ports.ledger_repository import BalanceRecorderPort
from src.domain.models.balances import RecordedBalance
from src.domain.services.normalization import normalize_note
from src.domain.services.validation import parse_balance_amount
from src.infrastructure.logging.logger import get_app_logger


class RecordDailyBalanceUseCase:
    """Validate and upsert a recorded balance.

    A second call for the same day replaces the amount and note; previously
    generated reports are not touched.
    """

    def __init__(self, balance_recorder: BalanceRecorderPort, logger=None):
        """Initialize the use case.

        Args:
            balance_recorder: Port writing recorded balances.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balance_recorder = balance_recorder
        self._logger = logger or get_app_logger()

    def execute(
        self,
        balance_date: date,
        amount,
        note: str | None = None,
    ) -> RecordedBalance:
        """Store the balance counted on ``balance_date``.

        Args:
            balance_date: Day the balance was counted.
            amount: Number or numeric string.
            note: Optional free text; blank notes are dropped.

        Returns:
            RecordedBalance: The stored balance.

        Raises:
            InvalidBalanceAmountError: If amount is not a finite number.
        """
        parsed_amount = parse_balance_amount(amount)
        cleaned_note = normalize_note(note)
        recorded = self._balance_recorder.upsert_daily_balance(
            balance_date,
            parsed_amount,
            cleaned_note,
        )
        self._logger.info(
            f"Recorded balance {parsed_amount} for {balance_date}"
        )
        return recorded


__all__ = ["RecordDailyBalanceUseCase"]
