"""CLI adapter to record the counted cash balance of a day.

Reads ``BALANCE_DATE`` (YYYY-MM-DD, defaults to today), ``BALANCE_AMOUNT``
and the optional ``BALANCE_NOTE`` from the environment.
"""

from datetime import date
import os

from src.adapters.api_payloads import parse_balance_payload
from src.domain.exceptions import LedgerValidationError
from src.infrastructure.container import (
    build_balance_recorder,
    build_record_balance_use_case,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Validate and upsert one recorded balance."""
    logger = get_app_logger()
    try:
        balance_input = parse_balance_payload(
            {
                "date": os.getenv("BALANCE_DATE", date.today().isoformat()),
                "balance": os.getenv("BALANCE_AMOUNT"),
                "note": os.getenv("BALANCE_NOTE"),
            }
        )
    except LedgerValidationError as exc:
        logger.error(str(exc))
        return

    recorder = build_balance_recorder()
    recorder.prepare_storage()
    use_case = build_record_balance_use_case(recorder)
    recorded = use_case.execute(
        balance_input.balance_date,
        balance_input.amount,
        balance_input.note,
    )

    print(f"Recorded balance {recorded.amount} for {recorded.date}.")


if __name__ == "__main__":  # pragma: no cover
    main()
