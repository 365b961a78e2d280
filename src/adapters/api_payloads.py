"""Request parsing and response shaping for the balances endpoints.

The HTTP layer hands raw query parameters and JSON bodies to these helpers and
returns their dictionaries as JSON. Amounts are computed as Decimal and only
converted to plain numbers here.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Mapping

from src.domain.exceptions import InvalidDateRangeError
from src.domain.models.balances import (
    BalanceReport,
    DailyBalanceRecord,
    RecordedBalance,
)
from src.domain.services.normalization import normalize_note
from src.domain.services.validation import (
    parse_balance_amount,
    validate_date_range,
)
from src.utils.decimal_utils import to_json_number


@dataclass(frozen=True)
class BalanceInput:
    """Validated body of a save-balance request."""

    balance_date: date
    amount: Decimal
    note: str | None


def parse_iso_date(value: Any, field_name: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Args:
        value: Raw value from the request.
        field_name: Name used in the error message.

    Returns:
        date: Parsed calendar day.

    Raises:
        InvalidDateRangeError: If the value is missing or malformed.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateRangeError(f"Missing date field '{field_name}'")
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise InvalidDateRangeError(
            f"Invalid date '{value}' for '{field_name}'. "
            "Expected format YYYY-MM-DD."
        ) from exc


def parse_report_query(params: Mapping[str, Any]) -> tuple[date, date]:
    """Return the validated (from, to) pair of a report request."""
    start_date = parse_iso_date(params.get("from"), "from")
    end_date = parse_iso_date(params.get("to"), "to")
    validate_date_range(start_date, end_date)
    return start_date, end_date


def parse_balance_payload(payload: Mapping[str, Any]) -> BalanceInput:
    """Validate the body of a save-balance request.

    Args:
        payload: Mapping with ``date``, ``balance`` and optional ``note``.

    Returns:
        BalanceInput: Parsed date, amount and trimmed note.

    Raises:
        InvalidDateRangeError: If the date is malformed.
        InvalidBalanceAmountError: If the balance is not a finite number.
    """
    note = payload.get("note")
    return BalanceInput(
        balance_date=parse_iso_date(payload.get("date"), "date"),
        amount=parse_balance_amount(payload.get("balance")),
        note=normalize_note(note if isinstance(note, str) else None),
    )


def _previous_payload(
    previous: RecordedBalance | None,
) -> dict[str, Any] | None:
    if previous is None:
        return None
    return {
        "date": previous.date.isoformat(),
        "balance": to_json_number(previous.amount),
        "note": previous.note,
    }


def _day_payload(day: DailyBalanceRecord) -> dict[str, Any]:
    return {
        "date": day.date.isoformat(),
        "totalIn": to_json_number(day.total_in),
        "totalOut": to_json_number(day.total_out),
        "netChange": to_json_number(day.net_change),
        "expectedBalance": to_json_number(day.expected_balance),
        "recordedBalance": to_json_number(day.recorded_balance),
        "difference": to_json_number(day.difference),
        "note": day.note,
        "hasCashback": day.has_cashback,
    }


def build_report_payload(report: BalanceReport) -> dict[str, Any]:
    """Serialize a report into the JSON structure clients consume."""
    return {
        "status": "ok",
        "from": report.start_date.isoformat(),
        "to": report.end_date.isoformat(),
        "previous": _previous_payload(report.previous),
        "days": [_day_payload(day) for day in report.days],
    }


def build_ack_payload() -> dict[str, str]:
    """Return the acknowledgment sent after a balance is saved."""
    return {"status": "ok"}


__all__ = [
    "BalanceInput",
    "parse_iso_date",
    "parse_report_query",
    "parse_balance_payload",
    "build_report_payload",
    "build_ack_payload",
]
