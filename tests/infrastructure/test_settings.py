"""Tests for infrastructure settings."""

from decimal import Decimal
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


@pytest.fixture
def fake_logger(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_from_env_uses_defaults(monkeypatch, fake_logger) -> None:
    """Unset variables fall back to naive dates, CLP and a tolerance of 1."""
    for name in (
        "LEDGER_TIMEZONE",
        "LEDGER_CURRENCY",
        "BALANCE_MISMATCH_TOLERANCE",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = LedgerSettings.from_env()

    assert settings.timezone is None
    assert settings.currency_code == "CLP"
    assert settings.mismatch_tolerance == Decimal("1")
    fake_logger.warning.assert_not_called()


def test_from_env_reads_values(monkeypatch, fake_logger) -> None:
    monkeypatch.setenv("LEDGER_TIMEZONE", "America/Santiago")
    monkeypatch.setenv("LEDGER_CURRENCY", " usd ")
    monkeypatch.setenv("BALANCE_MISMATCH_TOLERANCE", "0.50")

    settings = LedgerSettings.from_env()

    assert settings.timezone == ZoneInfo("America/Santiago")
    assert settings.currency_code == "USD"
    assert settings.mismatch_tolerance == Decimal("0.50")


def test_from_env_warns_on_invalid_values(monkeypatch, fake_logger) -> None:
    """Invalid optional values log a warning and use defaults."""
    monkeypatch.setenv("LEDGER_TIMEZONE", "Mars/Olympus_Mons")
    monkeypatch.setenv("BALANCE_MISMATCH_TOLERANCE", "-3")

    settings = LedgerSettings.from_env()

    assert settings.timezone is None
    assert settings.mismatch_tolerance == Decimal("1")
    assert fake_logger.warning.call_count == 2
