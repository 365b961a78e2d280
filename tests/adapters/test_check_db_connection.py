"""Tests for the check_db_connection adapter."""

from unittest.mock import MagicMock

from src.adapters import check_db_connection


def test_main_runs_select_one(monkeypatch) -> None:
    engine = MagicMock()
    conn = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    adapter = MagicMock()
    adapter.get_ledger_engine.return_value = engine
    logger = MagicMock()
    monkeypatch.setattr(
        check_db_connection,
        "SqlAlchemyDatabaseEngineAdapter",
        lambda: adapter,
    )
    monkeypatch.setattr(check_db_connection, "get_app_logger", lambda: logger)

    check_db_connection.main()

    conn.exec_driver_sql.assert_called_once_with("SELECT 1")
    assert logger.info.call_count == 2
