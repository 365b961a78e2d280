"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_creates_configured_logger(tmp_path, monkeypatch):
    """LoggerBuilder should build loggers in the project logs directory."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )

    builder = logger_module.LoggerBuilder()
    reconcile_logger = (
        builder.name("cash_ledger.test_reconcile")
        .subdir("reconcile")
        .prefix("reconcile_logs")
        .console(False)
        .level(logging.WARNING)
        .formatter(logger_module.LoggerBuilder._default_formatter)
        .file_handler(logger_module.LoggerBuilder._default_file_handler)
        .build()
    )

    assert reconcile_logger.name == "cash_ledger.test_reconcile"
    assert reconcile_logger.level == logging.WARNING
    assert len(reconcile_logger.handlers) == 1
    expected_path = (
        tmp_path / "logs" / "reconcile" / "20240101_reconcile_logs.log"
    )
    assert reconcile_logger.handlers[0].baseFilename == str(expected_path)
    # Building again should reuse the same configured logger.
    assert builder.build() is reconcile_logger
    assert len(reconcile_logger.handlers) == 1

    for handler in list(reconcile_logger.handlers):
        handler.close()
        reconcile_logger.removeHandler(handler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "logs.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt

    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger info/warning/error/etc. should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("cash_ledger")
    logger.info("report built")
    logger.warning("mismatch")
    logger.error("storage failure")
    logger.debug("bucketed")
    logger.critical("crit")

    fake_logger.info.assert_called_with("report built")
    fake_logger.warning.assert_called_with("mismatch")
    fake_logger.error.assert_called_with("storage failure")
    fake_logger.debug.assert_called_with("bucketed")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("cash_ledger") is logger


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should return singletons."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger_1 = logger_module.get_app_logger()
    app_logger_2 = logger_module.get_app_logger()
    usage_logger_1 = logger_module.get_usage_logger()
    usage_logger_2 = logger_module.get_usage_logger()

    assert app_logger_1 is app_logger_2
    assert usage_logger_1 is usage_logger_2
    assert app_logger_1 is not usage_logger_1
    assert isinstance(app_logger_1.logger, MagicMock)
    assert isinstance(usage_logger_1.logger, MagicMock)
