"""Composition root for wiring infrastructure adapters."""

from datetime import tzinfo

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    BalanceRecorderPort,
    LedgerReaderPort,
)
from src.application.use_cases.get_daily_balances_report import (
    GetDailyBalancesReportUseCase,
)
from src.application.use_cases.record_daily_balance import (
    RecordDailyBalanceUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import (
    SqlAlchemyBalanceRecorder,
    SqlAlchemyLedgerReader,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_reader(
    db_port: DatabaseEnginePort | None = None,
    tz: tzinfo | None = None,
) -> LedgerReaderPort:
    """Return the ledger reader for reconciliation reads."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerReader(resolved_db, tz=tz)


def build_balance_recorder(
    db_port: DatabaseEnginePort | None = None,
) -> BalanceRecorderPort:
    """Return the recorded balance store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBalanceRecorder(resolved_db)


def build_report_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> GetDailyBalancesReportUseCase:
    """Return the daily balances report use case."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetDailyBalancesReportUseCase(
        build_ledger_reader(db_port, tz=resolved_settings.timezone),
        logger=get_app_logger(),
        tz=resolved_settings.timezone,
    )


def build_record_balance_use_case(
    balance_recorder: BalanceRecorderPort | None = None,
) -> RecordDailyBalanceUseCase:
    """Return the use case recording a daily balance."""
    return RecordDailyBalanceUseCase(
        balance_recorder or build_balance_recorder(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_reader",
    "build_balance_recorder",
    "build_report_use_case",
    "build_record_balance_use_case",
]
