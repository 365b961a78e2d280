"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import (
    BalanceRecorderPort,
    LedgerReaderPort,
    LedgerWindow,
)

__all__ = [
    "BalanceRecorderPort",
    "DatabaseEnginePort",
    "LedgerReaderPort",
    "LedgerWindow",
]
