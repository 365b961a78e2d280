"""Simple CLI to validate the database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the ledger database.
"""

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the ledger database."""
    adapter = SqlAlchemyDatabaseEngineAdapter()
    logger = get_app_logger()

    ledger_engine = adapter.get_ledger_engine()
    logger.info(f"Ledger DB: {ledger_engine.url}")

    with ledger_engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Ledger connection is working.")


if __name__ == "__main__":
    main()
