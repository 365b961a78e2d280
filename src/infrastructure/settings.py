"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_MISMATCH_TOLERANCE
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for reconciling and presenting the cash ledger.

    Attributes:
        timezone: Zone aware transaction timestamps are bucketed in.
        currency_code: Currency amounts are displayed in.
        mismatch_tolerance: Absolute difference tolerated before a day is
            flagged as a mismatch.
    """

    timezone: Optional[ZoneInfo] = None
    currency_code: str = DEFAULT_CURRENCY
    mismatch_tolerance: Decimal = DEFAULT_MISMATCH_TOLERANCE

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        currency = os.getenv("LEDGER_CURRENCY", DEFAULT_CURRENCY).strip()
        return cls(
            timezone=cls._parse_timezone(
                os.getenv("LEDGER_TIMEZONE"),
                logger=logger,
            ),
            currency_code=currency.upper() or DEFAULT_CURRENCY,
            mismatch_tolerance=cls._parse_tolerance(
                os.getenv("BALANCE_MISMATCH_TOLERANCE"),
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_timezone(raw_value: str | None, logger) -> Optional[ZoneInfo]:
        """Parse an IANA timezone name.

        Args:
            raw_value: Raw timezone name.
            logger: Logger used for warnings.

        Returns:
            ZoneInfo | None: Timezone, or None when unset or unknown.
        """
        if not raw_value or not raw_value.strip():
            return None
        try:
            return ZoneInfo(raw_value.strip())
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                f"Unknown LEDGER_TIMEZONE '{raw_value}', using naive dates"
            )
            return None

    @staticmethod
    def _parse_tolerance(raw_value: str | None, logger) -> Decimal:
        """Parse the mismatch tolerance.

        Args:
            raw_value: Raw tolerance value.
            logger: Logger used for warnings.

        Returns:
            Decimal: Non-negative tolerance, or the default when invalid.
        """
        if not raw_value or not raw_value.strip():
            return DEFAULT_MISMATCH_TOLERANCE
        try:
            tolerance = Decimal(raw_value.strip())
        except InvalidOperation:
            tolerance = None
        if tolerance is None or not tolerance.is_finite() or tolerance < 0:
            logger.warning(
                f"Invalid BALANCE_MISMATCH_TOLERANCE '{raw_value}', "
                f"using {DEFAULT_MISMATCH_TOLERANCE}"
            )
            return DEFAULT_MISMATCH_TOLERANCE
        return tolerance


__all__ = ["LedgerSettings"]
