# =============================================================================
# core/settings.py  -  Runtime Configuration
# =============================================================================
#
# Configuration comes from environment variables (main.py loads a .env
# file first).  Settings is an explicit object handed to whoever needs it;
# there is no module-level "current location" or global store.
#
#   AGRIMETEO_LOCATION        Default location          (Dakar)
#   AGRIMETEO_LOCALE          Reason-text locale        (fr)
#   AGRIMETEO_FORECAST_DAYS   Default forecast length   (7)
#   AGRIMETEO_LOG_LEVEL       Logging level             (INFO)
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.weather import DEFAULT_FORECAST_DAYS, MAX_FORECAST_DAYS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    location: str = "Dakar"
    locale: str = "fr"
    forecast_days: int = DEFAULT_FORECAST_DAYS
    log_level: str = "INFO"

    @property
    def logging_level(self) -> int:
        """Numeric level for log_level; unknown names map to INFO."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the environment, falling back to defaults.

        A forecast length that is not an integer in [1, 16] is ignored with
        a warning rather than failing startup.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        days = defaults.forecast_days
        raw_days = env.get("AGRIMETEO_FORECAST_DAYS")
        if raw_days:
            try:
                parsed = int(raw_days)
            except ValueError:
                parsed = None
            if parsed is not None and 1 <= parsed <= MAX_FORECAST_DAYS:
                days = parsed
            else:
                logger.warning(
                    "Ignoring AGRIMETEO_FORECAST_DAYS=%r (expected 1-%d), using %d",
                    raw_days, MAX_FORECAST_DAYS, days,
                )

        return cls(
            location=env.get("AGRIMETEO_LOCATION", defaults.location).strip() or defaults.location,
            locale=env.get("AGRIMETEO_LOCALE", defaults.locale).strip().lower() or defaults.locale,
            forecast_days=days,
            log_level=env.get("AGRIMETEO_LOG_LEVEL", defaults.log_level).strip().upper() or defaults.log_level,
        )
