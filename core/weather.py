# =============================================================================
# core/weather.py  -  Forecast Data (mock provider)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Provides short daily forecasts for the locations the dashboard knows.
#   The data is MOCK: generated from a per-location climate profile with a
#   seeded random generator.  There is no network access here.
#
# DETERMINISM:
#   Each call seeds its own random.Random from (location, start date, days).
#   Same inputs, same forecast, every time, and concurrent callers never
#   share generator state.
#
# THE PATTERN:
#   Like real Sahel weather, each location gets a "wet spell" in the middle
#   of the window (rain, gusts, storms) surrounded by drier days.  That
#   gives the scorer and the alerts something to react to:
#     - before the spell: the location's normal weather
#     - during the spell: high rain chance, stronger wind, humid air
#     - after the spell:  recovery, slightly cooler and still humid
# =============================================================================

import logging
import random
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from core.models import ForecastDay, WeatherReport

logger = logging.getLogger(__name__)


MAX_FORECAST_DAYS = 16
DEFAULT_FORECAST_DAYS = 7


@dataclass(frozen=True)
class _Climate:
    city: str
    country: str
    temp_low: tuple[int, int]          # Range for the daily minimum (°C)
    temp_high: tuple[int, int]         # Range for the daily maximum (°C)
    humidity: tuple[int, int]
    rain: tuple[int, int]              # Rain chance on normal days
    wind: tuple[int, int]              # km/h on normal days
    wet_spell: tuple[int, int]         # Day offsets [start, end) of the wet spell


_CLIMATES: dict[str, _Climate] = {
    c.city.lower(): c
    for c in (
        _Climate("Dakar", "Sénégal", (22, 25), (28, 31), (65, 80), (5, 25), (12, 22), (3, 5)),
        _Climate("Saint-Louis", "Sénégal", (21, 24), (29, 33), (60, 78), (0, 20), (15, 28), (4, 6)),
        _Climate("Thiès", "Sénégal", (22, 25), (31, 35), (55, 72), (5, 25), (10, 20), (2, 4)),
        _Climate("Kaolack", "Sénégal", (24, 27), (34, 39), (40, 60), (5, 30), (8, 18), (4, 7)),
        _Climate("Ziguinchor", "Sénégal", (23, 25), (30, 33), (75, 90), (25, 55), (6, 15), (1, 5)),
        _Climate("Bamako", "Mali", (23, 26), (32, 37), (45, 65), (10, 35), (8, 18), (3, 6)),
    )
}

_DRY_CONDITIONS = ["Ensoleillé", "Ensoleillé", "Partiellement nuageux"]
_WET_CONDITIONS = ["Averses", "Orageux", "Pluie forte"]
_RECOVERY_CONDITIONS = ["Partiellement nuageux", "Nuageux", "Ensoleillé", "Averses légères"]


def list_locations() -> list[str]:
    """Names of every location with forecast data."""
    return [c.city for c in _CLIMATES.values()]


def get_forecast(
    location: str,
    start_date: Optional[str] = None,
    days: int = DEFAULT_FORECAST_DAYS,
) -> Optional[WeatherReport]:
    """Get a mock daily forecast for a location.

    Args:
        location: City name, matched case-insensitively (e.g. "dakar").
        start_date: ISO date of the first day.  Defaults to today.
        days: Number of days, clamped to [1, MAX_FORECAST_DAYS].

    Returns:
        A WeatherReport, or None if the location is unknown.
    """
    climate = _CLIMATES.get(location.strip().lower())
    if climate is None:
        logger.debug("no climate profile for %r", location)
        return None

    start = (
        datetime.strptime(start_date, "%Y-%m-%d").date()
        if start_date else date.today()
    )
    days = max(1, min(days, MAX_FORECAST_DAYS))

    rng = random.Random(f"{climate.city}|{start.isoformat()}|{days}")
    spell_start, spell_end = climate.wet_spell
    forecast = []

    for i in range(days):
        current = start + timedelta(days=i)

        if i < spell_start:
            # Normal weather for the location
            low = rng.randint(*climate.temp_low)
            high = rng.randint(*climate.temp_high)
            precip = rng.randint(*climate.rain)
            wind = rng.randint(*climate.wind)
            humidity = rng.randint(*climate.humidity)
            condition = rng.choice(_DRY_CONDITIONS)

        elif i < spell_end:
            # Wet spell: the days the planner should steer away from
            low = rng.randint(*climate.temp_low)
            high = rng.randint(climate.temp_high[0] - 3, climate.temp_high[1])
            precip = rng.randint(60, 95)
            wind = rng.randint(climate.wind[1], climate.wind[1] + 15)
            humidity = rng.randint(max(climate.humidity), 95)
            condition = rng.choice(_WET_CONDITIONS)

        else:
            # Recovery
            low = rng.randint(climate.temp_low[0] - 1, climate.temp_low[1])
            high = rng.randint(climate.temp_high[0] - 2, climate.temp_high[1] - 1)
            precip = rng.randint(climate.rain[0], climate.rain[1] + 15)
            wind = rng.randint(*climate.wind)
            humidity = rng.randint(climate.humidity[0] + 5, min(95, climate.humidity[1] + 10))
            condition = rng.choice(_RECOVERY_CONDITIONS)

        forecast.append(ForecastDay(
            date=current.isoformat(),
            temp_min=low,
            temp_max=max(low, high),
            precipitation_chance=min(100, precip),
            wind_speed=wind,
            humidity=min(100, humidity),
            condition=condition,
        ))

    logger.debug("generated %d days for %s from %s", days, climate.city, start)
    return WeatherReport(
        location=climate.city,
        country=climate.country,
        forecast=tuple(forecast),
        period=f"{forecast[0].date} to {forecast[-1].date}",
    )
