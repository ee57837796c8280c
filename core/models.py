# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that
# flows through the advisor: forecast days coming in, activity and crop
# profiles describing "ideal", and scored days, alerts and recommendations
# going out.
#
# All value objects are FROZEN.  The scorer and the agronomy heuristics
# receive them, read them, and build new objects; nothing downstream can
# mutate a forecast that another caller is also looking at.
#
# REASON CODES:
#   The scorer speaks in ReasonCode values, not display text.  Turning a
#   code into "Vent trop fort" (or "Wind too strong") is the job of
#   core/reasons.py, so the decision logic never depends on a locale.
# =============================================================================

from dataclasses import dataclass, field
from datetime import date as _date
from enum import Enum
from typing import Optional


_FRENCH_WEEKDAYS = (
    "Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi", "Dimanche",
)


# -----------------------------------------------------------------------------
# ReasonCode - stable identifiers for score diagnostics
# -----------------------------------------------------------------------------
class ReasonCode(str, Enum):
    """Why a day lost points, or the verdict it earned."""

    TEMP_OUT_OF_RANGE = "TEMP_OUT_OF_RANGE"
    PRECIP_TOO_HIGH = "PRECIP_TOO_HIGH"
    WIND_TOO_HIGH = "WIND_TOO_HIGH"
    EXCELLENT = "EXCELLENT"
    ACCEPTABLE = "ACCEPTABLE"


# -----------------------------------------------------------------------------
# ForecastDay - a single day's predicted weather
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ForecastDay:
    """Weather metrics for one calendar day."""

    date: str                          # ISO format: "2025-07-15"
    temp_min: float                    # Degrees Celsius
    temp_max: float                    # Degrees Celsius, >= temp_min
    precipitation_chance: int          # Chance of rain (0–100)
    wind_speed: float                  # km/h
    humidity: int = 0                  # Relative humidity (0–100), agronomy only
    condition: str = ""                # e.g. "Ensoleillé", "Orageux"

    @property
    def weekday(self) -> str:
        """French weekday name, as shown in the dashboard's alerts."""
        return _FRENCH_WEEKDAYS[_date.fromisoformat(self.date).weekday()]


# -----------------------------------------------------------------------------
# ActivityProfile - the ideal-condition thresholds of an activity
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ActivityProfile:
    """Acceptable band for each metric the scorer checks."""

    temp_min: float
    temp_max: float
    precipitation_max: int             # Highest tolerable rain chance
    wind_speed_max: float              # Highest tolerable wind (km/h)


@dataclass(frozen=True)
class ActivityType:
    """One entry of the event-type catalog."""

    id: int
    type: str                          # "Mariage en plein air"
    duration: int                      # Hours
    ideal_conditions: ActivityProfile
    description: str = ""


# -----------------------------------------------------------------------------
# ScoredDay - the scorer's output, one per ForecastDay
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ScoredDay:
    """A forecast day rated 0–100 against an activity profile."""

    date: str
    score: int
    reason_codes: tuple[ReasonCode, ...] = ()

    @property
    def reasons(self) -> list[str]:
        """Reason codes rendered with the reference (French) catalog."""
        from core.reasons import render_reasons

        return render_reasons(self.reason_codes)


# -----------------------------------------------------------------------------
# Crops
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GrowthStage:
    stage: str                         # "Germination"
    duration: str                      # "7-10 jours"
    irrigation: str                    # Watering guidance for the stage
    vulnerabilities: tuple[str, ...] = ()


@dataclass(frozen=True)
class CropProfile:
    """A crop and the conditions it wants at planting time."""

    id: int
    name: str
    planting_period: str
    harvest_period: str
    water_requirements: str            # "Faible", "Modéré", "Élevé"
    temp_min: float
    temp_max: float
    rainfall_min: int                  # mm per season
    rainfall_max: int
    soil_moisture: str
    growth_stages: tuple[GrowthStage, ...] = ()


# -----------------------------------------------------------------------------
# Agronomy outputs
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class FieldAlert:
    """A day-specific warning for the field."""

    level: str                         # "warning", "danger" or "info"
    code: str                          # "HEAVY_RAIN", "HIGH_HEAT", "STRONG_WIND"
    date: str
    message: str


@dataclass(frozen=True)
class PlantingRecommendation:
    status: str                        # "excellent", "good" or "poor"
    message: str
    average_temp: float
    total_rain: int


@dataclass(frozen=True)
class IrrigationAdvice:
    need: int                          # Percent, 0 when there is no forecast
    frequency: str                     # "1 fois par jour"
    volume: str                        # "15-20 L/m²"
    level: str                         # "low", "medium" or "high"


# -----------------------------------------------------------------------------
# WeatherReport - what the forecast provider returns for a location
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class WeatherReport:
    location: str                      # "Dakar"
    country: str                       # "Sénégal"
    forecast: tuple[ForecastDay, ...] = field(default_factory=tuple)
    period: Optional[str] = None       # "2025-07-10 to 2025-07-16"
