# =============================================================================
# core/agronomy.py  -  Field Heuristics for the "Pro" view
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a short forecast into three pieces of farm guidance:
#     - irrigation need (a percentage) and the watering routine it implies
#     - field alerts for heavy rain, heat and strong wind
#     - a planting verdict for a given crop
#
#   These are rules of thumb, not agronomic models.  Each one is a handful
#   of fixed thresholds over forecast averages, kept here so they can be
#   tested without the dashboard.
# =============================================================================

import logging
from typing import Optional, Sequence

from core.models import (
    CropProfile,
    FieldAlert,
    ForecastDay,
    IrrigationAdvice,
    PlantingRecommendation,
)

logger = logging.getLogger(__name__)


HEAVY_RAIN_CHANCE = 70                 # % rain chance that triggers an alert
HIGH_HEAT_TEMP = 35                    # °C daily max
STRONG_WIND_SPEED = 25                 # km/h
MAX_ALERTS = 5

# Summed rain chance over the forecast above which rain counts as adequate.
ADEQUATE_RAIN_TOTAL = 10


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


# =============================================================================
# Irrigation
# =============================================================================
def irrigation_need(forecast: Sequence[ForecastDay]) -> int:
    """Estimate how much the field needs watering, in percent.

    Wet, humid weeks need little; dry weeks need a lot:

        avg humidity > 70 and avg rain chance > 50  →  20
        avg humidity > 60 and avg rain chance > 30  →  40
        avg humidity > 50                           →  60
        otherwise                                   →  85

    An empty forecast returns 0 (nothing to base a recommendation on).
    """
    if not forecast:
        return 0

    avg_humidity = _mean([d.humidity for d in forecast])
    avg_precipitation = _mean([d.precipitation_chance for d in forecast])
    logger.debug("irrigation inputs: humidity=%.1f precipitation=%.1f",
                 avg_humidity, avg_precipitation)

    if avg_humidity > 70 and avg_precipitation > 50:
        return 20
    if avg_humidity > 60 and avg_precipitation > 30:
        return 40
    if avg_humidity > 50:
        return 60
    return 85


def irrigation_advice(forecast: Sequence[ForecastDay]) -> IrrigationAdvice:
    """Irrigation need plus the watering routine shown to the farmer."""
    need = irrigation_need(forecast)

    if need > 70:
        return IrrigationAdvice(need=need, frequency="2-3 fois par jour",
                                volume="25-30 L/m²", level="high")
    if need > 40:
        return IrrigationAdvice(need=need, frequency="1 fois par jour",
                                volume="15-20 L/m²", level="medium")
    return IrrigationAdvice(need=need, frequency="Tous les 2-3 jours",
                            volume="8-12 L/m²", level="low")


# =============================================================================
# Alerts
# =============================================================================
def field_alerts(forecast: Sequence[ForecastDay], limit: int = MAX_ALERTS) -> list[FieldAlert]:
    """Collect per-day weather alerts, in forecast order.

    For each day the checks run rain, then heat, then wind, so one day can
    raise up to three alerts.  Only the first ``limit`` alerts are kept.
    """
    alerts: list[FieldAlert] = []

    for day in forecast:
        if day.precipitation_chance > HEAVY_RAIN_CHANCE:
            alerts.append(FieldAlert(
                level="warning",
                code="HEAVY_RAIN",
                date=day.date,
                message=f"Fortes pluies prévues {day.weekday} - Protégez vos cultures",
            ))
        if day.temp_max > HIGH_HEAT_TEMP:
            alerts.append(FieldAlert(
                level="danger",
                code="HIGH_HEAT",
                date=day.date,
                message=f"Températures élevées {day.weekday} - Augmentez l'irrigation",
            ))
        if day.wind_speed > STRONG_WIND_SPEED:
            alerts.append(FieldAlert(
                level="info",
                code="STRONG_WIND",
                date=day.date,
                message=f"Vents forts {day.weekday} - Vérifiez les cultures fragiles",
            ))

    return alerts[:max(0, limit)]


# =============================================================================
# Planting
# =============================================================================
def planting_recommendation(
    forecast: Sequence[ForecastDay], crop: CropProfile
) -> Optional[PlantingRecommendation]:
    """Judge whether the coming days suit planting ``crop``.

    Two signals:
      - temperature: the mean of the daily midpoints falls inside the
        crop's band (inclusive)
      - rain: the summed daily rain chance exceeds ADEQUATE_RAIN_TOTAL

    Both → "excellent", one → "good", neither → "poor".
    Returns None for an empty forecast.
    """
    if not forecast:
        return None

    avg_temp = _mean([(d.temp_max + d.temp_min) / 2 for d in forecast])
    total_rain = sum(d.precipitation_chance for d in forecast)

    temp_ok = crop.temp_min <= avg_temp <= crop.temp_max
    rain_ok = total_rain > ADEQUATE_RAIN_TOTAL

    if temp_ok and rain_ok:
        status, message = "excellent", "Conditions optimales pour la plantation"
    elif temp_ok or rain_ok:
        status, message = "good", "Conditions acceptables pour la plantation"
    else:
        status, message = "poor", "Conditions non favorables - Attendez une meilleure période"

    return PlantingRecommendation(
        status=status,
        message=message,
        average_temp=round(avg_temp, 1),
        total_rain=total_rain,
    )
