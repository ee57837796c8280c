"""Tests for irrigation, alerts and planting heuristics."""
import pytest

from core.agronomy import (
    field_alerts,
    irrigation_advice,
    irrigation_need,
    planting_recommendation,
)
from core.catalog import get_crop
from core.models import ForecastDay


def _day(date="2025-07-14", temp_min=22, temp_max=30, precip=10, wind=10, humidity=50):
    return ForecastDay(
        date=date,
        temp_min=temp_min,
        temp_max=temp_max,
        precipitation_chance=precip,
        wind_speed=wind,
        humidity=humidity,
    )


@pytest.mark.parametrize("humidity, precip, expected", [
    (80, 60, 20),
    (80, 40, 40),
    (65, 35, 40),
    (65, 20, 60),
    (55, 0, 60),
    (50, 90, 85),
    (30, 10, 85),
])
def test_irrigation_need_thresholds(humidity, precip, expected):
    forecast = [_day(humidity=humidity, precip=precip)] * 3
    assert irrigation_need(forecast) == expected


def test_irrigation_need_uses_averages():
    """Humidity 60 and 90 average to 75; rain 40 and 70 average to 55."""
    forecast = [_day(humidity=60, precip=40), _day(humidity=90, precip=70)]
    assert irrigation_need(forecast) == 20


def test_irrigation_need_empty_forecast():
    assert irrigation_need([]) == 0


def test_irrigation_advice_levels():
    dry = irrigation_advice([_day(humidity=20)])
    assert (dry.need, dry.level, dry.frequency, dry.volume) == (
        85, "high", "2-3 fois par jour", "25-30 L/m²")

    medium = irrigation_advice([_day(humidity=55)])
    assert (medium.need, medium.level, medium.frequency) == (60, "medium", "1 fois par jour")

    wet = irrigation_advice([_day(humidity=85, precip=80)])
    assert (wet.need, wet.level, wet.volume) == (20, "low", "8-12 L/m²")


def test_field_alerts_per_day_order():
    """2025-07-14 is a Monday; rain, heat and wind alerts come in that order."""
    forecast = [_day(precip=80, temp_max=38, wind=30)]
    alerts = field_alerts(forecast)

    assert [a.code for a in alerts] == ["HEAVY_RAIN", "HIGH_HEAT", "STRONG_WIND"]
    assert [a.level for a in alerts] == ["warning", "danger", "info"]
    assert alerts[0].message == "Fortes pluies prévues Lundi - Protégez vos cultures"
    assert alerts[1].message == "Températures élevées Lundi - Augmentez l'irrigation"


def test_field_alerts_thresholds_are_strict():
    assert field_alerts([_day(precip=70, temp_max=35, wind=25)]) == []


def test_field_alerts_truncated():
    forecast = [
        _day(date=f"2025-07-{14 + i}", precip=90, temp_max=40, wind=10)
        for i in range(4)
    ]
    alerts = field_alerts(forecast)

    assert len(alerts) == 5
    assert [a.date for a in alerts] == [
        "2025-07-14", "2025-07-14", "2025-07-15", "2025-07-15", "2025-07-16",
    ]
    assert len(field_alerts(forecast, limit=2)) == 2


@pytest.fixture
def millet():
    return get_crop("Mil")  # 25-35 °C


def test_planting_excellent(millet):
    forecast = [_day(temp_min=24, temp_max=34, precip=20)]
    rec = planting_recommendation(forecast, millet)

    assert rec.status == "excellent"
    assert rec.message == "Conditions optimales pour la plantation"
    assert rec.average_temp == 29.0
    assert rec.total_rain == 20


def test_planting_good_when_dry(millet):
    forecast = [_day(temp_min=24, temp_max=34, precip=5), _day(temp_min=24, temp_max=34, precip=5)]
    rec = planting_recommendation(forecast, millet)

    assert rec.status == "good"
    assert rec.total_rain == 10


def test_planting_poor(millet):
    rec = planting_recommendation([_day(temp_min=10, temp_max=16, precip=0)], millet)
    assert rec.status == "poor"


def test_planting_empty_forecast(millet):
    assert planting_recommendation([], millet) is None
