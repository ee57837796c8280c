"""Tests for catalogs, reason rendering, mock forecasts and settings."""
import logging

import pytest

from core.catalog import get_activity_type, get_crop, list_activity_types, list_crops
from core.models import ReasonCode
from core.reasons import UnknownLocaleError, available_locales, render_reasons
from core.settings import Settings
from core.weather import MAX_FORECAST_DAYS, get_forecast, list_locations


def test_activity_lookup_by_name_and_id():
    by_name = get_activity_type("récolte")
    assert by_name is not None
    assert get_activity_type(by_name.id) == by_name
    assert get_activity_type(str(by_name.id)) == by_name


def test_unknown_catalog_entries():
    assert get_activity_type("Concert sur la lune") is None
    assert get_activity_type(999) is None
    assert get_crop("Blé") is None


def test_catalogs_sorted_by_id():
    assert [a.id for a in list_activity_types()] == sorted(a.id for a in list_activity_types())
    assert [c.name for c in list_crops()][:2] == ["Mil", "Maïs"]


def test_activity_profiles_are_valid():
    for activity in list_activity_types():
        ideal = activity.ideal_conditions
        assert ideal.temp_min <= ideal.temp_max
        assert 0 <= ideal.precipitation_max <= 100
        assert ideal.wind_speed_max >= 0


def test_render_reasons_locales():
    codes = (ReasonCode.PRECIP_TOO_HIGH, ReasonCode.ACCEPTABLE)
    assert render_reasons(codes) == ["Risque de pluie élevé", "Conditions acceptables"]
    assert render_reasons(codes, "EN") == ["High chance of rain", "Acceptable conditions"]
    assert available_locales() == ["en", "fr"]


def test_render_reasons_unknown_locale():
    with pytest.raises(UnknownLocaleError):
        render_reasons([ReasonCode.EXCELLENT], "wo")


def test_forecast_is_deterministic():
    first = get_forecast("Dakar", "2025-07-10", 7)
    second = get_forecast("dakar", "2025-07-10", 7)
    assert first == second
    assert first.location == "Dakar"
    assert first.period == "2025-07-10 to 2025-07-16"


def test_forecast_days_are_well_formed():
    for location in list_locations():
        report = get_forecast(location, "2025-08-01", 10)
        dates = [d.date for d in report.forecast]
        assert dates == sorted(set(dates))
        for day in report.forecast:
            assert day.temp_min <= day.temp_max
            assert 0 <= day.precipitation_chance <= 100
            assert 0 <= day.humidity <= 100
            assert day.wind_speed >= 0


def test_forecast_days_clamped():
    assert len(get_forecast("Bamako", "2025-07-10", 40).forecast) == MAX_FORECAST_DAYS
    assert len(get_forecast("Bamako", "2025-07-10", 0).forecast) == 1


def test_forecast_unknown_location():
    assert get_forecast("Atlantis", "2025-07-10") is None


def test_settings_defaults():
    settings = Settings.from_env({})
    assert settings == Settings(location="Dakar", locale="fr", forecast_days=7, log_level="INFO")


def test_settings_from_env():
    settings = Settings.from_env({
        "AGRIMETEO_LOCATION": "Ziguinchor",
        "AGRIMETEO_LOCALE": "EN",
        "AGRIMETEO_FORECAST_DAYS": "10",
        "AGRIMETEO_LOG_LEVEL": "debug",
    })
    assert settings.location == "Ziguinchor"
    assert settings.locale == "en"
    assert settings.forecast_days == 10
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["dix", "0", "40"])
def test_settings_invalid_days_fall_back(raw):
    assert Settings.from_env({"AGRIMETEO_FORECAST_DAYS": raw}).forecast_days == 7


@pytest.mark.parametrize("key", ["²", "①", "٣x"])
def test_non_decimal_digit_keys_are_unknown(key):
    assert get_activity_type(key) is None
    assert get_crop(key) is None


def test_arabic_indic_digits_are_ids():
    assert get_crop("٢").name == "Maïs"


@pytest.mark.parametrize("raw, expected", [
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    ("BASIC_FORMAT", logging.INFO),
    ("loud", logging.INFO),
])
def test_settings_logging_level(raw, expected):
    assert Settings.from_env({"AGRIMETEO_LOG_LEVEL": raw}).logging_level == expected
