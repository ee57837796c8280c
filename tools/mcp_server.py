# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines every MCP tool the dashboard (or an assistant) can call.  Each
#   tool is a thin wrapper around a core/ function: it resolves names to
#   catalog entries, calls the logic, and returns a plain dict.
#
# HOW IT WORKS (the flow):
#   1. The client calls a tool by name (e.g. "score_event_days")
#   2. FastMCP routes the call to the decorated function below
#   3. The function calls core/ logic and converts dataclasses to dicts
#   4. Unknown locations, activities or crops come back as an error dict
#      listing what IS available, never as an exception
#
# TOOL NAMING CONVENTIONS:
#   - list_*    → Catalog discovery
#   - get_*     → Read-only retrieval or derived guidance
#   - score_*   → Suitability scoring
#   All tools are read-only and idempotent, safe to retry.
#
# RUNNING THIS SERVER:
#   a) python main.py                (loads .env, then serves over stdio)
#   b) python -m tools.mcp_server    (serves with the current environment)
# =============================================================================

import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

from fastmcp import FastMCP

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.agronomy import field_alerts, irrigation_advice, planting_recommendation
from core.catalog import get_activity_type, get_crop, list_activity_types, list_crops
from core.reasons import UnknownLocaleError, available_locales, render_reasons
from core.settings import Settings
from core.suitability import best_day, rank_days, score
from core.weather import get_forecast, list_locations

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: the MCP stdio transport owns STDOUT, and a stray log
# line there would corrupt the JSON message stream.
#
# ANSI colors make tool traffic easy to scan in a terminal:
#   CYAN   incoming requests (tool name + parameters)
#   GREEN  response JSON
#   YELLOW intermediate status
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

SETTINGS = Settings.from_env()

logging.basicConfig(
    level=SETTINGS.logging_level,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), ensure_ascii=False)}{_RESET}"
    )
    return result


# =============================================================================
# Shared lookups
# =============================================================================
# Each helper returns (value, error_dict).  Exactly one of them is None.
# =============================================================================
def _resolve_forecast(location: str, start_date: Optional[str], days: int):
    location = location or SETTINGS.location
    try:
        report = get_forecast(location, start_date, days or SETTINGS.forecast_days)
    except ValueError:
        return None, {
            "error": f"Invalid start date '{start_date}'.",
            "hint": "Use ISO format YYYY-MM-DD (e.g. 2025-07-10).",
        }
    if report is None:
        return None, {
            "error": f"Location '{location}' not found.",
            "available_locations": list_locations(),
            "hint": "Use one of the available locations listed above.",
        }
    return report, None


def _resolve_activity(activity_type: str):
    activity = get_activity_type(activity_type)
    if activity is None:
        return None, {
            "error": f"Activity type '{activity_type}' not found.",
            "available_activity_types": [a.type for a in list_activity_types()],
            "hint": "Pass an activity name or its numeric id.",
        }
    return activity, None


def _resolve_crop(crop_name: str):
    crop = get_crop(crop_name)
    if crop is None:
        return None, {
            "error": f"Crop '{crop_name}' not found.",
            "available_crops": [c.name for c in list_crops()],
            "hint": "Pass a crop name or its numeric id.",
        }
    return crop, None


def _scored_to_dict(day, locale: str) -> dict:
    return {
        "date": day.date,
        "score": day.score,
        "reason_codes": [code.value for code in day.reason_codes],
        "reasons": render_reasons(day.reason_codes, locale),
    }


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("agrimeteo-advisor")


# =============================================================================
# TOOL 1: list_locations
# =============================================================================
@mcp.tool(name="list_locations")
def list_locations_tool() -> dict:
    """List the locations that have forecast data.

    Returns:
        A dict with ``locations`` (city names) and ``default_location``.
    """
    _log_request("list_locations")
    return _log_response("list_locations", {
        "locations": list_locations(),
        "default_location": SETTINGS.location,
    })


# =============================================================================
# TOOL 2: get_weather_forecast
# =============================================================================
@mcp.tool()
def get_weather_forecast(
    location: str = "",
    start_date: Optional[str] = None,
    days: int = 0,
) -> dict:
    """Get the daily forecast for a location.

    Args:
        location: City name (e.g. "Dakar").  Empty uses the configured default.
        start_date: First day, ISO format (e.g. "2025-07-10").  Defaults to today.
        days: Number of days (1-16).  0 uses the configured default.

    Returns:
        A dict with location, country, period and ``forecast``: one entry
        per day with temp_min, temp_max, precipitation_chance, wind_speed,
        humidity and condition.
    """
    _log_request("get_weather_forecast",
                 location=location, start_date=start_date, days=days)

    report, error = _resolve_forecast(location, start_date, days)
    if error:
        _log_status(error["error"])
        return _log_response("get_weather_forecast", error)

    _log_status(f"Got {len(report.forecast)} days for {report.location}")
    return _log_response("get_weather_forecast", asdict(report))


# =============================================================================
# TOOL 3: list_activity_types
# =============================================================================
@mcp.tool(name="list_activity_types")
def list_activity_types_tool() -> dict:
    """List the event types that days can be scored against.

    Returns:
        A dict with ``activity_types``: id, type, duration (hours),
        description and ideal_conditions for each.
    """
    _log_request("list_activity_types")
    return _log_response("list_activity_types", {
        "activity_types": [asdict(a) for a in list_activity_types()],
    })


# =============================================================================
# TOOL 4: score_event_days
# =============================================================================
# The event planner.  Scores come back in forecast order (the core
# contract); the ranking and the best day are added here for convenience.
# =============================================================================
@mcp.tool()
def score_event_days(
    activity_type: str,
    location: str = "",
    start_date: Optional[str] = None,
    days: int = 0,
    locale: str = "",
) -> dict:
    """Score each forecast day for an event type (0-100, with reasons).

    Each day starts at 100 and loses 20 if the temperature leaves the
    ideal band, 30 if rain chance exceeds the maximum, 15 if wind exceeds
    the maximum.  80+ is excellent, 60-79 acceptable.

    Args:
        activity_type: Event type name or id (see list_activity_types).
        location: City name.  Empty uses the configured default.
        start_date: First day, ISO format.  Defaults to today.
        days: Number of days (1-16).  0 uses the configured default.
        locale: Reason text language, "fr" or "en".  Empty uses the default.

    Returns:
        A dict with:
          - days: scored days in forecast order
          - ranking: dates ordered best first
          - best_day: the top day (earliest on ties)
    """
    _log_request("score_event_days", activity_type=activity_type,
                 location=location, start_date=start_date, days=days, locale=locale)
    locale = locale or SETTINGS.locale

    activity, error = _resolve_activity(activity_type)
    if error:
        _log_status(error["error"])
        return _log_response("score_event_days", error)

    report, error = _resolve_forecast(location, start_date, days)
    if error:
        _log_status(error["error"])
        return _log_response("score_event_days", error)

    scored = score(report.forecast, activity.ideal_conditions)
    try:
        scored_days = [_scored_to_dict(d, locale) for d in scored]
    except UnknownLocaleError as e:
        _log_status(str(e))
        return _log_response("score_event_days", {
            "error": str(e),
            "available_locales": available_locales(),
        })

    top = best_day(scored)
    _log_status(f"Scored {len(scored)} days, best={top.date if top else None}")

    return _log_response("score_event_days", {
        "location": report.location,
        "activity_type": activity.type,
        "period": report.period,
        "days": scored_days,
        "ranking": [d.date for d in rank_days(scored)],
        "best_day": _scored_to_dict(top, locale) if top else None,
    })


# =============================================================================
# TOOL 5: list_crops
# =============================================================================
@mcp.tool(name="list_crops")
def list_crops_tool() -> dict:
    """List known crops with their calendars, ideal conditions and growth stages."""
    _log_request("list_crops")
    return _log_response("list_crops", {
        "crops": [asdict(c) for c in list_crops()],
    })


# =============================================================================
# TOOL 6: get_irrigation_advice
# =============================================================================
@mcp.tool()
def get_irrigation_advice(
    location: str = "",
    start_date: Optional[str] = None,
    days: int = 0,
) -> dict:
    """Estimate irrigation need for a location and the watering routine.

    Returns:
        A dict with need (percent), frequency, volume and level
        ("low", "medium" or "high").
    """
    _log_request("get_irrigation_advice",
                 location=location, start_date=start_date, days=days)

    report, error = _resolve_forecast(location, start_date, days)
    if error:
        _log_status(error["error"])
        return _log_response("get_irrigation_advice", error)

    advice = irrigation_advice(report.forecast)
    _log_status(f"Irrigation need {advice.need}% ({advice.level})")
    return _log_response("get_irrigation_advice", {
        "location": report.location,
        "period": report.period,
        **asdict(advice),
    })


# =============================================================================
# TOOL 7: get_field_alerts
# =============================================================================
@mcp.tool()
def get_field_alerts(
    location: str = "",
    start_date: Optional[str] = None,
    days: int = 0,
    limit: int = 5,
) -> dict:
    """List heavy-rain, heat and strong-wind alerts for the coming days.

    Args:
        location: City name.  Empty uses the configured default.
        start_date: First day, ISO format.  Defaults to today.
        days: Number of days (1-16).  0 uses the configured default.
        limit: Maximum number of alerts returned (default 5).
    """
    _log_request("get_field_alerts", location=location,
                 start_date=start_date, days=days, limit=limit)

    report, error = _resolve_forecast(location, start_date, days)
    if error:
        _log_status(error["error"])
        return _log_response("get_field_alerts", error)

    alerts = field_alerts(report.forecast, limit=limit)
    _log_status(f"{len(alerts)} alerts")
    return _log_response("get_field_alerts", {
        "location": report.location,
        "period": report.period,
        "alerts": [asdict(a) for a in alerts],
    })


# =============================================================================
# TOOL 8: get_planting_recommendation
# =============================================================================
@mcp.tool()
def get_planting_recommendation(
    crop: str,
    location: str = "",
    start_date: Optional[str] = None,
    days: int = 0,
) -> dict:
    """Say whether the coming days suit planting a crop.

    Args:
        crop: Crop name or id (see list_crops).
        location: City name.  Empty uses the configured default.
        start_date: First day, ISO format.  Defaults to today.
        days: Number of days (1-16).  0 uses the configured default.

    Returns:
        A dict with status ("excellent", "good" or "poor"), message,
        average_temp and total_rain.
    """
    _log_request("get_planting_recommendation", crop=crop,
                 location=location, start_date=start_date, days=days)

    crop_profile, error = _resolve_crop(crop)
    if error:
        _log_status(error["error"])
        return _log_response("get_planting_recommendation", error)

    report, error = _resolve_forecast(location, start_date, days)
    if error:
        _log_status(error["error"])
        return _log_response("get_planting_recommendation", error)

    recommendation = planting_recommendation(report.forecast, crop_profile)
    _log_status(f"Planting {crop_profile.name}: {recommendation.status}")
    return _log_response("get_planting_recommendation", {
        "location": report.location,
        "crop": crop_profile.name,
        "period": report.period,
        **asdict(recommendation),
    })


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
