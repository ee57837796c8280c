"""Tests for the MCP tool surface, driven through an in-memory client."""
import json

import pytest
from fastmcp import Client

from tools.mcp_server import mcp


async def _call(tool: str, **arguments) -> dict:
    async with Client(mcp) as client:
        result = await client.call_tool(tool, arguments)
    return json.loads(result.content[0].text)


@pytest.mark.asyncio
async def test_tools_are_registered():
    async with Client(mcp) as client:
        names = {tool.name for tool in await client.list_tools()}

    assert names == {
        "list_locations",
        "get_weather_forecast",
        "list_activity_types",
        "score_event_days",
        "list_crops",
        "get_irrigation_advice",
        "get_field_alerts",
        "get_planting_recommendation",
    }


@pytest.mark.asyncio
async def test_get_weather_forecast():
    result = await _call("get_weather_forecast", location="Dakar",
                         start_date="2025-07-10", days=5)

    assert result["location"] == "Dakar"
    assert result["period"] == "2025-07-10 to 2025-07-14"
    assert len(result["forecast"]) == 5


@pytest.mark.asyncio
async def test_unknown_location_returns_error():
    result = await _call("get_weather_forecast", location="Atlantis")

    assert "error" in result
    assert "Dakar" in result["available_locations"]


@pytest.mark.asyncio
async def test_score_event_days():
    result = await _call("score_event_days", activity_type="Match de football",
                         location="Thiès", start_date="2025-07-10", days=7)

    days = result["days"]
    assert [d["date"] for d in days] == sorted(d["date"] for d in days)
    assert all(0 <= d["score"] <= 100 for d in days)
    assert result["best_day"]["score"] == max(d["score"] for d in days)
    assert sorted(result["ranking"]) == [d["date"] for d in days]
    for d in days:
        assert len(d["reasons"]) == len(d["reason_codes"])


@pytest.mark.asyncio
async def test_score_event_days_english():
    result = await _call("score_event_days", activity_type="1", location="Dakar",
                         start_date="2025-07-10", days=3, locale="en")

    verdicts = {"Excellent conditions", "Acceptable conditions",
                "Temperature outside ideal range", "High chance of rain", "Wind too strong"}
    for day in result["days"]:
        assert set(day["reasons"]) <= verdicts


@pytest.mark.asyncio
async def test_score_event_days_errors():
    unknown_activity = await _call("score_event_days", activity_type="Rodéo")
    assert "available_activity_types" in unknown_activity

    bad_locale = await _call("score_event_days", activity_type="Semis",
                             location="Dakar", locale="xx")
    assert bad_locale["available_locales"] == ["en", "fr"]


@pytest.mark.asyncio
async def test_irrigation_alerts_and_planting():
    irrigation = await _call("get_irrigation_advice", location="Kaolack",
                             start_date="2025-07-10")
    assert irrigation["need"] in (20, 40, 60, 85)
    assert irrigation["level"] in ("low", "medium", "high")

    alerts = await _call("get_field_alerts", location="Ziguinchor",
                         start_date="2025-07-10", days=10, limit=3)
    assert len(alerts["alerts"]) <= 3

    planting = await _call("get_planting_recommendation", crop="Maïs",
                           location="Bamako", start_date="2025-07-10")
    assert planting["crop"] == "Maïs"
    assert planting["status"] in ("excellent", "good", "poor")

    unknown_crop = await _call("get_planting_recommendation", crop="Blé")
    assert "available_crops" in unknown_crop


@pytest.mark.asyncio
async def test_invalid_start_date_returns_error():
    result = await _call("score_event_days", activity_type="Semis",
                         location="Dakar", start_date="10/07/2025")

    assert result["error"] == "Invalid start date '10/07/2025'."
    assert "YYYY-MM-DD" in result["hint"]


@pytest.mark.asyncio
async def test_non_decimal_activity_id_returns_error():
    result = await _call("score_event_days", activity_type="²", location="Dakar")
    assert "available_activity_types" in result
