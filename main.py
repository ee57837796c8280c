# =============================================================================
# main.py  -  Entry Point for the Agri-Weather Advisor
# =============================================================================
#
# HOW TO RUN:
#   python main.py            serve the MCP tools over stdio
#   python main.py --report   print a one-off console report and exit
#
# WHAT HAPPENS:
#   1. Environment variables are loaded from .env (AGRIMETEO_LOCATION, ...)
#   2. The FastMCP server in tools/mcp_server.py is imported, which reads
#      those settings and configures logging to stderr
#   3. Either the server starts, or a short report for the default location
#      is printed: best days for each event type, irrigation and alerts
# =============================================================================

import sys

from dotenv import load_dotenv

# Load .env BEFORE importing the server: Settings.from_env() runs at import.
load_dotenv()

from core.agronomy import field_alerts, irrigation_advice
from core.catalog import list_activity_types
from core.reasons import render_reasons
from core.suitability import best_day, score
from core.weather import get_forecast
from tools.mcp_server import SETTINGS, mcp


def print_report() -> int:
    """Print a console summary for the configured location."""
    report = get_forecast(SETTINGS.location, days=SETTINGS.forecast_days)
    if report is None:
        print(f"Unknown location: {SETTINGS.location}", file=sys.stderr)
        return 1

    print("=" * 70)
    print(f"  {report.location}, {report.country}  ({report.period})")
    print("=" * 70)

    for day in report.forecast:
        print(f"  {day.date} {day.weekday:<9} {day.temp_min:>3}-{day.temp_max:<3}°C "
              f"pluie {day.precipitation_chance:>3}%  vent {day.wind_speed:>3} km/h  "
              f"{day.condition}")

    print("\nMeilleur jour par événement:")
    for activity in list_activity_types():
        top = best_day(score(report.forecast, activity.ideal_conditions))
        reasons = ", ".join(render_reasons(top.reason_codes, SETTINGS.locale))
        print(f"  {activity.type:<28} {top.date}  {top.score:>3}/100  {reasons}")

    advice = irrigation_advice(report.forecast)
    print(f"\nIrrigation: {advice.need}% - {advice.frequency}, {advice.volume}")

    alerts = field_alerts(report.forecast)
    if alerts:
        print("\nAlertes:")
        for alert in alerts:
            print(f"  [{alert.level}] {alert.message}")
    return 0


if __name__ == "__main__":
    if "--report" in sys.argv[1:]:
        sys.exit(print_report())
    mcp.run()
