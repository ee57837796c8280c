# =============================================================================
# core/suitability.py  -  Weather Suitability Scoring
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Rates every day of a forecast against an activity's ideal conditions
#   and explains the rating.  This is the engine behind the event planner:
#   "which day next week is best for the wedding / the harvest / the match?"
#
# THE RULES (applied to each day independently):
#   1. Start at 100.
#   2. Temperature outside the band      → -20, TEMP_OUT_OF_RANGE
#   3. Rain chance above the maximum     → -30, PRECIP_TOO_HIGH
#   4. Wind above the maximum            → -15, WIND_TOO_HIGH
#   5. Clamp at 0.
#   6. Verdict: >= 80 EXCELLENT, >= 60 ACCEPTABLE, otherwise none.
#
#   Every check runs, so one day can collect several deductions.  Output
#   order is input order; sorting for display is left to the caller
#   (rank_days and best_day below are helpers for exactly that).
#
# WHAT IT DOES NOT DO:
#   It does not validate the profile.  An inverted band (temp_min >
#   temp_max) yields a well-defined low score, never an exception.
# =============================================================================

from typing import Iterable, Optional, Sequence

from core.models import ActivityProfile, ForecastDay, ReasonCode, ScoredDay


MAX_SCORE = 100
TEMPERATURE_PENALTY = 20
PRECIPITATION_PENALTY = 30
WIND_PENALTY = 15

EXCELLENT_THRESHOLD = 80
ACCEPTABLE_THRESHOLD = 60


def score(forecast: Iterable[ForecastDay], profile: ActivityProfile) -> list[ScoredDay]:
    """Score each forecast day against an activity profile.

    Args:
        forecast: Days to rate, in the order they should be reported.
        profile: The activity's ideal-condition thresholds.

    Returns:
        One ScoredDay per input day, same order.  An empty forecast gives
        an empty list.
    """
    return [score_day(day, profile) for day in forecast]


def score_day(day: ForecastDay, profile: ActivityProfile) -> ScoredDay:
    """Score a single day.  See the module header for the rules."""
    points = MAX_SCORE
    codes: list[ReasonCode] = []

    if day.temp_min < profile.temp_min or day.temp_max > profile.temp_max:
        points -= TEMPERATURE_PENALTY
        codes.append(ReasonCode.TEMP_OUT_OF_RANGE)

    if day.precipitation_chance > profile.precipitation_max:
        points -= PRECIPITATION_PENALTY
        codes.append(ReasonCode.PRECIP_TOO_HIGH)

    if day.wind_speed > profile.wind_speed_max:
        points -= WIND_PENALTY
        codes.append(ReasonCode.WIND_TOO_HIGH)

    points = max(0, points)

    if points >= EXCELLENT_THRESHOLD:
        codes.append(ReasonCode.EXCELLENT)
    elif points >= ACCEPTABLE_THRESHOLD:
        codes.append(ReasonCode.ACCEPTABLE)

    return ScoredDay(date=day.date, score=points, reason_codes=tuple(codes))


def rank_days(scored: Sequence[ScoredDay]) -> list[ScoredDay]:
    """Best score first; days with equal scores keep their forecast order."""
    return sorted(scored, key=lambda d: d.score, reverse=True)


def best_day(scored: Sequence[ScoredDay]) -> Optional[ScoredDay]:
    """The highest-scoring day, earliest first on ties.  None if empty."""
    best = None
    for day in scored:
        if best is None or day.score > best.score:
            best = day
    return best
