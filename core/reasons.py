# =============================================================================
# core/reasons.py  -  Reason Catalog (codes → display text)
# =============================================================================
#
# The scorer emits ReasonCode values.  The dashboard shows French text; an
# English catalog ships alongside it for API consumers.  Adding a locale
# means adding one dict below: the scoring logic does not change.
# =============================================================================

from typing import Iterable

from core.models import ReasonCode


DEFAULT_LOCALE = "fr"

REASON_TEXT: dict[str, dict[ReasonCode, str]] = {
    "fr": {
        ReasonCode.TEMP_OUT_OF_RANGE: "Température non optimale",
        ReasonCode.PRECIP_TOO_HIGH: "Risque de pluie élevé",
        ReasonCode.WIND_TOO_HIGH: "Vent trop fort",
        ReasonCode.EXCELLENT: "Conditions excellentes",
        ReasonCode.ACCEPTABLE: "Conditions acceptables",
    },
    "en": {
        ReasonCode.TEMP_OUT_OF_RANGE: "Temperature outside ideal range",
        ReasonCode.PRECIP_TOO_HIGH: "High chance of rain",
        ReasonCode.WIND_TOO_HIGH: "Wind too strong",
        ReasonCode.EXCELLENT: "Excellent conditions",
        ReasonCode.ACCEPTABLE: "Acceptable conditions",
    },
}


class UnknownLocaleError(ValueError):
    """Raised when no reason catalog exists for the requested locale."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"No reason catalog for locale '{locale}'. "
            f"Available: {', '.join(available_locales())}"
        )


def available_locales() -> list[str]:
    return sorted(REASON_TEXT)


def render_reasons(codes: Iterable[ReasonCode], locale: str = DEFAULT_LOCALE) -> list[str]:
    """Translate reason codes to display strings, preserving their order.

    Args:
        codes: Reason codes, typically ``ScoredDay.reason_codes``.
        locale: Catalog to use ("fr" or "en").  Matching ignores case.

    Raises:
        UnknownLocaleError: If the locale has no catalog.
    """
    catalog = REASON_TEXT.get(locale.lower())
    if catalog is None:
        raise UnknownLocaleError(locale)
    return [catalog[ReasonCode(code)] for code in codes]
