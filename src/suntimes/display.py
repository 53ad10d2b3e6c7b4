"""Display layer: formats a SolarEventSet as local clock times for a time zone.

Missing timestamps (the sun does not cross a threshold on that date) are never
formatted; they are replaced with a placeholder or a plain-language message.
"""

from datetime import datetime

from pytz import timezone

from suntimes.i18n import t
from suntimes.models import SolarEventSet, TimeWindow


def to_local(moment: datetime, tz_name: str) -> datetime:
    """Convert an aware datetime to the given IANA time zone."""
    return moment.astimezone(timezone(tz_name))


def format_clock(moment: datetime | None, tz_name: str, lang: str = "en") -> str:
    """Format as "h:mm AM" in tz_name, or a placeholder when moment is None."""
    if moment is None:
        return t("not_available", lang)
    local = to_local(moment, tz_name)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {suffix}"


def format_window(window: TimeWindow | None, tz_name: str, lang: str = "en") -> str:
    if window is None:
        return t("not_available", lang)
    return f"{format_clock(window.start, tz_name, lang)} – {format_clock(window.end, tz_name, lang)}"


def format_duration(minutes: int | None, lang: str = "en") -> str:
    """Format minutes as "15h 5m", or a placeholder when minutes is None."""
    if minutes is None:
        return t("not_available", lang)
    hours, rest = divmod(minutes, 60)
    return t("duration", lang).format(hours=hours, minutes=rest)


def missing_event_message(events: SolarEventSet, lang: str = "en") -> str | None:
    """Plain-language explanation when sunrise or sunset does not happen, else None."""
    if events.day_kind == "polar_day":
        return t("msg_polar_day", lang)
    if events.day_kind == "polar_night":
        return t("msg_polar_night", lang)
    if events.sunrise is None:
        return t("msg_no_sunrise", lang)
    if events.sunset is None:
        return t("msg_no_sunset", lang)
    return None


def event_rows(events: SolarEventSet, tz_name: str, lang: str = "en") -> list[tuple[str, str]]:
    """Rows of the sun times table as (label, text) pairs.

    Args:
        events: Computed solar events.
        tz_name: IANA time zone to show clock times in.
        lang: 'en' or 'ko'.

    Returns:
        Rows in display order: sunrise, solar noon, sunset, golden hours,
        civil/nautical/astronomical dawn and dusk, day length.
    """
    message = missing_event_message(events, lang)

    def clock(moment: datetime | None) -> str:
        return format_clock(moment, tz_name, lang)

    rows = [
        ("row_sunrise", clock(events.sunrise) if events.sunrise else message),
        ("row_solar_noon", clock(events.solar_noon)),
        ("row_sunset", clock(events.sunset) if events.sunset else message),
        ("row_morning_golden_hour", format_window(events.morning_golden_hour, tz_name, lang)),
        ("row_evening_golden_hour", format_window(events.evening_golden_hour, tz_name, lang)),
        ("row_civil_dawn", clock(events.civil_dawn)),
        ("row_civil_dusk", clock(events.civil_dusk)),
        ("row_nautical_dawn", clock(events.nautical_dawn)),
        ("row_nautical_dusk", clock(events.nautical_dusk)),
        ("row_astronomical_dawn", clock(events.astronomical_dawn)),
        ("row_astronomical_dusk", clock(events.astronomical_dusk)),
        (
            "row_day_length",
            format_duration(events.daylight_minutes, lang)
            if events.daylight_minutes is not None
            else message or t("not_available", lang),
        ),
    ]
    return [(t(key, lang), text or t("not_available", lang)) for key, text in rows]


def render_table(events: SolarEventSet, tz_name: str, lang: str = "en") -> str:
    """Plain-text two-column table for terminal output."""
    rows = event_rows(events, tz_name, lang)
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label.ljust(width)}  {text}" for label, text in rows)
