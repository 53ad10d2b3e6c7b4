"""Month tables and hub-level daylight statistics."""

import calendar
from datetime import date

from suntimes.compute import compute_solar_events
from suntimes.display import to_local
from suntimes.models import Coordinate, DaylightStats, MonthSummary, SolarEventSet


def compute_month(lat: float, lng: float, year: int, month: int, tz_name: str) -> MonthSummary:
    """Compute solar events for every day of a month and pick out its extremes.

    Earliest sunrise and latest sunset compare local clock times in tz_name;
    longest and shortest day compare daylight_minutes. Days without the
    relevant event are ignored; each extreme is None if no day qualifies.

    Raises:
        InvalidCoordinateError: lat/lng out of range.
        DateOutOfRangeError: month outside the span of the loaded ephemeris.
        ValueError: month outside 1..12.
    """
    coordinate = Coordinate(lat=lat, lng=lng)
    _, n_days = calendar.monthrange(year, month)
    days = tuple(
        compute_solar_events(lat, lng, date(year, month, day)) for day in range(1, n_days + 1)
    )

    with_sunrise = [d for d in days if d.sunrise is not None]
    with_sunset = [d for d in days if d.sunset is not None]
    with_daylight = [d for d in days if d.daylight_minutes is not None]

    return MonthSummary(
        coordinate=coordinate,
        year=year,
        month=month,
        tz_name=tz_name,
        days=days,
        earliest_sunrise=min(
            with_sunrise, key=lambda d: to_local(d.sunrise, tz_name).time(), default=None
        ),
        latest_sunset=max(
            with_sunset, key=lambda d: to_local(d.sunset, tz_name).time(), default=None
        ),
        longest_day=max(with_daylight, key=lambda d: d.daylight_minutes, default=None),
        shortest_day=min(with_daylight, key=lambda d: d.daylight_minutes, default=None),
    )


def daylight_series(days: tuple[SolarEventSet, ...] | MonthSummary) -> list[int | None]:
    """Daylight minutes per day, None where the sun does not both rise and set."""
    if isinstance(days, MonthSummary):
        days = days.days
    return [d.daylight_minutes for d in days]


def estimate_daylight_stats(mean_lat: float) -> DaylightStats:
    """Rough daylight extremes for a group of locations from their mean latitude.

    Used for hub summaries where computing every city is unnecessary: the
    hemisphere decides which solstice month is longest, and the latitude band
    decides the typical range of day length.
    """
    abs_lat = abs(mean_lat)
    if abs_lat > 50:
        daylight_range = "8-16"
    elif abs_lat > 35:
        daylight_range = "9-15"
    else:
        daylight_range = "10-14"

    summer, winter = ("June", "December") if mean_lat >= 0 else ("December", "June")
    return DaylightStats(
        earliest_sunrise_month=summer,
        latest_sunset_month=summer,
        longest_day_month=summer,
        shortest_day_month=winter,
        daylight_range_hours=daylight_range,
    )
