"""Solar time computation layer: skyfield horizon/twilight crossings for a coordinate and date."""

from datetime import date, datetime, time, timedelta, timezone

import structlog
from skyfield import almanac
from skyfield.api import Loader, wgs84

from suntimes.config import settings
from suntimes.golden_hour import golden_hour_windows
from suntimes.models import Coordinate, DateOutOfRangeError, DayKind, SolarEventSet

logger = structlog.get_logger(__name__)

settings.data_dir.mkdir(parents=True, exist_ok=True)
_loader = Loader(str(settings.data_dir))
_eph = _loader(settings.ephemeris)
_ts = _loader.timescale()
_earth = _eph["earth"]
_sun = _eph["sun"]

# Searches reach about a day either side of the requested date
EPHEMERIS_FIRST_DATE = (
    _ts.tdb_jd(max(s.start_jd for s in _eph.segments)).utc_datetime().date() + timedelta(days=2)
)
EPHEMERIS_LAST_DATE = (
    _ts.tdb_jd(min(s.end_jd for s in _eph.segments)).utc_datetime().date() - timedelta(days=2)
)

# Sun centre altitudes (degrees)
SUNRISE_ALTITUDE = -0.8333  # Refraction + solar semi-diameter
CIVIL_ALTITUDE = -6.0
NAUTICAL_ALTITUDE = -12.0
ASTRONOMICAL_ALTITUDE = -18.0
GOLDEN_HOUR_ALTITUDE = 6.0

_HALF_DAY = timedelta(hours=12)


def _mean_solar_noon(on: date, lng: float) -> datetime:
    """12:00 local mean solar time on the given date, in UTC."""
    noon_utc = datetime.combine(on, time(12, 0), tzinfo=timezone.utc)
    return noon_utc - timedelta(hours=lng / 15.0)


def _find_solar_noon(observer, approx_noon: datetime) -> datetime | None:
    """Upper transit of the sun closest to the approximate noon."""
    t0 = _ts.from_datetime(approx_noon - _HALF_DAY)
    t1 = _ts.from_datetime(approx_noon + _HALF_DAY)
    transits = almanac.find_transits(observer, _sun, t0, t1)
    candidates = [t.utc_datetime() for t in transits]
    if not candidates:
        return None
    return min(candidates, key=lambda dt: abs(dt - approx_noon))


def _last_rising(observer, start: datetime, end: datetime, altitude: float) -> datetime | None:
    """Latest time in [start, end] the sun climbs through `altitude`, or None."""
    times, crossed = almanac.find_risings(
        observer, _sun, _ts.from_datetime(start), _ts.from_datetime(end),
        horizon_degrees=altitude,
    )
    # Skyfield flags False where the sun only grazes the threshold
    real = [t.utc_datetime() for t, ok in zip(times, crossed) if ok]
    return real[-1] if real else None


def _first_setting(observer, start: datetime, end: datetime, altitude: float) -> datetime | None:
    """Earliest time in [start, end] the sun sinks through `altitude`, or None."""
    times, crossed = almanac.find_settings(
        observer, _sun, _ts.from_datetime(start), _ts.from_datetime(end),
        horizon_degrees=altitude,
    )
    real = [t.utc_datetime() for t, ok in zip(times, crossed) if ok]
    return real[0] if real else None


def _sun_altitude(observer, moment: datetime) -> float:
    alt, _, _ = observer.at(_ts.from_datetime(moment)).observe(_sun).apparent().altaz()
    return float(alt.degrees)


def compute_solar_events(lat: float, lng: float, on: date) -> SolarEventSet:
    """Compute sunrise, sunset, solar noon, twilight and golden hour for one date.

    The solar day is anchored on the sun's upper transit nearest to local mean
    noon: morning events are searched in the 12 hours before it and evening
    events in the 12 hours after, so sunrise < solar noon < sunset always holds
    when both exist.

    Args:
        lat: Latitude in decimal degrees (-90..90).
        lng: Longitude in decimal degrees (-180..180).
        on: Calendar date between EPHEMERIS_FIRST_DATE and EPHEMERIS_LAST_DATE
            (1850 to 2150 with the default de440s.bsp).

    Returns:
        SolarEventSet with None for every threshold the sun does not cross.

    Raises:
        InvalidCoordinateError: lat/lng out of range or not finite.
        DateOutOfRangeError: on is outside the span of the loaded ephemeris.
    """
    coordinate = Coordinate(lat=lat, lng=lng)
    if not EPHEMERIS_FIRST_DATE <= on <= EPHEMERIS_LAST_DATE:
        raise DateOutOfRangeError(
            f"{on.isoformat()} is outside {EPHEMERIS_FIRST_DATE.isoformat()}"
            f" to {EPHEMERIS_LAST_DATE.isoformat()} ({settings.ephemeris})"
        )
    observer = _earth + wgs84.latlon(latitude_degrees=lat, longitude_degrees=lng)

    approx_noon = _mean_solar_noon(on, lng)
    solar_noon = _find_solar_noon(observer, approx_noon)
    anchor = solar_noon or approx_noon
    morning = (anchor - _HALF_DAY, anchor)
    evening = (anchor, anchor + _HALF_DAY)

    sunrise = _last_rising(observer, *morning, SUNRISE_ALTITUDE)
    sunset = _first_setting(observer, *evening, SUNRISE_ALTITUDE)

    morning_window, evening_window = golden_hour_windows(
        sunrise,
        sunset,
        morning_marker=_last_rising(observer, *morning, GOLDEN_HOUR_ALTITUDE),
        evening_marker=_first_setting(observer, *evening, GOLDEN_HOUR_ALTITUDE),
    )

    daylight_minutes: int | None = None
    if sunrise is not None and sunset is not None:
        daylight_minutes = round((sunset - sunrise).total_seconds() / 60)

    day_kind: DayKind = "normal"
    if sunrise is None and sunset is None:
        above = _sun_altitude(observer, anchor) > SUNRISE_ALTITUDE
        day_kind = "polar_day" if above else "polar_night"
        logger.debug("no_sunrise_or_sunset", lat=lat, lng=lng, date=on.isoformat(), day_kind=day_kind)

    return SolarEventSet(
        coordinate=coordinate,
        date=on,
        sunrise=sunrise,
        sunset=sunset,
        solar_noon=solar_noon,
        civil_dawn=_last_rising(observer, *morning, CIVIL_ALTITUDE),
        civil_dusk=_first_setting(observer, *evening, CIVIL_ALTITUDE),
        nautical_dawn=_last_rising(observer, *morning, NAUTICAL_ALTITUDE),
        nautical_dusk=_first_setting(observer, *evening, NAUTICAL_ALTITUDE),
        astronomical_dawn=_last_rising(observer, *morning, ASTRONOMICAL_ALTITUDE),
        astronomical_dusk=_first_setting(observer, *evening, ASTRONOMICAL_ALTITUDE),
        morning_golden_hour=morning_window,
        evening_golden_hour=evening_window,
        daylight_minutes=daylight_minutes,
        day_kind=day_kind,
    )
