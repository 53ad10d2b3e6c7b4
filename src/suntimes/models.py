"""Data model definitions: explicit boundaries between input, compute, and display layers."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

DayKind = Literal["normal", "polar_day", "polar_night"]
WindowSource = Literal["marker", "default"]


class InvalidCoordinateError(ValueError):
    """Latitude/longitude outside the valid range, or not a finite number."""


class DateOutOfRangeError(ValueError):
    """Date outside the span covered by the loaded ephemeris."""


@dataclass(frozen=True)
class Coordinate:
    """A point on the Earth's surface. Validated on construction."""

    lat: float  # Latitude (decimal degrees, -90..90)
    lng: float  # Longitude (decimal degrees, -180..180)

    def __post_init__(self) -> None:
        for name, value, limit in (("lat", self.lat, 90.0), ("lng", self.lng, 180.0)):
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise InvalidCoordinateError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or not -limit <= value <= limit:
                raise InvalidCoordinateError(
                    f"{name}={value} is outside [-{limit:g}, {limit:g}]"
                )


@dataclass(frozen=True)
class NamedLocation:
    """One record of the static location dataset.

    Coordinates are not validated here: the dataset may contain malformed
    records and the resolver is expected to skip them.
    """

    name: str  # Display name ("New York")
    region: str  # State / admin area ("New York", "England"); may be empty
    country: str  # Country name ("United States")
    lat: float
    lng: float
    slug: str  # Unique URL-safe identifier ("new-york-ny", "london-uk")

    @property
    def label(self) -> str:
        qualifier = self.region if self.region and self.region != self.country else self.country
        return f"{self.name}, {qualifier}" if qualifier else self.name


@dataclass(frozen=True)
class NearbyLocation:
    """A dataset location plus its great-circle distance from a query point."""

    location: NamedLocation
    distance_km: float


@dataclass(frozen=True)
class TimeWindow:
    """A golden-hour window. Both ends are aware UTC datetimes."""

    start: datetime
    end: datetime
    source: WindowSource  # "marker" = refined from library marker, "default" = ±60 min rule

    @property
    def duration_minutes(self) -> float:
        return (self.end - self.start).total_seconds() / 60


@dataclass(frozen=True)
class SolarEventSet:
    """Solar events for one coordinate and calendar date.

    Every timestamp is an aware UTC datetime, or None when the sun does not
    cross the corresponding altitude on that date (polar day/night).
    """

    coordinate: Coordinate
    date: date
    sunrise: datetime | None
    sunset: datetime | None
    solar_noon: datetime | None
    civil_dawn: datetime | None  # Sun 6° below horizon
    civil_dusk: datetime | None
    nautical_dawn: datetime | None  # Sun 12° below horizon
    nautical_dusk: datetime | None
    astronomical_dawn: datetime | None  # Sun 18° below horizon
    astronomical_dusk: datetime | None
    morning_golden_hour: TimeWindow | None
    evening_golden_hour: TimeWindow | None
    daylight_minutes: int | None  # None unless both sunrise and sunset exist
    day_kind: DayKind

    @property
    def morning_golden_hour_start(self) -> datetime | None:
        return self.morning_golden_hour.start if self.morning_golden_hour else None

    @property
    def morning_golden_hour_end(self) -> datetime | None:
        return self.morning_golden_hour.end if self.morning_golden_hour else None

    @property
    def evening_golden_hour_start(self) -> datetime | None:
        return self.evening_golden_hour.start if self.evening_golden_hour else None

    @property
    def evening_golden_hour_end(self) -> datetime | None:
        return self.evening_golden_hour.end if self.evening_golden_hour else None


@dataclass(frozen=True)
class MonthSummary:
    """Day-by-day solar events for one month, plus the month's extremes."""

    coordinate: Coordinate
    year: int
    month: int
    tz_name: str  # Time zone used to compare local clock times
    days: tuple[SolarEventSet, ...]
    earliest_sunrise: SolarEventSet | None  # Earliest local clock time of sunrise
    latest_sunset: SolarEventSet | None  # Latest local clock time of sunset
    longest_day: SolarEventSet | None
    shortest_day: SolarEventSet | None


@dataclass(frozen=True)
class DaylightStats:
    """Approximate daylight extremes for a group of locations (hub page)."""

    earliest_sunrise_month: str
    latest_sunset_month: str
    longest_day_month: str
    shortest_day_month: str
    daylight_range_hours: str  # e.g. "9-15"
