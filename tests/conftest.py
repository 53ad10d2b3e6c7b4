"""Shared fixtures for the suntimes test suite."""

import math
import os
from datetime import date, datetime, timedelta, timezone

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from suntimes.golden_hour import golden_hour_windows  # noqa: E402
from suntimes.models import Coordinate, NamedLocation, SolarEventSet  # noqa: E402

NEW_YORK = NamedLocation("New York", "New York", "United States", 40.7128, -74.0060, "new-york-ny")
LONDON = NamedLocation("London", "England", "United Kingdom", 51.5074, -0.1278, "london-uk")
NEWARK = NamedLocation("Newark", "New Jersey", "United States", 40.7357, -74.1724, "newark-nj")
PHILADELPHIA = NamedLocation(
    "Philadelphia", "Pennsylvania", "United States", 39.9526, -75.1652, "philadelphia-pa"
)
BROKEN = NamedLocation("Nowhere", "", "Atlantis", math.nan, 10.0, "nowhere")


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def pool() -> list[NamedLocation]:
    return [BROKEN, LONDON, NEW_YORK, NEWARK, PHILADELPHIA]


@pytest.fixture
def make_events():
    """Build a SolarEventSet from sunrise/sunset without touching the ephemeris."""

    def _make(
        sunrise: datetime | None = utc(2024, 6, 21, 9, 25),
        sunset: datetime | None = utc(2024, 6, 22, 0, 31),
        day_kind: str = "normal",
        on: date = date(2024, 6, 21),
    ) -> SolarEventSet:
        noon = sunrise + (sunset - sunrise) / 2 if sunrise and sunset else utc(2024, 6, 21, 16, 58)
        morning, evening = golden_hour_windows(sunrise, sunset)
        minutes = round((sunset - sunrise).total_seconds() / 60) if sunrise and sunset else None

        def shift(moment: datetime | None, minutes_: int) -> datetime | None:
            return moment + timedelta(minutes=minutes_) if moment else None

        return SolarEventSet(
            coordinate=Coordinate(40.7128, -74.0060),
            date=on,
            sunrise=sunrise,
            sunset=sunset,
            solar_noon=noon,
            civil_dawn=shift(sunrise, -33),
            civil_dusk=shift(sunset, 33),
            nautical_dawn=shift(sunrise, -75),
            nautical_dusk=shift(sunset, 75),
            astronomical_dawn=shift(sunrise, -125),
            astronomical_dusk=shift(sunset, 125),
            morning_golden_hour=morning,
            evening_golden_hour=evening,
            daylight_minutes=minutes,
            day_kind=day_kind,
        )

    return _make
