"""Tests for time-zone lookup."""

import math

from suntimes.models import NamedLocation
from suntimes.timezones import DEFAULT_TIMEZONE, timezone_at, timezone_by_region, timezone_for


def test_polygon_lookup():
    assert timezone_at(40.7128, -74.0060) == "America/New_York"
    assert timezone_at(35.6762, 139.6503) == "Asia/Tokyo"
    assert timezone_at(-33.8688, 151.2093) == "Australia/Sydney"


def test_region_tables():
    assert timezone_by_region("Texas", "United States") == "America/Chicago"
    assert timezone_by_region("", "Japan") == "Asia/Tokyo"
    assert timezone_by_region("Atlantis", "Nowhere") == DEFAULT_TIMEZONE


def test_location_without_coordinates_uses_region():
    location = NamedLocation("Austin", "Texas", "United States", math.nan, math.nan, "austin-tx")
    assert timezone_for(location) == "America/Chicago"


def test_location_with_coordinates(pool):
    london = next(loc for loc in pool if loc.slug == "london-uk")
    assert timezone_for(london) == "Europe/London"
