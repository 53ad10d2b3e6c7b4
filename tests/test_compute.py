"""Tests for the solar time engine.

These use the real skyfield ephemeris (de440s.bsp, downloaded to SUNTIMES_DATA_DIR on first run).
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from suntimes.compute import EPHEMERIS_FIRST_DATE, EPHEMERIS_LAST_DATE, compute_solar_events
from suntimes.locations import load_locations
from suntimes.models import DateOutOfRangeError, InvalidCoordinateError

NYC = (40.7128, -74.0060)

MID_LATITUDE_CASES = [
    (40.7128, -74.0060),  # New York
    (51.5074, -0.1278),  # London
    (35.6762, 139.6503),  # Tokyo
    (-33.8688, 151.2093),  # Sydney
    (-36.8485, 174.7633),  # Auckland, near the date line
    (21.3069, -157.8583),  # Honolulu
    (1.3521, 103.8198),  # Singapore
    (-54.8019, -68.3030),  # Ushuaia
    (59.0, 179.9),
    (-59.0, -179.9),
]
DATES = [date(2024, 3, 20), date(2024, 6, 21), date(2024, 9, 22), date(2024, 12, 21)]


def _minutes(delta: timedelta) -> float:
    return delta.total_seconds() / 60


class TestSeasonalScenario:
    def test_new_york_summer_solstice(self):
        events = compute_solar_events(*NYC, date(2024, 6, 21))
        # ~15h05m
        assert 15 * 60 <= events.daylight_minutes <= 15 * 60 + 10

    def test_new_york_winter_solstice(self):
        events = compute_solar_events(*NYC, date(2024, 12, 21))
        # ~9h15m
        assert 9 * 60 + 8 <= events.daylight_minutes <= 9 * 60 + 22

    def test_summer_exceeds_winter_by_hours(self):
        summer = compute_solar_events(*NYC, date(2024, 6, 21))
        winter = compute_solar_events(*NYC, date(2024, 12, 21))
        assert summer.daylight_minutes - winter.daylight_minutes > 5 * 60

    def test_southern_hemisphere_is_reversed(self):
        june = compute_solar_events(-33.8688, 151.2093, date(2024, 6, 21))
        december = compute_solar_events(-33.8688, 151.2093, date(2024, 12, 21))
        assert december.daylight_minutes > june.daylight_minutes + 3 * 60

    def test_new_york_sunrise_clock_time(self):
        events = compute_solar_events(*NYC, date(2024, 6, 21))
        # 5:25 AM EDT == 09:25 UTC
        assert events.sunrise.date() == date(2024, 6, 21)
        expected = datetime(2024, 6, 21, 9, 25, tzinfo=timezone.utc)
        assert abs(_minutes(events.sunrise - expected)) < 3


@pytest.mark.parametrize("lat,lng", MID_LATITUDE_CASES)
@pytest.mark.parametrize("on", DATES)
class TestInvariants:
    def test_sunrise_noon_sunset_order(self, lat, lng, on):
        events = compute_solar_events(lat, lng, on)

        assert events.day_kind == "normal"
        assert events.sunrise < events.solar_noon < events.sunset

    def test_daylight_matches_sunrise_sunset(self, lat, lng, on):
        events = compute_solar_events(lat, lng, on)
        expected = round((events.sunset - events.sunrise).total_seconds() / 60)
        assert events.daylight_minutes == expected

    def test_twilight_order(self, lat, lng, on):
        e = compute_solar_events(lat, lng, on)
        dawns = [e.astronomical_dawn, e.nautical_dawn, e.civil_dawn, e.sunrise]
        dusks = [e.sunset, e.civil_dusk, e.nautical_dusk, e.astronomical_dusk]
        # Deep twilight can be missing in high-latitude summer
        dawns = [d for d in dawns if d is not None]
        dusks = [d for d in dusks if d is not None]
        assert dawns == sorted(dawns)
        assert dusks == sorted(dusks)

    def test_golden_hours_inside_daylight(self, lat, lng, on):
        e = compute_solar_events(lat, lng, on)
        morning, evening = e.morning_golden_hour, e.evening_golden_hour

        assert e.sunrise <= morning.start < morning.end <= e.sunset
        assert e.sunrise <= evening.start < evening.end <= e.sunset
        assert morning.duration_minutes <= 60 + 1e-6
        assert evening.duration_minutes <= 60 + 1e-6
        # Exactly an hour unless clipped by sunrise/sunset
        assert morning.start == e.sunrise or morning.duration_minutes == pytest.approx(60)
        assert evening.end == e.sunset or evening.duration_minutes == pytest.approx(60)

    def test_flat_golden_hour_fields(self, lat, lng, on):
        e = compute_solar_events(lat, lng, on)
        assert e.morning_golden_hour_start == e.morning_golden_hour.start
        assert e.evening_golden_hour_end == e.evening_golden_hour.end


class TestPolar:
    def test_polar_day_has_no_sunset(self):
        events = compute_solar_events(75.0, 15.0, date(2024, 6, 21))

        assert events.sunset is None
        assert events.sunrise is None
        assert events.day_kind == "polar_day"
        assert events.daylight_minutes is None
        assert events.morning_golden_hour is None and events.evening_golden_hour is None
        assert events.solar_noon is not None

    def test_polar_night_has_no_sunrise(self):
        events = compute_solar_events(75.0, 15.0, date(2024, 12, 21))

        assert events.sunrise is None
        assert events.day_kind == "polar_night"
        assert events.daylight_minutes is None
        # Noon altitude is about -8.4°: no civil twilight, but nautical twilight occurs
        assert events.civil_dawn is None
        assert events.nautical_dawn is not None
        assert events.astronomical_dawn is not None

    def test_southern_polar_day_in_december(self):
        events = compute_solar_events(-78.0, 166.7, date(2024, 12, 21))
        assert events.day_kind == "polar_day"

    def test_white_nights_have_no_astronomical_twilight(self):
        # Oslo in midsummer: the sun never gets 18° below the horizon
        events = compute_solar_events(59.9139, 10.7522, date(2024, 6, 21))
        assert events.sunrise is not None and events.sunset is not None
        assert events.astronomical_dawn is None
        assert events.astronomical_dusk is None


class TestDates:
    @pytest.mark.parametrize("on", [date(1950, 1, 1), date(2000, 2, 29), date(2049, 7, 4)])
    def test_historical_and_future_dates(self, on):
        events = compute_solar_events(*NYC, on)
        assert events.sunrise < events.solar_noon < events.sunset
        assert events.date == on

    def test_deterministic(self):
        a = compute_solar_events(*NYC, date(2024, 6, 21))
        b = compute_solar_events(*NYC, date(2024, 6, 21))
        assert a == b

    def test_default_ephemeris_spans_1850_to_2150(self):
        assert EPHEMERIS_FIRST_DATE <= date(1850, 1, 1)
        assert EPHEMERIS_LAST_DATE >= date(2149, 12, 31)

    def test_date_after_2053(self):
        events = compute_solar_events(*NYC, date(2060, 6, 21))
        assert 15 * 60 <= events.daylight_minutes <= 15 * 60 + 10

    @pytest.mark.parametrize("on", [date(1700, 1, 1), date(2200, 6, 21)])
    def test_date_outside_ephemeris_raises(self, on):
        with pytest.raises(DateOutOfRangeError, match=on.isoformat()):
            compute_solar_events(*NYC, on)

    def test_range_edges(self):
        compute_solar_events(*NYC, EPHEMERIS_FIRST_DATE)
        compute_solar_events(*NYC, EPHEMERIS_LAST_DATE)
        with pytest.raises(ValueError):
            compute_solar_events(*NYC, EPHEMERIS_LAST_DATE + timedelta(days=1))


class TestInvalidInput:
    @pytest.mark.parametrize("lat,lng", [(91, 0), (-91, 0), (0, 181), (0, -180.5), (float("nan"), 0)])
    def test_out_of_range_raises(self, lat, lng):
        with pytest.raises(InvalidCoordinateError):
            compute_solar_events(lat, lng, date(2024, 6, 21))

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            compute_solar_events(100, 0, date(2024, 6, 21))


def test_golden_hour_fallback_frequency_over_dataset():
    """How often the ±60 minute fallback replaces the library markers.

    Below ~56° the sun always climbs past +6°, so every window in the bundled
    dataset should come from the markers; above that, polar dates legitimately
    have no windows at all.
    """
    fallbacks: list[tuple[str, date]] = []
    checked = 0
    for location in load_locations():
        if abs(location.lat) > 56:
            continue
        for on in (date(2024, 6, 21), date(2024, 12, 21)):
            events = compute_solar_events(location.lat, location.lng, on)
            checked += 1
            for window in (events.morning_golden_hour, events.evening_golden_hour):
                if window.source != "marker":
                    fallbacks.append((location.slug, on))

    assert checked > 50
    assert fallbacks == []
