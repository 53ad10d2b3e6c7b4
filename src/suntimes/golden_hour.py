"""Golden-hour window derivation.

The astronomy layer only yields two single-point markers: the moment the
rising sun passes +6° (end of the morning golden hour) and the moment the
setting sun passes +6° (start of the evening golden hour). This module turns
them into two well-ordered windows inside the day's daylight interval:

    default window  →  refine from marker  →  validate  →  fall back to default
"""

from datetime import datetime, timedelta

import structlog

from suntimes.models import TimeWindow

logger = structlog.get_logger(__name__)

GOLDEN_HOUR = timedelta(minutes=60)


def default_windows(sunrise: datetime, sunset: datetime) -> tuple[TimeWindow, TimeWindow]:
    """The ±60 minute rule, clipped to the daylight interval."""
    morning = TimeWindow(
        start=sunrise, end=min(sunrise + GOLDEN_HOUR, sunset), source="default"
    )
    evening = TimeWindow(
        start=max(sunset - GOLDEN_HOUR, sunrise), end=sunset, source="default"
    )
    return morning, evening


def refine_morning(
    marker: datetime | None, sunrise: datetime, sunset: datetime
) -> TimeWindow | None:
    """Window ending at the morning marker, starting 60 minutes earlier (not before sunrise).

    Returns None when the marker is missing or not strictly inside the day.
    """
    if marker is None or not sunrise < marker < sunset:
        return None
    return TimeWindow(start=max(marker - GOLDEN_HOUR, sunrise), end=marker, source="marker")


def refine_evening(
    marker: datetime | None, sunrise: datetime, sunset: datetime
) -> TimeWindow | None:
    """Window starting at the evening marker, ending 60 minutes later (not after sunset)."""
    if marker is None or not sunrise < marker < sunset:
        return None
    return TimeWindow(start=marker, end=min(marker + GOLDEN_HOUR, sunset), source="marker")


def is_valid_window(window: TimeWindow | None, sunrise: datetime, sunset: datetime) -> bool:
    """True when the window is non-empty, ordered, and contained in [sunrise, sunset]."""
    if window is None or window.start is None or window.end is None:
        return False
    return sunrise <= window.start < window.end <= sunset


def golden_hour_windows(
    sunrise: datetime | None,
    sunset: datetime | None,
    morning_marker: datetime | None = None,
    evening_marker: datetime | None = None,
) -> tuple[TimeWindow | None, TimeWindow | None]:
    """Derive (morning, evening) golden-hour windows.

    Args:
        sunrise: Sunrise, or None if the sun does not rise.
        sunset: Sunset, or None if the sun does not set.
        morning_marker: Time the rising sun reaches +6°, if it does.
        evening_marker: Time the setting sun drops to +6°, if it does.

    Returns:
        Two TimeWindow objects (or None each). Both are None unless sunrise
        and sunset exist with sunrise < sunset.
    """
    if sunrise is None or sunset is None or not sunrise < sunset:
        return None, None

    default_morning, default_evening = default_windows(sunrise, sunset)
    morning = _choose(
        "morning", refine_morning(morning_marker, sunrise, sunset), default_morning,
        morning_marker, sunrise, sunset,
    )
    evening = _choose(
        "evening", refine_evening(evening_marker, sunrise, sunset), default_evening,
        evening_marker, sunrise, sunset,
    )
    return morning, evening


def _choose(
    which: str,
    refined: TimeWindow | None,
    default: TimeWindow,
    marker: datetime | None,
    sunrise: datetime,
    sunset: datetime,
) -> TimeWindow | None:
    if is_valid_window(refined, sunrise, sunset):
        return refined
    if marker is not None:
        # A marker exists but produced no usable window
        logger.info(
            "golden_hour_marker_rejected",
            window=which,
            marker=marker.isoformat(),
            sunrise=sunrise.isoformat(),
            sunset=sunset.isoformat(),
        )
    return default if is_valid_window(default, sunrise, sunset) else None
