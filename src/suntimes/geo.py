"""Nearest-location resolver: great-circle distance over a static location pool."""

import math
from collections.abc import Iterable
from math import asin, cos, radians, sin, sqrt

import structlog

from suntimes.models import Coordinate, NamedLocation, NearbyLocation

logger = structlog.get_logger(__name__)

# Earth's mean radius in kilometers
EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points given in decimal degrees.

    Returns:
        Distance in kilometers.
    """
    lat1, lng1, lat2, lng2 = map(radians, [lat1, lng1, lat2, lng2])

    dlat = lat2 - lat1
    dlng = lng2 - lng1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlng / 2) ** 2
    # Rounding can push `a` just above 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * asin(sqrt(min(1.0, a)))


def has_coordinates(location: NamedLocation) -> bool:
    """True when the record carries finite, in-range latitude and longitude."""
    lat, lng = location.lat, location.lng
    for value in (lat, lng):
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            return False
    return math.isfinite(lat) and math.isfinite(lng) and abs(lat) <= 90 and abs(lng) <= 180


def _distances(
    coordinate: Coordinate, pool: Iterable[NamedLocation]
) -> Iterable[NearbyLocation]:
    for location in pool:
        if not has_coordinates(location):
            logger.debug("skipped_location_without_coordinates", slug=location.slug)
            continue
        yield NearbyLocation(
            location=location,
            distance_km=haversine_km(coordinate.lat, coordinate.lng, location.lat, location.lng),
        )


def find_nearest(
    coordinate: Coordinate, pool: Iterable[NamedLocation]
) -> NearbyLocation | None:
    """Return the closest location in the pool, or None if there is none.

    Linear scan; on equal distances the first location in pool order wins.
    Records without usable coordinates are skipped.
    """
    nearest: NearbyLocation | None = None
    for candidate in _distances(coordinate, pool):
        if nearest is None or candidate.distance_km < nearest.distance_km:
            nearest = candidate
    return nearest


def find_nearby(
    coordinate: Coordinate,
    pool: Iterable[NamedLocation],
    limit: int = 8,
    max_distance_km: float = 500.0,
    exclude_slug: str | None = None,
) -> list[NearbyLocation]:
    """List locations within max_distance_km, closest first.

    Args:
        coordinate: Query point.
        pool: Candidate locations.
        limit: Maximum number of results.
        max_distance_km: Inclusive distance cut-off.
        exclude_slug: Slug to leave out (typically the location being shown).

    Returns:
        Up to `limit` NearbyLocation objects sorted by ascending distance;
        equal distances keep pool order.
    """
    if limit <= 0:
        return []
    results = [
        nearby
        for nearby in _distances(
            coordinate,
            (loc for loc in pool if exclude_slug is None or loc.slug != exclude_slug),
        )
        if nearby.distance_km <= max_distance_km
    ]
    results.sort(key=lambda nearby: nearby.distance_km)
    return results[:limit]
