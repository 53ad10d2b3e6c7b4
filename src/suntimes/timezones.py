"""Time-zone lookup for display: timezonefinder first, static region tables as fallback."""

from timezonefinder import TimezoneFinder

from suntimes.geo import has_coordinates
from suntimes.models import NamedLocation

_tf = TimezoneFinder()

DEFAULT_TIMEZONE = "Etc/UTC"

# Primary zone per US state (some states span two zones)
_STATE_TO_TZ: dict[str, str] = {
    "Alabama": "America/Chicago",
    "Alaska": "America/Anchorage",
    "Arizona": "America/Phoenix",
    "Arkansas": "America/Chicago",
    "California": "America/Los_Angeles",
    "Colorado": "America/Denver",
    "Connecticut": "America/New_York",
    "Delaware": "America/New_York",
    "Florida": "America/New_York",
    "Georgia": "America/New_York",
    "Hawaii": "Pacific/Honolulu",
    "Idaho": "America/Denver",
    "Illinois": "America/Chicago",
    "Indiana": "America/Indiana/Indianapolis",
    "Iowa": "America/Chicago",
    "Kansas": "America/Chicago",
    "Kentucky": "America/New_York",
    "Louisiana": "America/Chicago",
    "Maine": "America/New_York",
    "Maryland": "America/New_York",
    "Massachusetts": "America/New_York",
    "Michigan": "America/Detroit",
    "Minnesota": "America/Chicago",
    "Mississippi": "America/Chicago",
    "Missouri": "America/Chicago",
    "Montana": "America/Denver",
    "Nebraska": "America/Chicago",
    "Nevada": "America/Los_Angeles",
    "New Hampshire": "America/New_York",
    "New Jersey": "America/New_York",
    "New Mexico": "America/Denver",
    "New York": "America/New_York",
    "North Carolina": "America/New_York",
    "North Dakota": "America/Chicago",
    "Ohio": "America/New_York",
    "Oklahoma": "America/Chicago",
    "Oregon": "America/Los_Angeles",
    "Pennsylvania": "America/New_York",
    "Rhode Island": "America/New_York",
    "South Carolina": "America/New_York",
    "South Dakota": "America/Chicago",
    "Tennessee": "America/Chicago",
    "Texas": "America/Chicago",
    "Utah": "America/Denver",
    "Vermont": "America/New_York",
    "Virginia": "America/New_York",
    "Washington": "America/Los_Angeles",
    "West Virginia": "America/New_York",
    "Wisconsin": "America/Chicago",
    "Wyoming": "America/Denver",
}

_COUNTRY_TO_TZ: dict[str, str] = {
    "United Kingdom": "Europe/London",
    "France": "Europe/Paris",
    "Germany": "Europe/Berlin",
    "Italy": "Europe/Rome",
    "Spain": "Europe/Madrid",
    "Netherlands": "Europe/Amsterdam",
    "Belgium": "Europe/Brussels",
    "Switzerland": "Europe/Zurich",
    "Austria": "Europe/Vienna",
    "Sweden": "Europe/Stockholm",
    "Norway": "Europe/Oslo",
    "Denmark": "Europe/Copenhagen",
    "Finland": "Europe/Helsinki",
    "Poland": "Europe/Warsaw",
    "Czech Republic": "Europe/Prague",
    "Greece": "Europe/Athens",
    "Portugal": "Europe/Lisbon",
    "Ireland": "Europe/Dublin",
    "Romania": "Europe/Bucharest",
    "Hungary": "Europe/Budapest",
    "Russia": "Europe/Moscow",
    "Turkey": "Europe/Istanbul",
    "Japan": "Asia/Tokyo",
    "China": "Asia/Shanghai",
    "India": "Asia/Kolkata",
    "South Korea": "Asia/Seoul",
    "Thailand": "Asia/Bangkok",
    "Singapore": "Asia/Singapore",
    "Malaysia": "Asia/Kuala_Lumpur",
    "Indonesia": "Asia/Jakarta",
    "Philippines": "Asia/Manila",
    "Vietnam": "Asia/Ho_Chi_Minh",
    "Australia": "Australia/Sydney",
    "New Zealand": "Pacific/Auckland",
    "Canada": "America/Toronto",
    "Mexico": "America/Mexico_City",
    "Brazil": "America/Sao_Paulo",
    "Argentina": "America/Argentina/Buenos_Aires",
    "Chile": "America/Santiago",
    "Colombia": "America/Bogota",
    "Peru": "America/Lima",
    "South Africa": "Africa/Johannesburg",
    "Egypt": "Africa/Cairo",
    "Morocco": "Africa/Casablanca",
    "United Arab Emirates": "Asia/Dubai",
    "Saudi Arabia": "Asia/Riyadh",
    "Israel": "Asia/Jerusalem",
    "Lebanon": "Asia/Beirut",
    "Jordan": "Asia/Amman",
}


def timezone_by_region(region: str = "", country: str = "") -> str:
    """Static lookup: US state, then country, then UTC."""
    return _STATE_TO_TZ.get(region) or _COUNTRY_TO_TZ.get(country) or DEFAULT_TIMEZONE


def timezone_at(lat: float, lng: float, region: str = "", country: str = "") -> str:
    """IANA time-zone name for a point.

    Uses timezonefinder's polygon lookup; falls back to the region/country
    tables when the point is outside every zone polygon (e.g. open sea).
    """
    tz_str = _tf.timezone_at(lat=lat, lng=lng)
    return tz_str or timezone_by_region(region, country)


def timezone_for(location: NamedLocation) -> str:
    if not has_coordinates(location):
        return timezone_by_region(location.region, location.country)
    return timezone_at(location.lat, location.lng, location.region, location.country)
