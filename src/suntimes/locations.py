"""Static location dataset: loading, slugs, lookup and autocomplete search."""

import json
import math
import re
import unicodedata
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from suntimes.models import NamedLocation

logger = structlog.get_logger(__name__)

_DEFAULT_PATH = Path(__file__).parent / "data" / "locations.json"

_COUNTRY_CODES: dict[str, str] = {
    "United Kingdom": "uk",
    "France": "fr",
    "Germany": "de",
    "Italy": "it",
    "Spain": "es",
    "Netherlands": "nl",
    "Belgium": "be",
    "Switzerland": "ch",
    "Austria": "at",
    "Sweden": "se",
    "Norway": "no",
    "Denmark": "dk",
    "Finland": "fi",
    "Poland": "pl",
    "Czech Republic": "cz",
    "Greece": "gr",
    "Portugal": "pt",
    "Ireland": "ie",
    "Romania": "ro",
    "Hungary": "hu",
    "Russia": "ru",
    "Turkey": "tr",
    "Japan": "jp",
    "China": "cn",
    "India": "in",
    "South Korea": "kr",
    "Thailand": "th",
    "Singapore": "sg",
    "Malaysia": "my",
    "Indonesia": "id",
    "Philippines": "ph",
    "Vietnam": "vn",
    "Australia": "au",
    "New Zealand": "nz",
    "Canada": "ca",
    "Mexico": "mx",
    "Brazil": "br",
    "Argentina": "ar",
    "Chile": "cl",
    "Colombia": "co",
    "Peru": "pe",
    "South Africa": "za",
    "Egypt": "eg",
    "Morocco": "ma",
    "Kenya": "ke",
    "Nigeria": "ng",
    "United Arab Emirates": "ae",
    "Saudi Arabia": "sa",
    "Israel": "il",
    "Lebanon": "lb",
    "Jordan": "jo",
}

# Letters NFKD does not decompose into ASCII
_TRANSLITERATE = str.maketrans(
    {"ø": "o", "Ø": "O", "æ": "ae", "Æ": "AE", "ß": "ss", "đ": "d", "Đ": "D", "ł": "l", "Ł": "L"}
)


def make_slug(text: str) -> str:
    """Lower-case ASCII slug: "São Paulo" → "sao-paulo"."""
    text = unicodedata.normalize("NFKD", text.translate(_TRANSLITERATE))
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    return re.sub(r"[^a-z0-9]+", "-", text).strip("-")


def location_slug(city: str, country: str) -> str:
    """Slug for a global city: "<city>-<country code>"."""
    code = _COUNTRY_CODES.get(country) or make_slug(country)[:2]
    return f"{make_slug(city)}-{code}"


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _to_location(record: dict[str, Any]) -> NamedLocation | None:
    """Normalise a US ("name"/"region") or global ("city"/"admin1") record."""
    name = (record.get("name") or record.get("city") or "").strip()
    country = (record.get("country") or "").strip()
    if not name:
        return None
    region = (record.get("region") or record.get("admin1") or "").strip()
    slug = record.get("slug") or (location_slug(name, country) if country else "")
    if not slug:
        return None
    return NamedLocation(
        name=name,
        region=region,
        country=country,
        lat=_as_float(record.get("lat")),
        lng=_as_float(record.get("lng")),
        slug=slug,
    )


def load_locations(path: Path | None = None) -> tuple[NamedLocation, ...]:
    """Load the location dataset.

    The file holds ``{"us": [...], "global": [...]}`` (a bare list is also
    accepted). Records without a name or slug are dropped; records with
    missing coordinates are kept as NaN and left for the resolver to skip.

    Args:
        path: JSON file to read. Defaults to the bundled dataset.

    Returns:
        Tuple of NamedLocation in file order (US first, then global).
    """
    path = path or _DEFAULT_PATH
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)

    records: list[dict[str, Any]] = raw if isinstance(raw, list) else [
        *raw.get("us", []),
        *raw.get("global", []),
    ]

    locations: list[NamedLocation] = []
    seen: set[str] = set()
    for record in records:
        location = _to_location(record)
        if location is None:
            logger.warning("dropped_location_record", record=record)
            continue
        if location.slug in seen:
            logger.warning("duplicate_location_slug", slug=location.slug)
            continue
        seen.add(location.slug)
        locations.append(location)

    logger.debug("locations_loaded", count=len(locations), path=str(path))
    return tuple(locations)


def find_by_slug(slug: str, pool: Iterable[NamedLocation]) -> NamedLocation | None:
    return next((loc for loc in pool if loc.slug == slug), None)


def search_locations(
    query: str, pool: Iterable[NamedLocation], limit: int = 10
) -> list[NamedLocation]:
    """Autocomplete search over name, region, country and label.

    Name prefix matches rank first (100), then name substrings (50); a
    matching country adds 5. Ties are ordered by name.
    """
    needle = query.strip().lower()
    if not needle:
        return []

    scored: list[tuple[int, NamedLocation]] = []
    for loc in pool:
        name = loc.name.lower()
        matches_country = needle in loc.country.lower()
        if not (
            needle in name
            or matches_country
            or needle in loc.region.lower()
            or needle in loc.label.lower()
        ):
            continue
        score = 100 if name.startswith(needle) else 50 if needle in name else 0
        if matches_country:
            score += 5
        scored.append((score, loc))

    scored.sort(key=lambda item: (-item[0], item[1].name))
    return [loc for _, loc in scored[:limit]]
