"""CLI entry point for sun times.

    uv run suntimes new-york-ny --date 2024-06-21
    uv run suntimes --near -33.9 151.2
    uv run suntimes --search york
    uv run suntimes london-uk --month --svg results/london-daylight.svg --chart results/london.png
"""

import argparse
import calendar
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from suntimes.config import settings  # noqa: E402
from suntimes.display import format_clock, format_duration, render_table  # noqa: E402
from suntimes.geo import find_nearby, find_nearest, has_coordinates  # noqa: E402
from suntimes.i18n import t  # noqa: E402
from suntimes.locations import find_by_slug, load_locations, search_locations  # noqa: E402
from suntimes.log import configure_logging  # noqa: E402
from suntimes.models import (  # noqa: E402
    Coordinate,
    DateOutOfRangeError,
    InvalidCoordinateError,
    MonthSummary,
    NamedLocation,
)
from suntimes.timezones import timezone_for  # noqa: E402


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suntimes", description="Sunrise, sunset, twilight and golden hour times."
    )
    parser.add_argument("slug", nargs="?", help="Location slug, e.g. new-york-ny")
    parser.add_argument(
        "--near", nargs=2, type=float, metavar=("LAT", "LNG"), help="Use the nearest known location"
    )
    parser.add_argument("--search", metavar="QUERY", help="List locations matching a name")
    parser.add_argument("--date", type=date.fromisoformat, default=None, help="YYYY-MM-DD (default: today)")
    parser.add_argument("--lang", choices=["en", "ko"], default="en")
    parser.add_argument("--month", action="store_true", help="Print the whole month")
    parser.add_argument("--svg", metavar="PATH", help="With --month, save the daylight chart (SVG)")
    parser.add_argument("--chart", metavar="PATH", help="Save a year daylight chart (PNG)")
    return parser


def _print_search(query: str, pool: tuple[NamedLocation, ...], lang: str) -> None:
    matches = search_locations(query, pool)
    if not matches:
        print(t("no_search_results", lang))
    for location in matches:
        print(f"{location.slug:<24}  {location.label}")


def _resolve(args: argparse.Namespace, pool: tuple[NamedLocation, ...]) -> NamedLocation | None:
    if args.near:
        lat, lng = args.near
        nearest = find_nearest(Coordinate(lat=lat, lng=lng), pool)
        if nearest is None:
            print(t("no_nearby", args.lang))
            return None
        print(
            t("near_location", args.lang).format(
                label=nearest.location.label, distance=f"{nearest.distance_km:.1f}"
            )
        )
        return nearest.location
    location = find_by_slug(args.slug, pool)
    if location is None:
        print(t("error_unknown_slug", args.lang).format(slug=args.slug), file=sys.stderr)
    return location


def _print_month(summary: MonthSummary, location: NamedLocation, args: argparse.Namespace) -> None:
    from suntimes.month import daylight_series, estimate_daylight_stats

    tz_name = summary.tz_name
    for day in summary.days:
        print(
            f"{day.date.isoformat()}  "
            f"{format_clock(day.sunrise, tz_name, args.lang):>9}  "
            f"{format_clock(day.sunset, tz_name, args.lang):>9}  "
            f"{format_duration(day.daylight_minutes, args.lang)}"
        )

    stats = estimate_daylight_stats(location.lat)
    print(
        "\n"
        + t("typical_daylight", args.lang).format(
            range=stats.daylight_range_hours,
            longest=stats.longest_day_month,
            shortest=stats.shortest_day_month,
        )
    )

    if args.svg:
        from suntimes.renderers.svg_month import render_month_svg

        hours = [m / 60 if m is not None else None for m in daylight_series(summary)]
        svg = render_month_svg(
            t("chart_daylight", args.lang),
            hours,
            month_name=calendar.month_name[summary.month],
            city_name=location.label,
        )
        path = Path(args.svg)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(svg, encoding="utf-8")
        print(f"Saved: {path}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.slug and not args.near and not args.search:
        parser.error("a location slug, --near or --search is required")
    if args.svg and not args.month:
        parser.error("--svg requires --month")

    configure_logging(settings)
    pool = load_locations(settings.locations_path)

    if args.search:
        _print_search(args.search, pool, args.lang)
        return 0

    try:
        location = _resolve(args, pool)
    except InvalidCoordinateError as e:
        print(t("error_coordinates", args.lang).format(error=e), file=sys.stderr)
        return 2
    if location is None:
        return 2
    if not has_coordinates(location):
        print(t("error_coordinates", args.lang).format(error=location.slug), file=sys.stderr)
        return 2

    # compute loads the ephemeris on import
    from suntimes.compute import compute_solar_events
    from suntimes.month import compute_month

    on = args.date or date.today()
    tz_name = timezone_for(location)

    try:
        if args.month:
            summary = compute_month(location.lat, location.lng, on.year, on.month, tz_name)
        else:
            events = compute_solar_events(location.lat, location.lng, on)
    except DateOutOfRangeError as e:
        print(t("error_date_range", args.lang).format(error=e), file=sys.stderr)
        return 2

    print(f"{location.label}, {on.isoformat()} ({tz_name})")
    if args.month:
        _print_month(summary, location, args)
    else:
        print(render_table(events, tz_name, args.lang))

    nearby = find_nearby(
        Coordinate(lat=location.lat, lng=location.lng),
        pool,
        limit=settings.nearby_limit,
        max_distance_km=settings.nearby_max_km,
        exclude_slug=location.slug,
    )
    if nearby:
        print(f"\n{t('nearby_title', args.lang)}:")
        for item in nearby:
            print(f"  {item.location.label} ({item.distance_km:.0f} km)")

    if args.chart:
        from suntimes.renderers.static import save_year_chart

        try:
            path = save_year_chart(
                location.lat, location.lng, on.year, Path(args.chart), title=location.label
            )
        except DateOutOfRangeError as e:
            print(t("error_date_range", args.lang).format(error=e), file=sys.stderr)
            return 2
        print(f"Saved: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
