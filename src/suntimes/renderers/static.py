"""Matplotlib static PNG renderer for daylight through the year."""

from datetime import date, timedelta
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from suntimes.compute import compute_solar_events
from suntimes.locations import make_slug
from suntimes.models import SolarEventSet

_ROOT = Path(__file__).parent.parent.parent.parent
_LINE_COLOR = "#f5a623"
_POLAR_COLOR = "#334466"


def sample_year(lat: float, lng: float, year: int, step_days: int = 7) -> list[SolarEventSet]:
    """Solar events every `step_days` days from 1 January, plus 31 December."""
    first, last = date(year, 1, 1), date(year, 12, 31)
    days = [first + timedelta(days=n) for n in range(0, (last - first).days + 1, step_days)]
    if days[-1] != last:
        days.append(last)
    return [compute_solar_events(lat, lng, d) for d in days]


def render_daylight_chart(days: list[SolarEventSet], title: str = "", chart_size: int = 8) -> Figure:
    """Render daylight hours per sampled day as a line chart.

    Polar days and polar nights are drawn as shaded full-height bars (light
    and dark) instead of being joined into the line.

    Args:
        days: Computed solar events, in date order.
        title: Figure title.
        chart_size: Figure width in inches (height is half of it).

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size / 2))

    dates = [d.date for d in days]
    hours = np.array(
        [d.daylight_minutes / 60 if d.daylight_minutes is not None else np.nan for d in days]
    )
    ax.plot(dates, hours, color=_LINE_COLOR, linewidth=2)

    for d in days:
        if d.day_kind == "normal":
            continue
        color = _LINE_COLOR if d.day_kind == "polar_day" else _POLAR_COLOR
        ax.bar(d.date, 24, width=5, color=color, alpha=0.3, linewidth=0)

    ax.set_ylim(0, 24)
    ax.set_yticks(range(0, 25, 6))
    ax.set_ylabel("Daylight (hours)")
    ax.grid(axis="y", alpha=0.3)
    if title:
        ax.set_title(title)
    fig.autofmt_xdate()

    return fig


def save_year_chart(
    lat: float,
    lng: float,
    year: int,
    output_path: Path | None = None,
    title: str = "",
    step_days: int = 7,
) -> Path:
    """Compute and save a year daylight chart as PNG.

    Args:
        lat: Latitude in decimal degrees.
        lng: Longitude in decimal degrees.
        year: Calendar year to plot.
        output_path: Destination path. Auto-generated under results/ if None.
        title: Chart title; also used for the generated file name.
        step_days: Sampling interval in days.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        stem = make_slug(title) or f"{lat:.2f}_{lng:.2f}"
        output_path = _ROOT / "results" / f"{stem}__{year}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_daylight_chart(sample_year(lat, lng, year, step_days), title=title)
    fig.savefig(output_path)
    plt.close(fig)
    return output_path
