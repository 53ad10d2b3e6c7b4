"""Inline SVG line chart of one value per day of a month.

Produces a self-contained <svg> string with viewBox="0 0 320 {height}" and
no fixed pixel size, so the embedding page controls scaling.

Layout:
  title baseline at y=15, plot area below it inside a 20-unit padding,
  five horizontal grid lines at quarter heights, values scaled with 10% headroom above and below.
"""

from __future__ import annotations

import html

_WIDTH = 320
_PADDING = 20
_TITLE_SPACE = 20
_GRID_COLOR = "#e5e7eb"
_TITLE_COLOR = "#1f2937"


def _segments(points: list[tuple[float, float] | None]) -> list[list[tuple[float, float]]]:
    """Split at gaps (None) so days without a value break the line."""
    segments: list[list[tuple[float, float]]] = [[]]
    for point in points:
        if point is None:
            if segments[-1]:
                segments.append([])
        else:
            segments[-1].append(point)
    return [s for s in segments if s]


def render_month_svg(
    title: str,
    values: list[float | None],
    color: str = "#0070f3",
    height: int = 160,
    month_name: str | None = None,
    city_name: str | None = None,
) -> str:
    """Return an SVG chart of `values` (one per day), or "" if there is nothing to plot.

    Args:
        title: Chart title, drawn centred above the plot.
        values: One value per day; None marks a day without a value.
        color: Stroke colour of the data line.
        height: viewBox height.
        month_name: Used with city_name in the aria-label.
        city_name: Used with month_name in the aria-label.

    Returns:
        SVG markup string.
    """
    present = [v for v in values if v is not None]
    if not present:
        return ""

    chart_width = _WIDTH - _PADDING * 2
    area_height = height - _PADDING * 2 - _TITLE_SPACE
    top = _PADDING + _TITLE_SPACE

    lo, hi = min(present), max(present)
    headroom = (hi - lo) * 0.1
    scaled_min = lo - headroom
    scaled_range = (hi + headroom) - scaled_min

    step = chart_width / (len(values) - 1) if len(values) > 1 else 0.0
    points: list[tuple[float, float] | None] = []
    for i, value in enumerate(values):
        if value is None:
            points.append(None)
            continue
        # Flat series sit mid-height
        norm = (value - scaled_min) / scaled_range if scaled_range else 0.5
        x = _PADDING + step * i if len(values) > 1 else _WIDTH / 2
        points.append((x, top + area_height - norm * area_height))

    grid_parts = [
        f'<line x1="{_PADDING}" y1="{top + area_height / 4 * i:.2f}"'
        f' x2="{_WIDTH - _PADDING}" y2="{top + area_height / 4 * i:.2f}"'
        f' stroke="{_GRID_COLOR}" stroke-width="1"/>'
        for i in range(5)
    ]

    line_parts: list[str] = []
    for segment in _segments(points):
        if len(segment) == 1:
            x, y = segment[0]
            line_parts.append(f'<circle cx="{x:.2f}" cy="{y:.2f}" r="2" fill="{color}"/>')
            continue
        coords = " ".join(f"{x:.2f},{y:.2f}" for x, y in segment)
        line_parts.append(
            f'<polyline points="{coords}" fill="none" stroke="{color}" stroke-width="2"'
            f' stroke-linecap="round" stroke-linejoin="round"/>'
        )

    if month_name and city_name:
        aria = f"{title} chart for {month_name} in {city_name}"
    else:
        aria = f"{title} chart"

    grid_svg = "\n  ".join(grid_parts)
    lines_svg = "\n  ".join(line_parts)
    return (
        f'<svg viewBox="0 0 {_WIDTH} {height}" role="img"'
        f' aria-label="{html.escape(aria, quote=True)}"'
        f' preserveAspectRatio="xMidYMid meet" xmlns="http://www.w3.org/2000/svg">\n'
        f"  {grid_svg}\n"
        f"  {lines_svg}\n"
        f'  <text x="{_WIDTH / 2:g}" y="15" text-anchor="middle" font-size="14"'
        f' font-weight="600" fill="{_TITLE_COLOR}">{html.escape(title)}</text>\n'
        f"</svg>"
    )
