"""Path-data reader — facade over svgpathtools + shapely.

Reads generated ``M/L/Z`` path strings back into vertices, line elements and
polygons. Used for layout metrics and for checking generator output.
"""

from __future__ import annotations

import logging

from shapely.geometry import Polygon
from svgpathtools import Line, Path, parse_path

from bevelkit.models.layout import LineElement

logger = logging.getLogger(__name__)

Point = tuple[float, float]


def _parse(path_data: str) -> Path:
    if not path_data or not path_data.strip():
        return Path()
    try:
        return parse_path(path_data)
    except Exception as e:
        logger.warning("Failed to parse path: %s", e)
        return Path()


def parse_path_points(path_data: str) -> list[Point]:
    """Vertices of a polyline path, without repeating the start of a closed path."""
    path = _parse(path_data)
    if not path:
        return []

    points = [(seg.start.real, seg.start.imag) for seg in path]
    if not path.isclosed():
        points.append((path[-1].end.real, path[-1].end.imag))
    return points


def path_as_lines(path_data: str) -> list[LineElement]:
    """Split a path into straight line elements, closing segment included."""
    lines: list[LineElement] = []
    for i, seg in enumerate(_parse(path_data)):
        if not isinstance(seg, Line):
            logger.debug("Skipping non-line segment %s", type(seg).__name__)
            continue
        lines.append(
            LineElement(
                x1=seg.start.real,
                y1=seg.start.imag,
                x2=seg.end.real,
                y2=seg.end.imag,
                key=f"line-{i}",
            )
        )
    return lines


def path_polygon(path_data: str) -> Polygon:
    """Polygon enclosed by a closed path (repaired with ``buffer(0)`` when self-intersecting)."""
    points = parse_path_points(path_data)
    if len(points) < 3:
        return Polygon()

    poly = Polygon(points)
    if not poly.is_valid:
        poly = poly.buffer(0)
    return poly
