"""Write SVG path data and standalone panel documents."""

from __future__ import annotations

from html import escape
from typing import Any, Sequence

Point = tuple[float, float]


def format_number(value: float, precision: int = 2) -> str:
    """Round to ``precision`` decimals; integral values drop the decimal point, -0 prints as 0."""
    rounded = round(float(value), precision)
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.{precision}f}".rstrip("0").rstrip(".")


def to_path_data(points: Sequence[Point], closed: bool = True, precision: int = 2) -> str:
    """Serialize vertices as ``M x y L x y … [Z]``.

    On a closed path a final vertex equal to the start (after rounding) is
    dropped, since ``Z`` already draws that segment.
    """
    if not points:
        return ""

    coords = [(format_number(x, precision), format_number(y, precision)) for x, y in points]
    if closed and len(coords) > 1 and coords[-1] == coords[0]:
        coords = coords[:-1]

    commands = [f"M {coords[0][0]} {coords[0][1]}"]
    commands.extend(f"L {x} {y}" for x, y in coords[1:])
    if closed:
        commands.append("Z")
    return " ".join(commands)


def serialize_svg(
    elements: list[dict[str, Any]],
    width: float,
    height: float,
    view_box: str | None = None,
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions (``tag`` plus attributes)."""
    view_box = view_box or f"0 0 {format_number(width)} {format_number(height)}"
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{format_number(width)}" height="{format_number(height)}"'
        f' viewBox="{view_box}" xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag" and v is not None}
        attr_str = " ".join(f'{k}="{escape(str(v), quote=True)}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def render_panel_svg(
    width: float,
    height: float,
    fill_path: str,
    shape_path: str,
    shape_transform: str,
    view_box: str,
    background_style: dict[str, Any] | None = None,
    border_style: dict[str, Any] | None = None,
    stroke_width: float = 0.0,
    title: str = "",
) -> str:
    """Panel document: fill path as background, shape path as stroked outline."""
    background_style = background_style or {}
    border_style = border_style or {}

    elements: list[dict[str, Any]] = [
        {
            "tag": "path",
            "class": "panel-background",
            "d": fill_path,
            "transform": shape_transform,
            "fill": background_style.get("fill", "currentColor"),
            "fill-opacity": background_style.get("fillOpacity", background_style.get("opacity")),
            "stroke": "none",
        }
    ]

    stroke = border_style.get("stroke")
    if stroke and stroke_width > 0:
        elements.append(
            {
                "tag": "path",
                "class": "panel-border",
                "d": shape_path,
                "transform": shape_transform,
                "fill": "none",
                "stroke": stroke,
                "stroke-width": format_number(stroke_width),
                "stroke-linecap": "round",
                "stroke-linejoin": "round",
            }
        )

    return serialize_svg(elements, width, height, view_box=view_box, title=title)
