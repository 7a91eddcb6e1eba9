"""Layout metrics — padding, step bounds and the boxes derived from them."""

from __future__ import annotations

import math

import numpy as np

from bevelkit.engine.config import DEFAULT_CONFIG, GeometryConfig
from bevelkit.models.layout import Dimensions, InnerRect, Padding, StepBounds
from bevelkit.models.shape import CORNERS, EDGES, BevelConfig, StepConfig
from bevelkit.svg.serializer import format_number
from bevelkit.utils.units import stroke_width_pixels

# Corners adjoining each side
_SIDE_CORNERS = {
    "top": ("top_left", "top_right"),
    "right": ("top_right", "bottom_right"),
    "bottom": ("bottom_right", "bottom_left"),
    "left": ("top_left", "bottom_left"),
}


def _max_step_height(step_config: StepConfig, edge: str) -> float:
    segments = step_config.edge(edge).segments or ()
    return max((s.height for s in segments), default=0.0)


def get_step_bounds(step_config: StepConfig | None) -> StepBounds:
    """Per-edge maximum step height, never below 0."""
    step_config = step_config or StepConfig()
    return StepBounds(
        **{edge: max(0.0, _max_step_height(step_config, edge)) for edge in EDGES}
    )


def stroke_accommodation(stroke_width: float) -> int:
    """Room reserved for half a stroke plus one pixel."""
    return math.ceil(stroke_width / 2) + 1


def get_min_padding(
    bevel_config: BevelConfig | None = None,
    steps_config: StepConfig | None = None,
    stroke_width: str | float | None = 0,
) -> Padding:
    """Minimum content padding per side so content clears bevels, steps and the stroke.

    side = max(half of each adjoining bevel, tallest step on that edge) + stroke room;
    overall = tallest side + twice the stroke room.
    """
    bevel_config = bevel_config or BevelConfig()
    steps_config = steps_config or StepConfig()
    room = stroke_accommodation(stroke_width_pixels(stroke_width))

    sides: dict[str, float] = {}
    for side, corners in _SIDE_CORNERS.items():
        reach = max(
            0.0,
            *(bevel_config.corner(c).bevel_size / 2 for c in corners),
            _max_step_height(steps_config, side),
        )
        sides[side] = reach + room

    return Padding(
        padding_top=sides["top"],
        padding_right=sides["right"],
        padding_bottom=sides["bottom"],
        padding_left=sides["left"],
        padding=max(sides.values()) + room * 2,
    )


def inner_rect(dimensions: Dimensions, step_bounds: StepBounds) -> InnerRect:
    """Base rectangle of the shape inside the outer box, leaving room for protruding steps."""
    return InnerRect(
        x=step_bounds.left,
        y=step_bounds.top,
        width=max(0.0, dimensions.width - step_bounds.left - step_bounds.right),
        height=max(0.0, dimensions.height - step_bounds.top - step_bounds.bottom),
    )


def container_dimensions(
    content_width: float,
    content_height: float,
    padding: Padding,
    step_bounds: StepBounds,
    stroke_width: str | float | None = 0,
    config: GeometryConfig = DEFAULT_CONFIG,
) -> Dimensions:
    """Outer box for measured content. Unmeasured (zero) content falls back to 100×50."""
    stroke = stroke_width_pixels(stroke_width)
    content_width = content_width or config.fallback_content_width
    content_height = content_height or config.fallback_content_height
    return Dimensions(
        width=content_width + padding.padding_left + padding.padding_right
        + step_bounds.left + step_bounds.right + stroke,
        height=content_height + padding.padding_top + padding.padding_bottom
        + step_bounds.top + step_bounds.bottom + stroke,
    )


def shape_transform(rect: InnerRect) -> str:
    return f"translate({format_number(rect.x)}, {format_number(rect.y)})"


def border_view_box(dimensions: Dimensions, stroke_width: str | float | None = 0) -> str:
    """viewBox of the border layer, widened by half a stroke so edge strokes are not clipped."""
    pad = math.ceil(stroke_width_pixels(stroke_width) / 2)
    return " ".join(
        format_number(v)
        for v in (-pad, -pad, dimensions.width + pad * 2, dimensions.height + pad * 2)
    )


def adjusted_stroke_width(angle: float, base_stroke_width: float) -> float:
    """Apparent stroke width of a line cut at ``angle`` degrees."""
    return float(base_stroke_width * np.sin(np.deg2rad(angle)))


def average_bevel_angle(
    bevel_config: BevelConfig | None, config: GeometryConfig = DEFAULT_CONFIG
) -> float:
    """Mean angle of the cut corners (the default angle when none is cut)."""
    bevel_config = bevel_config or BevelConfig()
    angles = [
        bevel.bevel_angle or config.default_bevel_angle
        for bevel in (bevel_config.corner(c) for c in CORNERS)
        if bevel.is_cut
    ]
    if not angles:
        return config.default_bevel_angle
    return float(np.mean(angles))
