"""Dynamic drop shadow — offset that leans away from a reference point."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from bevelkit.engine.config import DEFAULT_CONFIG
from bevelkit.models.layout import (
    ElementTarget,
    PercentTarget,
    PointTarget,
    Rect,
    ShadowOffset,
    Viewport,
)
from bevelkit.svg.serializer import format_number

logger = logging.getLogger(__name__)

VIEWPORT_CENTER = "viewportCenter"


def _round_half_up(value: float) -> int:
    """Round like JS Math.round; infinities and NaN have no effect (0)."""
    if not math.isfinite(value):
        logger.debug("Non-finite shadow component %r", value)
        return 0
    return int(math.floor(value + 0.5))


def _mapping_target(target: Mapping[str, Any], viewport: Viewport) -> tuple[float, float] | None:
    if "x" in target and "y" in target:
        return float(target["x"]), float(target["y"])
    if "element" in target:
        element = target["element"]
        rect = element if isinstance(element, Rect) else Rect.model_validate(element)
        return rect.center_x, rect.center_y
    for px, py in (("percentX", "percentY"), ("percent_x", "percent_y")):
        if px in target and py in target:
            return viewport.width * float(target[px]), viewport.height * float(target[py])
    return None


def resolve_shadow_target(target: Any, viewport: Viewport) -> tuple[float, float]:
    """Reference point for ``target``; unknown shapes resolve to the origin."""
    if target == VIEWPORT_CENTER:
        return viewport.width / 2, viewport.height / 2
    if isinstance(target, PointTarget):
        return target.x, target.y
    if isinstance(target, ElementTarget):
        return target.element.center_x, target.element.center_y
    if isinstance(target, PercentTarget):
        return viewport.width * target.percent_x, viewport.height * target.percent_y
    if isinstance(target, Mapping):
        try:
            point = _mapping_target(target, viewport)
        except (TypeError, ValueError) as e:
            logger.debug("Malformed shadow target %r: %s", target, e)
            point = None
        if point is not None:
            return point

    logger.debug("Unknown shadow target %r, using origin", target)
    return 0.0, 0.0


def calculate_dynamic_shadow(
    element_rect: Rect,
    max_shadow_distance: float = DEFAULT_CONFIG.max_shadow_distance,
    target: Any = VIEWPORT_CENTER,
    viewport: Viewport | None = None,
) -> ShadowOffset:
    """Shadow offset proportional to the element's distance from ``target``.

    The delta between the element's center and the target is normalized by
    half the viewport size, scaled by ``max_shadow_distance`` and rounded.
    """
    viewport = viewport or Viewport()
    target_x, target_y = resolve_shadow_target(target, viewport)

    delta_x = element_rect.center_x - target_x
    delta_y = element_rect.center_y - target_y

    half_w = viewport.width / 2
    half_h = viewport.height / 2
    normalized_x = delta_x / half_w if half_w > 0 else 0.0
    normalized_y = delta_y / half_h if half_h > 0 else 0.0

    return ShadowOffset(
        x=_round_half_up(normalized_x * max_shadow_distance),
        y=_round_half_up(normalized_y * max_shadow_distance),
    )


def drop_shadow_filter(
    offset: ShadowOffset,
    blur: float = 2.5,
    color: str = "rgba(0, 0, 0, 0.35)",
) -> str:
    """CSS ``filter`` value for the offset."""
    return f"drop-shadow({offset.x}px {offset.y}px {format_number(blur)}px {color})"
