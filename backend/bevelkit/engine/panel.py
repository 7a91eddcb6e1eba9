"""Panel geometry — one render pass from outer size and shape config to paths and boxes.

Outputs depend only on the inputs, so results are memoized on
``(width, height, bevel_config, steps_config, stroke_width, precision)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from bevelkit.engine.config import DEFAULT_CONFIG
from bevelkit.engine.fill import generate_fill_path
from bevelkit.engine.layout import (
    border_view_box,
    get_min_padding,
    get_step_bounds,
    inner_rect,
    shape_transform,
)
from bevelkit.engine.outline import generate_shape_path
from bevelkit.models.layout import Dimensions, InnerRect, Padding, StepBounds
from bevelkit.models.shape import BevelConfig, StepConfig
from bevelkit.utils.units import stroke_width_pixels

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelGeometry:
    dimensions: Dimensions
    padding: Padding
    step_bounds: StepBounds
    inner_rect: InnerRect
    fill_path: str
    shape_path: str
    shape_transform: str
    border_view_box: str
    stroke_width: float


@lru_cache(maxsize=256)
def build_panel(
    width: float,
    height: float,
    bevel_config: BevelConfig | None = None,
    steps_config: StepConfig | None = None,
    stroke_width: str | float | None = 0,
    precision: int = DEFAULT_CONFIG.path_precision,
) -> PanelGeometry:
    """Lay out a panel in a ``width`` × ``height`` box and generate both of its paths."""
    dimensions = Dimensions(width=width, height=height)
    step_bounds = get_step_bounds(steps_config)
    rect = inner_rect(dimensions, step_bounds)

    geometry = PanelGeometry(
        dimensions=dimensions,
        padding=get_min_padding(bevel_config, steps_config, stroke_width),
        step_bounds=step_bounds,
        inner_rect=rect,
        fill_path=generate_fill_path(rect.width, rect.height, bevel_config, steps_config, precision),
        shape_path=generate_shape_path(rect.width, rect.height, bevel_config, steps_config, precision),
        shape_transform=shape_transform(rect),
        border_view_box=border_view_box(dimensions, stroke_width),
        stroke_width=stroke_width_pixels(stroke_width),
    )
    logger.debug("Built panel %.0f×%.0f (inner %.0f×%.0f)", width, height, rect.width, rect.height)
    return geometry
