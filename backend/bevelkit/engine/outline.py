"""Shape path — the stroked outline of a panel.

Walks the same edges as the fill path, but every corner is drawn explicitly:
the last vertex of each edge is moved to where the edge's end lift and the
next edge's start lift meet, then the bevel cut (if any) is emitted as its own
visible line. Edges are walked without bevel targets, and an edge whose span
collapsed under its bevels is reduced to that corrected corner vertex.
"""

from __future__ import annotations

import logging

from bevelkit.engine.config import DEFAULT_CONFIG, GeometryConfig
from bevelkit.engine.edges import walk_stepped_edge
from bevelkit.engine.frame import PanelFrame
from bevelkit.models.shape import CORNERS, EDGES, BevelConfig, EdgeStepConfig, StepConfig
from bevelkit.svg.serializer import to_path_data
from bevelkit.utils.geometry import Point

logger = logging.getLogger(__name__)


def _reconciled_edge(
    start: Point,
    end: Point,
    steps: EdgeStepConfig,
    corner: Point,
    traversable: bool,
) -> list[Point]:
    """Vertices of a stepped edge with the final vertex replaced by ``corner``."""
    if not traversable:
        logger.debug("Edge collapsed under its bevels, keeping corner %s", corner)
        return [corner]
    walked = walk_stepped_edge(*start, *end, steps).points
    return [*walked[:-1], corner]


def shape_path_points(
    width: float,
    height: float,
    bevel_config: BevelConfig | None = None,
    step_config: StepConfig | None = None,
    config: GeometryConfig = DEFAULT_CONFIG,
) -> list[Point]:
    frame = PanelFrame.build(width, height, bevel_config, step_config, config)
    w, h = frame.width, frame.height
    tl, tr, br, bl = (frame.cut(c) for c in CORNERS)
    top, right, bottom, left = (frame.edges[e] for e in EDGES)

    te, re_, be, le = top.end_offset, right.end_offset, bottom.end_offset, left.end_offset
    ts, rs, bs, ls = top.start_offset, right.start_offset, bottom.start_offset, left.start_offset

    # Base corner coordinates along each edge, before lifts
    top_left_y = tl.y if frame.is_cut("top_left") else 0.0
    top_left_x = tl.x if frame.is_cut("top_left") else 0.0
    top_right_x = w - tr.x if frame.is_cut("top_right") else w
    top_right_y = tr.y if frame.is_cut("top_right") else 0.0
    bottom_right_y = h - br.y if frame.is_cut("bottom_right") else h
    bottom_right_x = w - br.x if frame.is_cut("bottom_right") else w
    bottom_left_x = bl.x if frame.is_cut("bottom_left") else 0.0
    bottom_left_y = h - bl.y if frame.is_cut("bottom_left") else h

    points: list[Point] = [(le.offset_x, top_left_y + le.offset_y)]

    if frame.is_cut("top_left"):
        points.append((tl.x + le.offset_x + ts.offset_x, le.offset_y + ts.offset_y))

    # Top edge
    top_start = (top_left_x + le.offset_x, le.offset_y)
    top_end = (top_right_x, 0.0)
    top_corner = (top_right_x + te.offset_x + rs.offset_x, te.offset_y + rs.offset_y)
    points.extend(
        _reconciled_edge(top_start, top_end, top.steps, top_corner, top_start[0] < top_end[0])
    )

    if frame.is_cut("top_right"):
        points.append((w + te.offset_x + rs.offset_x, tr.y + te.offset_y + rs.offset_y))

    # Right edge
    right_start = (w + te.offset_x, top_right_y + te.offset_y)
    right_end = (w, bottom_right_y)
    right_corner = (w + re_.offset_x + bs.offset_x, bottom_right_y + re_.offset_y + bs.offset_y)
    points.extend(
        _reconciled_edge(right_start, right_end, right.steps, right_corner, right_start[1] < right_end[1])
    )

    if frame.is_cut("bottom_right"):
        points.append((w - br.x + re_.offset_x + bs.offset_x, h + re_.offset_y + bs.offset_y))

    # Bottom edge
    bottom_start = (bottom_right_x + re_.offset_x, h + re_.offset_y)
    bottom_end = (bottom_left_x, h)
    bottom_corner = (bottom_left_x + be.offset_x + ls.offset_x, h + be.offset_y + ls.offset_y)
    points.extend(
        _reconciled_edge(bottom_start, bottom_end, bottom.steps, bottom_corner, bottom_start[0] > bottom_end[0])
    )

    if frame.is_cut("bottom_left"):
        points.append((be.offset_x + ls.offset_x, h - bl.y + be.offset_y + ls.offset_y))

    # Left edge, back to the start
    left_start = (be.offset_x, bottom_left_y + be.offset_y)
    left_end = (0.0, top_left_y)
    left_corner = (le.offset_x + ts.offset_x, top_left_y + le.offset_y + ts.offset_y)
    points.extend(
        _reconciled_edge(left_start, left_end, left.steps, left_corner, left_start[1] > left_end[1])
    )

    return points


def generate_shape_path(
    width: float,
    height: float,
    bevel_config: BevelConfig | None = None,
    step_config: StepConfig | None = None,
    precision: int = DEFAULT_CONFIG.path_precision,
) -> str:
    """Closed ``M/L/Z`` outline path for stroking the panel border."""
    return to_path_data(
        shape_path_points(width, height, bevel_config, step_config),
        closed=True,
        precision=precision,
    )
