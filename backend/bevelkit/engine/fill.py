"""Fill path — closed background region of a beveled, stepped panel.

Traversal starts at the top-left cut (or the origin), walks each edge with its
steps, and crosses every cut corner with one straight line. A step that runs
to the end of an edge is routed directly into the next bevel, so the closing
``Z`` only has to finish the top-left cut.
"""

from __future__ import annotations

from bevelkit.engine.config import DEFAULT_CONFIG, GeometryConfig
from bevelkit.engine.edges import walk_stepped_edge
from bevelkit.engine.frame import PanelFrame
from bevelkit.models.shape import CORNERS, EDGES, BevelConfig, StepConfig
from bevelkit.svg.serializer import to_path_data
from bevelkit.utils.geometry import Point


def fill_path_points(
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

    top_end = top.end_offset
    right_end = right.end_offset
    bottom_end = bottom.end_offset
    left_end = left.end_offset

    # Where each edge's raised tail meets the following bevel
    tr_entry = (w - tr.x + top_end.offset_x, top_end.offset_y) if frame.is_cut("top_right") else None
    br_entry = (w + right_end.offset_x, h - br.y + right_end.offset_y) if frame.is_cut("bottom_right") else None
    bl_entry = (bl.x + bottom_end.offset_x, h + bottom_end.offset_y) if frame.is_cut("bottom_left") else None
    tl_entry = (left_end.offset_x, tl.y + left_end.offset_y) if frame.is_cut("top_left") else None

    points: list[Point] = [top.start]

    points.extend(walk_stepped_edge(*top.start, *top.end, top.steps, tr_entry).points)
    if frame.is_cut("top_right"):
        points.append((w + top_end.offset_x, tr.y + top_end.offset_y))

    right_start = (
        w + top_end.offset_x,
        tr.y + top_end.offset_y if frame.is_cut("top_right") else 0.0,
    )
    points.extend(walk_stepped_edge(*right_start, *right.end, right.steps, br_entry).points)
    if frame.is_cut("bottom_right"):
        points.append((w - br.x + right_end.offset_x, h + right_end.offset_y))

    bottom_start = (
        w - br.x + right_end.offset_x if frame.is_cut("bottom_right") else w,
        h + right_end.offset_y,
    )
    points.extend(walk_stepped_edge(*bottom_start, *bottom.end, bottom.steps, bl_entry).points)
    if frame.is_cut("bottom_left"):
        points.append((bottom_end.offset_x, h - bl.y + bottom_end.offset_y))

    left_start = (
        bottom_end.offset_x,
        h - bl.y + bottom_end.offset_y if frame.is_cut("bottom_left") else h,
    )
    points.extend(walk_stepped_edge(*left_start, *left.end, left.steps, tl_entry).points)

    return points


def generate_fill_path(
    width: float,
    height: float,
    bevel_config: BevelConfig | None = None,
    step_config: StepConfig | None = None,
    precision: int = DEFAULT_CONFIG.path_precision,
) -> str:
    """Closed ``M/L/Z`` path of the panel's fill region."""
    return to_path_data(
        fill_path_points(width, height, bevel_config, step_config),
        closed=True,
        precision=precision,
    )
