"""PanelFrame — corner cuts and edge spans shared by the fill and outline generators.

Edges run clockwise on screen: top (left→right), right (top→bottom), bottom
(right→left), left (bottom→top). Each edge spans the base rectangle minus the
projections of the bevels at its two corners.
"""

from __future__ import annotations

from dataclasses import dataclass

from bevelkit.engine.config import DEFAULT_CONFIG, GeometryConfig
from bevelkit.engine.edges import Offset, edge_end_offset, edge_start_offset
from bevelkit.models.shape import CORNERS, BevelConfig, EdgeStepConfig, StepConfig
from bevelkit.utils.geometry import BevelOffset, Point, bevel_offset


@dataclass(frozen=True)
class EdgeSpan:
    name: str
    start: Point
    end: Point
    steps: EdgeStepConfig
    start_offset: Offset
    end_offset: Offset

    @classmethod
    def build(cls, name: str, start: Point, end: Point, steps: EdgeStepConfig) -> EdgeSpan:
        return cls(
            name=name,
            start=start,
            end=end,
            steps=steps,
            start_offset=edge_start_offset(*start, *end, steps),
            end_offset=edge_end_offset(*start, *end, steps),
        )


@dataclass(frozen=True)
class PanelFrame:
    width: float
    height: float
    cuts: dict[str, BevelOffset]
    edges: dict[str, EdgeSpan]

    def is_cut(self, corner: str) -> bool:
        return corner in self.cuts

    def cut(self, corner: str) -> BevelOffset:
        """Bevel offset at ``corner`` (zero when the corner is sharp)."""
        return self.cuts.get(corner, BevelOffset())

    @classmethod
    def build(
        cls,
        width: float,
        height: float,
        bevel_config: BevelConfig | None = None,
        step_config: StepConfig | None = None,
        config: GeometryConfig = DEFAULT_CONFIG,
    ) -> PanelFrame:
        bevel_config = bevel_config or BevelConfig()
        step_config = step_config or StepConfig()

        cuts: dict[str, BevelOffset] = {}
        for name in CORNERS:
            bevel = bevel_config.corner(name)
            if bevel.is_cut:
                angle = bevel.bevel_angle if bevel.bevel_angle is not None else config.default_bevel_angle
                cuts[name] = bevel_offset(bevel.bevel_size, angle)

        tl = cuts.get("top_left")
        tr = cuts.get("top_right")
        br = cuts.get("bottom_right")
        bl = cuts.get("bottom_left")

        w, h = float(width), float(height)
        edges = {
            "top": EdgeSpan.build(
                "top",
                (tl.x if tl else 0.0, 0.0),
                (w - tr.x if tr else w, 0.0),
                step_config.edge("top"),
            ),
            "right": EdgeSpan.build(
                "right",
                (w, tr.y if tr else 0.0),
                (w, h - br.y if br else h),
                step_config.edge("right"),
            ),
            "bottom": EdgeSpan.build(
                "bottom",
                (w - br.x if br else w, h),
                (bl.x if bl else 0.0, h),
                step_config.edge("bottom"),
            ),
            "left": EdgeSpan.build(
                "left",
                (0.0, h - bl.y if bl else h),
                (0.0, tl.y if tl else 0.0),
                step_config.edge("left"),
            ),
        }
        return cls(width=w, height=h, cuts=cuts, edges=edges)
