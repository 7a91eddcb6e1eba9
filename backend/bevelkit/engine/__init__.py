"""bevelkit panel geometry engine."""

from bevelkit.engine.edges import Offset, edge_end_offset, edge_start_offset, stepped_edge_path
from bevelkit.engine.fill import generate_fill_path
from bevelkit.engine.layout import get_min_padding, get_step_bounds
from bevelkit.engine.outline import generate_shape_path
from bevelkit.engine.panel import PanelGeometry, build_panel
from bevelkit.engine.registry import get_registry, preset
from bevelkit.engine.shadow import calculate_dynamic_shadow

__all__ = [
    "Offset",
    "edge_end_offset",
    "edge_start_offset",
    "stepped_edge_path",
    "generate_fill_path",
    "generate_shape_path",
    "get_min_padding",
    "get_step_bounds",
    "PanelGeometry",
    "build_panel",
    "get_registry",
    "preset",
    "calculate_dynamic_shadow",
]
