"""POST /api/panel — fill/outline paths and layout boxes for one panel."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from bevelkit.config import Settings
from bevelkit.dependencies import get_settings
from bevelkit.engine.panel import PanelGeometry, build_panel
from bevelkit.engine.styles import MappingStyleResolver, process_all_styles, resolve_style_tokens
from bevelkit.models.requests import PanelRequest, PanelSvgRequest
from bevelkit.models.responses import PanelResponse
from bevelkit.svg.parser import path_polygon
from bevelkit.svg.serializer import render_panel_svg

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/panel")


def _build(req: PanelRequest, settings: Settings) -> PanelGeometry:
    precision = req.precision if req.precision is not None else settings.path_precision
    return build_panel(
        req.width,
        req.height,
        req.bevel_config,
        req.steps_config,
        req.stroke_width,
        precision,
    )


@router.post("", response_model=PanelResponse)
async def panel(req: PanelRequest, settings: Settings = Depends(get_settings)) -> PanelResponse:
    geometry = _build(req, settings)

    poly = path_polygon(geometry.fill_path)
    bounds = tuple(float(v) for v in poly.bounds) if not poly.is_empty else (0.0, 0.0, 0.0, 0.0)

    logger.info("Panel %.0f×%.0f: fill area %.1f", req.width, req.height, poly.area)
    return PanelResponse(
        fill_path=geometry.fill_path,
        shape_path=geometry.shape_path,
        padding=geometry.padding,
        step_bounds=geometry.step_bounds,
        inner_rect=geometry.inner_rect,
        shape_transform=geometry.shape_transform,
        border_view_box=geometry.border_view_box,
        stroke_width=geometry.stroke_width,
        bounds=bounds,
        area=float(poly.area),
    )


@router.post("/svg")
async def panel_svg(req: PanelSvgRequest, settings: Settings = Depends(get_settings)) -> Response:
    geometry = _build(req, settings)

    resolver = MappingStyleResolver(req.theme)
    slots = process_all_styles(req.style_config, req.is_hovered, req.is_active, req.disabled)

    svg = render_panel_svg(
        width=geometry.dimensions.width,
        height=geometry.dimensions.height,
        fill_path=geometry.fill_path,
        shape_path=geometry.shape_path,
        shape_transform=geometry.shape_transform,
        view_box=geometry.border_view_box,
        background_style=resolve_style_tokens(slots["background"], resolver),
        border_style=resolve_style_tokens(slots["border"], resolver),
        stroke_width=geometry.stroke_width,
        title=req.title,
    )
    logger.info("Panel SVG %.0f×%.0f (%d bytes)", req.width, req.height, len(svg))
    return Response(content=svg, media_type="image/svg+xml")
