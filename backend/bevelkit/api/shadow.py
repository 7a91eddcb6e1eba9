"""POST /api/shadow — pointer/viewport-relative drop shadow."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from bevelkit.config import Settings
from bevelkit.dependencies import get_settings
from bevelkit.engine.shadow import calculate_dynamic_shadow, drop_shadow_filter
from bevelkit.models.requests import ShadowRequest
from bevelkit.models.responses import ShadowResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/shadow", response_model=ShadowResponse)
async def shadow(req: ShadowRequest, settings: Settings = Depends(get_settings)) -> ShadowResponse:
    distance = req.max_shadow_distance
    if distance is None:
        distance = settings.max_shadow_distance

    offset = calculate_dynamic_shadow(req.element_rect, distance, req.target, req.viewport)
    logger.info("Shadow offset (%d, %d)", offset.x, offset.y)
    return ShadowResponse(
        offset=offset,
        filter=drop_shadow_filter(offset, settings.shadow_blur, settings.shadow_color),
    )
