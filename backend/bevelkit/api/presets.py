"""GET /api/presets — named shape configurations."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from bevelkit.engine.registry import PresetSpec, get_registry
from bevelkit.models.responses import PresetResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/presets")


def _to_response(spec: PresetSpec) -> PresetResponse:
    return PresetResponse(
        name=spec.name,
        description=spec.description,
        tags=sorted(spec.tags),
        stroke_width=spec.stroke_width,
        shape=spec.build(),
    )


@router.get("", response_model=list[PresetResponse])
async def list_presets(tag: str | None = None) -> list[PresetResponse]:
    registry = get_registry()
    specs = registry.with_tag(tag) if tag else registry.all()
    return [_to_response(s) for s in specs]


@router.get("/{name}", response_model=PresetResponse)
async def get_preset(name: str) -> PresetResponse:
    try:
        spec = get_registry().get(name)
    except KeyError:
        logger.info("Unknown preset requested: %s", name)
        raise HTTPException(status_code=404, detail=f"Unknown preset: {name}")
    return _to_response(spec)
