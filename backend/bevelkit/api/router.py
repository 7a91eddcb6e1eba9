"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from bevelkit.api import health, panel, presets, shadow

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(panel.router)
api_router.include_router(shadow.router)
api_router.include_router(presets.router)
