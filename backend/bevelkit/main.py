"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bevelkit.config import settings
from bevelkit.engine.registry import get_registry

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.bevelkit_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)

PRESET_MODULES = ("bevelkit.engine.presets",)


def create_app() -> FastAPI:
    app = FastAPI(
        title="bevelkit",
        description="Panel geometry service — beveled, stepped SVG paths and layout metrics",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Built-in presets register themselves on import
    _register_presets()
    logger.info("bevelkit ready (%s, %d presets)", settings.bevelkit_env, get_registry().count)

    from bevelkit.api.router import api_router

    app.include_router(api_router)

    return app


def _register_presets() -> None:
    """Import the preset modules so their @preset decorators fire."""
    import importlib

    for module_name in PRESET_MODULES:
        importlib.import_module(module_name)


app = create_app()
