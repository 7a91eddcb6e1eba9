"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    bevelkit_env: str = "development"
    bevelkit_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Path output
    path_precision: int = 2

    # Dynamic drop shadow
    max_shadow_distance: float = 20.0
    shadow_blur: float = 2.5
    shadow_color: str = "rgba(0, 0, 0, 0.35)"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
