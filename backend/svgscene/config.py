"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgscene_env: str = "development"
    svgscene_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Animation defaults
    animation_duration_ms: float = 500.0
    frame_interval_ms: float = 1000.0 / 60.0
    min_frame_ms: float = 1.0
    max_frames: int = 100_000
    max_sample_ms: float = 600_000.0

    # Parsing
    max_use_depth: int = 8

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
