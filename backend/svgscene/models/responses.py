"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"
    svg_classes_registered: int = 0


class ParseResponse(BaseModel):
    objects: list[dict[str, Any] | None] = Field(default_factory=list)
    element_count: int = 0
    object_count: int = 0
    dimensions: dict[str, float] = Field(default_factory=dict)
    animation_count: int = 0
    processing_time_ms: float = 0.0


class AnimateResponse(BaseModel):
    at_ms: float
    objects: list[dict[str, Any] | None] = Field(default_factory=list)
    running_animations: int = 0
    active_sequences: int = 0
