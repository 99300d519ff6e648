"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgscene.config import settings


class ParseRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    cross_origin: str | None = Field(default=None, description="Cross-origin mode for referenced images")


class AnimateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code with <animate> directives")
    at_ms: float = Field(
        ..., ge=0, le=settings.max_sample_ms, description="Animation clock time to sample, in milliseconds"
    )
    frame_ms: float | None = Field(
        default=None, ge=settings.min_frame_ms, description="Frame step used to reach at_ms"
    )
