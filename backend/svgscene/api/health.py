"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgscene.config import Settings
from svgscene.dependencies import get_settings
from svgscene.models.responses import HealthResponse
from svgscene.shapes import get_class_registry

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        environment=settings.svgscene_env,
        svg_classes_registered=len(get_class_registry().svg_tags),
    )
