"""POST /api/animate — sample a document's animations at a point in time."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from svgscene.animation.registry import AnimationRegistry
from svgscene.dependencies import get_request_registry
from svgscene.models.requests import AnimateRequest
from svgscene.models.responses import AnimateResponse
from svgscene.svg.document import load_svg_from_string

router = APIRouter()


@router.post("/animate", response_model=AnimateResponse)
async def animate(req: AnimateRequest, registry: AnimationRegistry = Depends(get_request_registry)) -> AnimateResponse:
    result = await load_svg_from_string(req.svg, registry=registry)
    if not result.elements:
        raise HTTPException(status_code=422, detail="SVG contains no drawable elements")

    try:
        registry.run_for(req.at_ms, req.frame_ms)
        response = AnimateResponse(
            at_ms=req.at_ms,
            objects=[obj.to_object() if obj is not None else None for obj in result.objects],
            running_animations=len(registry),
            active_sequences=len(registry.sequences),
        )
    finally:
        registry.cancel_all()
    return response
