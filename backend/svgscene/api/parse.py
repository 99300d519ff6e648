"""POST /api/parse — SVG markup to scene objects."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from svgscene.animation.registry import AnimationRegistry
from svgscene.dependencies import get_request_registry
from svgscene.models.requests import ParseRequest
from svgscene.models.responses import ParseResponse
from svgscene.svg.document import load_svg_from_string

router = APIRouter()

_DIMENSION_KEYS = ("width", "height", "min_x", "min_y", "viewbox_width", "viewbox_height")


@router.post("/parse", response_model=ParseResponse)
async def parse(req: ParseRequest, registry: AnimationRegistry = Depends(get_request_registry)) -> ParseResponse:
    start = time.perf_counter()
    result = await load_svg_from_string(req.svg, cross_origin=req.cross_origin, registry=registry)
    # objects are reported at their first frame
    registry.cancel_all()
    elapsed = (time.perf_counter() - start) * 1000

    return ParseResponse(
        objects=[obj.to_object() if obj is not None else None for obj in result.objects],
        element_count=len(result.elements),
        object_count=sum(obj is not None for obj in result.objects),
        dimensions={k: result.options[k] for k in _DIMENSION_KEYS if k in result.options},
        animation_count=len(result.sequences),
        processing_time_ms=round(elapsed, 1),
    )
