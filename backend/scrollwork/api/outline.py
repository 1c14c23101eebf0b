"""POST /api/outline: read the outline out of an uploaded SVG."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from scrollwork.dependencies import get_generator
from scrollwork.engine.generator import ScrollworkGenerator
from scrollwork.models.requests import OutlineRequest
from scrollwork.models.responses import OutlineResponse, RegionModel
from scrollwork.svg.parser import load_outline

router = APIRouter()


@router.post("/outline", response_model=OutlineResponse)
async def upload_outline(
    req: OutlineRequest,
    generator: ScrollworkGenerator = Depends(get_generator),
) -> OutlineResponse:
    outline = load_outline(req.svg)
    region = generator.region(outline)
    return OutlineResponse(path_data=outline.path_data, region=RegionModel(**region.as_dict()))
