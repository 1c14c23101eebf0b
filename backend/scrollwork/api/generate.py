"""POST /api/generate: lay out motifs and return the exported SVG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from scrollwork.config import Settings
from scrollwork.dependencies import get_generator, get_settings
from scrollwork.engine.config import GenerationConfig
from scrollwork.engine.generator import ScrollworkGenerator
from scrollwork.models.requests import GenerateRequest
from scrollwork.models.responses import GenerateResponse, RegionModel
from scrollwork.svg.serializer import render_scene

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    req: GenerateRequest,
    generator: ScrollworkGenerator = Depends(get_generator),
    cfg: Settings = Depends(get_settings),
) -> GenerateResponse:
    config = GenerationConfig(
        style_name=req.style if req.style is not None else cfg.default_style,
        intricacy=req.intricacy if req.intricacy is not None else cfg.default_intricacy,
        seed=req.seed if req.seed is not None else cfg.default_seed,
        thickness=req.thickness if req.thickness is not None else cfg.default_thickness,
        invert=req.invert,
    )

    # Omitted outline → the session's current (default) outline
    scene = generator.generate(config, outline=req.path_data)
    svg = render_scene(scene, height=cfg.export_height)

    return GenerateResponse(
        svg=svg,
        filename=config.export_filename,
        region=RegionModel(**scene.region.as_dict()),
        motif_count=len(scene.motifs),
        leaf_count=scene.leaf_count,
    )
