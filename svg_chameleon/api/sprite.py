"""POST /api/sprite: build a variablized sprite from posted SVG sources."""

from __future__ import annotations

import dataclasses
import logging

from fastapi import APIRouter, HTTPException

from svg_chameleon.engine.pipeline import build_sprite
from svg_chameleon.errors import ChameleonError
from svg_chameleon.models.requests import SpriteRequest
from svg_chameleon.models.responses import ReportResponse, SpriteResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/sprite", response_model=SpriteResponse)
def create_sprite(req: SpriteRequest) -> SpriteResponse:
    try:
        result = build_sprite(req.svgs, req.options)
    except ChameleonError as e:
        logger.warning("Sprite request rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return SpriteResponse(
        svg=result.svg,
        css=result.css,
        scss=result.scss,
        report=ReportResponse(**dataclasses.asdict(result.report)),
    )
