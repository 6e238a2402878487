"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svg_chameleon.config import Settings
from svg_chameleon.dependencies import get_settings
from svg_chameleon.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", environment=settings.chameleon_env)
