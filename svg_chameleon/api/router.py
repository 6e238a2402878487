"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svg_chameleon.api import health, sprite

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(sprite.router)
