"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from svg_chameleon.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.chameleon_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svg-chameleon",
        description="SVG sprite builder with themeable color, stroke-width and transition variables",
        version="0.1.0",
    )

    from svg_chameleon.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
