"""FastAPI dependency injection."""

from __future__ import annotations

from svg_chameleon.config import settings


def get_settings():
    return settings
