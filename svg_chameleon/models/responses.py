"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"


class ReportResponse(BaseModel):
    colors_changed: int = 0
    stroke_widths_changed: int = 0
    transitions_applied: int = 0
    graphics_processed: int = 0


class SpriteResponse(BaseModel):
    svg: str
    css: str | None = None
    scss: str | None = None
    report: ReportResponse
