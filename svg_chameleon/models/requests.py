"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svg_chameleon.models.options import ChameleonOptions


class SpriteRequest(BaseModel):
    svgs: dict[str, str] = Field(..., description="Icon name (or file name) -> raw SVG code")
    options: ChameleonOptions = Field(
        default_factory=ChameleonOptions,
        description="Variablization options; path/subdir/file name are ignored",
    )
