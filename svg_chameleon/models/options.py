"""Run options for sprite creation and attribute variablization."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Options(BaseModel):
    # Accept both snake_case and the camelCase keys of JS-style configs
    model_config = ConfigDict(populate_by_name=True)


class ColorOptions(_Options):
    apply: bool = True
    name: str = Field(default="color", description="Base custom property name")
    preserve_original: bool = Field(
        default=False,
        alias="preserveOriginal",
        description="Keep the literal color as fallback instead of currentColor",
    )
    custom_vars: dict[str, str] = Field(
        default_factory=dict,
        alias="customVars",
        description="Literal value -> intermediate fallback property name",
    )


class StrokeWidthOptions(_Options):
    apply: bool = True
    name: str = "stroke-width"
    non_scaling: bool = Field(
        default=False,
        alias="nonScaling",
        description="Add vector-effect: non-scaling-stroke to stroked elements",
    )
    custom_vars: dict[str, str] = Field(default_factory=dict, alias="customVars")


class TransitionOptions(_Options):
    apply: bool = False
    name: str = "transition"
    default: str | None = Field(default=None, description="Fallback CSS transition value")

    @model_validator(mode="before")
    @classmethod
    def _enable_when_customized(cls, data: Any) -> Any:
        # Giving a transition name or default implies the caller wants transitions
        if isinstance(data, dict) and (data.get("name") or data.get("default")):
            data = {**data, "apply": True}
        return data


class ChameleonOptions(_Options):
    """Everything a single sprite run needs."""

    path: str = "./"
    subdir_name: str = Field(default="chameleon-sprite", alias="subdirName")
    file_name: str = Field(default="chameleon-sprite", alias="fileName")
    css: bool = False
    scss: bool = False

    colors: ColorOptions = Field(default_factory=ColorOptions)
    stroke_widths: StrokeWidthOptions = Field(
        default_factory=StrokeWidthOptions, alias="strokeWidths"
    )
    transition: TransitionOptions = Field(default_factory=TransitionOptions)

    # "sprite": one walk over the whole sprite; "symbol": fresh registries per <symbol>
    registry_scope: Literal["sprite", "symbol"] = Field(default="sprite", alias="registryScope")
