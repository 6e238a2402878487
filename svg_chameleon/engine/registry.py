"""Value registry: one per category, deduplicates literals into shared variables.

Usage:
    colors = ValueRegistry.for_colors(options.colors)
    colors.resolve("#ff0000")   # 'var(--color, currentColor)'
    colors.resolve("#00ff00")   # 'var(--color-2, currentColor)'
    colors.resolve("#ff0000")   # 'var(--color, currentColor)' again

A registry lives for exactly one walk. Fill and stroke share the color registry,
so the same literal in either attribute collapses to one variable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from svg_chameleon.engine.naming import name_for

if TYPE_CHECKING:
    from svg_chameleon.models.options import ColorOptions, StrokeWidthOptions

logger = logging.getLogger(__name__)

CURRENT_COLOR = "currentColor"


class ValueRegistry:
    """Maps literal values to the variable reference assigned on first sight."""

    def __init__(
        self,
        name: str,
        custom_vars: dict[str, str] | None = None,
        current_color_fallback: bool = False,
    ) -> None:
        self.name = name
        self.custom_vars = custom_vars or {}
        self.current_color_fallback = current_color_fallback
        self._refs: dict[str, str] = {}

    @classmethod
    def for_colors(cls, options: ColorOptions) -> ValueRegistry:
        return cls(
            options.name,
            options.custom_vars,
            current_color_fallback=not options.preserve_original,
        )

    @classmethod
    def for_stroke_widths(cls, options: StrokeWidthOptions) -> ValueRegistry:
        return cls(options.name, options.custom_vars)

    def resolve(self, literal: str) -> str:
        """Return the reference for ``literal``, allocating the next id if it is new."""
        ref = self._refs.get(literal)
        if ref is not None:
            return ref

        ref = self._build_reference(literal, len(self._refs) + 1)
        self._refs[literal] = ref
        logger.debug("Registered %r as %s", literal, ref)
        return ref

    def _build_reference(self, literal: str, index: int) -> str:
        var_name = name_for(self.name, index)
        fallback = CURRENT_COLOR if self.current_color_fallback else literal
        custom = self.custom_vars.get(literal)
        if custom:
            return f"var({var_name}, var(--{custom}, {fallback}))"
        return f"var({var_name}, {fallback})"

    def __contains__(self, literal: object) -> bool:
        return literal in self._refs

    @property
    def count(self) -> int:
        return len(self._refs)
