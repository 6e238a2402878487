"""svg-chameleon variablization engine."""

from svg_chameleon.engine.context import RunReport
from svg_chameleon.engine.registry import ValueRegistry
from svg_chameleon.engine.walker import Variablizer, walk
from svg_chameleon.engine.pipeline import build_sprite, create

__all__ = [
    "RunReport",
    "ValueRegistry",
    "Variablizer",
    "walk",
    "build_sprite",
    "create",
]
