"""Per-element attribute rewriting: colors, stroke widths, vector-effect, transitions."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svg_chameleon.engine.context import RunReport
from svg_chameleon.engine.registry import ValueRegistry
from svg_chameleon.engine.validator import is_eligible
from svg_chameleon.models.options import ChameleonOptions, TransitionOptions

logger = logging.getLogger(__name__)

FILL = "fill"
STROKE = "stroke"
STROKE_WIDTH = "stroke-width"
VECTOR_EFFECT = "vector-effect"
STYLE = "style"

NON_SCALING_STROKE = "non-scaling-stroke"

COLOR_ATTRS = (FILL, STROKE)
PAINT_ATTRS = (FILL, STROKE, STROKE_WIDTH)


def _resolve_attr(element: ET.Element, attr: str, registry: ValueRegistry) -> bool:
    """Swap an eligible literal for its variable reference. Returns True on write."""
    value = element.get(attr)
    if not value or not is_eligible(value):
        return False
    element.set(attr, registry.resolve(value))
    return True


def variablize_colors(element: ET.Element, colors: ValueRegistry) -> int:
    """Resolve ``fill`` then ``stroke`` through the shared color registry."""
    return sum(_resolve_attr(element, attr, colors) for attr in COLOR_ATTRS)


def variablize_stroke_width(element: ET.Element, stroke_widths: ValueRegistry) -> int:
    return int(_resolve_attr(element, STROKE_WIDTH, stroke_widths))


def apply_non_scaling(element: ET.Element) -> None:
    """Make sure a stroked element's vector-effect includes non-scaling-stroke."""
    if not element.get(STROKE_WIDTH):
        return
    vector_effect = element.get(VECTOR_EFFECT)
    if not vector_effect:
        element.set(VECTOR_EFFECT, NON_SCALING_STROKE)
    elif NON_SCALING_STROKE not in vector_effect:
        element.set(VECTOR_EFFECT, f"{vector_effect} {NON_SCALING_STROKE}")


def transition_declaration(options: TransitionOptions) -> str:
    var_name = f"--{options.name}"
    if options.default:
        return f"transition: var({var_name}, {options.default});"
    return f"transition: var({var_name});"


def inject_transition(element: ET.Element, options: TransitionOptions) -> bool:
    """Append a transition declaration to the inline style of a painted element.

    The trigger is attribute presence, not "changed in this walk", so calling
    this twice on one element appends two declarations.
    """
    if not options.apply:
        return False
    if not any(element.get(attr) for attr in PAINT_ATTRS):
        return False
    element.set(STYLE, element.get(STYLE, "") + transition_declaration(options))
    return True


def variablize_element(
    element: ET.Element,
    colors: ValueRegistry,
    stroke_widths: ValueRegistry,
    options: ChameleonOptions,
    report: RunReport,
) -> None:
    """Run color, stroke-width, non-scaling and transition steps on one element, in that order."""
    if options.colors.apply:
        report.colors_changed += variablize_colors(element, colors)

    if options.stroke_widths.apply:
        report.stroke_widths_changed += variablize_stroke_width(element, stroke_widths)

    if options.stroke_widths.non_scaling:
        apply_non_scaling(element)

    if inject_transition(element, options.transition):
        report.transitions_applied += 1
