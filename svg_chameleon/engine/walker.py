"""Tree walker: pre-order traversal that variablizes every element of a sprite."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svg_chameleon.engine.context import RunReport
from svg_chameleon.engine.registry import ValueRegistry
from svg_chameleon.engine.variablizer import variablize_element
from svg_chameleon.models.options import ChameleonOptions
from svg_chameleon.svg.parser import strip_ns

logger = logging.getLogger(__name__)

# Elements whose attributes are never touched
SKIPPED_TAGS = {"style"}


def walk(
    node: ET.Element,
    colors: ValueRegistry,
    stroke_widths: ValueRegistry,
    options: ChameleonOptions,
    report: RunReport,
) -> None:
    """Variablize ``node`` and then each of its children, in document order.

    The same two registries are handed to every recursive call, which is what
    makes a literal resolve to one variable across the whole tree.
    """
    name = strip_ns(node.tag)
    if name and name not in SKIPPED_TAGS:
        variablize_element(node, colors, stroke_widths, options, report)

    for child in node:
        walk(child, colors, stroke_widths, options, report)


class Variablizer:
    """Runs the walk over a parsed sprite with fresh registries."""

    def __init__(self, options: ChameleonOptions | None = None) -> None:
        self.options = options or ChameleonOptions()

    def run(self, root: ET.Element, report: RunReport | None = None) -> RunReport:
        report = report or RunReport()

        if self.options.registry_scope == "symbol":
            # One walk per top-level child; the sprite root keeps its attributes
            for child in root:
                self._walk_once(child, report)
        else:
            self._walk_once(root, report)

        logger.info(
            "Variablized sprite: %d color writes, %d stroke-width writes, %d transitions",
            report.colors_changed,
            report.stroke_widths_changed,
            report.transitions_applied,
        )
        return report

    def _walk_once(self, node: ET.Element, report: RunReport) -> None:
        colors = ValueRegistry.for_colors(self.options.colors)
        stroke_widths = ValueRegistry.for_stroke_widths(self.options.stroke_widths)
        walk(node, colors, stroke_widths, self.options, report)
        logger.debug(
            "Walk of <%s> allocated %d color and %d stroke-width variables",
            strip_ns(node.tag),
            colors.count,
            stroke_widths.count,
        )
