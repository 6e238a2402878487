"""Sprite assembly: one <symbol> per icon inside a single root <svg>."""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from svg_chameleon.svg.optimizer import PRESENTATION_ATTRS
from svg_chameleon.svg.parser import SVG_NS, parse_length, parse_viewbox

logger = logging.getLogger(__name__)

# Root attributes copied onto <symbol> besides viewBox and presentation attributes
_SYMBOL_ATTRS = ("preserveAspectRatio",)


@dataclass
class SpriteSymbol:
    """One icon ready to be placed into the sprite."""

    id: str
    element: ET.Element
    width: float | None = None
    height: float | None = None


def _qualify(element: ET.Element) -> None:
    """Put unqualified tags into the SVG namespace so the sprite serializes uniformly."""
    for el in element.iter():
        if isinstance(el.tag, str) and not el.tag.startswith("{"):
            el.tag = f"{{{SVG_NS}}}{el.tag}"


def build_symbol(root: ET.Element, symbol_id: str) -> SpriteSymbol:
    """Turn a parsed icon root into a <symbol> carrying its children."""
    symbol = ET.Element(f"{{{SVG_NS}}}symbol")

    width = parse_length(root.get("width"))
    height = parse_length(root.get("height"))
    view_box = root.get("viewBox")
    if view_box is None and width is not None and height is not None:
        view_box = f"0 0 {width:g} {height:g}"
    elif view_box is not None and (width is None or height is None):
        vb = parse_viewbox(view_box)
        if vb is not None:
            width = width if width is not None else vb[2]
            height = height if height is not None else vb[3]

    if view_box is not None:
        symbol.set("viewBox", view_box)
    for attr in _SYMBOL_ATTRS:
        if root.get(attr) is not None:
            symbol.set(attr, root.get(attr))
    # Inheritable presentation attributes on the icon root still apply to its shapes
    for attr, value in root.attrib.items():
        if attr in PRESENTATION_ATTRS:
            symbol.set(attr, value)
    symbol.set("id", symbol_id)

    for child in root:
        symbol.append(copy.deepcopy(child))
    _qualify(symbol)

    return SpriteSymbol(id=symbol_id, element=symbol, width=width, height=height)


def assemble_sprite(symbols: list[SpriteSymbol]) -> ET.Element:
    sprite = ET.Element(f"{{{SVG_NS}}}svg")
    for symbol in symbols:
        sprite.append(symbol.element)
    logger.debug("Assembled sprite with %d symbols", len(symbols))
    return sprite
