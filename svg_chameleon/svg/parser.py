"""SVG parser: thin facade over ElementTree.

Converts raw SVG text into an element tree the engine can mutate in place.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from svg_chameleon.errors import SvgParseError

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)

_LENGTH_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(?:px)?\s*$")


def strip_ns(tag: object) -> str:
    """Local tag name without ``{namespace}``. Comments and PIs have no string tag."""
    if not isinstance(tag, str):
        return ""
    return tag.split("}")[-1] if "}" in tag else tag


def parse_svg(svg_text: str, source: str = "<string>") -> ET.Element:
    """Parse raw SVG text. Raises SvgParseError if it is not well-formed or not an <svg>."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(f"Failed to parse {source}: {e}") from e

    if strip_ns(root.tag) != "svg":
        raise SvgParseError(f"No <svg> root element found in {source}.")

    logger.debug("Parsed %s: %d elements", source, sum(1 for _ in root.iter()))
    return root


def parse_length(value: str | None) -> float | None:
    """Parse a plain or ``px`` length; anything else (%, em, missing) gives None."""
    if not value:
        return None
    m = _LENGTH_RE.match(value)
    return float(m.group(1)) if m else None


def parse_viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    if not value:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        return None
    return (x, y, w, h)
