"""Write SVG markup from an element tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET

# Importing the parser registers the svg/xlink namespace prefixes
from svg_chameleon.svg import parser  # noqa: F401


def serialize_svg(root: ET.Element) -> str:
    """Serialize without XML declaration or doctype, ready to inline into HTML."""
    return ET.tostring(root, encoding="unicode", xml_declaration=False)
