"""Per-file optimization before sprite assembly.

Three steps, in order:
- inline_styles(): copy declarations from <style> blocks onto the elements their
  selectors match (tag, .class, #id and compounds of those; anything with
  combinators or pseudo-classes is skipped).
- remove_style_elements(): drop the <style> blocks themselves.
- styles_to_attributes(): move presentation properties (fill, stroke, ...) out of
  inline ``style`` into attributes, where the variablizer can see them.

Rules are applied in stylesheet order; no specificity is computed.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

import cssutils

from svg_chameleon.svg.parser import parse_svg, strip_ns

logger = logging.getLogger(__name__)

# cssutils reports every unknown SVG property as a warning
cssutils.log.setLevel(logging.ERROR)

_SIMPLE_SELECTOR_RE = re.compile(r"^(?P<tag>[a-zA-Z][\w-]*|\*)?(?P<rest>(?:[.#][\w-]+)*)$")
_PART_RE = re.compile(r"([.#])([\w-]+)")

PRESENTATION_ATTRS = {
    "clip-rule",
    "color",
    "fill",
    "fill-opacity",
    "fill-rule",
    "opacity",
    "stop-color",
    "stop-opacity",
    "stroke",
    "stroke-dasharray",
    "stroke-dashoffset",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
    "stroke-opacity",
    "stroke-width",
    "vector-effect",
    "visibility",
}


def parse_declarations(style: str | None) -> dict[str, str]:
    """Split an inline style string into an ordered property -> value mapping."""
    declarations: dict[str, str] = {}
    if not style:
        return declarations
    for decl in style.split(";"):
        if ":" not in decl:
            continue
        prop, value = (s.strip() for s in decl.split(":", 1))
        if prop and value:
            declarations[prop] = value
    return declarations


def format_declarations(declarations: dict[str, str]) -> str:
    """Inverse of parse_declarations. Non-empty output ends with ';' so more can be appended."""
    return "".join(f"{prop}:{value};" for prop, value in declarations.items())


def read_rules(css_text: str) -> list[tuple[list[str], dict[str, str]]]:
    """Style rules of a stylesheet as ``(selectors, declarations)`` pairs.

    Values are kept exactly as authored (``#ABCDEF`` is not shortened), since they
    become registry keys later. The serializer preference is process-global, so it
    is restored before returning.
    """
    prefs = cssutils.ser.prefs
    saved = prefs.minimizeColorHash
    prefs.minimizeColorHash = False
    try:
        rules = []
        for rule in cssutils.parseString(css_text):
            if rule.type != rule.STYLE_RULE:
                continue
            selectors = [selector.selectorText for selector in rule.selectorList]
            rules.append((selectors, {prop.name: prop.value for prop in rule.style}))
        return rules
    finally:
        prefs.minimizeColorHash = saved


def _selector_matcher(selector: str):
    """Build a predicate for a simple selector, or None if it is not supported."""
    m = _SIMPLE_SELECTOR_RE.match(selector.strip())
    if not m or not (m.group("tag") or m.group("rest")):
        return None
    tag = m.group("tag")
    ids = [name for kind, name in _PART_RE.findall(m.group("rest")) if kind == "#"]
    classes = [name for kind, name in _PART_RE.findall(m.group("rest")) if kind == "."]

    def matches(element: ET.Element) -> bool:
        if tag and tag != "*" and strip_ns(element.tag) != tag:
            return False
        if any(element.get("id") != i for i in ids):
            return False
        element_classes = (element.get("class") or "").split()
        return all(c in element_classes for c in classes)

    return matches


def inline_styles(root: ET.Element) -> int:
    """Apply <style> rules to matching elements. Returns the number of elements styled."""
    css_text = "\n".join(el.text or "" for el in root.iter() if strip_ns(el.tag) == "style")
    if not css_text.strip():
        return 0

    from_sheet: dict[ET.Element, dict[str, str]] = {}

    for selectors, declarations in read_rules(css_text):
        for selector in selectors:
            matches = _selector_matcher(selector)
            if matches is None:
                logger.debug("Skipping unsupported selector %r", selector)
                continue
            for element in root.iter():
                if strip_ns(element.tag) and matches(element):
                    from_sheet.setdefault(element, {}).update(declarations)

    for element, declarations in from_sheet.items():
        # Declarations already inline win over the stylesheet
        merged = {**declarations, **parse_declarations(element.get("style"))}
        element.set("style", format_declarations(merged))

    return len(from_sheet)


def remove_style_elements(root: ET.Element) -> int:
    removed = 0
    for parent in list(root.iter()):
        for child in list(parent):
            if strip_ns(child.tag) == "style":
                parent.remove(child)
                removed += 1
    return removed


def styles_to_attributes(root: ET.Element) -> None:
    """Move presentation properties from inline style into attributes."""
    for element in root.iter():
        style = element.get("style")
        if not style:
            continue
        declarations = parse_declarations(style)
        remaining: dict[str, str] = {}
        for prop, value in declarations.items():
            if prop in PRESENTATION_ATTRS and "!important" not in value:
                element.set(prop, value)
            else:
                remaining[prop] = value
        if remaining:
            element.set("style", format_declarations(remaining))
        else:
            del element.attrib["style"]


def optimize_svg(svg_text: str, source: str = "<string>") -> ET.Element:
    """Parse one icon and flatten its styling into attributes."""
    root = parse_svg(svg_text, source)
    styled = inline_styles(root)
    removed = remove_style_elements(root)
    styles_to_attributes(root)
    if styled or removed:
        logger.debug("Optimized %s: %d elements styled, %d <style> removed", source, styled, removed)
    return root
