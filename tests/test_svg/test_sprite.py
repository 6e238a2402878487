"""Tests for sprite assembly and companion stylesheets."""

from __future__ import annotations

from svg_chameleon.svg.parser import SVG_NS, parse_svg, strip_ns
from svg_chameleon.svg.serializer import serialize_svg
from svg_chameleon.svg.sprite import assemble_sprite, build_symbol
from svg_chameleon.svg.stylesheet import render_css, render_scss
from tests.conftest import CIRCLE_SVG, FILLED_SVG, NO_NAMESPACE_SVG


def test_symbol_carries_viewbox_and_id():
    symbol = build_symbol(parse_svg(CIRCLE_SVG), "circle")
    assert strip_ns(symbol.element.tag) == "symbol"
    assert symbol.element.get("id") == "circle"
    assert symbol.element.get("viewBox") == "0 0 24 24"
    assert (symbol.width, symbol.height) == (24.0, 24.0)


def test_symbol_keeps_root_presentation_attributes():
    symbol = build_symbol(parse_svg(CIRCLE_SVG), "circle")
    assert symbol.element.get("stroke") == "currentColor"
    assert symbol.element.get("stroke-width") == "2"
    assert symbol.element.get("fill") == "none"
    assert symbol.element.get("width") is None


def test_size_from_viewbox():
    symbol = build_symbol(parse_svg(FILLED_SVG), "filled")
    assert (symbol.width, symbol.height) == (100.0, 100.0)


def test_unqualified_tags_moved_into_svg_namespace():
    symbol = build_symbol(parse_svg(NO_NAMESPACE_SVG), "plain")
    assert symbol.element[0].tag == f"{{{SVG_NS}}}path"


def test_assemble_and_serialize():
    symbols = [
        build_symbol(parse_svg(CIRCLE_SVG), "circle"),
        build_symbol(parse_svg(FILLED_SVG), "filled"),
    ]
    sprite = assemble_sprite(symbols)
    assert [s.get("id") for s in sprite] == ["circle", "filled"]

    text = serialize_svg(sprite)
    assert text.startswith('<svg xmlns="http://www.w3.org/2000/svg">')
    assert "<?xml" not in text
    assert '<symbol viewBox="0 0 24 24"' in text


def test_render_css():
    symbols = [build_symbol(parse_svg(CIRCLE_SVG), "circle")]
    css = render_css(symbols)
    assert ".svg-circle-dims {" in css
    assert "width: 24px;" in css


def test_render_scss():
    symbols = [build_symbol(parse_svg(FILLED_SVG), "filled")]
    scss = render_scss(symbols)
    assert "$svg-filled-width: 100px;" in scss
    assert "width: $svg-filled-width;" in scss


def test_stylesheets_skip_unsized_symbols():
    symbols = [build_symbol(parse_svg('<svg xmlns="http://www.w3.org/2000/svg"/>'), "bare")]
    assert "bare" not in render_css(symbols)
    assert "bare" not in render_scss(symbols)
