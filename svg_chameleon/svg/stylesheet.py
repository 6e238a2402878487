"""Companion stylesheets with per-symbol dimension classes."""

from __future__ import annotations

from svg_chameleon.svg.sprite import SpriteSymbol


def _dims(symbol: SpriteSymbol) -> tuple[str, str] | None:
    if symbol.width is None or symbol.height is None:
        return None
    return f"{symbol.width:g}px", f"{symbol.height:g}px"


def render_css(symbols: list[SpriteSymbol]) -> str:
    """``.svg-<id>-dims`` rules; symbols without known size are left out."""
    blocks = []
    for symbol in symbols:
        dims = _dims(symbol)
        if dims is None:
            continue
        blocks.append(f".svg-{symbol.id}-dims {{\n\twidth: {dims[0]};\n\theight: {dims[1]};\n}}\n")
    return "\n".join(blocks)


def render_scss(symbols: list[SpriteSymbol]) -> str:
    """Size variables plus the same dimension classes, built from the variables."""
    lines = []
    for symbol in symbols:
        dims = _dims(symbol)
        if dims is None:
            continue
        lines.append(f"$svg-{symbol.id}-width: {dims[0]};")
        lines.append(f"$svg-{symbol.id}-height: {dims[1]};")
    lines.append("")
    for symbol in symbols:
        if _dims(symbol) is None:
            continue
        lines.append(
            f".svg-{symbol.id}-dims {{\n\twidth: $svg-{symbol.id}-width;\n"
            f"\theight: $svg-{symbol.id}-height;\n}}\n"
        )
    return "\n".join(lines)
