"""Pipeline orchestrator: discover, optimize, assemble, variablize, write.

Every stage runs strictly after the previous one; the variablization walk runs
exactly once per sprite, over the fully assembled tree.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from svg_chameleon.engine.context import RunReport
from svg_chameleon.engine.walker import Variablizer
from svg_chameleon.errors import InputDirectoryError, NoSvgFilesError
from svg_chameleon.models.options import ChameleonOptions
from svg_chameleon.svg.optimizer import optimize_svg
from svg_chameleon.svg.serializer import serialize_svg
from svg_chameleon.svg.sprite import SpriteSymbol, assemble_sprite, build_symbol
from svg_chameleon.svg.stylesheet import render_css, render_scss

logger = logging.getLogger(__name__)

_UNSAFE_ID_RE = re.compile(r"[^A-Za-z0-9_-]+")


@dataclass
class SpriteResult:
    svg: str
    report: RunReport
    css: str | None = None
    scss: str | None = None


def symbol_id(name: str) -> str:
    """File name -> symbol id: extension dropped, unsafe characters collapsed to '-'."""
    stem = name[:-4] if name.lower().endswith(".svg") else name
    return _UNSAFE_ID_RE.sub("-", stem).strip("-") or "icon"


def unique_id(candidate: str, used: set[str]) -> str:
    """``candidate``, or ``candidate-2``, ``candidate-3``... if already taken. Records the result."""
    result = candidate
    n = 2
    while result in used:
        result = f"{candidate}-{n}"
        n += 1
    if result != candidate:
        logger.warning("Symbol id '%s' already used, renamed to '%s'", candidate, result)
    used.add(result)
    return result


def discover_svgs(path: Path) -> list[Path]:
    """SVG files directly inside ``path``, sorted by name."""
    if not path.is_dir():
        raise InputDirectoryError(f"Input directory '{path}' does not exist or is not a directory.")
    return sorted(p for p in path.iterdir() if p.is_file() and p.suffix.lower() == ".svg")


def read_sources(path: Path) -> dict[str, str]:
    files = discover_svgs(path)
    logger.info("%d SVGs found.", len(files))
    return {f.name: f.read_text(encoding="utf-8") for f in files}


def build_sprite(sources: Mapping[str, str], options: ChameleonOptions | None = None) -> SpriteResult:
    """Build the variablized sprite from ``{name: svg_text}`` entirely in memory."""
    options = options or ChameleonOptions()
    report = RunReport()
    symbols: list[SpriteSymbol] = []
    used_ids: set[str] = set()

    for name, text in sources.items():
        if not text.strip():
            logger.warning("Skipping %s, because the file is empty...", name)
            continue
        root = optimize_svg(text, source=name)
        symbols.append(build_symbol(root, unique_id(symbol_id(name), used_ids)))
        report.graphics_processed += 1

    if not symbols:
        raise NoSvgFilesError("No SVG sources to build a sprite from.")

    sprite = assemble_sprite(symbols)
    Variablizer(options).run(sprite, report)

    return SpriteResult(
        svg=serialize_svg(sprite),
        report=report,
        css=render_css(symbols) if options.css else None,
        scss=render_scss(symbols) if options.scss else None,
    )


def write_outputs(result: SpriteResult, out_dir: Path, file_name: str) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    sprite_path = out_dir / f"{file_name}.svg"
    sprite_path.write_text(result.svg, encoding="utf-8")
    if result.css is not None:
        (out_dir / f"{file_name}.css").write_text(result.css, encoding="utf-8")
    if result.scss is not None:
        (out_dir / f"{file_name}.scss").write_text(result.scss, encoding="utf-8")
    return sprite_path


def log_report(report: RunReport, options: ChameleonOptions) -> None:
    """One line per active category; zero counts are logged as warnings."""
    lines = [
        (options.colors.apply, report.colors_changed, "color var injections into attributes"),
        (
            options.stroke_widths.apply,
            report.stroke_widths_changed,
            "stroke-width var injections into attributes",
        ),
        (options.transition.apply, report.transitions_applied, "transition injections into tags"),
    ]
    for active, count, label in lines:
        if not active:
            continue
        level = logging.INFO if count > 0 else logging.WARNING
        logger.log(level, "%d %s.", count, label)


def create(options: ChameleonOptions | None = None) -> RunReport:
    """Build the sprite for ``options.path`` and write it to ``<path>/<subdir>/<file>.svg``."""
    options = options or ChameleonOptions()
    start = time.perf_counter()
    full_path = Path(options.path).expanduser().resolve()
    out_dir = full_path / options.subdir_name

    logger.info("Creating basic sprite inside '%s' ...", out_dir)
    sources = read_sources(full_path)
    result = build_sprite(sources, options)
    sprite_path = write_outputs(result, out_dir, options.file_name)

    log_report(result.report, options)
    logger.info(
        "Task complete: %d graphics written to %s in %.0fms",
        result.report.graphics_processed,
        sprite_path,
        (time.perf_counter() - start) * 1000,
    )
    return result.report
