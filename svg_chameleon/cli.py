"""svg-chameleon command line: build a themeable sprite from a folder of SVGs."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from svg_chameleon.config import settings
from svg_chameleon.engine.pipeline import create
from svg_chameleon.errors import ChameleonError
from svg_chameleon.models.options import ChameleonOptions

logger = logging.getLogger("svg_chameleon")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg-chameleon",
        description="Combine SVG icons into one sprite with color, stroke-width and transition variables",
    )
    parser.add_argument("path", nargs="?", default=None, help="Folder of SVG files (default: CHAMELEON_DEFAULT_PATH)")
    parser.add_argument("--subdir-name", help="Output subfolder inside the input folder")
    parser.add_argument("--file-name", help="Sprite file name without extension")
    parser.add_argument("--css", action="store_true", help="Also write a .css file with dimension classes")
    parser.add_argument("--scss", action="store_true", help="Also write a .scss file with dimension variables")
    parser.add_argument(
        "--registry-scope",
        choices=["sprite", "symbol"],
        help="Share variables across the whole sprite or restart numbering per symbol",
    )

    colors = parser.add_argument_group("colors")
    colors.add_argument("--no-colors", action="store_true", help="Leave fill/stroke untouched")
    colors.add_argument("--color-name", help="Base custom property name for colors")
    colors.add_argument("--preserve-original", action="store_true", help="Fall back to the original color, not currentColor")

    widths = parser.add_argument_group("stroke widths")
    widths.add_argument("--no-stroke-widths", action="store_true", help="Leave stroke-width untouched")
    widths.add_argument("--stroke-width-name", help="Base custom property name for stroke widths")
    widths.add_argument("--non-scaling", action="store_true", help="Add vector-effect: non-scaling-stroke")

    transition = parser.add_argument_group("transition")
    transition.add_argument("--transition", action="store_true", help="Inject transition declarations")
    transition.add_argument("--transition-name", help="Custom property name for the transition")
    transition.add_argument("--transition-default", help="Fallback transition value, e.g. '0.2s'")
    return parser


def options_from_args(args: argparse.Namespace) -> ChameleonOptions:
    """Only flags that were given override the option defaults."""
    data: dict = {"path": args.path or settings.chameleon_default_path, "css": args.css, "scss": args.scss}
    if args.subdir_name:
        data["subdir_name"] = args.subdir_name
    if args.file_name:
        data["file_name"] = args.file_name
    if args.registry_scope:
        data["registry_scope"] = args.registry_scope

    colors: dict = {"apply": not args.no_colors, "preserve_original": args.preserve_original}
    if args.color_name:
        colors["name"] = args.color_name

    widths: dict = {"apply": not args.no_stroke_widths, "non_scaling": args.non_scaling}
    if args.stroke_width_name:
        widths["name"] = args.stroke_width_name

    transition: dict = {"apply": args.transition}
    if args.transition_name:
        transition["name"] = args.transition_name
    if args.transition_default:
        transition["default"] = args.transition_default

    data.update(colors=colors, stroke_widths=widths, transition=transition)
    return ChameleonOptions.model_validate(data)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.chameleon_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        create(options_from_args(args))
    except ChameleonError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
