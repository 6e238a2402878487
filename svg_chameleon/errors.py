"""Errors raised by the sprite pipeline.

The variablization walk itself never raises; everything here comes from
reading inputs and assembling the sprite.
"""

from __future__ import annotations


class ChameleonError(Exception):
    """Base class for all reported pipeline failures."""


class InputDirectoryError(ChameleonError):
    """The configured input path is missing or is not a directory."""


class NoSvgFilesError(ChameleonError):
    """No usable SVG source was found."""


class SvgParseError(ChameleonError):
    """An SVG source (or the assembled sprite) could not be parsed."""
