"""RunReport: the counters accumulated over one sprite run.

A fresh report is created for every run; nothing carries over between runs.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RunReport:
    """Counters for end-of-run reporting. They never influence the walk."""

    # Attribute writes, not distinct values
    colors_changed: int = 0
    stroke_widths_changed: int = 0
    # Elements that received a transition declaration
    transitions_applied: int = 0
    # Non-empty SVG inputs added to the sprite
    graphics_processed: int = 0
