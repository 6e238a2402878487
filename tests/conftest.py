"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Outline icon with its styling on the root element (lucide style)
CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

# Two fills, one of them repeated
FILLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
  <circle cx="30" cy="30" r="5" fill="#4ECDC4" stroke="#FF6B6B" stroke-width="3"/>
</svg>'''

# Colors that only live in a <style> block
STYLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
  <style>
    .body { fill: #123456; }
    #eye { stroke: #abcdef; stroke-width: 1.5; }
    circle.pupil { fill: #654321; opacity: 0.5; }
  </style>
  <path class="body" d="M0 0h32v32H0z"/>
  <circle id="eye" cx="10" cy="10" r="4"/>
  <circle class="pupil" cx="10" cy="10" r="1" style="fill: #000001"/>
</svg>'''

GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <defs>
    <linearGradient id="grad1">
      <stop offset="0" stop-color="#ff0000"/>
      <stop offset="1" stop-color="#0000ff"/>
    </linearGradient>
  </defs>
  <rect width="10" height="10" fill="url(#grad1)" stroke="none"/>
</svg>'''

NO_NAMESPACE_SVG = '''<svg viewBox="0 0 16 16"><path d="M1 1h14v14H1z" fill="#00ff00"/></svg>'''


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def filled_svg() -> str:
    return FILLED_SVG


@pytest.fixture
def styled_svg() -> str:
    return STYLED_SVG


@pytest.fixture
def icon_dir(tmp_path):
    """A folder with a few icons, one empty file and one non-SVG file."""
    (tmp_path / "circle.svg").write_text(CIRCLE_SVG, encoding="utf-8")
    (tmp_path / "filled.svg").write_text(FILLED_SVG, encoding="utf-8")
    (tmp_path / "empty.svg").write_text("", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not an icon", encoding="utf-8")
    return tmp_path
