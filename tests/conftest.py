"""Shared test fixtures."""

from __future__ import annotations

import pytest


SQUARE_D = "M0,0 L10,0 L10,10 Z"

# House outline: relative lines, horizontal/vertical runs
HOUSE_D = "M3 9l9-7 9 7v11h-18z"

SMOOTH_CUBIC_D = "M0,0 C10,0 10,10 0,10 S-10,20 0,30"

SMOOTH_QUAD_D = "M0,0 Q5,10 10,0 T20,0 T30,0"

# Glyph-like outline with an inner counter, relative commands throughout
GLYPH_D = "m100 0h300v700h-300z m50 50v600h200v-600z"

SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <path d="M2 2 L22 2 L22 22 L2 22 Z"/>
</svg>'''

TWO_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path fill="#4ECDC4" d="M10 10 H90 V90 H10 Z"/>
  <path d='M50 20 Q80 50 50 80 T50 20 z' stroke="black"/>
</svg>'''

ARC_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M2 2 L22 2 Z"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999"/>
  <path d="M4 4 L20 20"/>
</svg>'''


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def two_path_svg() -> str:
    return TWO_PATH_SVG


@pytest.fixture
def arc_svg() -> str:
    return ARC_SVG
