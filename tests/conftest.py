"""Shared test fixtures."""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from epicycles.complex_ops import Point  # noqa: E402
from epicycles.config import Settings  # noqa: E402

UNIT_SQUARE = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]

TRIANGLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 10 L90 10 L50 80 Z"/>
</svg>'''

CURVES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M10 50 Q50 0 90 50 C90 80 10 80 10 50"/>
  <path d="m20 20 h10 v10 h-10 z"/>
</svg>'''


@pytest.fixture
def unit_square():
    return list(UNIT_SQUARE)


@pytest.fixture
def settings():
    return Settings(threshold=2.0, max_input_points=5, trail_length=3, canvas_size=400)


@pytest.fixture
def triangle_svg():
    return TRIANGLE_SVG


@pytest.fixture
def curves_svg():
    return CURVES_SVG
