"""Tests for the svgpathtools / numpy bridge."""

import numpy as np
import pytest

from pathcmds import Move, parse_path_data
from pathcmds.svg.bridge import (
    contour_windings,
    path_bbox,
    sample_points,
    split_contours,
    to_svgpathtools,
)
from tests.conftest import GLYPH_D, SQUARE_D


def test_split_contours():
    contours = split_contours(parse_path_data(GLYPH_D))
    assert len(contours) == 2
    for contour in contours:
        assert isinstance(contour[0], Move)
        assert len(contour) == 5


def test_to_svgpathtools_adds_closing_line():
    path = to_svgpathtools(parse_path_data(SQUARE_D))
    assert len(path) == 3
    assert path[0].start == 0j
    assert path[-1].end == 0j


def test_to_svgpathtools_no_closing_line_when_already_at_start():
    path = to_svgpathtools(parse_path_data("M0 0 L10 0 L0 0 Z"))
    assert len(path) == 2


def test_to_svgpathtools_curves():
    path = to_svgpathtools(parse_path_data("M0 0 Q5 10 10 0 C10 5 20 5 20 0"))
    assert type(path[0]).__name__ == "QuadraticBezier"
    assert type(path[1]).__name__ == "CubicBezier"
    assert path[1].start == 10 + 0j
    assert path[1].control1 == 10 + 5j


def test_sample_points_shape():
    pts = sample_points(parse_path_data(SQUARE_D), samples_per_segment=4)
    assert pts.shape == (13, 2)
    np.testing.assert_allclose(pts[0], [0.0, 0.0])
    np.testing.assert_allclose(pts[-1], [0.0, 0.0])


def test_sample_points_empty():
    assert sample_points([]).shape == (0, 2)
    assert sample_points(parse_path_data("M3 3")).shape == (0, 2)


def test_sample_points_rejects_zero_samples():
    with pytest.raises(ValueError):
        sample_points(parse_path_data(SQUARE_D), samples_per_segment=0)


def test_windings_outer_and_counter():
    assert contour_windings(parse_path_data(GLYPH_D)) == [1, -1]


def test_flip_y_reverses_winding():
    d = "M0 0 L10 0 L10 10 L0 10 Z"
    assert contour_windings(parse_path_data(d)) == [1]
    assert contour_windings(parse_path_data(d, flip_y=True)) == [-1]


def test_bbox_of_curve():
    bb = path_bbox(parse_path_data("M0 0 C0 10 10 10 10 0"))
    assert bb == pytest.approx((0.0, 0.0, 10.0, 7.5))


def test_bbox_moves_only():
    assert path_bbox(parse_path_data("M5 5")) == (5.0, 5.0, 5.0, 5.0)
