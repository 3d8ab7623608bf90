"""Tests for domain sampling and geometry summaries."""

from __future__ import annotations

import numpy as np
import pytest

from app.curves.boundary import circle_band
from app.curves.primitives import Point2D
from app.curves.rose import evaluate_rose
from app.curves.presets import PINK_FLOWER
from app.curves.sampling import sample_bands, sample_domain, sample_points, stride_through
from app.utils.geometry import (
    band_bbox,
    band_polygon,
    bbox,
    is_closed,
    line_polygon,
    merge_bboxes,
    path_length,
)


def test_stride_through_includes_end():
    assert list(stride_through(0.0, 1.0, 0.25)) == [0.0, 0.25, 0.5, 0.75, 1.0]


def test_stride_through_stops_before_overshoot():
    assert list(stride_through(0.0, 1.0, 0.3)) == pytest.approx([0.0, 0.3, 0.6, 0.9])


@pytest.mark.parametrize("start, end", [(0.0, 3.9), (0.0, 7.8), (0.0, 16.9), (12.3, 47.7)])
def test_stride_through_never_passes_end(start: float, end: float):
    angles = list(stride_through(start, end, 0.1))
    assert all(a <= end for a in angles)
    assert start + len(angles) * 0.1 > end


def test_stride_through_off_grid_end():
    angles = list(stride_through(0.0, 3.9, 0.1))
    assert len(angles) == 39
    assert angles[-1] == 38 * 0.1


def test_stride_through_rejects_non_finite_bounds():
    with pytest.raises(ValueError):
        list(stride_through(0.0, float("inf"), 0.1))
    with pytest.raises(ValueError):
        list(stride_through(float("nan"), 1.0, 0.1))


def test_stride_through_empty_when_reversed():
    assert list(stride_through(2.0, 1.0, 0.1)) == []


def test_stride_through_rejects_bad_step():
    with pytest.raises(ValueError):
        list(stride_through(0.0, 1.0, 0.0))
    with pytest.raises(ValueError):
        list(stride_through(0.0, 1.0, -0.1))


def test_sample_domain():
    params = sample_domain(-3.0, 3.0, 7)
    assert params.tolist() == [-3.0, -2.0, -1.0, 0.0, 1.0, 2.0, 3.0]
    with pytest.raises(ValueError):
        sample_domain(0.0, 1.0, 1)


def test_sample_points_preserves_order():
    pts = sample_points(lambda t: Point2D(t, 2 * t), 0.0, 1.0, 5)
    assert pts.shape == (5, 2)
    assert pts[:, 0].tolist() == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert pts[-1].tolist() == [1.0, 2.0]


def test_sample_bands_shape():
    bands = sample_bands(lambda x: circle_band(x, 1.0), -1.0, 1.0, 11)
    assert bands.shape == (11, 3)
    assert bands[0, 1] == pytest.approx(0.0)
    assert bands[5, 1] == pytest.approx(1.0)
    assert bands[5, 2] == pytest.approx(-1.0)


def test_flower_samples_close_and_cover_petals():
    pts = sample_points(lambda a: evaluate_rose(a, PINK_FLOWER), 0.0, 360.0, 241)
    assert is_closed(pts)
    xmin, ymin, xmax, ymax = bbox(pts)
    assert xmin < 40.0 < xmax
    assert ymin < 35.0 < ymax
    assert line_polygon(pts).area > 0


def test_path_length_and_open_line():
    pts = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 10.0]])
    assert path_length(pts) == pytest.approx(11.0)
    assert not is_closed(pts)
    assert line_polygon(pts) is None


def test_band_bbox_handles_either_order():
    bands = np.array([[0.0, -1.0, 2.0], [1.0, 5.0, -3.0]])
    assert band_bbox(bands) == (0.0, -3.0, 1.0, 5.0)


def test_band_polygon_area_of_disc():
    bands = sample_bands(lambda x: circle_band(x, 10.0), -10.0, 10.0, 400)
    assert band_polygon(bands).area == pytest.approx(np.pi * 100, rel=0.01)


def test_merge_bboxes():
    assert merge_bboxes([]) == (0.0, 0.0, 0.0, 0.0)
    assert merge_bboxes([(0, 0, 1, 1), (-2, 0.5, 0.5, 3)]) == (-2.0, 0.0, 1.0, 3.0)
