"""Tests for rose flowers, stem search, stem interpolation and leaves."""

from __future__ import annotations

import math

import pytest

from app.curves.presets import PINK_FLOWER, PINK_PLANT, YELLOW_FLOWER, YELLOW_PLANT
from app.curves.primitives import CurveConfig, Point2D
from app.curves.rose import (
    STEM_ORIGIN,
    EmptyDomainError,
    evaluate_leaf,
    evaluate_rose,
    evaluate_stem,
    find_curve_extremum,
)
from app.curves.sampling import stride_through


def test_pink_rose_at_90_degrees_sits_on_center():
    # r = 40·sin(540°) = 0, so only the translation remains
    pt = evaluate_rose(90, PINK_FLOWER)
    assert pt.x == pytest.approx(40.0, abs=1e-9)
    assert pt.y == pytest.approx(35.0, abs=1e-9)


@pytest.mark.parametrize("config", [PINK_FLOWER, YELLOW_FLOWER])
def test_integer_frequency_closes(config: CurveConfig):
    start = evaluate_rose(0, config)
    end = evaluate_rose(360, config)
    assert end.x == pytest.approx(start.x, abs=1e-9)
    assert end.y == pytest.approx(start.y, abs=1e-9)


def test_zero_frequency_is_degenerate_center():
    cfg = CurveConfig(center=Point2D(3.0, -4.0), size=10.0, frequency=0.0, shear=0.7, spread=0.2)
    for angle in (0.0, 33.3, 90.0, 271.0):
        assert evaluate_rose(angle, cfg) == Point2D(3.0, -4.0)


def test_zero_scale_y_collapses_to_center_line():
    cfg = CurveConfig(center=Point2D(1.0, 2.0), size=10.0, frequency=3.0, scale_y=0.0, rotation=0.5)
    for angle in (10.0, 45.0, 120.0):
        assert evaluate_rose(angle, cfg).y == 2.0


def test_spread_warps_x_only():
    plain = CurveConfig(size=10.0, frequency=2.0)
    spread = CurveConfig(size=10.0, frequency=2.0, spread=0.3)
    angle = 30.0
    a = evaluate_rose(angle, plain)
    b = evaluate_rose(angle, spread)
    assert b.y == a.y
    assert b.x == pytest.approx(a.x * (1 + 0.3 * math.cos(math.radians(60))))


def test_rotation_applies_before_scale_and_shear():
    # Unit rose at 45°: raw (0.5, 0.5); a quarter turn gives (-0.5, 0.5)
    cfg = CurveConfig(size=1.0, frequency=1.0, rotation=math.pi / 2, scale_y=2.0)
    pt = evaluate_rose(45.0, cfg)
    assert pt.x == pytest.approx(-0.5)
    assert pt.y == pytest.approx(1.0)


def test_shear_uses_scaled_y():
    cfg = CurveConfig(size=1.0, frequency=1.0, scale_y=0.5, shear=2.0)
    pt = evaluate_rose(90.0, cfg)
    assert pt.y == pytest.approx(0.5)
    assert pt.x == pytest.approx(1.0)


def _brute_force_lowest(start: float, end: float, config: CurveConfig) -> Point2D:
    pts = []
    i = 0
    while start + i * 0.1 <= end:
        pts.append(evaluate_rose(start + i * 0.1, config))
        i += 1
    # Stable descending sort by y, take the tail
    return sorted(pts, key=lambda p: p.y, reverse=True)[-1]


@pytest.mark.parametrize(
    "domain, config",
    [
        ((60.0, 90.0), PINK_FLOWER),
        ((46.0, 90.0), YELLOW_FLOWER),
        ((0.0, 3.9), PINK_FLOWER),
        ((12.3, 47.7), YELLOW_FLOWER),
        ((0.0, 3.9), CurveConfig(size=1.0, frequency=1.0, scale_y=-1.0)),
    ],
)
def test_extremum_matches_brute_force(domain, config):
    found = find_curve_extremum(domain[0], domain[1], config)
    assert found == _brute_force_lowest(domain[0], domain[1], config)


def test_extremum_samples_both_ends():
    angles = list(stride_through(60.0, 90.0, 0.1))
    assert len(angles) == 301
    assert angles[0] == 60.0
    assert angles[-1] == pytest.approx(90.0)


def test_extremum_stays_inside_off_grid_domain():
    # y = -sin²θ falls across [0°, 90°], so the lowest sample is the last one
    cfg = CurveConfig(size=1.0, frequency=1.0, scale_y=-1.0)
    found = find_curve_extremum(0.0, 3.9, cfg)
    assert found == evaluate_rose(38 * 0.1, cfg)
    assert found.y > evaluate_rose(39 * 0.1, cfg).y


def test_extremum_tie_resolves_to_last_sample():
    # scale_y = 0 makes every sample share the same y
    cfg = CurveConfig(center=Point2D(1.0, 2.0), size=10.0, frequency=2.0, scale_y=0.0)
    last_angle = list(stride_through(0.0, 10.0, 0.1))[-1]
    found = find_curve_extremum(0.0, 10.0, cfg)
    assert found == evaluate_rose(last_angle, cfg)
    assert found != evaluate_rose(0.0, cfg)


def test_extremum_single_sample_domain():
    assert find_curve_extremum(45.0, 45.0, PINK_FLOWER) == evaluate_rose(45.0, PINK_FLOWER)


def test_extremum_empty_domain_raises():
    with pytest.raises(EmptyDomainError):
        find_curve_extremum(90.0, 60.0, PINK_FLOWER)
    assert issubclass(EmptyDomainError, ValueError)


@pytest.mark.parametrize("amp", [-6.0, 0.0, 6.0, 250.0])
def test_stem_passes_through_endpoints(amp: float):
    origin = Point2D(0.0, -35.0)
    endpoint = Point2D(-31.7, 18.9)
    assert evaluate_stem(origin, endpoint, 0.0, amp) == origin
    assert evaluate_stem(origin, endpoint, 1.0, amp) == endpoint


def test_stem_wave_moves_x_only():
    origin = Point2D(0.0, 0.0)
    endpoint = Point2D(10.0, 20.0)
    mid = evaluate_stem(origin, endpoint, 0.5, 4.0)
    assert mid.y == pytest.approx(10.0)
    assert mid.x == pytest.approx(5.0 + 4.0)

    quarter = evaluate_stem(origin, endpoint, 0.25, 4.0)
    assert quarter.y == pytest.approx(5.0)
    assert quarter.x == pytest.approx(2.5 + 4.0 * math.sin(math.pi / 4))


@pytest.mark.parametrize("plant", [PINK_PLANT, YELLOW_PLANT])
def test_leaf_is_pinned_to_stem(plant):
    endpoint = find_curve_extremum(plant.stem_domain[0], plant.stem_domain[1], plant.flower)
    anchor = evaluate_stem(STEM_ORIGIN, endpoint, plant.leaf_attachment, plant.stem_wave)
    # r = size·sin(0) = 0, so the leaf point is the anchor itself
    pt = evaluate_leaf(
        0.0,
        plant.leaf_size,
        plant.leaf_scale,
        plant.leaf_attachment,
        plant.stem_wave,
        plant.stem_domain,
        plant.flower,
    )
    assert pt == anchor


def test_leaf_ignores_flower_shear_and_rotation():
    args = dict(size=10.0, vertical_scale=0.5, attachment_t=0.0, wave_amplitude=3.0)
    cfg = YELLOW_FLOWER
    pt = evaluate_leaf(18.0, stem_domain=(46.0, 90.0), config=cfg, **args)
    # attachment_t = 0 anchors the leaf at the stem origin
    assert pt.x == pytest.approx(STEM_ORIGIN.x + 10.0 * math.cos(math.radians(18)))
    assert pt.y == pytest.approx(STEM_ORIGIN.y + 10.0 * math.sin(math.radians(18)) * 0.5)
