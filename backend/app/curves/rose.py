"""Rose-curve flowers, their stems and leaves.

A flower is a rhodonea curve r = a·sin(kθ) warped by spread, rotation,
vertical scale and shear. Its stem runs from a fixed origin to the lowest
sampled point of a petal sweep, and each leaf is a small k=5 rose pinned to a
point along that stem.
"""

from __future__ import annotations

import math

from app.curves.primitives import CurveConfig, Point2D
from app.curves.sampling import stride_through

# Every stem grows from the same point on the ground line.
STEM_ORIGIN = Point2D(0.0, -35.0)

EXTREMUM_STEP = 0.1
LEAF_FREQUENCY = 5.0


class EmptyDomainError(ValueError):
    """An angle sweep produced no samples (start > end)."""


def evaluate_rose(angle_degrees: float, config: CurveConfig) -> Point2D:
    """Point on the configured rose curve at ``angle_degrees``.

    Order matters: spread, then rotation, then vertical scale, then shear
    against the scaled y, then translation.
    """
    rad = angle_degrees * math.pi / 180
    r = config.size * math.sin(config.frequency * rad)
    x = r * math.cos(rad)
    y = r * math.sin(rad)

    if config.spread != 0:
        x *= 1.0 + config.spread * math.cos(2 * rad)

    if config.rotation != 0:
        ca = math.cos(config.rotation)
        sa = math.sin(config.rotation)
        x, y = x * ca - y * sa, x * sa + y * ca

    y *= config.scale_y
    x += config.shear * y

    return Point2D(x + config.center.x, y + config.center.y)


def find_curve_extremum(
    start_angle: float,
    end_angle: float,
    config: CurveConfig,
    step: float = EXTREMUM_STEP,
) -> Point2D:
    """Lowest point of the rose over [start_angle, end_angle].

    Ties on the exact minimum y resolve to the last sample in sweep order,
    matching a stable descending sort by y followed by taking the tail.
    """
    lowest: Point2D | None = None
    for angle in stride_through(start_angle, end_angle, step):
        pt = evaluate_rose(angle, config)
        if lowest is None or pt.y <= lowest.y:
            lowest = pt
    if lowest is None:
        raise EmptyDomainError(
            f"No samples in angle domain [{start_angle}, {end_angle}]"
        )
    return lowest


def evaluate_stem(
    origin: Point2D,
    endpoint: Point2D,
    t: float,
    wave_amplitude: float,
) -> Point2D:
    """Linear interpolation with a sin(tπ) sway on x only."""
    # sin(π) is ~1.2e-16 and a + (b - a) can round; pin the ends exactly.
    if t == 0:
        return Point2D(origin.x, origin.y)
    if t == 1:
        return Point2D(endpoint.x, endpoint.y)
    x = origin.x + (endpoint.x - origin.x) * t
    y = origin.y + (endpoint.y - origin.y) * t
    return Point2D(x + wave_amplitude * math.sin(t * math.pi), y)


def evaluate_leaf(
    angle_degrees: float,
    size: float,
    vertical_scale: float,
    attachment_t: float,
    wave_amplitude: float,
    stem_domain: tuple[float, float],
    config: CurveConfig,
    step: float = EXTREMUM_STEP,
) -> Point2D:
    """Leaf point: an unsheared k=5 rose translated onto the flower's stem."""
    rad = angle_degrees * math.pi / 180
    r = size * math.sin(LEAF_FREQUENCY * rad)
    x = r * math.cos(rad)
    y = r * math.sin(rad) * vertical_scale

    endpoint = find_curve_extremum(stem_domain[0], stem_domain[1], config, step)
    anchor = evaluate_stem(STEM_ORIGIN, endpoint, attachment_t, wave_amplitude)
    return Point2D(x + anchor.x, y + anchor.y)
