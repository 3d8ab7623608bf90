"""Circle, ellipse and ground-line evaluators."""

from __future__ import annotations

import math

from app.curves.primitives import Band, Point2D


def circle_boundary_y(
    x: float,
    radius: float,
    divisor: float = 1.0,
    center_x: float = 0.0,
    center_y: float = 0.0,
    upper: bool = True,
) -> float:
    """Upper or lower boundary of a circle (divisor=1) or squashed ellipse.

    The radicand is clamped at 0 so samples at or just past the rim return
    ``center_y`` instead of NaN.
    """
    dx = x - center_x
    sign = 1.0 if upper else -1.0
    return sign * math.sqrt(max(0.0, radius * radius - dx * dx) / divisor) + center_y


def circle_band(
    x: float,
    radius: float,
    divisor: float = 1.0,
    center_x: float = 0.0,
    center_y: float = 0.0,
) -> Band:
    """Filled slice of a disc at ``x``: upper boundary to lower boundary."""
    return Band(
        x,
        circle_boundary_y(x, radius, divisor, center_x, center_y, upper=True),
        circle_boundary_y(x, radius, divisor, center_x, center_y, upper=False),
    )


def circle_point(angle_degrees: float, radius: float) -> Point2D:
    rad = angle_degrees * math.pi / 180.0
    return Point2D(radius * math.cos(rad), radius * math.sin(rad))


def s_curve_y(t: float) -> float:
    """Odd S-shaped profile: 2·(sin t + atan t)."""
    return 2 * (math.sin(t) + math.atan(t))
