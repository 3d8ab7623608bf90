"""Immutable value types shared by every curve evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Point2D(NamedTuple):
    x: float
    y: float


class Band(NamedTuple):
    """Vertical interval at ``x``. No ordering between y_start and y_end."""

    x: float
    y_start: float
    y_end: float


@dataclass(frozen=True)
class CurveConfig:
    """Rose-curve parameters for one flower.

    ``frequency`` is k in r = a·sin(kθ); a non-integer k does not close after
    one turn. ``rotation`` is in radians. ``spread`` modulates x only.
    """

    center: Point2D = Point2D(0.0, 0.0)
    size: float = 1.0
    frequency: float = 1.0
    scale_y: float = 1.0
    shear: float = 0.0
    rotation: float = 0.0
    spread: float = 0.0
