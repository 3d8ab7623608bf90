"""Closed-form curve evaluators for chart drawings."""

from app.curves.boundary import circle_band, circle_boundary_y, circle_point, s_curve_y
from app.curves.primitives import Band, CurveConfig, Point2D
from app.curves.rose import (
    EmptyDomainError,
    evaluate_leaf,
    evaluate_rose,
    evaluate_stem,
    find_curve_extremum,
)

__all__ = [
    "Band",
    "CurveConfig",
    "EmptyDomainError",
    "Point2D",
    "circle_band",
    "circle_boundary_y",
    "circle_point",
    "evaluate_leaf",
    "evaluate_rose",
    "evaluate_stem",
    "find_curve_extremum",
    "s_curve_y",
]
