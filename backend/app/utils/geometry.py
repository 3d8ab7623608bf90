"""Leaf-node geometry helpers for sampled sequences. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.validation import make_valid


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box of Nx2 points."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def band_bbox(bands: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Bounding box of Nx3 (x, y_start, y_end) bands. Either y may be the larger."""
    if len(bands) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    ys = bands[:, 1:3]
    return (
        float(np.min(bands[:, 0])),
        float(np.min(ys)),
        float(np.max(bands[:, 0])),
        float(np.max(ys)),
    )


def merge_bboxes(
    boxes: list[tuple[float, float, float, float]],
) -> tuple[float, float, float, float]:
    if not boxes:
        return (0.0, 0.0, 0.0, 0.0)
    arr = np.array(boxes)
    return (
        float(np.min(arr[:, 0])),
        float(np.min(arr[:, 1])),
        float(np.max(arr[:, 2])),
        float(np.max(arr[:, 3])),
    )


def path_length(points: NDArray[np.float64]) -> float:
    """Total polyline length in sample order."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))


def is_closed(points: NDArray[np.float64], tol: float = 1e-6) -> bool:
    """True if the first and last samples coincide within ``tol``."""
    if len(points) < 3:
        return False
    return bool(np.linalg.norm(points[0] - points[-1]) <= tol)


def band_polygon(bands: NDArray[np.float64]) -> BaseGeometry | None:
    """Outline of a filled band region: y_start forward, then y_end back.

    Bands that cross over themselves are repaired with ``make_valid``.
    """
    if len(bands) < 2:
        return None
    upper = bands[:, [0, 1]]
    lower = bands[::-1][:, [0, 2]]
    ring = np.vstack([upper, lower])
    poly = Polygon(ring)
    if not poly.is_valid:
        poly = make_valid(poly)
    return poly


def line_polygon(points: NDArray[np.float64], tol: float = 1e-6) -> BaseGeometry | None:
    """Polygon for a closed polyline, or None if it does not close."""
    if not is_closed(points, tol) or len(points) < 4:
        return None
    poly = Polygon(points)
    if not poly.is_valid:
        poly = make_valid(poly)
    return poly
