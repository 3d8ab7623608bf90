"""Domain sampling: turns scalar evaluators into ordered point/band arrays."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator

import numpy as np
from numpy.typing import NDArray

from app.curves.primitives import Band, Point2D


def stride_through(start: float, end: float, step: float) -> Iterator[float]:
    """Yield ``start + i * step`` up to and including ``end``.

    Values are computed by multiplication, not accumulation, and the sweep
    stops at the first value past ``end``. Yields nothing when start > end.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if not (math.isfinite(start) and math.isfinite(end)):
        raise ValueError(f"stride bounds must be finite, got {start}..{end}")
    i = 0
    value = start
    while value <= end:
        yield value
        i += 1
        value = start + i * step


def sample_domain(start: float, end: float, count: int) -> NDArray[np.float64]:
    """``count`` evenly spaced parameters covering [start, end] inclusive."""
    if count < 2:
        raise ValueError(f"count must be at least 2, got {count}")
    return np.linspace(start, end, count)


def sample_points(
    fn: Callable[[float], Point2D],
    start: float,
    end: float,
    count: int,
) -> NDArray[np.float64]:
    """Evaluate ``fn`` over the domain. Returns Nx2 (x, y) in parameter order."""
    params = sample_domain(start, end, count)
    return np.array([tuple(fn(float(t))) for t in params], dtype=np.float64)


def sample_bands(
    fn: Callable[[float], Band],
    start: float,
    end: float,
    count: int,
) -> NDArray[np.float64]:
    """Evaluate ``fn`` over the domain. Returns Nx3 (x, y_start, y_end)."""
    params = sample_domain(start, end, count)
    return np.array([tuple(fn(float(x))) for x in params], dtype=np.float64)
