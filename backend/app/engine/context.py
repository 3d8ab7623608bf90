"""SceneContext: the mutable state a scene's plot builders append to.

Each builder contributes one or more PlotData entries; the list order is the
drawing order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from app.engine.config import SamplingConfig
from app.utils.geometry import band_bbox, band_polygon, bbox, line_polygon, merge_bboxes

PLOT_KINDS = ("line", "area", "cells")


@dataclass
class PlotData:
    """One drawable plot."""

    id: str
    # "line" → Nx2 (x, y); "area" → Nx3 (x, y_start, y_end); "cells" → list of cells
    kind: str
    # What the plot depicts: stem, petals, leaf, ground, face, eye, ...
    role: str
    data: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    cells: list[Any] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.kind not in PLOT_KINDS:
            raise ValueError(f"Unknown plot kind: {self.kind}")

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        if self.kind == "line":
            return bbox(self.data)
        if self.kind == "area":
            return band_bbox(self.data)
        if not self.cells:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [c.x for c in self.cells]
        ys = [c.y for c in self.cells]
        return (float(min(xs)), float(min(ys)), float(max(xs)), float(max(ys)))

    @property
    def area(self) -> float:
        """Filled area. Open lines are 0; each mosaic cell counts as one unit."""
        if self.kind == "area":
            poly = band_polygon(self.data)
        elif self.kind == "line":
            poly = line_polygon(self.data)
        else:
            return float(len(self.cells))
        return float(poly.area) if poly is not None else 0.0

    @property
    def size(self) -> int:
        return len(self.cells) if self.kind == "cells" else len(self.data)


@dataclass
class SceneContext:
    """Shared state for building a single scene."""

    scene: str
    config: SamplingConfig = field(default_factory=SamplingConfig)
    # Inputs a builder may need beyond constants (e.g. mosaic_path)
    inputs: dict[str, Any] = field(default_factory=dict)
    plots: list[PlotData] = field(default_factory=list)

    completed_builders: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    def add(self, plot: PlotData) -> None:
        self.plots.append(plot)

    def get_plot(self, plot_id: str) -> PlotData | None:
        for plot in self.plots:
            if plot.id == plot_id:
                return plot
        return None

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return merge_bboxes([p.bbox for p in self.plots if p.size > 0])
