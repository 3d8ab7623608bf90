"""Serialized scene model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CellModel(BaseModel):
    x: int
    y: int
    r: float
    g: float
    b: float
    index: int


class PlotModel(BaseModel):
    """One plot in drawing order.

    ``points`` holds (x, y) for line plots, ``bands`` holds
    (x, y_start, y_end) for area plots, ``cells`` holds mosaic cells.
    """

    id: str
    kind: str
    role: str
    points: list[tuple[float, float]] = Field(default_factory=list)
    bands: list[tuple[float, float, float]] = Field(default_factory=list)
    cells: list[CellModel] = Field(default_factory=list)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    area: float = 0.0
    meta: dict[str, Any] = Field(default_factory=dict)


class SceneModel(BaseModel):
    scene: str
    plots: list[PlotModel] = Field(default_factory=list)
    bounds: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    errors: dict[str, str] = Field(default_factory=dict)
