"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.requests import PointModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    builders_registered: int = 0


class SceneSummary(BaseModel):
    name: str
    plot_builders: list[str] = Field(default_factory=list)


class SceneListResponse(BaseModel):
    scenes: list[SceneSummary] = Field(default_factory=list)


class CurveResponse(BaseModel):
    points: list[tuple[float, float]] = Field(default_factory=list)
    closed: bool = False
    length: float = 0.0
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


class BandResponse(BaseModel):
    bands: list[tuple[float, float, float]] = Field(default_factory=list)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


class ExtremumResponse(BaseModel):
    point: PointModel
    samples: int = 0


class GroundResponse(BaseModel):
    fill: BandResponse
    outline: CurveResponse
