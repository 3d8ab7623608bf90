"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

# Widest angle sweep a request may ask for; the extremum search samples every 0.1°
MAX_SWEEP_DEGREES = 3600.0


class PointModel(BaseModel):
    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)


class CurveConfigModel(BaseModel):
    center: PointModel = Field(default_factory=lambda: PointModel(x=0.0, y=0.0))
    size: float = Field(
        default=1.0, allow_inf_nan=False, description="Rose amplitude a in r = a·sin(kθ)"
    )
    frequency: float = Field(default=1.0, allow_inf_nan=False, description="Rose parameter k")
    scale_y: float = Field(default=1.0, allow_inf_nan=False)
    shear: float = Field(default=0.0, allow_inf_nan=False)
    rotation: float = Field(default=0.0, allow_inf_nan=False, description="Rotation in radians")
    spread: float = Field(
        default=0.0, allow_inf_nan=False, description="Horizontal spread coefficient"
    )


def _check_sweep(start: float | None, end: float | None) -> None:
    if start is not None and end is not None and end - start > MAX_SWEEP_DEGREES:
        raise ValueError(f"angle sweep wider than {MAX_SWEEP_DEGREES} degrees")


class RoseRequest(BaseModel):
    config: CurveConfigModel
    start_angle: float = Field(default=0.0, allow_inf_nan=False)
    end_angle: float = Field(default=360.0, allow_inf_nan=False)
    samples: int = Field(default=240, ge=2, le=10000)

    @model_validator(mode="after")
    def _bounded_sweep(self) -> RoseRequest:
        _check_sweep(self.start_angle, self.end_angle)
        return self


class ExtremumRequest(BaseModel):
    config: CurveConfigModel
    start_angle: float = Field(..., allow_inf_nan=False, description="Sweep start (degrees)")
    end_angle: float = Field(..., allow_inf_nan=False, description="Sweep end (degrees), inclusive")

    @model_validator(mode="after")
    def _bounded_sweep(self) -> ExtremumRequest:
        _check_sweep(self.start_angle, self.end_angle)
        return self


class StemRequest(BaseModel):
    origin: PointModel
    endpoint: PointModel
    wave_amplitude: float = Field(default=0.0, allow_inf_nan=False)
    samples: int = Field(default=120, ge=2, le=10000)


class LeafRequest(BaseModel):
    flower: str = Field(..., description="Preset plant name: pink or yellow")
    start_angle: float | None = Field(
        default=None, allow_inf_nan=False, description="Defaults to the preset leaf domain"
    )
    end_angle: float | None = Field(default=None, allow_inf_nan=False)
    samples: int = Field(default=120, ge=2, le=2000)

    @model_validator(mode="after")
    def _bounded_sweep(self) -> LeafRequest:
        _check_sweep(self.start_angle, self.end_angle)
        return self


class CircleRequest(BaseModel):
    radius: float = Field(..., gt=0, allow_inf_nan=False)
    center: PointModel = Field(default_factory=lambda: PointModel(x=0.0, y=0.0))
    divisor: float = Field(
        default=1.0, gt=0, allow_inf_nan=False, description="Ellipse squash factor; 1 = circle"
    )
    samples: int = Field(default=180, ge=2, le=10000)
