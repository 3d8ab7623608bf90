"""POST /api/curves/*: sample individual curves with caller-supplied parameters."""

from __future__ import annotations

from functools import partial

from fastapi import APIRouter, HTTPException

from app.curves.boundary import circle_band
from app.curves.presets import GROUND, PINK_PLANT, YELLOW_PLANT
from app.curves.primitives import CurveConfig, Point2D
from app.curves.rose import (
    EXTREMUM_STEP,
    evaluate_leaf,
    evaluate_rose,
    evaluate_stem,
    find_curve_extremum,
)
from app.curves.sampling import sample_bands, sample_points, stride_through
from app.engine.garden.g_01_ground import ground_band, ground_outline
from app.models.requests import (
    CircleRequest,
    CurveConfigModel,
    ExtremumRequest,
    LeafRequest,
    PointModel,
    RoseRequest,
    StemRequest,
)
from app.models.responses import BandResponse, CurveResponse, ExtremumResponse, GroundResponse
from app.utils.geometry import band_bbox, bbox, is_closed, path_length

router = APIRouter(prefix="/curves")

_PLANTS = {"pink": PINK_PLANT, "yellow": YELLOW_PLANT}


def _to_config(model: CurveConfigModel) -> CurveConfig:
    return CurveConfig(
        center=Point2D(model.center.x, model.center.y),
        size=model.size,
        frequency=model.frequency,
        scale_y=model.scale_y,
        shear=model.shear,
        rotation=model.rotation,
        spread=model.spread,
    )


def _curve_response(points) -> CurveResponse:
    return CurveResponse(
        points=[tuple(p) for p in points.tolist()],
        closed=is_closed(points),
        length=path_length(points),
        bbox=bbox(points),
    )


def _band_response(bands) -> BandResponse:
    return BandResponse(bands=[tuple(b) for b in bands.tolist()], bbox=band_bbox(bands))


@router.post("/rose", response_model=CurveResponse)
async def rose(req: RoseRequest) -> CurveResponse:
    if req.start_angle > req.end_angle:
        raise HTTPException(status_code=422, detail="start_angle must not exceed end_angle")
    config = _to_config(req.config)
    points = sample_points(
        lambda angle: evaluate_rose(angle, config), req.start_angle, req.end_angle, req.samples
    )
    return _curve_response(points)


@router.post("/extremum", response_model=ExtremumResponse)
async def extremum(req: ExtremumRequest) -> ExtremumResponse:
    config = _to_config(req.config)
    try:
        point = find_curve_extremum(req.start_angle, req.end_angle, config)
        samples = sum(1 for _ in stride_through(req.start_angle, req.end_angle, EXTREMUM_STEP))
    except ValueError as e:
        # EmptyDomainError included
        raise HTTPException(status_code=422, detail=str(e)) from e
    return ExtremumResponse(point=PointModel(x=point.x, y=point.y), samples=samples)


@router.post("/stem", response_model=CurveResponse)
async def stem(req: StemRequest) -> CurveResponse:
    origin = Point2D(req.origin.x, req.origin.y)
    endpoint = Point2D(req.endpoint.x, req.endpoint.y)
    points = sample_points(
        lambda t: evaluate_stem(origin, endpoint, t, req.wave_amplitude), 0.0, 1.0, req.samples
    )
    return _curve_response(points)


@router.post("/leaf", response_model=CurveResponse)
async def leaf(req: LeafRequest) -> CurveResponse:
    plant = _PLANTS.get(req.flower)
    if plant is None:
        raise HTTPException(status_code=404, detail=f"Unknown flower: {req.flower}")
    start = plant.leaf_domain[0] if req.start_angle is None else req.start_angle
    end = plant.leaf_domain[1] if req.end_angle is None else req.end_angle
    if start > end:
        raise HTTPException(status_code=422, detail="start_angle must not exceed end_angle")

    fn = partial(
        evaluate_leaf,
        size=plant.leaf_size,
        vertical_scale=plant.leaf_scale,
        attachment_t=plant.leaf_attachment,
        wave_amplitude=plant.stem_wave,
        stem_domain=plant.stem_domain,
        config=plant.flower,
    )
    return _curve_response(sample_points(fn, start, end, req.samples))


@router.post("/circle", response_model=BandResponse)
async def circle(req: CircleRequest) -> BandResponse:
    cx, cy = req.center.x, req.center.y
    bands = sample_bands(
        lambda x: circle_band(x, req.radius, req.divisor, cx, cy),
        cx - req.radius,
        cx + req.radius,
        req.samples,
    )
    return _band_response(bands)


@router.get("/ground", response_model=GroundResponse)
async def ground(samples: int = 180) -> GroundResponse:
    if samples < 2:
        raise HTTPException(status_code=422, detail="samples must be at least 2")
    fill = sample_bands(ground_band, GROUND.band_domain[0], GROUND.band_domain[1], samples)
    outline = sample_points(
        ground_outline, GROUND.outline_domain[0], GROUND.outline_domain[1], samples
    )
    return GroundResponse(fill=_band_response(fill), outline=_curve_response(outline))
