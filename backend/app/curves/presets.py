"""Hand-tuned drawing constants for the garden and face scenes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from app.curves.primitives import CurveConfig, Point2D

PINK_FLOWER = CurveConfig(
    center=Point2D(40.0, 35.0),
    size=40.0,
    frequency=6.0,
    scale_y=0.45,
    shear=-0.4,
    rotation=0.0,
    spread=0.0,
)

YELLOW_FLOWER = CurveConfig(
    center=Point2D(-35.0, 20.0),
    size=35.0,
    frequency=4.0,
    scale_y=0.3,
    shear=0.5,
    rotation=math.pi / 4,
    spread=0.3,
)


@dataclass(frozen=True)
class PlantSpec:
    """Stem and leaf placement for one flower."""

    flower: CurveConfig
    # Petal sweep searched for the stem's attachment point (degrees)
    stem_domain: tuple[float, float]
    stem_wave: float
    leaf_domain: tuple[float, float]
    leaf_size: float
    leaf_scale: float = 0.5
    # Fraction along the stem where the leaf is pinned
    leaf_attachment: float = 0.45


PINK_PLANT = PlantSpec(
    flower=PINK_FLOWER,
    stem_domain=(60.0, 90.0),
    stem_wave=-6.0,
    leaf_domain=(0.0, 36.0),
    leaf_size=55.0,
)

YELLOW_PLANT = PlantSpec(
    flower=YELLOW_FLOWER,
    stem_domain=(46.0, 90.0),
    stem_wave=6.0,
    leaf_domain=(144.0, 180.0),
    leaf_size=40.0,
)

# Flower rose curves close after one full turn.
FLOWER_DOMAIN = (0.0, 360.0)


@dataclass(frozen=True)
class GroundSpec:
    baseline: float = -35.0
    floor: float = -50.0
    x_scale: float = 30.0
    band_domain: tuple[float, float] = (-90.0, 90.0)
    outline_domain: tuple[float, float] = (-3.0, 3.0)


GROUND = GroundSpec()


@dataclass(frozen=True)
class ArcSpec:
    """Segment of a circle about the origin, shifted by (dx, dy)."""

    radius: float
    domain: tuple[float, float]
    dx: float = 0.0
    dy: float = 0.0


FACE_RADIUS = 70.0
CHEEK_RADIUS = 25.0
CHEEK_CENTERS = (Point2D(-45.0, -5.0), Point2D(45.0, -5.0))
EYE_RADIUS = 12.0
EYE_DIVISOR = 1.0
EYE_CENTERS = (Point2D(23.0, 15.0), Point2D(-23.0, 15.0))
EYE_HIGHLIGHT = ArcSpec(radius=6.0, domain=(110.0, 150.0))
MOUTH_MAIN = ArcSpec(radius=40.0, domain=(215.0, 325.0), dy=5.0)
MOUTH_SUB = ArcSpec(radius=40.0, domain=(218.0, 322.0), dy=4.0)
DIMPLE_LEFT = ArcSpec(radius=45.0, domain=(38.0, 46.0), dy=-48.0)
DIMPLE_RIGHT = ArcSpec(radius=45.0, domain=(134.0, 142.0), dy=-48.0)
