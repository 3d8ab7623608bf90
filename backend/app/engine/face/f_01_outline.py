"""F.01 — Face disc."""

from __future__ import annotations

from app.curves.presets import FACE_RADIUS
from app.curves.primitives import Point2D
from app.engine.context import SceneContext
from app.engine.plots import disc_plot
from app.engine.registry import Scene, plot_builder


@plot_builder(id="F.01", scene=Scene.FACE, description="Face outline disc")
def face_outline(ctx: SceneContext) -> None:
    ctx.add(disc_plot("face.outline", "face", FACE_RADIUS, Point2D(0.0, 0.0), ctx.config.area_samples))
