"""F.02 — Cheek accents, left then right."""

from __future__ import annotations

from app.curves.presets import CHEEK_CENTERS, CHEEK_RADIUS
from app.engine.context import SceneContext
from app.engine.plots import disc_plot
from app.engine.registry import Scene, plot_builder


@plot_builder(id="F.02", scene=Scene.FACE, dependencies=["F.01"], description="Cheek discs")
def cheeks(ctx: SceneContext) -> None:
    for side, center in zip(("left", "right"), CHEEK_CENTERS):
        ctx.add(disc_plot(f"face.cheek.{side}", "cheek", CHEEK_RADIUS, center, ctx.config.area_samples))
