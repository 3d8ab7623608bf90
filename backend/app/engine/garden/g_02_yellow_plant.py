"""G.02 — Yellow plant (stem, four-k rose with spread and rotation, leaf)."""

from __future__ import annotations

from app.curves.presets import YELLOW_PLANT
from app.engine.context import SceneContext
from app.engine.plots import plant_plots
from app.engine.registry import Scene, plot_builder


@plot_builder(
    id="G.02",
    scene=Scene.GARDEN,
    dependencies=["G.01"],
    description="Yellow flower with stem and leaf",
)
def yellow_plant(ctx: SceneContext) -> None:
    for plot in plant_plots("yellow", YELLOW_PLANT, ctx.config):
        ctx.add(plot)
