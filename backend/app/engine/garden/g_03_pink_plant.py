"""G.03 — Pink plant, drawn over the yellow one."""

from __future__ import annotations

from app.curves.presets import PINK_PLANT
from app.engine.context import SceneContext
from app.engine.plots import plant_plots
from app.engine.registry import Scene, plot_builder


@plot_builder(
    id="G.03",
    scene=Scene.GARDEN,
    dependencies=["G.02"],
    description="Pink flower with stem and leaf",
)
def pink_plant(ctx: SceneContext) -> None:
    for plot in plant_plots("pink", PINK_PLANT, ctx.config):
        ctx.add(plot)
