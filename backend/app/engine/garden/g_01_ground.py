"""G.01 — Ground.

Filled band between the S-curve and a flat floor, plus the S-curve outline.
The band is sampled in chart x; the outline in the curve's own parameter t,
with x = x_scale * t.
"""

from __future__ import annotations

from app.curves.boundary import s_curve_y
from app.curves.presets import GROUND
from app.curves.primitives import Band, Point2D
from app.engine.context import SceneContext
from app.engine.plots import area_plot, line_plot
from app.engine.registry import Scene, plot_builder


def ground_band(x: float) -> Band:
    return Band(x, s_curve_y(x / GROUND.x_scale) + GROUND.baseline, GROUND.floor)


def ground_outline(t: float) -> Point2D:
    return Point2D(GROUND.x_scale * t, s_curve_y(t) + GROUND.baseline)


@plot_builder(
    id="G.01",
    scene=Scene.GARDEN,
    description="Ground fill and S-curve outline",
)
def ground(ctx: SceneContext) -> None:
    cfg = ctx.config
    ctx.add(area_plot("ground.fill", "ground", ground_band, GROUND.band_domain, cfg.area_samples))
    ctx.add(
        line_plot("ground.outline", "ground", ground_outline, GROUND.outline_domain, cfg.line_samples)
    )
