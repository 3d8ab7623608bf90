"""F.03 — Eyes.

Each eye is an ellipse fill (the divisor squashes it vertically) with a
small highlight arc drawn on top, centered on the eye.
"""

from __future__ import annotations

from app.curves.presets import EYE_CENTERS, EYE_DIVISOR, EYE_HIGHLIGHT, EYE_RADIUS
from app.engine.context import SceneContext
from app.engine.plots import arc_plot, disc_plot
from app.engine.registry import Scene, plot_builder


@plot_builder(id="F.03", scene=Scene.FACE, dependencies=["F.02"], description="Eyes with highlights")
def eyes(ctx: SceneContext) -> None:
    for side, center in zip(("right", "left"), EYE_CENTERS):
        ctx.add(disc_plot(
            f"face.eye.{side}",
            "eye",
            EYE_RADIUS,
            center,
            ctx.config.area_samples,
            divisor=EYE_DIVISOR,
        ))
        ctx.add(arc_plot(
            f"face.eye.{side}.highlight",
            "highlight",
            EYE_HIGHLIGHT,
            ctx.config.arc_samples,
            offset=center,
        ))
