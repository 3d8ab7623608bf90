"""F.04 — Mouth: a thick lower arc, a thin inner arc and two dimples."""

from __future__ import annotations

from app.curves.presets import DIMPLE_LEFT, DIMPLE_RIGHT, MOUTH_MAIN, MOUTH_SUB
from app.engine.context import SceneContext
from app.engine.plots import arc_plot
from app.engine.registry import Scene, plot_builder


@plot_builder(id="F.04", scene=Scene.FACE, dependencies=["F.03"], description="Mouth and dimples")
def mouth(ctx: SceneContext) -> None:
    cfg = ctx.config
    ctx.add(arc_plot("face.mouth.main", "mouth", MOUTH_MAIN, cfg.line_samples))
    ctx.add(arc_plot("face.mouth.sub", "mouth", MOUTH_SUB, cfg.line_samples))
    ctx.add(arc_plot("face.dimple.left", "dimple", DIMPLE_LEFT, cfg.arc_samples))
    ctx.add(arc_plot("face.dimple.right", "dimple", DIMPLE_RIGHT, cfg.arc_samples))
