"""M.01 — Pixel mosaic cells from CSV."""

from __future__ import annotations

from app.engine.context import PlotData, SceneContext
from app.engine.registry import Scene, plot_builder
from app.mosaic.loader import load_pixels


@plot_builder(id="M.01", scene=Scene.MOSAIC, description="Mosaic cells loaded from CSV")
def pixels(ctx: SceneContext) -> None:
    path = ctx.inputs.get("mosaic_path")
    if path is None:
        raise ValueError("mosaic_path input is required")
    cells = load_pixels(path)
    ctx.add(PlotData(
        id="mosaic.pixels",
        kind="cells",
        role="pixel",
        cells=cells,
        meta={"source": str(path)},
    ))
