"""SceneContext → SceneModel for the API."""

from __future__ import annotations

from app.engine.context import PlotData, SceneContext
from app.models.scene import CellModel, PlotModel, SceneModel


def _round(values: list[float], ndigits: int | None) -> tuple[float, ...]:
    if ndigits is None:
        return tuple(float(v) for v in values)
    return tuple(round(float(v), ndigits) for v in values)


def plot_to_model(plot: PlotData, ndigits: int | None = None) -> PlotModel:
    model = PlotModel(
        id=plot.id,
        kind=plot.kind,
        role=plot.role,
        bbox=plot.bbox,
        area=plot.area,
        meta=dict(plot.meta),
    )
    if plot.kind == "line":
        model.points = [_round(row, ndigits) for row in plot.data.tolist()]
    elif plot.kind == "area":
        model.bands = [_round(row, ndigits) for row in plot.data.tolist()]
    else:
        model.cells = [
            CellModel(x=c.x, y=c.y, r=c.r, g=c.g, b=c.b, index=c.index) for c in plot.cells
        ]
    return model


def context_to_scene(ctx: SceneContext, ndigits: int | None = None) -> SceneModel:
    return SceneModel(
        scene=ctx.scene,
        plots=[plot_to_model(p, ndigits) for p in ctx.plots],
        bounds=ctx.bounds,
        errors=dict(ctx.errors),
    )
