"""Helpers shared by scene builders: sample an evaluator into a PlotData."""

from __future__ import annotations

from collections.abc import Callable

from app.curves.boundary import circle_band, circle_point
from app.curves.presets import FLOWER_DOMAIN, ArcSpec, PlantSpec
from app.curves.primitives import Band, Point2D
from app.curves.rose import (
    STEM_ORIGIN,
    evaluate_leaf,
    evaluate_rose,
    evaluate_stem,
    find_curve_extremum,
)
from app.curves.sampling import sample_bands, sample_points
from app.engine.config import SamplingConfig
from app.engine.context import PlotData


def line_plot(
    plot_id: str,
    role: str,
    fn: Callable[[float], Point2D],
    domain: tuple[float, float],
    count: int,
) -> PlotData:
    return PlotData(
        id=plot_id,
        kind="line",
        role=role,
        data=sample_points(fn, domain[0], domain[1], count),
        meta={"domain": list(domain)},
    )


def area_plot(
    plot_id: str,
    role: str,
    fn: Callable[[float], Band],
    domain: tuple[float, float],
    count: int,
) -> PlotData:
    return PlotData(
        id=plot_id,
        kind="area",
        role=role,
        data=sample_bands(fn, domain[0], domain[1], count),
        meta={"domain": list(domain)},
    )


def disc_plot(
    plot_id: str,
    role: str,
    radius: float,
    center: Point2D,
    count: int,
    divisor: float = 1.0,
) -> PlotData:
    """Filled circle (or ellipse) sampled across its full width."""
    plot = area_plot(
        plot_id,
        role,
        lambda x: circle_band(x, radius, divisor, center.x, center.y),
        (center.x - radius, center.x + radius),
        count,
    )
    plot.meta.update({"radius": radius, "center": list(center), "divisor": divisor})
    return plot


def arc_plot(
    plot_id: str,
    role: str,
    arc: ArcSpec,
    count: int,
    offset: Point2D = Point2D(0.0, 0.0),
) -> PlotData:
    """Circular arc shifted by the arc's own (dx, dy) plus ``offset``."""

    def point(angle: float) -> Point2D:
        p = circle_point(angle, arc.radius)
        return Point2D(p.x + arc.dx + offset.x, p.y + arc.dy + offset.y)

    return line_plot(plot_id, role, point, arc.domain, count)


def plant_plots(name: str, plant: PlantSpec, config: SamplingConfig) -> list[PlotData]:
    """Stem, flower and leaf plots for one plant, in drawing order."""
    endpoint = find_curve_extremum(
        plant.stem_domain[0], plant.stem_domain[1], plant.flower, step=config.extremum_step
    )

    stem = line_plot(
        f"{name}.stem",
        "stem",
        lambda t: evaluate_stem(STEM_ORIGIN, endpoint, t, plant.stem_wave),
        (0.0, 1.0),
        config.line_samples,
    )
    stem.meta["endpoint"] = list(endpoint)

    flower = line_plot(
        f"{name}.flower",
        "petals",
        lambda angle: evaluate_rose(angle, plant.flower),
        FLOWER_DOMAIN,
        config.line_samples,
    )

    leaf = line_plot(
        f"{name}.leaf",
        "leaf",
        lambda angle: evaluate_leaf(
            angle,
            plant.leaf_size,
            plant.leaf_scale,
            plant.leaf_attachment,
            plant.stem_wave,
            plant.stem_domain,
            plant.flower,
            step=config.extremum_step,
        ),
        plant.leaf_domain,
        config.line_samples,
    )
    return [stem, flower, leaf]
