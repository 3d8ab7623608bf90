"""ChartCanvas scene engine."""

from app.engine.context import PlotData, SceneContext
from app.engine.pipeline import ScenePipeline, create_pipeline
from app.engine.registry import Scene, get_registry, plot_builder

__all__ = [
    "PlotData",
    "Scene",
    "SceneContext",
    "ScenePipeline",
    "create_pipeline",
    "get_registry",
    "plot_builder",
]
