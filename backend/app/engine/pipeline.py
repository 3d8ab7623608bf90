"""Scene pipeline: runs a scene's plot builders in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time
from typing import Any

from app.engine.config import SamplingConfig
from app.engine.context import SceneContext
from app.engine.registry import BuilderRegistry, Scene, get_registry

logger = logging.getLogger(__name__)

_SCENE_PACKAGES = ["garden", "face", "mosaic"]


class ScenePipeline:
    """Builds scenes from the registered plot builders."""

    def __init__(
        self,
        registry: BuilderRegistry | None = None,
        config: SamplingConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or SamplingConfig()

    def run(self, ctx: SceneContext) -> SceneContext:
        """Run every builder registered for ``ctx.scene``."""
        start = time.perf_counter()

        requested = {s.id for s in self.registry.get_scene(Scene(ctx.scene))}
        ordered = self.registry.resolve_order(requested)

        logger.info("Scene %s: %d builders queued", ctx.scene, len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_builders.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Scene %s complete: %d/%d builders, %d plots in %.0fms",
            ctx.scene,
            len(ctx.completed_builders),
            len(ordered),
            len(ctx.plots),
            total,
        )
        return ctx

    def build(self, scene: Scene | str, inputs: dict[str, Any] | None = None) -> SceneContext:
        ctx = SceneContext(
            scene=Scene(scene).value,
            config=self.config,
            inputs=dict(inputs or {}),
        )
        return self.run(ctx)


def register_builders() -> None:
    """Import all scene builder modules so @plot_builder decorators fire."""
    for package_short in _SCENE_PACKAGES:
        package_name = f"app.engine.{package_short}"
        try:
            package = importlib.import_module(package_name)
            for _, module_name, _ in pkgutil.iter_modules(package.__path__):
                importlib.import_module(f"{package_name}.{module_name}")
        except ModuleNotFoundError:
            logger.warning("Scene package %s not found", package_name)


def create_pipeline(config: SamplingConfig | None = None) -> ScenePipeline:
    """Factory function for creating a pipeline with all builders registered."""
    register_builders()
    return ScenePipeline(config=config)
