"""Plot builder registry: every plot is a standalone function registered via decorator.

Usage:
    @plot_builder(id="G.03", scene=Scene.GARDEN, dependencies=["G.02"])
    def yellow_flower(ctx: SceneContext) -> None:
        ctx.add(PlotData(id="yellow.flower", kind="line", role="petals", data=...))

Dependencies fix drawing order: a builder's plots land after those of the
builders it depends on. Adding a plot = creating one file with the decorator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from app.engine.context import SceneContext

logger = logging.getLogger(__name__)


class Scene(str, enum.Enum):
    GARDEN = "garden"
    FACE = "face"
    MOSAIC = "mosaic"


@dataclass
class BuilderSpec:
    id: str
    scene: Scene
    fn: Callable[["SceneContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class BuilderRegistry:
    """Registry of plot builders, keyed by id."""

    def __init__(self) -> None:
        self._builders: dict[str, BuilderSpec] = {}

    def register(self, spec: BuilderSpec) -> None:
        if spec.id in self._builders:
            raise ValueError(f"Duplicate builder ID: {spec.id}")
        self._builders[spec.id] = spec
        logger.debug("Registered builder %s (%s)", spec.id, spec.scene.value)

    def get(self, builder_id: str) -> BuilderSpec:
        return self._builders[builder_id]

    def get_scene(self, scene: Scene) -> list[BuilderSpec]:
        specs = [s for s in self._builders.values() if s.scene == scene]
        return sorted(specs, key=lambda s: s.id)

    def scenes(self) -> list[Scene]:
        present = {s.scene for s in self._builders.values()}
        return [scene for scene in Scene if scene in present]

    def all(self) -> list[BuilderSpec]:
        return sorted(self._builders.values(), key=lambda s: (s.scene.value, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[BuilderSpec]:
        """Topological sort respecting dependencies. If requested_ids is None, run all."""
        pool = self._builders
        if requested_ids is not None:
            expanded: set[str] = set()
            stack = list(requested_ids)
            while stack:
                bid = stack.pop()
                if bid in expanded:
                    continue
                expanded.add(bid)
                spec = pool.get(bid)
                if spec:
                    stack.extend(spec.dependencies)
            pool = {k: v for k, v in pool.items() if k in expanded}

        # Kahn's algorithm, ties broken by id
        in_degree: dict[str, int] = {bid: 0 for bid in pool}
        for bid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[bid] += 1

        queue = sorted([bid for bid, d in in_degree.items() if d == 0])
        ordered: list[BuilderSpec] = []

        while queue:
            bid = queue.pop(0)
            ordered.append(pool[bid])
            for other_id, other_spec in pool.items():
                if bid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._builders)


# Module-level singleton
_registry = BuilderRegistry()


def get_registry() -> BuilderRegistry:
    return _registry


def plot_builder(
    *,
    id: str,
    scene: Scene,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a plot builder function."""

    def decorator(fn: Callable[["SceneContext"], None]):
        spec = BuilderSpec(
            id=id,
            scene=scene,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
