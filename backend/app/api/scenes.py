"""GET /api/scenes: prebuilt drawings as plot sequences."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from app.config import Settings
from app.dependencies import get_pipeline, get_settings
from app.engine.formatter import context_to_scene
from app.engine.pipeline import ScenePipeline
from app.engine.registry import Scene
from app.models.responses import SceneListResponse, SceneSummary
from app.models.scene import SceneModel

router = APIRouter(prefix="/scenes")


@router.get("", response_model=SceneListResponse)
async def list_scenes(pipeline: ScenePipeline = Depends(get_pipeline)) -> SceneListResponse:
    registry = pipeline.registry
    return SceneListResponse(
        scenes=[
            SceneSummary(name=scene.value, plot_builders=[s.id for s in registry.get_scene(scene)])
            for scene in registry.scenes()
        ]
    )


@router.get("/{name}", response_model=SceneModel)
async def get_scene(
    name: str,
    ndigits: int | None = Query(default=None, ge=0, le=12, description="Round coordinates"),
    pipeline: ScenePipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> SceneModel:
    try:
        scene = Scene(name)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown scene: {name}") from None

    ctx = pipeline.build(scene, inputs={"mosaic_path": settings.mosaic_csv_path})
    return context_to_scene(ctx, ndigits)
