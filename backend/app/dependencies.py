"""FastAPI dependency injection."""

from __future__ import annotations

from app.config import Settings, settings
from app.engine.pipeline import ScenePipeline, create_pipeline


def get_settings() -> Settings:
    return settings


def get_pipeline() -> ScenePipeline:
    return create_pipeline()
