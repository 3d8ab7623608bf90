"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

_DEFAULT_MOSAIC = Path(__file__).resolve().parent / "data" / "pixels.csv"


class Settings(BaseSettings):
    chartcanvas_env: str = "development"
    chartcanvas_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Pixel mosaic source
    mosaic_csv_path: str = str(_DEFAULT_MOSAIC)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
