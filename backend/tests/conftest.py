"""Shared test fixtures."""

from __future__ import annotations

import pytest

from app.engine.config import SamplingConfig


# Small mosaic with one row of each kind of defect
MOSAIC_CSV = """x,y,r,g,b
0,0,255,0,0
1,0,0,255,0
2,0,0,0
3,0,a,0,0
4,0,0,0,255,9
5,0,0,0,255
0,1,127.5,127.5,127.5
"""


@pytest.fixture
def mosaic_csv() -> str:
    return MOSAIC_CSV


@pytest.fixture
def mosaic_path(tmp_path):
    path = tmp_path / "pixels.csv"
    path.write_text(MOSAIC_CSV, encoding="utf-8")
    return path


@pytest.fixture
def fast_sampling() -> SamplingConfig:
    return SamplingConfig(line_samples=40, area_samples=30, arc_samples=8)
