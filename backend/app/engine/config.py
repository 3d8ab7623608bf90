"""Sampling configuration for scene builders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SamplingConfig:
    """Controls how densely each plot is sampled."""

    # Samples per line plot (inclusive of both domain ends)
    line_samples: int = 240
    # Samples per filled area plot
    area_samples: int = 180
    # Short arcs (dimples, highlights) need fewer points
    arc_samples: int = 24

    # Angle step for the stem attachment search (degrees)
    extremum_step: float = 0.1
