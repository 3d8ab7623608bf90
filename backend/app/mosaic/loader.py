"""Pixel-mosaic CSV loader.

Format: header row, then ``x,y,r,g,b`` per cell with integer grid coordinates
and 0-255 channel values. Bad rows are dropped, never fatal.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_COLUMNS = 5
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class PixelCell:
    x: int
    y: int
    # Channels normalized to 0-1
    r: float
    g: float
    b: float
    # Position among data rows (header excluded, dropped rows still counted)
    index: int


def parse_pixel_row(line: str, index: int) -> PixelCell | None:
    """Parse one data row, or None if it is malformed."""
    columns = line.split(",")
    if len(columns) != _COLUMNS:
        return None
    # No surrounding whitespace, digit separators or inf/nan spellings
    if not all(_INT_RE.fullmatch(c) for c in columns[:2]):
        return None
    if not all(_FLOAT_RE.fullmatch(c) for c in columns[2:]):
        return None
    x, y = int(columns[0]), int(columns[1])
    r, g, b = (float(c) for c in columns[2:])
    return PixelCell(x=x, y=y, r=r / 255.0, g=g / 255.0, b=b / 255.0, index=index)


def parse_pixels(content: str) -> list[PixelCell]:
    cells: list[PixelCell] = []
    skipped = 0
    for index, line in enumerate(content.splitlines()[1:]):
        cell = parse_pixel_row(line, index)
        if cell is None:
            skipped += 1
            continue
        cells.append(cell)
    if skipped:
        logger.debug("Mosaic CSV: skipped %d malformed rows", skipped)
    return cells


def load_pixels(path: str | Path) -> list[PixelCell]:
    """Load mosaic cells from ``path``. Unreadable files give an empty list."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Mosaic CSV %s not readable: %s", path, e)
        return []
    cells = parse_pixels(content)
    logger.info("Loaded mosaic: %d cells from %s", len(cells), path)
    return cells
