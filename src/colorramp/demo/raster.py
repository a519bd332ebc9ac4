"""Rasterize color maps into RGBA images."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..core.colormap import ColorMap
from .strips import Strip


def render_strip(colormap: ColorMap, width: int, height: int) -> np.ndarray:
    """Paint ``colormap`` across ``width`` pixel columns.

    Column ``x`` gets ``colormap.get_color(x / (width - 1))`` and every row
    is identical. Returns a (height, width, 4) uint8 image.
    """
    if width < 1 or height < 1:
        raise ValueError(
            f"Strip size must be at least 1x1 pixels, got {width}x{height}."
        )
    columns = colormap.sample(width)  # (width, 4)
    return np.broadcast_to(columns, (height, width, 4)).copy()


def render_strips(
    strips: Sequence[Strip],
    width: int,
    strip_height: int,
) -> np.ndarray:
    """Stack one band per strip vertically, top to bottom."""
    if not strips:
        raise ValueError("No strips to render. Provide at least one Strip.")
    return np.concatenate(
        [render_strip(s.colormap, width, strip_height) for s in strips],
        axis=0,
    )
