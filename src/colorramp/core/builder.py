"""Factories for lookup-table color maps and input transforms."""

from __future__ import annotations

import math
from typing import Callable, Sequence

import numpy as np

from .._logging import logger
from .colormap import ColorMap, LookupColorMap, TransformedColorMap
from .validation import validate_anchor_colors, validate_steps


def build_table(steps: int, colors: Sequence) -> np.ndarray:
    """Interpolate ``colors`` into a (steps, 4) uint8 RGBA table.

    The anchors are spaced evenly over [0, 1]. Entry ``i`` sits at position
    ``i / (steps - 1)`` (0 when there is a single step) and takes each
    channel from the linear blend of the two surrounding anchors, truncated
    toward zero.

    Parameters
    ----------
    steps : int
        Number of table entries, at least 1.
    colors : sequence
        One or more anchor colors, anything ``Color.parse`` accepts.
    """
    steps = validate_steps(steps)
    anchors = validate_anchor_colors(colors)
    logger.debug("Building %d-step table over %d anchors", steps, len(anchors))

    rgba = np.array([c.to_tuple() for c in anchors], dtype=np.float64)
    if len(anchors) == 1:
        return np.repeat(rgba.astype(np.uint8), steps, axis=0)

    if steps == 1:
        positions = np.zeros(1)
    else:
        positions = np.arange(steps, dtype=np.float64) / (steps - 1)

    n_segments = len(anchors) - 1
    segment_width = 1.0 / n_segments
    segment = np.minimum(np.floor(positions / segment_width).astype(np.intp), n_segments - 1)
    following = np.minimum(n_segments, segment + 1)
    local = (positions - segment * segment_width) / segment_width

    start = rgba[segment]
    end = rgba[following]
    blended = np.trunc(start + local[:, np.newaxis] * (end - start))
    return np.clip(blended, 0, 255).astype(np.uint8)


def build_color_map(steps: int, colors: Sequence) -> LookupColorMap:
    """Create a color map interpolating ``colors`` in ``steps`` steps."""
    return LookupColorMap(build_table(steps, colors))


def with_transform(delegate: ColorMap, function: Callable[[float], float]) -> ColorMap:
    """Create a color map that converts its argument with ``function``
    before looking up the color in ``delegate``."""
    return TransformedColorMap(delegate, function)


def sine_transform(frequency: float) -> Callable[[float], float]:
    """``v -> 0.5 + 0.5 * sin(v * frequency)``"""
    frequency = float(frequency)

    def sine(value: float) -> float:
        angle = value * frequency
        if math.isinf(angle):
            return math.nan
        return 0.5 + 0.5 * math.sin(angle)

    return sine


def with_sine(delegate: ColorMap, frequency: float) -> ColorMap:
    """Walk back and forth through ``delegate`` along a sine of ``frequency``."""
    return with_transform(delegate, sine_transform(frequency))


def range_transform(vmin: float, vmax: float) -> Callable[[float], float]:
    """Map ``[vmin, vmax]`` linearly onto [0, 1].

    A degenerate range (``vmin == vmax``) maps every value to the middle.
    """
    vmin = float(vmin)
    vmax = float(vmax)
    span = vmax - vmin

    def rescale(value: float) -> float:
        if span == 0:
            return 0.5
        return (value - vmin) / span

    return rescale


def with_range(delegate: ColorMap, vmin: float, vmax: float) -> ColorMap:
    """Read ``delegate`` over the data range ``[vmin, vmax]``."""
    return with_transform(delegate, range_transform(vmin, vmax))
