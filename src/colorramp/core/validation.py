"""Input validation with clear error messages."""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np


def validate_channel(value: Any, name: str) -> int:
    """Validate one 8-bit color channel and return it as a plain int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(
            f"Color channel '{name}' must be an integer in [0, 255], "
            f"got {type(value).__name__}."
        )
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(
            f"Color channel '{name}' must be in [0, 255], got {value}."
        )
    return value


def validate_steps(steps: Any, minimum: int = 1, name: str = "steps") -> int:
    """Validate a lookup table size or sample count."""
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise TypeError(
            f"{name} must be an integer, got {type(steps).__name__}."
        )
    steps = int(steps)
    if steps < minimum:
        raise ValueError(
            f"{name} must be at least {minimum}, got {steps}."
        )
    return steps


def validate_anchor_colors(colors: Any) -> list:
    """Validate that at least one anchor color was supplied.

    Returns the anchors as a list of Color values. Each entry may be anything
    ``Color.parse`` accepts.
    """
    from .color import Color

    if isinstance(colors, (str, bytes)) or not hasattr(colors, "__iter__"):
        raise TypeError(
            f"colors must be a sequence of colors, got {type(colors).__name__}. "
            "Wrap a single color in a list: [color]."
        )
    anchors = [Color.parse(c) for c in colors]
    if not anchors:
        raise ValueError("colors is empty. Provide at least one anchor color.")
    return anchors


def validate_lookup_table(table: Any) -> np.ndarray:
    """Validate an (n, 4) RGBA table and return it as a uint8 array."""
    arr = np.asarray(table)
    if arr.ndim != 2 or arr.shape[1] != 4 or arr.shape[0] < 1:
        raise ValueError(
            f"Lookup table must have shape (n, 4) with n >= 1, got {arr.shape}."
        )
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(
            f"Lookup table must hold integer channels, got dtype {arr.dtype}."
        )
    if arr.min() < 0 or arr.max() > 255:
        raise ValueError(
            f"Lookup table channels must be in [0, 255], "
            f"found range [{arr.min()}, {arr.max()}]."
        )
    return arr.astype(np.uint8)


def validate_colormap_name(name: str) -> str:
    """Validate that a matplotlib colormap name exists."""
    import matplotlib.pyplot as plt

    try:
        plt.get_cmap(name)
    except ValueError:
        raise ValueError(
            f"Unknown colormap '{name}'. Use a matplotlib colormap name "
            f"like 'viridis', 'plasma', 'RdBu_r', etc."
        ) from None
    return name
