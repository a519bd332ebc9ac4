"""Ready-made lookup-table color maps."""

from __future__ import annotations

import numpy as np

from .._logging import logger
from .colormap import LookupColorMap
from .validation import validate_colormap_name, validate_steps


def jet_table(steps: int = 257) -> np.ndarray:
    """(steps, 4) uint8 "jet" ramp in integer arithmetic.

    With ``n = steps - 1`` colors the ramp runs dark blue, blue, cyan,
    yellow, red, dark red, switching at ``n/8``, ``3n/8``, ``5n/8`` and
    ``7n/8``.
    """
    steps = validate_steps(steps, minimum=5)
    n = steps - 1
    eighth = n // 8
    quarter = n // 4
    c = np.arange(steps, dtype=np.int64)

    r = np.zeros(steps, dtype=np.int64)
    g = np.zeros(steps, dtype=np.int64)
    b = np.zeros(steps, dtype=np.int64)

    band = c < eighth
    b[band] = 255 * (c[band] + eighth) // quarter

    band = (c >= eighth) & (c < 3 * n // 8)
    g[band] = 255 * (c[band] - eighth) // quarter
    b[band] = 255

    band = (c >= 3 * n // 8) & (c < 5 * n // 8)
    r[band] = 255 * (c[band] - 3 * n // 8) // quarter
    g[band] = 255
    b[band] = 255 - r[band]

    band = (c >= 5 * n // 8) & (c < 7 * n // 8)
    r[band] = 255
    g[band] = 255 * (7 * n // 8 - c[band]) // quarter

    band = c >= 7 * n // 8
    r[band] = 255 * (9 * n // 8 - c[band]) // quarter

    alpha = np.full(steps, 255, dtype=np.int64)
    table = np.stack([r, g, b, alpha], axis=1)
    return np.clip(table, 0, 255).astype(np.uint8)


def jet_color_map(steps: int = 257) -> LookupColorMap:
    """Color map over the "jet" ramp, 256 colors plus the end point by default."""
    return LookupColorMap(jet_table(steps))


def from_matplotlib(name: str = "viridis", steps: int = 256) -> LookupColorMap:
    """Sample a named matplotlib colormap into a lookup table.

    Channels are scaled by 255 and truncated.
    """
    validate_colormap_name(name)
    steps = validate_steps(steps)
    import matplotlib.pyplot as plt

    cmap = plt.get_cmap(name)
    positions = np.linspace(0.0, 1.0, steps)
    rgba_float = cmap(positions)  # (steps, 4) float in [0, 1]
    logger.debug("Sampling matplotlib colormap %r into %d steps", name, steps)
    return LookupColorMap((rgba_float * 255).astype(np.uint8))
