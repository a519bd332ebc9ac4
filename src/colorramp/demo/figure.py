"""matplotlib rendering of the demo strips."""

from __future__ import annotations

import pathlib
from typing import Sequence

from matplotlib.figure import Figure

from .._logging import logger
from .raster import render_strip
from .strips import DemoConfig, Strip

_DPI = 100


def plot_strips(
    strips: Sequence[Strip],
    config: DemoConfig | None = None,
    fig: Figure | None = None,
) -> Figure:
    """Build a figure with one titled axis per strip.

    The figure is ``config.width`` x ``config.height`` pixels; every strip
    is rasterized at the full figure width so each pixel column gets its
    own color. Pass ``fig`` to draw into an existing (e.g. pyplot) figure.
    """
    config = config or DemoConfig()
    if not strips:
        raise ValueError("No strips to plot. Provide at least one Strip.")

    if fig is None:
        fig = Figure(figsize=(config.width / _DPI, config.height / _DPI), dpi=_DPI)
    axes = fig.subplots(len(strips), 1, squeeze=False)[:, 0]
    strip_height = max(1, config.height // len(strips))
    for ax, strip in zip(axes, strips):
        image = render_strip(strip.colormap, config.width, strip_height)
        ax.imshow(image, aspect="auto", interpolation="nearest")
        ax.set_title(strip.label, loc="left", fontsize=8)
        ax.set_axis_off()
    fig.tight_layout()
    return fig


def save_png(
    path: str | pathlib.Path,
    strips: Sequence[Strip],
    config: DemoConfig | None = None,
) -> None:
    """Write the strip figure to a PNG file."""
    path = pathlib.Path(path)
    fig = plot_strips(strips, config)
    fig.savefig(path, format="png")
    logger.info("Wrote %d strips to %s", len(strips), path)
