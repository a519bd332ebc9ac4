"""Demo: the strip window, rasterizer and exporters."""

from .strips import DemoConfig, Strip, default_strips, describe_colors
from .raster import render_strip, render_strips
from .figure import plot_strips, save_png
from .html_export import HTMLExporter

__all__ = [
    "DemoConfig",
    "Strip",
    "default_strips",
    "describe_colors",
    "render_strip",
    "render_strips",
    "plot_strips",
    "save_png",
    "HTMLExporter",
]
