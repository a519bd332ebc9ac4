"""Core color map types and factories."""

from .color import Color
from .colormap import ColorMap, LookupColorMap, TransformedColorMap
from .builder import (
    build_table,
    build_color_map,
    with_transform,
    sine_transform,
    with_sine,
    range_transform,
    with_range,
)
from .presets import jet_color_map, from_matplotlib

__all__ = [
    "Color",
    "ColorMap",
    "LookupColorMap",
    "TransformedColorMap",
    "build_table",
    "build_color_map",
    "with_transform",
    "sine_transform",
    "with_sine",
    "range_transform",
    "with_range",
    "jet_color_map",
    "from_matplotlib",
]
