"""The strip catalogue shown by the demo window."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..core.builder import build_color_map, with_sine
from ..core.color import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    MAGENTA,
    ORANGE,
    RED,
    WHITE,
    YELLOW,
    Color,
)
from ..core.colormap import ColorMap

NAVY = Color(0, 0, 128)


@dataclass(frozen=True)
class DemoConfig:
    """Knobs of the demo window."""

    steps: int = 1024
    width: int = 500
    height: int = 400
    sine_frequency: float = math.pi * 4


@dataclass(frozen=True)
class Strip:
    """A labelled color map drawn as one horizontal band."""

    label: str
    colormap: ColorMap


def describe_colors(colors: Sequence[Color]) -> str:
    """Format colors as ``"(r,g,b), (r,g,b)"``. Alpha is not shown."""
    return ", ".join(f"({c.red},{c.green},{c.blue})" for c in colors)


def interpolated_strip(steps: int, *colors: Color) -> Strip:
    return Strip(
        label=f"In {steps} steps over {describe_colors(colors)}",
        colormap=build_color_map(steps, colors),
    )


def sine_strip(steps: int, frequency: float, *colors: Color) -> Strip:
    return Strip(
        label=f"With sine over {describe_colors(colors)}",
        colormap=with_sine(build_color_map(steps, colors), frequency),
    )


def default_strips(config: DemoConfig | None = None) -> list[Strip]:
    """The six strips of the demo, top to bottom."""
    config = config or DemoConfig()
    steps = config.steps
    return [
        interpolated_strip(steps, RED),
        interpolated_strip(steps, RED, GREEN),
        interpolated_strip(steps, RED, GREEN, BLUE),
        interpolated_strip(steps, RED, YELLOW, GREEN, CYAN, BLUE, MAGENTA),
        interpolated_strip(steps, BLACK, ORANGE, WHITE, BLUE, NAVY),
        sine_strip(steps, config.sine_frequency, RED, GREEN, BLUE),
    ]
