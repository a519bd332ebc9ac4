"""Color: immutable 8-bit RGBA value."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np

from .validation import validate_channel


@dataclass(frozen=True)
class Color:
    """An RGBA color with integer channels in [0, 255].

    Instances can be built directly (``Color(255, 128, 0)``, alpha defaults
    to opaque) or with ``Color.parse`` from tuples, hex strings and
    matplotlib color names.
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, name, validate_channel(getattr(self, name), name))

    @classmethod
    def parse(cls, spec: Any) -> Color:
        """Build a Color from any supported specification.

        Accepted forms::

            Color.parse(Color(1, 2, 3))      # returned unchanged
            Color.parse((255, 0, 0))         # 8-bit channels, opaque
            Color.parse((255, 0, 0, 128))    # 8-bit channels with alpha
            Color.parse("orange")            # matplotlib / CSS name
            Color.parse("#ff000080")         # hex, optional alpha
            Color.parse((1.0, 0.5, 0.0))     # float channels in [0, 1]
        """
        if isinstance(spec, Color):
            return spec
        if isinstance(spec, (tuple, list, np.ndarray)) and len(spec) > 0 and all(
            isinstance(c, numbers.Integral) and not isinstance(c, bool) for c in spec
        ):
            if len(spec) not in (3, 4):
                raise ValueError(
                    f"Integer color tuples need 3 or 4 channels, got {len(spec)}."
                )
            return cls(*spec)

        import matplotlib.colors as mcolors

        try:
            rgba = mcolors.to_rgba(spec)
        except (ValueError, TypeError):
            raise ValueError(
                f"Cannot interpret {spec!r} as a color. Use an (r, g, b[, a]) "
                "tuple of ints, a hex string or a matplotlib color name."
            ) from None
        return cls(*(int(round(c * 255)) for c in rgba))

    @classmethod
    def from_argb(cls, argb: int) -> Color:
        """Unpack a ``0xAARRGGBB`` integer."""
        argb = int(argb) & 0xFFFFFFFF
        return cls(
            (argb >> 16) & 0xFF,
            (argb >> 8) & 0xFF,
            argb & 0xFF,
            (argb >> 24) & 0xFF,
        )

    def to_argb(self) -> int:
        """Pack as a non-negative ``0xAARRGGBB`` integer."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    def to_hex(self) -> str:
        """``#rrggbbaa`` string."""
        return "#" + "".join(f"{c:02x}" for c in self.to_tuple())

    def __iter__(self):
        return iter(self.to_tuple())


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)
ORANGE = Color(255, 200, 0)
