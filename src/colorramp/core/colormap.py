"""ColorMap: maps a scalar in [0, 1] to a Color."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Callable, Iterable

import numpy as np

from .color import Color
from .validation import validate_lookup_table, validate_steps


def clamp_unit(value: float) -> float:
    """Clamp into [0, 1]. NaN maps to 0."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


class ColorMap(ABC):
    """Base class for 1-D color maps.

    Subclasses implement ``get_color``. Implementations are immutable after
    construction, so one instance can be shared between any number of
    readers.
    """

    __slots__ = ()

    @abstractmethod
    def get_color(self, value: float) -> Color:
        """Return the color for ``value``, clamped into [0, 1]."""

    def __call__(self, value: float) -> Color:
        return self.get_color(value)

    def get_colors(self, values: Iterable[float]) -> np.ndarray:
        """Look up many values at once. Returns an (n, 4) uint8 array."""
        values = np.asarray(values, dtype=np.float64).ravel()
        out = np.empty((values.size, 4), dtype=np.uint8)
        for i, v in enumerate(values):
            out[i] = self.get_color(v).to_tuple()
        return out

    def sample(self, n: int) -> np.ndarray:
        """Colors at ``x / (n - 1)`` for ``x`` in ``0 .. n-1``.

        A single sample is taken at position 0.
        """
        n = validate_steps(n, name="Number of samples")
        if n == 1:
            positions = np.zeros(1)
        else:
            positions = np.arange(n, dtype=np.float64) / (n - 1)
        return self.get_colors(positions)


class LookupColorMap(ColorMap):
    """Color map backed by a precomputed table of colors.

    ``get_color(value)`` returns ``table[int(clamp(value) * (steps - 1))]``.
    The table is stored as a read-only (steps, 4) uint8 array.
    """

    __slots__ = ("_table", "_colors")

    def __init__(self, table: np.ndarray) -> None:
        table = validate_lookup_table(table)
        table.flags.writeable = False
        self._table: np.ndarray = table
        self._colors: tuple[Color, ...] = tuple(
            Color(*(int(c) for c in row)) for row in table
        )

    @classmethod
    def from_table(cls, table) -> LookupColorMap:
        """Wrap an existing (n, 4) array of 8-bit RGBA rows."""
        return cls(table)

    @property
    def steps(self) -> int:
        return len(self._colors)

    @property
    def table(self) -> np.ndarray:
        """(steps, 4) uint8 RGBA table, read-only."""
        return self._table

    @property
    def colors(self) -> tuple[Color, ...]:
        return self._colors

    def value_to_index(self, value: float) -> int:
        """Map a scalar value to a table index in [0, steps - 1]."""
        return int(clamp_unit(value) * (len(self._colors) - 1))

    def get_color(self, value: float) -> Color:
        return self._colors[self.value_to_index(value)]

    def get_colors(self, values: Iterable[float]) -> np.ndarray:
        values = np.asarray(values, dtype=np.float64).ravel()
        clamped = np.clip(np.nan_to_num(values, nan=0.0), 0.0, 1.0)
        indices = (clamped * (len(self._colors) - 1)).astype(np.intp)
        return self._table[indices]

    def to_bytes(self) -> bytes:
        """Serialize the table as row-major RGBA bytes (4 per step)."""
        return self._table.tobytes()

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        return f"LookupColorMap(steps={self.steps})"


class TransformedColorMap(ColorMap):
    """Color map that remaps its input with ``function`` before delegating."""

    __slots__ = ("_delegate", "_function")

    def __init__(self, delegate: ColorMap, function: Callable[[float], float]) -> None:
        if not isinstance(delegate, ColorMap):
            raise TypeError(
                f"delegate must be a ColorMap, got {type(delegate).__name__}."
            )
        if not callable(function):
            raise TypeError(
                f"function must be callable, got {type(function).__name__}."
            )
        self._delegate = delegate
        self._function = function

    @property
    def delegate(self) -> ColorMap:
        return self._delegate

    @property
    def function(self) -> Callable[[float], float]:
        return self._function

    def get_color(self, value: float) -> Color:
        return self._delegate.get_color(self._function(value))

    def __repr__(self) -> str:
        name = getattr(self._function, "__name__", repr(self._function))
        return f"TransformedColorMap({self._delegate!r}, {name})"
