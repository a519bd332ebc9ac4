"""colorramp: 1-D color maps built from interpolated lookup tables."""

from ._version import __version__
from .core import (
    Color,
    ColorMap,
    LookupColorMap,
    TransformedColorMap,
    build_table,
    build_color_map,
    with_transform,
    sine_transform,
    with_sine,
    range_transform,
    with_range,
    jet_color_map,
    from_matplotlib,
)


def show_demo(config=None):
    """Open a window showing the demo strips.

    Parameters
    ----------
    config : DemoConfig, optional
        Table steps, window size and sine frequency.
    """
    import matplotlib.pyplot as plt

    from .demo import DemoConfig, default_strips, plot_strips

    config = config or DemoConfig()
    fig = plt.figure(figsize=(config.width / 100, config.height / 100), dpi=100)
    plot_strips(default_strips(config), config, fig=fig)
    plt.show()


__all__ = [
    "__version__",
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
    "show_demo",
]
