"""Tests for preset color maps."""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from colorramp.core.color import Color
from colorramp.core.presets import from_matplotlib, jet_color_map, jet_table


class TestJet:
    def test_default_size(self):
        assert jet_color_map().steps == 257

    def test_endpoints(self):
        cmap = jet_color_map()
        assert cmap.get_color(0.0) == Color(0, 0, 127)
        assert cmap.get_color(1.0) == Color(127, 0, 0)

    def test_band_edges(self):
        table = jet_table(257)
        assert tuple(table[32]) == (0, 0, 255, 255)
        assert tuple(table[96]) == (0, 255, 255, 255)
        assert tuple(table[128]) == (127, 255, 128, 255)
        assert tuple(table[160]) == (255, 255, 0, 255)
        assert tuple(table[224]) == (255, 0, 0, 255)

    def test_opaque(self):
        assert (jet_table(129)[:, 3] == 255).all()

    def test_too_few_steps_raises(self):
        with pytest.raises(ValueError, match="at least 5"):
            jet_table(4)


class TestFromMatplotlib:
    def test_matches_matplotlib_sampling(self):
        cmap = from_matplotlib("viridis", steps=256)
        expected = (plt.get_cmap("viridis")(np.linspace(0.0, 1.0, 256)) * 255).astype(np.uint8)
        np.testing.assert_array_equal(cmap.table, expected)

    def test_custom_steps(self):
        assert from_matplotlib("plasma", steps=16).steps == 16

    def test_different_cmaps_differ(self):
        assert not np.array_equal(
            from_matplotlib("viridis").table,
            from_matplotlib("plasma").table,
        )

    def test_invalid_cmap_raises(self):
        with pytest.raises(ValueError, match="Unknown colormap"):
            from_matplotlib("not_a_real_cmap")

    def test_invalid_steps_raises(self):
        with pytest.raises(ValueError):
            from_matplotlib("viridis", steps=0)
