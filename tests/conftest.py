"""Shared test fixtures for colorramp."""

import matplotlib

matplotlib.use("Agg")

import pytest

from colorramp.core.color import Color
from colorramp.demo.strips import DemoConfig


@pytest.fixture
def red_green():
    """Opaque red and green anchors."""
    return [Color(255, 0, 0, 255), Color(0, 255, 0, 255)]


@pytest.fixture
def rgb_anchors():
    """Red, green, blue anchors."""
    return [Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255)]


@pytest.fixture
def small_config():
    """Small demo window for fast rendering tests."""
    return DemoConfig(steps=64, width=40, height=60)
