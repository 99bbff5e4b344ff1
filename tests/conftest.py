"""Shared fixtures for the photolooks test suite."""

from __future__ import annotations

import pytest

from photolooks.core.raster import RasterImage

from helpers import random_image, solid_image


@pytest.fixture
def photo() -> RasterImage:
    """A small noisy image with varying alpha."""
    return random_image(7, 5, seed=42)


@pytest.fixture
def warm_pixel() -> RasterImage:
    """1x1 image with (R=200, G=150, B=100, A=255)."""
    return solid_image(1, 1, 200, 150, 100, 255)
