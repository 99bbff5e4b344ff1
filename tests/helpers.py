"""Image builders shared by the test modules."""

import numpy as np

from photolooks.core.raster import RasterImage, pack_argb


def solid_image(width: int, height: int, r: int, g: int, b: int, a: int = 255) -> RasterImage:
    return RasterImage(width, height, [pack_argb(r, g, b, a)] * (width * height))


def random_image(width: int, height: int, seed: int = 0) -> RasterImage:
    rng = np.random.default_rng(seed)
    rgba = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    return RasterImage.from_rgba(rgba)
