import numpy as np
import pytest

from photolooks.core.errors import InvalidInputError
from photolooks.core.raster import RasterImage, pack_argb, to_channel, unpack_argb

from helpers import random_image


def test_pack_unpack_argb():
    p = pack_argb(200, 150, 100, 255)
    assert p == 0xFFC89664
    assert unpack_argb(p) == (200, 150, 100, 255)


def test_pack_argb_rejects_out_of_range():
    with pytest.raises(InvalidInputError):
        pack_argb(256, 0, 0)


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-3, 2), (1.5, 1), (True, 1)])
def test_rejects_bad_dimensions(width, height):
    with pytest.raises(InvalidInputError):
        RasterImage(width, height, [0])


def test_rejects_length_mismatch():
    with pytest.raises(InvalidInputError):
        RasterImage(2, 2, [0, 0, 0])


@pytest.mark.parametrize(
    "pixels",
    [
        np.zeros((2, 2), dtype=np.uint32),
        np.zeros(4, dtype=np.float64),
        [0, 0, -1, 0],
        [0, 0, 0x1_0000_0000, 0],
    ],
)
def test_rejects_malformed_buffers(pixels):
    with pytest.raises(InvalidInputError):
        RasterImage(2, 2, pixels)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        RasterImage(0, 0, [])


def test_buffer_is_copied_and_read_only():
    source = np.array([pack_argb(1, 2, 3, 4)] * 4, dtype=np.uint32)
    image = RasterImage(2, 2, source)

    source[0] = 0
    assert image.pixel(0, 0) == (1, 2, 3, 4)

    with pytest.raises(ValueError):
        image.pixels[0] = 0
    with pytest.raises(AttributeError):
        image.width = 10


def test_pixel_accessor_row_major():
    pixels = [pack_argb(i, 0, 0) for i in range(6)]
    image = RasterImage(3, 2, pixels)
    assert image.pixel(2, 0)[0] == 2
    assert image.pixel(0, 1)[0] == 3
    with pytest.raises(IndexError):
        image.pixel(3, 0)


def test_rgba_bridge():
    image = random_image(4, 3)
    rgba = image.to_rgba()
    assert rgba.shape == (3, 4, 4)
    assert RasterImage.from_rgba(rgba) == image
    assert tuple(rgba[1, 2]) == image.pixel(2, 1)


def test_from_bgr_swaps_channel_order():
    bgr = np.zeros((1, 1, 3), dtype=np.uint8)
    bgr[0, 0] = (1, 2, 3)
    assert RasterImage.from_bgr(bgr).pixel(0, 0) == (3, 2, 1, 255)

    bgra = np.zeros((1, 1, 4), dtype=np.uint8)
    bgra[0, 0] = (1, 2, 3, 4)
    image = RasterImage.from_bgr(bgra)
    assert image.pixel(0, 0) == (3, 2, 1, 4)
    assert tuple(image.to_bgra()[0, 0]) == (1, 2, 3, 4)


def test_from_bgr_grayscale_is_opaque():
    gray = np.full((2, 2), 77, dtype=np.uint8)
    assert RasterImage.from_bgr(gray).pixel(1, 1) == (77, 77, 77, 255)


def test_channels_roundtrip():
    image = random_image(5, 2, seed=3)
    assert RasterImage.from_channels(*image.channels()) == image


@pytest.mark.parametrize(
    "plane",
    [
        np.array([[300]], dtype=np.int64),
        np.array([[-1]], dtype=np.int32),
        np.array([[12.5]], dtype=np.float64),
    ],
)
def test_from_channels_rejects_out_of_range_or_float_planes(plane):
    zero = np.zeros((1, 1), dtype=np.uint8)
    with pytest.raises(InvalidInputError):
        RasterImage.from_channels(plane, zero, zero, zero)


def test_from_channels_accepts_in_range_integer_planes():
    wide = np.array([[255, 0]], dtype=np.int64)
    img = RasterImage.from_channels(wide, wide, wide, wide)
    assert img.pixel(0, 0) == (255, 255, 255, 255)
    assert img.pixel(1, 0) == (0, 0, 0, 0)


def test_to_channel_bounds_non_finite_values():
    out = to_channel(np.array([np.nan, np.inf, -np.inf, 127.5]))
    assert out.tolist() == [0, 255, 0, 128]
