import numpy as np
import pytest

from photolooks.core.errors import InvalidInputError
from photolooks.core.raster import RasterImage, pack_argb
from photolooks.filters.convolution import ConvolutionFilter, EmbossFilter

from helpers import random_image, solid_image

IDENTITY_KERNEL = [0, 0, 0, 0, 1, 0, 0, 0, 0]


def test_emboss_uniform_gray():
    out = EmbossFilter().apply(solid_image(3, 3, 50, 50, 50, 200))
    assert out.pixel(1, 1) == (178, 178, 178, 200)
    # Clamp-to-edge keeps borders flat too
    assert {out.pixel(x, y) for x in range(3) for y in range(3)} == {(178, 178, 178, 200)}


def test_emboss_clamps_bright_regions():
    out = EmbossFilter().apply(solid_image(4, 2, 200, 10, 127, 9))
    assert out.pixel(0, 0) == (255, 138, 255, 9)


def test_emboss_kernel_and_offset():
    emboss = EmbossFilter()
    assert emboss.kernel.tolist() == [[-2, -1, 0], [-1, 1, 1], [0, 1, 2]]
    assert emboss.offset == 128
    assert emboss.kernel.sum() == 1


def test_identity_kernel_is_a_noop(photo):
    assert ConvolutionFilter(IDENTITY_KERNEL).apply(photo) == photo


def test_alpha_is_not_convolved(photo):
    out = ConvolutionFilter(np.ones((3, 3)) / 9.0).apply(photo)
    assert np.array_equal(out.channels()[3], photo.channels()[3])


def test_samples_clamp_to_edge():
    # Picks the left neighbour; x=0 re-reads itself
    left = [0, 0, 0, 1, 0, 0, 0, 0, 0]
    image = RasterImage(3, 1, [pack_argb(v, v, v) for v in (10, 20, 30)])
    out = ConvolutionFilter(left).apply(image)
    assert [out.pixel(x, 0)[0] for x in range(3)] == [10, 10, 20]


def test_samples_clamp_to_edge_vertically():
    # Picks the pixel below; the last row re-reads itself
    below = [[0, 0, 0], [0, 0, 0], [0, 1, 0]]
    image = RasterImage(1, 3, [pack_argb(v, 0, 0) for v in (5, 6, 7)])
    out = ConvolutionFilter(below).apply(image)
    assert [out.pixel(0, y)[0] for y in range(3)] == [6, 7, 7]


def test_single_pixel_image():
    out = EmbossFilter().apply(solid_image(1, 1, 0, 100, 255, 0))
    assert out.pixel(0, 0) == (128, 228, 255, 0)


def test_matches_reference_loop():
    image = random_image(5, 4, seed=11)
    kernel = np.array([[0.5, -1.0, 0.25], [2.0, 0.1, -0.3], [0.0, 1.0, -0.75]])
    out = ConvolutionFilter(kernel, offset=17).apply(image)

    r, g, b, a = (c.astype(float) for c in image.channels())
    for y in range(4):
        for x in range(5):
            expected = []
            for plane in (r, g, b):
                total = 0.0
                for dy in (-1, 0, 1):
                    for dx in (-1, 0, 1):
                        sx = min(max(x + dx, 0), 4)
                        sy = min(max(y + dy, 0), 3)
                        total += kernel[dy + 1, dx + 1] * plane[sy, sx]
                total = min(max(total + 17, 0.0), 255.0)
                expected.append(int(np.floor(np.round(total, 6) + 0.5)))
            assert out.pixel(x, y)[:3] == tuple(expected)
            assert out.pixel(x, y)[3] == int(a[y, x])


@pytest.mark.parametrize(
    "kernel",
    [
        [1, 2, 3, 4],
        np.ones((2, 2)),
        np.ones((3, 5)),
        [0, 0, 0, 0, float("inf"), 0, 0, 0, 0],
    ],
)
def test_rejects_malformed_kernels(kernel):
    with pytest.raises(InvalidInputError):
        ConvolutionFilter(kernel)
