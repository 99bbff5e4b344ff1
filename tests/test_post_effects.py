import numpy as np
import pytest

from photolooks.core.errors import InvalidInputError
from photolooks.core.raster import RasterImage
from photolooks.filters.post_effects import PostEffectFilter

from helpers import solid_image


def _row(*values: int) -> RasterImage:
    plane = np.array([values], dtype=np.uint8)
    return RasterImage.from_channels(plane, plane, plane, np.full_like(plane, 60))


def _reds(image: RasterImage) -> list:
    return image.channels()[0][0].tolist()


def test_neutral_post_effects_are_a_noop(photo):
    post = PostEffectFilter()
    assert post.is_neutral
    assert post.apply(photo) == photo


def test_full_sharpness_is_the_sharpen_kernel():
    assert _reds(PostEffectFilter(sharpness=100).apply(_row(10, 20, 30))) == [0, 20, 40]


def test_half_sharpness_blends():
    assert _reds(PostEffectFilter(sharpness=50).apply(_row(10, 20, 30))) == [5, 20, 35]


def test_definition_pushes_away_from_local_mean():
    assert _reds(PostEffectFilter(definition=100).apply(_row(10, 20, 30))) == [7, 20, 33]


def test_glow_screens_with_local_mean():
    out = PostEffectFilter(glow=100).apply(solid_image(3, 3, 100, 100, 100, 30))
    assert out.pixel(1, 1) == (161, 161, 161, 30)


def test_effects_keep_alpha(photo):
    _, _, _, a_in = photo.channels()
    _, _, _, a_out = PostEffectFilter(sharpness=30, definition=40, glow=20).apply(photo).channels()
    assert np.array_equal(a_in, a_out)


def test_sliders_are_clamped_to_zero_hundred():
    post = PostEffectFilter(sharpness=-10, glow=250)
    assert post.sharpness == 0
    assert post.glow == 100


def test_rejects_non_numeric_sliders():
    with pytest.raises(InvalidInputError):
        PostEffectFilter(definition="crisp")
