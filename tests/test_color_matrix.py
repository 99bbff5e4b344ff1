import numpy as np
import pytest

from photolooks.core.color_matrix import ColorMatrix
from photolooks.core.errors import InvalidInputError
from photolooks.filters.catalog import SEPIA_TINT, RETRO_WARM

from helpers import random_image


def test_identity_layout():
    values = ColorMatrix.identity().values
    assert [i for i, v in enumerate(values) if v != 0] == [0, 6, 12, 18]
    assert all(values[i] == 1 for i in (0, 6, 12, 18))


def test_identity_is_a_noop(photo):
    assert ColorMatrix.identity().apply(photo) == photo


def test_saturation_one_is_identity():
    assert ColorMatrix.saturation(1.0).allclose(ColorMatrix.identity())


def test_saturation_zero_rows_are_equal():
    rows = ColorMatrix.saturation(0.0).rows
    assert np.array_equal(rows[0], rows[1])
    assert np.array_equal(rows[1], rows[2])
    assert rows[0].tolist() == pytest.approx([0.213, 0.715, 0.072, 0.0, 0.0])


def test_saturation_zero_gives_gray(photo):
    r, g, b, _ = ColorMatrix.saturation(0.0).apply(photo).channels()
    assert np.abs(r.astype(int) - g.astype(int)).max() <= 1
    assert np.abs(g.astype(int) - b.astype(int)).max() <= 1


def test_scale_offset_translation():
    rows = ColorMatrix.scale_offset(0.92, 12).rows
    t = (-0.5 * 0.92 + 0.5) * 255 + 12
    for i in range(3):
        assert rows[i, i] == pytest.approx(0.92)
        assert rows[i, 4] == pytest.approx(t)
    assert rows[3].tolist() == [0, 0, 0, 1, 0]


def test_scale_offset_unit_scale_is_pure_offset():
    assert ColorMatrix.scale_offset(1.0, 7).apply_pixel(10, 20, 30, 40) == (17, 27, 37, 40)


def test_compose_applies_existing_first():
    # translate by 10, then sepia: offsets pass through the sepia weights
    combined = ColorMatrix.compose(ColorMatrix.translate(10), ColorMatrix.tint(SEPIA_TINT))
    values = combined.values
    assert values[4] == pytest.approx(10 * (0.393 + 0.769 + 0.189))
    assert values[9] == pytest.approx(10 * (0.349 + 0.686 + 0.168))
    assert values[14] == pytest.approx(10 * (0.272 + 0.534 + 0.131))
    assert combined.apply_pixel(0, 0, 0, 255) == (14, 12, 9, 255)


def test_composition_is_not_commutative():
    translate = ColorMatrix.translate(10)
    sepia = ColorMatrix.tint(SEPIA_TINT)
    assert ColorMatrix.chain(translate, sepia).apply_pixel(0, 0, 0) == (14, 12, 9, 255)
    assert ColorMatrix.chain(sepia, translate).apply_pixel(0, 0, 0) == (10, 10, 10, 255)


def test_saturation_and_tint_order_matters():
    sat = ColorMatrix.saturation(0.6)
    warm = ColorMatrix.tint(RETRO_WARM)
    image = random_image(6, 6, seed=9)
    a = ColorMatrix.chain(sat, warm).apply(image)
    b = ColorMatrix.chain(warm, sat).apply(image)
    assert a != b


def test_chain_matches_stepwise_left_multiplication():
    a = ColorMatrix.saturation(0.85)
    b = ColorMatrix.tint(RETRO_WARM)
    c = ColorMatrix.scale_offset(0.9, 12)
    expected = a
    for nxt in (b, c):
        expected = ColorMatrix.compose(expected, nxt)
    assert ColorMatrix.chain(a, b, c).allclose(expected)
    assert a.then(b).then(c).allclose(expected)


def test_fixed_alpha_row_passes_alpha_through():
    m = ColorMatrix.chain(ColorMatrix.saturation(1.3), ColorMatrix.scale_offset(1.4, -30))
    assert m.preserves_alpha
    for alpha in (0, 1, 127, 254, 255):
        assert m.apply_pixel(12, 200, 90, alpha)[3] == alpha


def test_results_are_clamped():
    assert ColorMatrix.translate(300).apply_pixel(10, 10, 10) == (255, 255, 255, 255)
    assert ColorMatrix.translate(-300).apply_pixel(10, 10, 10) == (0, 0, 0, 255)


def test_rounds_half_away_from_zero():
    # 0.5 * 3 = 1.5 -> 2, 0.5 * 5 = 2.5 -> 3
    m = ColorMatrix([
        0.5, 0, 0, 0, 0,
        0, 0.5, 0, 0, 0,
        0, 0, 1, 0, 0,
        0, 0, 0, 1, 0,
    ])
    assert m.apply_pixel(3, 5, 9) == (2, 3, 9, 255)


@pytest.mark.parametrize(
    "coefficients",
    [
        [0.0] * 19,
        [0.0] * 19 + [float("nan")],
        ["a"] * 20,
    ],
)
def test_rejects_malformed_coefficients(coefficients):
    with pytest.raises(InvalidInputError):
        ColorMatrix(coefficients)


def test_nested_and_flat_forms_are_equal():
    flat = ColorMatrix(SEPIA_TINT)
    nested = ColorMatrix([SEPIA_TINT[i:i + 5] for i in range(0, 20, 5)])
    assert flat == nested


def test_overflowing_coefficients_still_yield_channels():
    huge = ColorMatrix([
        [1e308, -1e308, 0, 0, 0],
        [1e308, 0, 0, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 0, 1, 0],
    ])
    # R overflows to inf - inf; G to +inf
    assert huge.apply_pixel(255, 255, 7, 9) == (0, 255, 7, 9)
