"""
Catalog of named looks.

Each factory returns a fresh, pre-configured filter. Matrix stages are
listed in the order they affect the pixel; reordering them changes the look.
"""
from typing import Callable, Dict
from .base import Filter
from .blur import BoxBlurFilter
from .convolution import EmbossFilter
from .matrix import MatrixFilter
from ..constants import BLUR_DEFAULT_RADIUS
from ..core.color_matrix import ColorMatrix

saturation = ColorMatrix.saturation
scale_offset = ColorMatrix.scale_offset
tint = ColorMatrix.tint

SEPIA_TINT = [
    0.393, 0.769, 0.189, 0, 0,
    0.349, 0.686, 0.168, 0, 0,
    0.272, 0.534, 0.131, 0, 0,
    0, 0, 0, 1, 0,
]

COOL_TINT = [
    0.94, 0, 0, 0, -6,
    0, 1.00, 0, 0, 0,
    0, 0, 1.06, 0, 10,
    0, 0, 0, 1, 0,
]

VINTAGE_WARM = [
    1.03, 0, 0, 0, 8,
    0, 1.00, 0, 0, 2,
    0, 0, 0.97, 0, -2,
    0, 0, 0, 1, 0,
]

CLEAN_SKIN_WARM = [
    1.03, 0, 0, 0, 5,
    0, 1.02, 0, 0, 3,
    0, 0, 0.98, 0, -2,
    0, 0, 0, 1, 0,
]

RETRO_WARM = [
    1.2, 0.1, 0, 0, 15,
    0.05, 0.95, 0.05, 0, 5,
    0, 0, 0.8, 0, -5,
    0, 0, 0, 1, 0,
]

SUNSET_WARM = [
    1.25, 0.08, 0, 0, 20,
    0.05, 1.05, 0.05, 0, 10,
    0, 0, 0.85, 0, -15,
    0, 0, 0, 1, 0,
]


def grayscale() -> MatrixFilter:
    return MatrixFilter([saturation(0.0)], "Grayscale", "Black and white")


def sepia() -> MatrixFilter:
    return MatrixFilter([tint(SEPIA_TINT)], "Sepia", "Warm brown vintage tone")


def cool() -> MatrixFilter:
    return MatrixFilter([tint(COOL_TINT)], "Cool", "Slightly boosted blues, reduced reds")


def dramatic() -> MatrixFilter:
    return MatrixFilter(
        [saturation(1.18), scale_offset(1.25, -4)],
        "Dramatic",
        "Higher contrast, mild saturation boost, darker mids",
    )


def dreamy() -> MatrixFilter:
    return MatrixFilter(
        [saturation(0.85), scale_offset(0.85, 20)],
        "Dreamy",
        "Soft, low contrast, lifted blacks",
    )


def pastel() -> MatrixFilter:
    return MatrixFilter(
        [saturation(0.80), scale_offset(0.95, 10)],
        "Pastel",
        "Softer contrast, brighter, lower saturation",
    )


def vintage() -> MatrixFilter:
    return MatrixFilter(
        [saturation(0.85), tint(VINTAGE_WARM), scale_offset(0.95, 6)],
        "Vintage",
        "Slightly desaturated, warm, soft contrast",
    )


def clean_skin() -> MatrixFilter:
    return MatrixFilter(
        [saturation(0.9), scale_offset(0.92, 12), tint(CLEAN_SKIN_WARM)],
        "CleanSkin",
        "Soft portrait look with slight warmth",
    )


def retro() -> MatrixFilter:
    return MatrixFilter(
        [saturation(0.6), tint(RETRO_WARM), scale_offset(0.9, 12)],
        "Retro",
        "Warm, faded old-photo feel",
    )


def sunset() -> MatrixFilter:
    return MatrixFilter(
        [saturation(1.15), tint(SUNSET_WARM)],
        "Sunset",
        "Golden-hour warm tones",
    )


def emboss() -> EmbossFilter:
    return EmbossFilter()


def blur(radius: int = BLUR_DEFAULT_RADIUS) -> BoxBlurFilter:
    return BoxBlurFilter(radius)


LOOKS: Dict[str, Callable[[], Filter]] = {
    "Grayscale": grayscale,
    "Sepia": sepia,
    "Vintage": vintage,
    "Retro": retro,
    "Dramatic": dramatic,
    "Dreamy": dreamy,
    "Pastel": pastel,
    "Sunset": sunset,
    "Cool": cool,
    "CleanSkin": clean_skin,
    "Emboss": emboss,
    "Blur": blur,
}
