"""Core: raster container, color-matrix algebra and error types."""
from .errors import InvalidInputError, UnknownLookError, AllocationFailureError
from .raster import RasterImage, pack_argb, unpack_argb, allocate_buffer
from .color_matrix import ColorMatrix

__all__ = [
    "InvalidInputError",
    "UnknownLookError",
    "AllocationFailureError",
    "RasterImage",
    "pack_argb",
    "unpack_argb",
    "allocate_buffer",
    "ColorMatrix",
]
