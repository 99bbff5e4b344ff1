"""
Raster image container and pixel buffer helpers.

A RasterImage owns a row-major buffer of packed 0xAARRGGBB pixels
(8 bits per channel, non-premultiplied alpha). Instances are immutable:
the buffer is copied on construction and marked read-only, so filters
always produce a fresh image and never touch their input.
"""
from typing import Iterable, Tuple
import numpy as np
import cv2

from .errors import InvalidInputError, AllocationFailureError
from ..constants import CHANNEL_MIN, CHANNEL_MAX, ROUND_DECIMALS

MAX_PACKED = 0xFFFFFFFF


def pack_argb(r: int, g: int, b: int, a: int = 255) -> int:
    """
    Pack four 8-bit channels into a single 0xAARRGGBB integer.

    Args:
        r: Red (0-255)
        g: Green (0-255)
        b: Blue (0-255)
        a: Alpha (0-255, default opaque)

    Returns:
        Packed pixel value
    """
    for value in (r, g, b, a):
        if not CHANNEL_MIN <= int(value) <= CHANNEL_MAX:
            raise InvalidInputError(f"Channel value {value} outside 0-255")
    return (int(a) << 24) | (int(r) << 16) | (int(g) << 8) | int(b)


def unpack_argb(pixel: int) -> Tuple[int, int, int, int]:
    """Split a packed pixel into (r, g, b, a)."""
    pixel = int(pixel)
    return (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF, (pixel >> 24) & 0xFF


def allocate_buffer(shape, dtype) -> np.ndarray:
    """
    Allocate an uninitialised pixel buffer.

    Every output and intermediate buffer a filter needs is obtained here so
    that running out of memory surfaces as a single error type.

    Args:
        shape: Buffer shape
        dtype: numpy dtype

    Returns:
        Newly allocated array

    Raises:
        AllocationFailureError: If numpy cannot allocate the buffer
    """
    try:
        return np.empty(shape, dtype=dtype)
    except MemoryError as e:
        raise AllocationFailureError(f"Cannot allocate buffer of shape {shape}: {e}") from e


def to_channel(values: np.ndarray) -> np.ndarray:
    """
    Convert float channel values to 8-bit.

    Values are made finite, clamped to [0, 255], snapped to ROUND_DECIMALS
    and rounded half away from zero.

    Args:
        values: Float array of any shape

    Returns:
        uint8 array of the same shape
    """
    # NaN (inf - inf from huge coefficients) maps to 0, infinities to the bounds
    finite = np.nan_to_num(values, nan=CHANNEL_MIN, posinf=CHANNEL_MAX, neginf=CHANNEL_MIN)
    clamped = np.clip(finite, CHANNEL_MIN, CHANNEL_MAX)
    snapped = np.round(clamped, ROUND_DECIMALS)
    # clamped range is non-negative, so floor(x + 0.5) rounds half away from zero
    out = allocate_buffer(values.shape, np.uint8)
    out[...] = np.floor(snapped + 0.5)
    return out


def _check_dimension(label: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInputError(f"{label} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidInputError(f"{label} must be positive, got {value}")
    return int(value)


class RasterImage:
    """
    Immutable raster of packed ARGB pixels.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        pixels: Read-only 1-D numpy.uint32 array of length width * height
    """

    __slots__ = ("width", "height", "pixels")

    def __init__(self, width: int, height: int, pixels: Iterable[int]):
        """
        Create a raster from a packed pixel sequence.

        Args:
            width: Image width (> 0)
            height: Image height (> 0)
            pixels: Row-major sequence of 0xAARRGGBB integers

        Raises:
            InvalidInputError: On bad dimensions, non-integer data,
                out-of-range values or a length mismatch
        """
        width = _check_dimension("width", width)
        height = _check_dimension("height", height)

        try:
            data = np.asarray(pixels)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Pixel buffer is not array-like: {e}") from e

        if data.ndim != 1:
            raise InvalidInputError(f"Pixel buffer must be 1-D, got shape {data.shape}")
        if data.size != width * height:
            raise InvalidInputError(
                f"Pixel buffer length {data.size} does not match {width}x{height}"
            )
        if not np.issubdtype(data.dtype, np.integer):
            raise InvalidInputError(f"Pixel buffer must hold integers, got {data.dtype}")
        if data.dtype.kind == "i" and data.min() < 0:
            raise InvalidInputError("Pixel values must be non-negative")
        if data.max() > MAX_PACKED:
            raise InvalidInputError("Pixel values must fit in 32 bits")

        buffer = allocate_buffer(data.shape, np.uint32)
        buffer[...] = data
        self._init(width, height, buffer)

    def _init(self, width: int, height: int, buffer: np.ndarray):
        buffer.flags.writeable = False
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "pixels", buffer)

    def __setattr__(self, name, value):
        raise AttributeError("RasterImage is immutable")

    @classmethod
    def _wrap(cls, width: int, height: int, buffer: np.ndarray) -> "RasterImage":
        """Adopt a freshly allocated uint32 buffer without copying it."""
        image = cls.__new__(cls)
        image._init(width, height, buffer.reshape(-1))
        return image

    # Channel planes

    @classmethod
    def from_channels(
        cls,
        r: np.ndarray,
        g: np.ndarray,
        b: np.ndarray,
        a: np.ndarray,
    ) -> "RasterImage":
        """
        Build a raster from four (height, width) uint8 planes.

        Integer planes of another dtype are accepted when every value lies
        in 0-255.

        Args:
            r: Red plane
            g: Green plane
            b: Blue plane
            a: Alpha plane

        Returns:
            New RasterImage
        """
        planes = [np.asarray(p) for p in (r, g, b, a)]
        shape = planes[0].shape
        if len(shape) != 2 or any(p.shape != shape for p in planes):
            raise InvalidInputError("Channel planes must share one 2-D shape")
        height, width = shape
        _check_dimension("width", width)
        _check_dimension("height", height)
        for plane in planes:
            if plane.dtype == np.uint8:
                continue
            if not np.issubdtype(plane.dtype, np.integer):
                raise InvalidInputError(f"Channel planes must hold integers, got {plane.dtype}")
            if plane.min() < CHANNEL_MIN or plane.max() > CHANNEL_MAX:
                raise InvalidInputError("Channel values must lie in 0-255")

        packed = allocate_buffer(shape, np.uint32)
        packed[...] = planes[3]
        packed <<= 24
        packed |= planes[0].astype(np.uint32) << 16
        packed |= planes[1].astype(np.uint32) << 8
        packed |= planes[2].astype(np.uint32)
        return cls._wrap(width, height, packed)

    def channels(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Split the raster into (height, width) uint8 planes.

        Returns:
            Tuple of (r, g, b, a) planes
        """
        grid = self.pixels.reshape(self.height, self.width)
        return (
            ((grid >> 16) & 0xFF).astype(np.uint8),
            ((grid >> 8) & 0xFF).astype(np.uint8),
            (grid & 0xFF).astype(np.uint8),
            ((grid >> 24) & 0xFF).astype(np.uint8),
        )

    # Array bridges

    @classmethod
    def from_rgba(cls, array: np.ndarray) -> "RasterImage":
        """
        Build a raster from an (H, W, 4) uint8 RGBA array.
        """
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 4:
            raise InvalidInputError(f"Expected (H, W, 4) RGBA array, got shape {array.shape}")
        if array.dtype != np.uint8:
            raise InvalidInputError(f"Expected uint8 RGBA array, got {array.dtype}")
        return cls.from_channels(array[..., 0], array[..., 1], array[..., 2], array[..., 3])

    def to_rgba(self) -> np.ndarray:
        """Return the raster as a new (H, W, 4) uint8 RGBA array."""
        return np.dstack(self.channels())

    @classmethod
    def from_bgr(cls, array: np.ndarray) -> "RasterImage":
        """
        Build a raster from an OpenCV image.

        Accepts 8-bit grayscale, BGR or BGRA arrays as returned by
        cv2.imread(..., cv2.IMREAD_UNCHANGED).

        Args:
            array: OpenCV image

        Returns:
            New RasterImage
        """
        array = np.asarray(array)
        if array.dtype != np.uint8:
            raise InvalidInputError(f"Expected 8-bit image, got {array.dtype}")
        if array.ndim == 2:
            rgba = cv2.cvtColor(array, cv2.COLOR_GRAY2RGBA)
        elif array.ndim == 3 and array.shape[2] == 3:
            rgba = cv2.cvtColor(array, cv2.COLOR_BGR2RGBA)
        elif array.ndim == 3 and array.shape[2] == 4:
            rgba = cv2.cvtColor(array, cv2.COLOR_BGRA2RGBA)
        else:
            raise InvalidInputError(f"Unsupported image shape {array.shape}")
        return cls.from_rgba(rgba)

    def to_bgra(self) -> np.ndarray:
        """Return the raster as a new (H, W, 4) uint8 BGRA array for OpenCV."""
        return cv2.cvtColor(self.to_rgba(), cv2.COLOR_RGBA2BGRA)

    # Accessors

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """
        Get a single pixel.

        Args:
            x: Column
            y: Row

        Returns:
            (r, g, b, a) tuple
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        return unpack_argb(self.pixels[y * self.width + x])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    def __eq__(self, other) -> bool:
        if not isinstance(other, RasterImage):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.pixels, other.pixels)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"RasterImage(width={self.width}, height={self.height})"
