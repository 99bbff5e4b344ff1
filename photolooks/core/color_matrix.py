"""
Affine 4x5 color matrices over (R, G, B, A) plus a per-channel offset.

Rows produce R', G', B', A'; columns weight R, G, B, A and the last column
is a constant added in 0-255 channel units.
"""
from typing import Iterable, Sequence, Union
import numpy as np

from .errors import InvalidInputError
from .raster import RasterImage, to_channel
from ..constants import LUMA_R, LUMA_G, LUMA_B, CONTRAST_PIVOT, CHANNEL_MAX

_HOMOGENEOUS_ROW = np.array([0.0, 0.0, 0.0, 0.0, 1.0])
_ALPHA_PASSTHROUGH = np.array([0.0, 0.0, 0.0, 1.0, 0.0])


class ColorMatrix:
    """
    Immutable 4x5 affine color operator.

    Composition is order-sensitive: to apply A, then B, then C to a pixel
    build ``ColorMatrix.chain(A, B, C)``, which is the product C·B·A.
    """

    __slots__ = ("_m",)

    def __init__(self, coefficients: Union[Sequence[float], Sequence[Sequence[float]], np.ndarray]):
        """
        Initialize from literal coefficients.

        Args:
            coefficients: 20 numbers row-major, or a 4x5 nested sequence

        Raises:
            InvalidInputError: If the coefficients are not 20 finite numbers
        """
        try:
            m = np.array(coefficients, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Color matrix coefficients must be numeric: {e}") from e

        if m.size != 20:
            raise InvalidInputError(f"Color matrix needs 20 coefficients, got {m.size}")
        if not np.all(np.isfinite(m)):
            raise InvalidInputError("Color matrix coefficients must be finite")

        m = m.reshape(4, 5)
        m.flags.writeable = False
        self._m = m

    # Constructors

    @classmethod
    def identity(cls) -> "ColorMatrix":
        """Matrix that leaves every channel unchanged."""
        return cls(np.eye(4, 5))

    @classmethod
    def saturation(cls, s: float) -> "ColorMatrix":
        """
        Luma-weighted saturation matrix.

        s=0 gives true grayscale (R'=G'=B'), s=1 is identity, s>1 boosts
        saturation.

        Args:
            s: Saturation factor

        Returns:
            Saturation ColorMatrix
        """
        s = float(s)
        inv = 1.0 - s
        r, g, b = LUMA_R * inv, LUMA_G * inv, LUMA_B * inv
        return cls([
            [r + s, g, b, 0.0, 0.0],
            [r, g + s, b, 0.0, 0.0],
            [r, g, b + s, 0.0, 0.0],
            _ALPHA_PASSTHROUGH,
        ])

    @classmethod
    def scale_offset(cls, scale: float, extra_offset: float = 0.0) -> "ColorMatrix":
        """
        Uniform contrast matrix pivoting around mid-gray.

        Scales R, G, B by ``scale`` and translates each by
        ``(-0.5 * scale + 0.5) * 255 + extra_offset``.

        Args:
            scale: Contrast scale (<1 softens, >1 hardens)
            extra_offset: Additional lift in channel units

        Returns:
            Contrast ColorMatrix
        """
        scale = float(scale)
        t = (-CONTRAST_PIVOT * scale + CONTRAST_PIVOT) * CHANNEL_MAX + float(extra_offset)
        return cls([
            [scale, 0.0, 0.0, 0.0, t],
            [0.0, scale, 0.0, 0.0, t],
            [0.0, 0.0, scale, 0.0, t],
            _ALPHA_PASSTHROUGH,
        ])

    @classmethod
    def tint(cls, coefficients) -> "ColorMatrix":
        """Fixed literal matrix (sepia, warm or cool casts)."""
        return cls(coefficients)

    @classmethod
    def channel_gain(cls, gain: float) -> "ColorMatrix":
        """Multiply R, G, B by ``gain``."""
        gain = float(gain)
        return cls([
            [gain, 0.0, 0.0, 0.0, 0.0],
            [0.0, gain, 0.0, 0.0, 0.0],
            [0.0, 0.0, gain, 0.0, 0.0],
            _ALPHA_PASSTHROUGH,
        ])

    @classmethod
    def translate(cls, offset: float) -> "ColorMatrix":
        """Add ``offset`` to R, G, B."""
        offset = float(offset)
        return cls([
            [1.0, 0.0, 0.0, 0.0, offset],
            [0.0, 1.0, 0.0, 0.0, offset],
            [0.0, 0.0, 1.0, 0.0, offset],
            _ALPHA_PASSTHROUGH,
        ])

    # Algebra

    @staticmethod
    def compose(existing: "ColorMatrix", next_matrix: "ColorMatrix") -> "ColorMatrix":
        """
        Compose two matrices so that ``existing`` runs first.

        Returns next·existing, i.e. (next∘existing)(v) = next(existing(v)).

        Args:
            existing: Accumulated operator (applied first)
            next_matrix: Operator applied to the result of ``existing``

        Returns:
            Combined ColorMatrix
        """
        product = next_matrix._homogeneous() @ existing._homogeneous()
        return ColorMatrix(product[:4])

    @classmethod
    def chain(cls, *matrices: "ColorMatrix") -> "ColorMatrix":
        """
        Compose matrices in application order, starting from identity.

        ``chain(A, B, C)`` applies A first and C last.
        """
        combined = cls.identity()
        for matrix in matrices:
            combined = cls.compose(combined, matrix)
        return combined

    def then(self, next_matrix: "ColorMatrix") -> "ColorMatrix":
        """Shorthand for ``ColorMatrix.compose(self, next_matrix)``."""
        return ColorMatrix.compose(self, next_matrix)

    def _homogeneous(self) -> np.ndarray:
        return np.vstack([self._m, _HOMOGENEOUS_ROW])

    # Accessors

    @property
    def values(self) -> list:
        """The 20 coefficients, row-major."""
        return self._m.reshape(-1).tolist()

    @property
    def rows(self) -> np.ndarray:
        """Writable 4x5 copy of the coefficients."""
        return self._m.copy()

    @property
    def preserves_alpha(self) -> bool:
        """True when the alpha row is [0, 0, 0, 1, 0]."""
        return bool(np.array_equal(self._m[3], _ALPHA_PASSTHROUGH))

    def is_identity(self) -> bool:
        return bool(np.array_equal(self._m, np.eye(4, 5)))

    # Application

    def apply_channels(self, r: np.ndarray, g: np.ndarray, b: np.ndarray, a: np.ndarray):
        """
        Transform channel planes.

        Each output channel is evaluated as m0*r + m1*g + m2*b + m3*a + m4
        in that order, then clamped and rounded to 8 bits.

        Args:
            r: Red plane (uint8)
            g: Green plane (uint8)
            b: Blue plane (uint8)
            a: Alpha plane (uint8)

        Returns:
            Tuple of transformed (r, g, b, a) uint8 planes
        """
        src = [c.astype(np.float64) for c in (r, g, b, a)]
        out = []
        for row in self._m:
            # huge coefficients may overflow to inf or NaN; to_channel bounds them
            with np.errstate(over="ignore", invalid="ignore"):
                acc = row[0] * src[0]
                acc += row[1] * src[1]
                acc += row[2] * src[2]
                acc += row[3] * src[3]
                acc += row[4]
            out.append(to_channel(acc))
        return tuple(out)

    def apply(self, image: RasterImage) -> RasterImage:
        """Apply the matrix to every pixel, returning a new image."""
        return RasterImage.from_channels(*self.apply_channels(*image.channels()))

    def apply_pixel(self, r: int, g: int, b: int, a: int = 255) -> tuple:
        """Transform a single (r, g, b, a) pixel."""
        planes = [np.array([[v]], dtype=np.uint8) for v in (r, g, b, a)]
        return tuple(int(p[0, 0]) for p in self.apply_channels(*planes))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorMatrix):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None

    def allclose(self, other: "ColorMatrix", atol: float = 1e-9) -> bool:
        return bool(np.allclose(self._m, other._m, atol=atol))

    def __repr__(self) -> str:
        rows = " / ".join(", ".join(f"{v:g}" for v in row) for row in self._m)
        return f"ColorMatrix([{rows}])"


def as_matrix(value: Union[ColorMatrix, Iterable[float]]) -> ColorMatrix:
    """Coerce literal coefficients to a ColorMatrix."""
    if isinstance(value, ColorMatrix):
        return value
    return ColorMatrix(value)
