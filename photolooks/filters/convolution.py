"""
Spatial convolution filters with clamp-to-edge sampling.
"""
from typing import Sequence, Union
import numpy as np
from .base import Filter, FilterKind
from ..constants import EMBOSS_KERNEL, EMBOSS_OFFSET
from ..core.errors import InvalidInputError
from ..core.raster import RasterImage, allocate_buffer, to_channel


def _as_kernel(kernel: Union[Sequence[float], Sequence[Sequence[float]], np.ndarray]) -> np.ndarray:
    try:
        k = np.array(kernel, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Kernel must be numeric: {e}") from e
    
    if k.ndim == 1:
        side = int(round(np.sqrt(k.size)))
        if side * side != k.size:
            raise InvalidInputError(f"Flat kernel of {k.size} taps is not square")
        k = k.reshape(side, side)
    if k.ndim != 2 or k.shape[0] != k.shape[1] or k.shape[0] % 2 == 0:
        raise InvalidInputError(f"Kernel must be square with odd side, got shape {k.shape}")
    if not np.all(np.isfinite(k)):
        raise InvalidInputError("Kernel coefficients must be finite")
    
    k.flags.writeable = False
    return k


def convolve_plane(channel: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """
    Convolve one channel plane with clamp-to-edge sampling.
    
    Taps are accumulated row-major so the summation order is fixed.
    
    Args:
        channel: 2-D plane of any numeric dtype
        kernel: Square odd-sized float64 kernel
        
    Returns:
        Unrounded float64 sums with the same shape as ``channel``
    """
    h, w = channel.shape
    side = kernel.shape[0]
    k = side // 2
    padded = np.pad(channel.astype(np.float64), k, mode="edge")
    
    acc = allocate_buffer((h, w), np.float64)
    acc.fill(0.0)
    # huge finite weights may overflow; to_channel bounds inf and NaN
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(side):
            for j in range(side):
                weight = kernel[i, j]
                if weight == 0.0:
                    continue
                acc += weight * padded[i:i + h, j:j + w]
    return acc


class ConvolutionFilter(Filter):
    """
    Convolves R, G and B independently with a square kernel.
    
    Neighbours outside the image are read from the nearest edge pixel.
    The fixed ``offset`` is added to each sum before clamping and rounding.
    Alpha is not convolved: each output pixel keeps its source alpha.
    """
    
    kind = FilterKind.CONVOLUTION
    
    def __init__(
        self,
        kernel,
        offset: float = 0.0,
        name: str = "Convolution Filter",
        description: str = ""
    ):
        """
        Initialize convolution filter.
        
        Args:
            kernel: Square odd-sized kernel, nested or flat row-major
                (the 3x3 case is 9 taps ordered dy=-1..1, dx=-1..1)
            offset: Constant added to every channel sum
            name: Filter name
            description: Filter description
        """
        super().__init__(name, description)
        self.kernel = _as_kernel(kernel)
        self.offset = float(offset)
        if not np.isfinite(self.offset):
            raise InvalidInputError("Convolution offset must be finite")
    
    @property
    def radius(self) -> int:
        """Number of taps on each side of the centre."""
        return self.kernel.shape[0] // 2
    
    def apply(self, image: RasterImage) -> RasterImage:
        """
        Apply the kernel to the image.
        
        Args:
            image: Input image
            
        Returns:
            Convolved image with source alpha
        """
        r, g, b, a = image.channels()
        return RasterImage.from_channels(
            self._convolve(r),
            self._convolve(g),
            self._convolve(b),
            a,
        )
    
    def _convolve(self, channel: np.ndarray) -> np.ndarray:
        acc = convolve_plane(channel, self.kernel)
        acc += self.offset
        return to_channel(acc)


class EmbossFilter(ConvolutionFilter):
    """
    Emboss relief: directional edge kernel lifted to mid-gray.
    
    The kernel sums to 1, so flat regions map to color + 128 (clamped).
    """
    
    def __init__(self):
        """Initialize emboss filter with the fixed kernel and offset."""
        super().__init__(
            EMBOSS_KERNEL,
            offset=EMBOSS_OFFSET,
            name="Emboss",
            description="Raised 3-D relief effect"
        )
