"""
Separable box blur.
"""
from typing import Optional
import math
import numpy as np
from .base import Filter, FilterKind
from ..constants import (
    BLUR_RADIUS_MIN,
    BLUR_RADIUS_MAX,
    BLUR_DEFAULT_RADIUS,
    BLUR_OUTPUT_ALPHA,
)
from ..core.errors import InvalidInputError
from ..core.raster import RasterImage, allocate_buffer


def clamp_radius(radius) -> int:
    """
    Coerce a requested blur radius into the supported range.
    
    Args:
        radius: Requested radius (fractional values are truncated)
        
    Returns:
        Radius clamped to [BLUR_RADIUS_MIN, BLUR_RADIUS_MAX]
        
    Raises:
        InvalidInputError: If radius is not a finite number
    """
    if isinstance(radius, bool) or not isinstance(radius, (int, float, np.integer, np.floating)):
        raise InvalidInputError(f"Blur radius must be a number, got {radius!r}")
    if not math.isfinite(radius):
        raise InvalidInputError(f"Blur radius must be finite, got {radius}")
    return max(BLUR_RADIUS_MIN, min(BLUR_RADIUS_MAX, int(radius)))


def _mean_pass(plane: np.ndarray, radius: int, axis: int, out: np.ndarray) -> None:
    """
    Unweighted mean over a clamp-to-edge window along one axis.
    
    Window sums come from an exact integer running sum; the mean is
    truncated, matching integer channel division.
    """
    span = 2 * radius + 1
    edge = [(0, 0), (0, 0)]
    edge[axis] = (radius, radius)
    padded = np.pad(plane.astype(np.int64), edge, mode="edge")
    
    lead = [(0, 0), (0, 0)]
    lead[axis] = (1, 0)
    running = np.cumsum(np.pad(padded, lead, mode="constant"), axis=axis)
    
    if axis == 1:
        sums = running[:, span:] - running[:, :-span]
    else:
        sums = running[span:, :] - running[:-span, :]
    out[...] = sums // span


class BoxBlurFilter(Filter):
    """
    Two-pass box blur: horizontal mean, then vertical mean.
    
    The horizontal pass writes into a separate intermediate buffer which the
    vertical pass reads, so no pass ever sees its own output. Source alpha is
    discarded and every output pixel is fully opaque.
    """
    
    kind = FilterKind.BOX_BLUR
    
    def __init__(
        self,
        radius: int = BLUR_DEFAULT_RADIUS,
        name: str = "Blur",
        description: str = "Separable box blur"
    ):
        """
        Initialize box blur.
        
        Args:
            radius: Window half-width, clamped to [1, 10]
            name: Filter name
            description: Filter description
        """
        super().__init__(name, description)
        self.radius = clamp_radius(radius)
    
    def with_radius(self, radius: int) -> "BoxBlurFilter":
        """Return a copy of this filter using a different radius."""
        return BoxBlurFilter(radius, self.name, self.description)
    
    def apply(self, image: RasterImage, radius: Optional[int] = None) -> RasterImage:
        """
        Blur the image.
        
        Args:
            image: Input image
            radius: Optional per-call radius override, clamped to [1, 10]
            
        Returns:
            Blurred, fully opaque image
        """
        radius = self.radius if radius is None else clamp_radius(radius)
        r, g, b, _ = image.channels()
        h, w = r.shape
        
        # Horizontal pass -> intermediate, vertical pass -> output
        intermediate = allocate_buffer((3, h, w), np.uint8)
        output = allocate_buffer((3, h, w), np.uint8)
        for index, plane in enumerate((r, g, b)):
            _mean_pass(plane, radius, axis=1, out=intermediate[index])
        for index in range(3):
            _mean_pass(intermediate[index], radius, axis=0, out=output[index])
        
        alpha = allocate_buffer((h, w), np.uint8)
        alpha.fill(BLUR_OUTPUT_ALPHA)
        return RasterImage.from_channels(output[0], output[1], output[2], alpha)
