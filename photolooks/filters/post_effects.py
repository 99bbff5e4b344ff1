"""
Neighbourhood finishing effects: sharpness, definition and glow.
"""
import numpy as np
from .base import Filter, FilterKind
from .convolution import convolve_plane
from .sliders import slider_value, lerp
from ..constants import CHANNEL_MAX, EFFECT_MIN, EFFECT_MAX, SHARPEN_KERNEL, DEFINITION_GAIN
from ..core.raster import RasterImage, to_channel

_SHARPEN = np.array(SHARPEN_KERNEL, dtype=np.float64)
_BOX_MEAN = np.full((3, 3), 1.0 / 9.0)


class PostEffectFilter(Filter):
    """
    Sharpness, definition and glow over a 3x3 clamp-to-edge neighbourhood.
    
    Every effect reads the source neighbourhood; they are blended into the
    centre value in the order sharpness -> definition -> glow and rounded
    once. Alpha is kept.
    """
    
    kind = FilterKind.CONVOLUTION
    
    def __init__(
        self,
        sharpness: float = 0.0,
        definition: float = 0.0,
        glow: float = 0.0,
        name: str = "Post Effects",
        description: str = ""
    ):
        """
        Initialize post-effect filter.
        
        Args:
            sharpness: Blend toward a 4-neighbour sharpen, 0..100
            definition: Local contrast against the 3x3 mean, 0..100
            glow: Blend toward a screen of the pixel with its 3x3 mean, 0..100
            name: Filter name
            description: Filter description
        """
        super().__init__(name, description)
        self.sharpness = slider_value("sharpness", sharpness, EFFECT_MIN, EFFECT_MAX)
        self.definition = slider_value("definition", definition, EFFECT_MIN, EFFECT_MAX)
        self.glow = slider_value("glow", glow, EFFECT_MIN, EFFECT_MAX)
        
        if not description:
            self.description = (
                f"sharpness={self.sharpness:g}, definition={self.definition:g}, glow={self.glow:g}"
            )
    
    @property
    def is_neutral(self) -> bool:
        """True when every slider is zero."""
        return not any((self.sharpness, self.definition, self.glow))
    
    def apply(self, image: RasterImage) -> RasterImage:
        """
        Apply the enabled effects.
        
        Args:
            image: Input image
            
        Returns:
            Processed image with source alpha
        """
        r, g, b, a = image.channels()
        return RasterImage.from_channels(
            self._process(r),
            self._process(g),
            self._process(b),
            a,
        )
    
    def _process(self, channel: np.ndarray) -> np.ndarray:
        out = channel.astype(np.float64)
        
        if self.sharpness:
            out = lerp(out, convolve_plane(channel, _SHARPEN), self.sharpness / 100.0)
        
        if self.definition or self.glow:
            mean = convolve_plane(channel, _BOX_MEAN)
            if self.definition:
                out += (out - mean) * (self.definition / 100.0 * DEFINITION_GAIN)
            if self.glow:
                screen = CHANNEL_MAX - (CHANNEL_MAX - out) * (CHANNEL_MAX - mean) / CHANNEL_MAX
                out = lerp(out, screen, self.glow / 100.0)
        
        return to_channel(out)
