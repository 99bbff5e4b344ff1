"""
Per-pixel tone and color adjustments that a single matrix cannot express.
"""
import cv2
import numpy as np
from .base import Filter, FilterKind
from .sliders import slider_value, smoothstep
from ..constants import (
    CHANNEL_MIN,
    CHANNEL_MAX,
    EFFECT_MIN,
    EFFECT_MAX,
    TONE_LUMA_R,
    TONE_LUMA_G,
    TONE_LUMA_B,
    HIGHLIGHT_EDGES,
    SHADOW_EDGES,
    WARMTH_SHIFT,
    TINT_GREEN_SHIFT,
    TINT_RED_BLUE_SHIFT,
    HUE_DEGREES_PER_UNIT,
    VIGNETTE_EDGES,
    VIGNETTE_MAX_DISTANCE,
)
from ..core.raster import RasterImage, to_channel


def _lift(planes, amount: float, mask: np.ndarray) -> None:
    """Push planes toward white (amount > 0) or toward black (amount < 0) where mask is set."""
    for c in planes:
        if amount > 0:
            c += (CHANNEL_MAX - c) * amount * mask
        else:
            c *= 1.0 + amount * mask


def vignette_mask(width: int, height: int) -> np.ndarray:
    """
    Squared radial falloff, 0 at the centre and 1 in the far corners.
    
    Distances are normalised so the middle of each edge sits at 1. An axis
    one pixel long contributes no distance.
    """
    cx = (width - 1) / 2.0
    cy = (height - 1) / 2.0
    inv_cx = 0.0 if cx == 0 else 1.0 / cx
    inv_cy = 0.0 if cy == 0 else 1.0 / cy
    
    nx = (np.arange(width, dtype=np.float64) - cx) * inv_cx
    ny = (np.arange(height, dtype=np.float64) - cy) * inv_cy
    d = np.clip(np.sqrt(nx[np.newaxis, :] ** 2 + ny[:, np.newaxis] ** 2), 0.0, VIGNETTE_MAX_DISTANCE)
    mask = smoothstep(VIGNETTE_EDGES[0], VIGNETTE_EDGES[1], d)
    return mask * mask


class ToneFilter(Filter):
    """
    Highlights, shadows, warmth, tint, hue, vibrance and vignette.
    
    Stages run in that order on float planes; channels are clamped before
    the HSV step and rounded once at the end. Alpha is kept.
    """
    
    kind = FilterKind.TONE
    
    def __init__(
        self,
        highlights: float = 0.0,
        shadows: float = 0.0,
        vibrance: float = 0.0,
        warmth: float = 0.0,
        tint: float = 0.0,
        hue: float = 0.0,
        vignette: float = 0.0,
        name: str = "Tone",
        description: str = ""
    ):
        """
        Initialize tone filter.
        
        Args:
            highlights: Brighten (>0) or recover (<0) pixels with luma above 0.55
            shadows: Lift (>0) or crush (<0) pixels with luma below 0.45
            vibrance: Scale HSV saturation toward 1 (>0) or 0 (<0)
            warmth: Shift red up and blue down by up to 24
            tint: Shift toward magenta (>0) or green (<0)
            hue: Rotate hue by 1.8 degrees per unit
            vignette: Darken corners, 0..100
            name: Filter name
            description: Filter description
        """
        super().__init__(name, description)
        self.highlights = slider_value("highlights", highlights)
        self.shadows = slider_value("shadows", shadows)
        self.vibrance = slider_value("vibrance", vibrance)
        self.warmth = slider_value("warmth", warmth)
        self.tint = slider_value("tint", tint)
        self.hue = slider_value("hue", hue)
        self.vignette = slider_value("vignette", vignette, EFFECT_MIN, EFFECT_MAX)
        
        if not description:
            self.description = (
                f"highlights={self.highlights:g}, shadows={self.shadows:g}, "
                f"vibrance={self.vibrance:g}, warmth={self.warmth:g}, tint={self.tint:g}, "
                f"hue={self.hue:g}, vignette={self.vignette:g}"
            )
    
    @property
    def is_neutral(self) -> bool:
        """True when every slider is zero."""
        return not any((
            self.highlights, self.shadows, self.vibrance, self.warmth,
            self.tint, self.hue, self.vignette,
        ))
    
    def apply(self, image: RasterImage) -> RasterImage:
        """
        Apply the tone stages.
        
        Args:
            image: Input image
            
        Returns:
            Adjusted image with source alpha
        """
        r, g, b, a = image.channels()
        planes = [c.astype(np.float64) for c in (r, g, b)]
        
        hl = self.highlights / 100.0
        sh = self.shadows / 100.0
        if hl or sh:
            lum = (TONE_LUMA_R * planes[0] + TONE_LUMA_G * planes[1] + TONE_LUMA_B * planes[2]) / CHANNEL_MAX
            if hl:
                _lift(planes, hl, smoothstep(HIGHLIGHT_EDGES[0], HIGHLIGHT_EDGES[1], lum))
            if sh:
                _lift(planes, sh, smoothstep(SHADOW_EDGES[0], SHADOW_EDGES[1], 1.0 - lum))
        
        warm = self.warmth / 100.0
        if warm:
            planes[0] += warm * WARMTH_SHIFT
            planes[2] -= warm * WARMTH_SHIFT
        
        tn = self.tint / 100.0
        if tn:
            planes[1] += tn * TINT_GREEN_SHIFT
            planes[0] += tn * TINT_RED_BLUE_SHIFT
            planes[2] += tn * TINT_RED_BLUE_SHIFT
        
        for c in planes:
            np.clip(c, CHANNEL_MIN, CHANNEL_MAX, out=c)
        
        if self.hue or self.vibrance:
            planes = self._shift_hsv(planes)
        
        if self.vignette:
            factor = 1.0 - (self.vignette / 100.0) * vignette_mask(image.width, image.height)
            for c in planes:
                c *= factor
        
        return RasterImage.from_channels(*(to_channel(c) for c in planes), a)
    
    def _shift_hsv(self, planes):
        """Rotate hue and scale saturation; pixels with no saturation stay gray."""
        rgb = np.ascontiguousarray(np.dstack(planes) / CHANNEL_MAX, dtype=np.float32)
        hsv = cv2.cvtColor(rgb, cv2.COLOR_RGB2HSV)
        h, s = hsv[:, :, 0], hsv[:, :, 1]
        
        if self.hue:
            h[:] = np.mod(h + self.hue * HUE_DEGREES_PER_UNIT, 360.0)
        
        vib = self.vibrance / 100.0
        if vib > 0:
            s[:] = np.where(s > 0, s + vib * (1.0 - s), s)
        elif vib < 0:
            s *= 1.0 + vib
        np.clip(s, 0.0, 1.0, out=s)
        
        rgb = cv2.cvtColor(hsv, cv2.COLOR_HSV2RGB).astype(np.float64) * CHANNEL_MAX
        return [rgb[:, :, i] for i in range(3)]
