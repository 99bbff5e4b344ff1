"""
Photo adjustments: linear sliders folded into a single color matrix, and
the full three-stage adjustment pipeline.
"""
from .composite import CompositeFilter
from .matrix import MatrixFilter
from .post_effects import PostEffectFilter
from .tone import ToneFilter
from .sliders import slider_value
from ..constants import EXPOSURE_STOPS_DIVISOR, CHANNEL_MAX
from ..core.color_matrix import ColorMatrix


class AdjustmentFilter(MatrixFilter):
    """
    Exposure, saturation, contrast and brightness sliders as one matrix.
    
    Each slider ranges over [-100, 100] with 0 meaning "unchanged"; values
    outside the range are clamped. The stages compose in the order
    exposure -> saturation -> contrast -> brightness.
    """
    
    def __init__(
        self,
        brightness: float = 0.0,
        contrast: float = 0.0,
        saturation: float = 0.0,
        exposure: float = 0.0,
        name: str = "Adjustments",
        description: str = ""
    ):
        """
        Initialize adjustment filter.
        
        Args:
            brightness: Shift of up to +/-255 channel units at +/-100
            contrast: Contrast scale (contrast + 100) / 100
            saturation: Saturation factor (saturation + 100) / 100
            exposure: Gain of 2 ** (exposure / 50), so 50 is one stop
            name: Filter name
            description: Filter description
        """
        self.brightness = slider_value("brightness", brightness)
        self.contrast = slider_value("contrast", contrast)
        self.saturation = slider_value("saturation", saturation)
        self.exposure = slider_value("exposure", exposure)
        
        stages = [
            ColorMatrix.channel_gain(2.0 ** (self.exposure / EXPOSURE_STOPS_DIVISOR)),
            ColorMatrix.saturation((self.saturation + 100.0) / 100.0),
            ColorMatrix.scale_offset((self.contrast + 100.0) / 100.0),
            ColorMatrix.translate(self.brightness / 100.0 * CHANNEL_MAX),
        ]
        if not description:
            description = (
                f"brightness={self.brightness:g}, contrast={self.contrast:g}, "
                f"saturation={self.saturation:g}, exposure={self.exposure:g}"
            )
        super().__init__(stages, name, description)
    
    @property
    def is_neutral(self) -> bool:
        """True when every slider is zero."""
        return not any((self.brightness, self.contrast, self.saturation, self.exposure))


class AdjustmentPipeline(CompositeFilter):
    """
    Every editor slider as three stages run in sequence.
    
    Stage 1 is the fused linear matrix (AdjustmentFilter), stage 2 the
    per-pixel tone and color pass (ToneFilter) and stage 3 the 3x3 finishing
    effects (PostEffectFilter). Each stage rounds to 8 bits.
    """
    
    def __init__(
        self,
        brightness: float = 0.0,
        contrast: float = 0.0,
        saturation: float = 0.0,
        exposure: float = 0.0,
        highlights: float = 0.0,
        shadows: float = 0.0,
        vibrance: float = 0.0,
        warmth: float = 0.0,
        tint: float = 0.0,
        hue: float = 0.0,
        sharpness: float = 0.0,
        definition: float = 0.0,
        vignette: float = 0.0,
        glow: float = 0.0,
        name: str = "Adjustments"
    ):
        self.linear = AdjustmentFilter(
            brightness=brightness,
            contrast=contrast,
            saturation=saturation,
            exposure=exposure,
        )
        self.tone = ToneFilter(
            highlights=highlights,
            shadows=shadows,
            vibrance=vibrance,
            warmth=warmth,
            tint=tint,
            hue=hue,
            vignette=vignette,
        )
        self.post = PostEffectFilter(sharpness=sharpness, definition=definition, glow=glow)
        
        stages = [self.linear, self.tone, self.post]
        active = [stage for stage in stages if not stage.is_neutral]
        description = "; ".join(stage.description for stage in active) or "neutral"
        super().__init__(stages, name, description)
    
    @property
    def is_neutral(self) -> bool:
        """True when every slider in every stage is zero."""
        return all(stage.is_neutral for stage in self.filters)
