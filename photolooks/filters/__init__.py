"""Filters: pixel-transforming filters and the look catalog."""
from .base import Filter, FilterKind
from .matrix import MatrixFilter
from .convolution import ConvolutionFilter, EmbossFilter
from .blur import BoxBlurFilter, clamp_radius
from .tone import ToneFilter
from .post_effects import PostEffectFilter
from .adjustments import AdjustmentFilter, AdjustmentPipeline
from .composite import CompositeFilter
from .catalog import LOOKS
from .registry import FilterRegistry
from .engine import apply_filter, apply_look, available_looks

__all__ = [
    "Filter",
    "FilterKind",
    "MatrixFilter",
    "ConvolutionFilter",
    "EmbossFilter",
    "BoxBlurFilter",
    "clamp_radius",
    "ToneFilter",
    "PostEffectFilter",
    "AdjustmentFilter",
    "AdjustmentPipeline",
    "CompositeFilter",
    "LOOKS",
    "FilterRegistry",
    "apply_filter",
    "apply_look",
    "available_looks",
]
