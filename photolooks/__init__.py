"""Photo Looks: named visual looks for raster photos."""
from .core import (
    ColorMatrix,
    RasterImage,
    pack_argb,
    unpack_argb,
    InvalidInputError,
    UnknownLookError,
    AllocationFailureError,
)
from .filters import (
    Filter,
    FilterKind,
    MatrixFilter,
    ConvolutionFilter,
    EmbossFilter,
    BoxBlurFilter,
    ToneFilter,
    PostEffectFilter,
    AdjustmentFilter,
    AdjustmentPipeline,
    CompositeFilter,
    FilterRegistry,
    apply_filter,
    apply_look,
    available_looks,
)

__version__ = "1.0.0"

__all__ = [
    "ColorMatrix",
    "RasterImage",
    "pack_argb",
    "unpack_argb",
    "InvalidInputError",
    "UnknownLookError",
    "AllocationFailureError",
    "Filter",
    "FilterKind",
    "MatrixFilter",
    "ConvolutionFilter",
    "EmbossFilter",
    "BoxBlurFilter",
    "ToneFilter",
    "PostEffectFilter",
    "AdjustmentFilter",
    "AdjustmentPipeline",
    "CompositeFilter",
    "FilterRegistry",
    "apply_filter",
    "apply_look",
    "available_looks",
]
