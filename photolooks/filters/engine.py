"""
Single entry point for applying filters and catalog looks.
"""
from typing import List, Optional
from .base import Filter, FilterKind
from .registry import FilterRegistry
from ..core.errors import AllocationFailureError, InvalidInputError
from ..core.raster import RasterImage

DEFAULT_REGISTRY = FilterRegistry.default()


def apply_filter(image: RasterImage, filter_obj: Filter, radius: Optional[int] = None) -> RasterImage:
    """
    Apply one filter to an image.
    
    Args:
        image: Input image (never modified)
        filter_obj: Filter to apply
        radius: Blur radius override; only valid for box blur filters
        
    Returns:
        New image with the same dimensions as ``image``
        
    Raises:
        InvalidInputError: If the image or arguments are malformed
        AllocationFailureError: If an output buffer cannot be allocated
    """
    if not isinstance(image, RasterImage):
        raise InvalidInputError(f"Expected RasterImage, got {type(image).__name__}")
    if not isinstance(filter_obj, Filter):
        raise InvalidInputError(f"Not a filter: {filter_obj!r}")
    
    kind = filter_obj.kind
    if radius is not None and kind is not FilterKind.BOX_BLUR:
        raise InvalidInputError(f"'{filter_obj.name}' does not take a radius")
    
    try:
        if kind is FilterKind.BOX_BLUR:
            return filter_obj.apply(image, radius)
        elif kind in (FilterKind.MATRIX, FilterKind.CONVOLUTION, FilterKind.TONE, FilterKind.COMPOSITE):
            return filter_obj.apply(image)
        else:
            raise InvalidInputError(f"Unsupported filter kind: {kind}")
    except AllocationFailureError:
        raise
    except MemoryError as e:
        raise AllocationFailureError(f"Out of memory applying '{filter_obj.name}'") from e


def apply_look(
    image: RasterImage,
    name: str,
    radius: Optional[int] = None,
    registry: Optional[FilterRegistry] = None
) -> RasterImage:
    """
    Apply a catalog look by name.
    
    Args:
        image: Input image
        name: Look name (case and separators ignored)
        radius: Optional blur radius, clamped to [1, 10]
        registry: Registry to look the name up in (defaults to the catalog)
        
    Returns:
        New filtered image
        
    Raises:
        UnknownLookError: If the name is not registered
    """
    registry = DEFAULT_REGISTRY if registry is None else registry
    return apply_filter(image, registry.require_filter(name), radius)


def available_looks(registry: Optional[FilterRegistry] = None) -> List[str]:
    """Names of every look in the registry."""
    registry = DEFAULT_REGISTRY if registry is None else registry
    return registry.list_filters()
