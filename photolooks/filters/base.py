"""
Base filter interface for pixel-transforming filters.
"""
from abc import ABC, abstractmethod
from enum import Enum
from ..core.raster import RasterImage


class FilterKind(Enum):
    """Tag identifying which family a filter belongs to."""
    MATRIX = "matrix"
    CONVOLUTION = "convolution"
    BOX_BLUR = "box_blur"
    TONE = "tone"
    COMPOSITE = "composite"


class Filter(ABC):
    """
    Abstract base class for all image filters.
    
    Filters are pure: ``apply`` reads its input image and returns a new
    RasterImage of identical dimensions. They hold no mutable state between
    calls and can be composed together using CompositeFilter.
    """
    
    kind: FilterKind
    
    def __init__(self, name: str, description: str = ""):
        """
        Initialize the filter.
        
        Args:
            name: Human-readable name for this filter
            description: Optional description of what the filter does
        """
        self.name = name
        self.description = description
    
    @abstractmethod
    def apply(self, image: RasterImage) -> RasterImage:
        """
        Apply the filter to an image.
        
        Args:
            image: Input image (never modified)
            
        Returns:
            New image with the same width and height
        """
        pass
    
    def __call__(self, image: RasterImage) -> RasterImage:
        return self.apply(image)
    
    def __repr__(self) -> str:
        """String representation of the filter."""
        return f"{self.__class__.__name__}(name='{self.name}')"
