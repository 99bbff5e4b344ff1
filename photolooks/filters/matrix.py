"""
Color-matrix filters.
"""
from typing import Iterable, Union
from .base import Filter, FilterKind
from ..core.color_matrix import ColorMatrix, as_matrix
from ..core.errors import InvalidInputError
from ..core.raster import RasterImage


class MatrixFilter(Filter):
    """
    Applies one composed ColorMatrix to every pixel of an image.
    
    The stages are composed once at construction in application order, so
    ``MatrixFilter([A, B, C])`` transforms each pixel by A, then B, then C.
    """
    
    kind = FilterKind.MATRIX
    
    def __init__(
        self,
        stages: Union[ColorMatrix, Iterable[ColorMatrix]],
        name: str = "Matrix Filter",
        description: str = ""
    ):
        """
        Initialize matrix filter.
        
        Args:
            stages: A single ColorMatrix or the matrices to compose, in the
                order they should affect the pixel
            name: Filter name
            description: Filter description
        """
        super().__init__(name, description)
        if isinstance(stages, ColorMatrix):
            stages = [stages]
        self.stages = tuple(as_matrix(stage) for stage in stages)
        if not self.stages:
            raise InvalidInputError("MatrixFilter requires at least one matrix")
        self.matrix = ColorMatrix.chain(*self.stages)
    
    def apply(self, image: RasterImage) -> RasterImage:
        """
        Apply the composed matrix to the image.
        
        Args:
            image: Input image
            
        Returns:
            Transformed image; alpha is unchanged whenever the matrix keeps
            the fixed [0, 0, 0, 1, 0] alpha row
        """
        return self.matrix.apply(image)
