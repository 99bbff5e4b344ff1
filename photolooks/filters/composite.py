"""
Composite filter for chaining multiple filters together.
"""
from typing import List
from .base import Filter, FilterKind
from ..core.errors import InvalidInputError
from ..core.raster import RasterImage


class CompositeFilter(Filter):
    """
    Composite filter that applies several filters in sequence.
    
    Each filter receives the previous filter's output, e.g. a look followed
    by a blur. Matrix stages are not fused: every step rounds to 8 bits, so
    the result equals calling the filters one after another.
    """
    
    kind = FilterKind.COMPOSITE
    
    def __init__(
        self,
        filters: List[Filter],
        name: str = "Composite Filter",
        description: str = ""
    ):
        """
        Initialize composite filter.
        
        Args:
            filters: Filters to apply, first to last
            name: Filter name
            description: Filter description
        """
        filters = list(filters)
        if not filters:
            raise InvalidInputError("CompositeFilter requires at least one filter")
        for filter_obj in filters:
            if not isinstance(filter_obj, Filter):
                raise InvalidInputError(f"Not a filter: {filter_obj!r}")
        
        super().__init__(name, description)
        self.filters = filters
        
        # Generate description if not provided
        if not description:
            filter_names = " -> ".join(f.name for f in filters)
            self.description = f"Composite filter: {filter_names}"
    
    def apply(self, image: RasterImage) -> RasterImage:
        """
        Apply every filter in order.
        
        Args:
            image: Input image
            
        Returns:
            Output of the last filter
        """
        result = image
        for filter_obj in self.filters:
            result = filter_obj.apply(result)
        return result
