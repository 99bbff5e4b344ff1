"""
Registry of named filters.
"""
from typing import Dict, List, Optional
from .base import Filter
from .catalog import LOOKS
from ..core.errors import InvalidInputError, UnknownLookError


def normalize_name(name: str) -> str:
    """
    Canonical lookup key for a filter name.
    
    Case, spaces, underscores and hyphens are ignored, so "Clean Skin",
    "clean_skin" and "CleanSkin" all map to the same key.

    Raises:
        InvalidInputError: If name is not a string
    """
    if not isinstance(name, str):
        raise InvalidInputError(f"Filter name must be a string, got {name!r}")
    return "".join(ch for ch in name.lower() if ch not in " _-")


class FilterRegistry:
    """
    Registry for storing and retrieving named filters.
    
    Filters keep the display name they were registered under; lookups are
    insensitive to case and separators.
    """
    
    def __init__(self):
        """Initialize an empty registry."""
        # Map normalized name -> (display name, filter)
        self._filters: Dict[str, tuple] = {}
    
    @classmethod
    def default(cls) -> "FilterRegistry":
        """
        Create a registry holding every catalog look.
        
        Returns:
            FilterRegistry with fresh catalog filter instances
        """
        registry = cls()
        for name, factory in LOOKS.items():
            registry.register_filter(name, factory())
        return registry
    
    def register_filter(self, name: str, filter_obj: Filter) -> None:
        """
        Register a named filter, replacing any filter with the same key.
        
        Args:
            name: Display name for the filter
            filter_obj: Filter instance to register
            
        Raises:
            InvalidInputError: If name is empty or filter_obj is not a Filter
        """
        if not name or not normalize_name(name):
            raise InvalidInputError("Filter name cannot be empty")
        if not isinstance(filter_obj, Filter):
            raise InvalidInputError(f"Not a filter: {filter_obj!r}")
        
        self._filters[normalize_name(name)] = (name, filter_obj)
    
    def get_filter(self, name: str) -> Optional[Filter]:
        """
        Retrieve a registered filter by name.
        
        Args:
            name: Name of the filter to retrieve
            
        Returns:
            Filter instance if found, None otherwise
        """
        entry = self._filters.get(normalize_name(name))
        return entry[1] if entry else None
    
    def require_filter(self, name: str) -> Filter:
        """
        Retrieve a registered filter, failing if it is missing.
        
        Raises:
            UnknownLookError: If no filter is registered under that name
        """
        filter_obj = self.get_filter(name)
        if filter_obj is None:
            raise UnknownLookError(name, self.list_filters())
        return filter_obj
    
    def has_filter(self, name: str) -> bool:
        """Check if a filter is registered."""
        return normalize_name(name) in self._filters
    
    def list_filters(self) -> List[str]:
        """
        Get list of all registered filter names.
        
        Returns:
            Display names in registration order
        """
        return [display for display, _ in self._filters.values()]
    
    def unregister_filter(self, name: str) -> bool:
        """
        Unregister a filter by name.
        
        Args:
            name: Name of the filter to unregister
            
        Returns:
            True if filter was removed, False if it didn't exist
        """
        key = normalize_name(name)
        if key in self._filters:
            del self._filters[key]
            return True
        return False
    
    def clear(self) -> None:
        """Clear all registered filters."""
        self._filters.clear()
    
    def __contains__(self, name: str) -> bool:
        return self.has_filter(name)
    
    def __len__(self) -> int:
        return len(self._filters)
