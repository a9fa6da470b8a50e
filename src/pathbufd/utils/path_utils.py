"""String-level path helpers that follow the platform's own separator rules."""

import os
from typing import List, Optional, Tuple


# Separators recognised by the host platform (``os.altsep`` is None on POSIX)
SEPARATORS = os.sep + (os.altsep or '')

# Marker pushed for every empty segment of a formatted path
ROOT_MARKER = '/'


class PathUtils:
    """Utilities for inspecting raw OS path strings without normalizing them."""
    
    @staticmethod
    def split_segments(path: str) -> List[str]:
        """
        Split a rendered path on literal forward slashes.
        
        Args:
            path: Already-formatted path string
            
        Returns:
            List of substrings; empty strings mark leading, doubled
            or trailing slashes
        """
        return path.split('/')
    
    @staticmethod
    def strip_trailing_components(path: str) -> str:
        """
        Remove trailing separators and trailing current-directory segments.
        
        A leading '.' is kept, so "." and "./." both come back as ".".
        
        Args:
            path: Raw OS path string
            
        Returns:
            Path up to the end of its final significant segment; empty for
            root-only paths
        """
        stripped = path.rstrip(SEPARATORS)
        while len(stripped) > 1 and stripped[-1] == '.' and stripped[-2] in SEPARATORS:
            stripped = stripped[:-1].rstrip(SEPARATORS)
        return stripped
    
    @staticmethod
    def split_last(path: str) -> Tuple[str, str]:
        """
        Split off the final segment, ignoring trailing separators and '.' segments.
        
        Args:
            path: Raw OS path string
            
        Returns:
            (head, tail) where tail is empty if the path has no final segment
        """
        return os.path.split(PathUtils.strip_trailing_components(path))
    
    @staticmethod
    def file_name(path: str) -> Optional[str]:
        """Final normal segment of the path, or None for root, empty, '.' and '..'."""
        _, tail = PathUtils.split_last(path)
        if tail in ('', '.', '..'):
            return None
        return tail
