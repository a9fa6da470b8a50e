"""Utility modules for pathbufd."""

from .encodings import is_text_representable, to_display_str
from .logging_config import setup_logging
from .path_utils import PathUtils, ROOT_MARKER, SEPARATORS

__all__ = [
    "PathUtils",
    "ROOT_MARKER",
    "SEPARATORS",
    "is_text_representable",
    "setup_logging",
    "to_display_str",
]
