"""
Text rendering helpers for OS path strings.

Paths read from the OS may carry bytes that are not valid UTF-8; Python
keeps those as surrogate escapes. These helpers decide whether such a
string has a text rendering at all.
"""

import logging


# Encoding used for the display rendering and ``as_bytes``
DISPLAY_ENCODING = 'utf-8'

# Set up module logger
logger = logging.getLogger(__name__)


def is_text_representable(value: str) -> bool:
    """
    Check whether an OS string can be rendered as text.
    
    Args:
        value: OS string, possibly holding surrogate escapes.
        
    Returns:
        True if the value encodes strictly to UTF-8.
    """
    try:
        value.encode(DISPLAY_ENCODING)
    except UnicodeEncodeError as e:
        logger.debug(f"Path is not {DISPLAY_ENCODING} representable - failed at position {e.start}")
        return False
    return True


def to_display_str(value: str) -> str:
    """Render an OS string as text, or the empty string if it has no text form."""
    if is_text_representable(value):
        return value
    return ''
