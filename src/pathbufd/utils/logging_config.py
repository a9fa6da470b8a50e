"""Logging setup for applications embedding pathbufd."""

import logging
import sys


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(name)s: %(message)s'
    
    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    
    logging.getLogger("pathbufd").setLevel(level)
