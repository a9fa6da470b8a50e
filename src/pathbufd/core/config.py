"""
Runtime configuration for pathbufd.

Defaults are read from the environment; a ``.env`` file in the working
directory is loaded first.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def host_memory_limit() -> int:
    """
    Physical memory of the host in bytes, the most any allocation could get.
    
    Falls back to ``sys.maxsize`` where the platform cannot report it.
    """
    try:
        total = os.sysconf('SC_PAGE_SIZE') * os.sysconf('SC_PHYS_PAGES')
    except (AttributeError, ValueError, OSError):
        return sys.maxsize
    if total <= 0:
        return sys.maxsize
    return min(total, sys.maxsize)


@dataclass
class Config:
    """Configuration settings for pathbufd."""
    
    # Largest capacity the allocator will hand out, in bytes
    max_capacity: int = field(
        default_factory=lambda: int(os.getenv('PATHBUFD_MAX_CAPACITY', host_memory_limit()))
    )
    
    # First allocation of a growing buffer is at least this large
    min_non_zero_capacity: int = field(
        default_factory=lambda: int(os.getenv('PATHBUFD_MIN_NON_ZERO_CAPACITY', 8))
    )


_config: Optional[Config] = None


def get_config() -> Config:
    """Return the process configuration, building it on first use."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Replace the process configuration. ``None`` rebuilds it from the environment."""
    global _config
    _config = config
