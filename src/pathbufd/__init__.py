"""pathbufd - a serializable, owned filesystem path buffer."""

from .core import (
    CapacityError,
    Config,
    PathBufD,
    PathBufDError,
    PathRecord,
    build_path,
    pathbufd_fmt,
    pathd,
)

__version__ = "0.1.0"

__all__ = [
    "PathBufD",
    "PathRecord",
    "CapacityError",
    "PathBufDError",
    "Config",
    "build_path",
    "pathbufd_fmt",
    "pathd",
]
