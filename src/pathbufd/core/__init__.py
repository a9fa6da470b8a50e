"""Core components for pathbufd."""

from .buffer import PathBufD
from .config import Config, get_config, set_config
from .errors import CapacityError, PathBufDError
from .formatting import build_path, pathbufd_fmt, pathd
from .serde import PathRecord, dump_json, from_python, load_json, to_python

__all__ = [
    "PathBufD",
    "Config",
    "get_config",
    "set_config",
    "CapacityError",
    "PathBufDError",
    "build_path",
    "pathbufd_fmt",
    "pathd",
    "PathRecord",
    "dump_json",
    "load_json",
    "to_python",
    "from_python",
]
