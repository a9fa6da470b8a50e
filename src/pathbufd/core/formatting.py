"""Build paths from formatted strings split on forward slashes."""

from typing import Any

from .buffer import PathBufD
from ..utils.path_utils import PathUtils, ROOT_MARKER


def build_path(rendered: str) -> PathBufD:
    """
    Build a buffer from an already-rendered path string.

    The string is split on '/'. Every non-empty piece is pushed as a
    segment; every empty piece (leading, doubled or trailing slash) pushes
    the root marker, which replaces whatever was built so far.

    Args:
        rendered: Path string with any formatting already applied.

    Returns:
        The resulting buffer.
    """
    buf = PathBufD.new()
    for segment in PathUtils.split_segments(rendered):
        if not segment:
            buf.push(ROOT_MARKER)
            continue

        buf.push(segment)

    return buf


def pathbufd_fmt(template: str, *args: Any, **kwargs: Any) -> PathBufD:
    """Render ``template`` with ``str.format`` and build a buffer from the result."""
    return build_path(template.format(*args, **kwargs))


def pathd(template: str, *args: Any, **kwargs: Any) -> str:
    """
    Format a path and return its display string.

    Example:
        >>> pathd("/home/{}/.config", "alice")
        '/home/alice/.config'
    """
    return str(pathbufd_fmt(template, *args, **kwargs))
