"""
Serialization of ``PathBufD`` through pydantic.

A buffer is carried as a single string value. ``PathRecord`` is the
reference envelope; the helpers below go through a shared ``TypeAdapter``.
"""

from typing import Any, Union

from pydantic import BaseModel, TypeAdapter

from .buffer import PathBufD


PATH_ADAPTER: TypeAdapter = TypeAdapter(PathBufD)


class PathRecord(BaseModel):
    """A structured record holding one path."""
    path: PathBufD


def dump_json(path: PathBufD) -> bytes:
    """Serialize a buffer as a JSON string value."""
    return PATH_ADAPTER.dump_json(path)


def load_json(data: Union[str, bytes]) -> PathBufD:
    """Reconstruct a buffer from a JSON string value."""
    return PATH_ADAPTER.validate_json(data)


def to_python(path: PathBufD) -> str:
    return PATH_ADAPTER.dump_python(path)


def from_python(value: Any) -> PathBufD:
    """Validate a str, os.PathLike or existing buffer into a ``PathBufD``."""
    return PATH_ADAPTER.validate_python(value)
