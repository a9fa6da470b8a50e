"""
Owned, growable filesystem path for pathbufd.

This module contains ``PathBufD``, a mutable wrapper around the platform's
native path string. Joining follows ``os.path.join``; nothing is normalized,
resolved or validated. The wrapper also keeps the allocation bookkeeping of a
growable byte buffer so callers can reserve and shrink capacity explicitly.
"""

import functools
import logging
import os
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .config import get_config
from .errors import CapacityError
from ..utils.encodings import DISPLAY_ENCODING, to_display_str
from ..utils.path_utils import PathUtils

PathLike = Union[str, bytes, os.PathLike]

# Set up module logger
logger = logging.getLogger(__name__)


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"capacity amounts are unsigned, got {amount}")


@functools.total_ordering
class PathBufD:
    """
    Owned, mutable filesystem path.

    The content is the OS string exactly as given. Capacity is counted in
    bytes of the filesystem encoding and only ever changes through push
    growth or the reserve/shrink family.
    """

    __slots__ = ('_inner', '_capacity')

    def __init__(self, path: PathLike = ''):
        """
        Create a buffer holding ``path`` verbatim.

        Args:
            path: Any str, bytes or os.PathLike value. Defaults to empty.
        """
        self._inner: str = os.fsdecode(path)
        self._capacity: int = self._len()

    # Constructors

    @classmethod
    def new(cls) -> 'PathBufD':
        """Create an empty buffer with zero capacity."""
        return cls()

    @classmethod
    def with_capacity(cls, capacity: int) -> 'PathBufD':
        """
        Create an empty buffer with room for at least ``capacity`` bytes.

        Raises:
            MemoryError: If the allocator limit is exceeded.
        """
        buf = cls()
        buf.reserve_exact(capacity)
        return buf

    @classmethod
    def current(cls) -> 'PathBufD':
        """
        Snapshot the process working directory.

        Returns:
            Buffer holding the working directory, or an empty buffer if the
            OS query fails.
        """
        try:
            return cls(os.getcwd())
        except OSError as e:
            logger.debug(f"Working directory unavailable, using empty path: {e}")
            return cls()

    @classmethod
    def from_path(cls, path: PathLike) -> 'PathBufD':
        """Convert a native path (str, bytes, pathlib.Path, ...) into a buffer."""
        return cls(path)

    # Views and conversions

    def as_path(self) -> Path:
        """Read-only ``pathlib.Path`` view of the buffer."""
        return Path(self._inner)

    def as_os_str(self) -> str:
        """The raw OS string, surrogate escapes included."""
        return self._inner

    def as_bytes(self) -> bytes:
        """UTF-8 bytes of the display rendering (empty if not representable)."""
        return str(self).encode(DISPLAY_ENCODING)

    def to_path(self) -> Path:
        """Owned ``pathlib.Path`` copy of the content."""
        return Path(self._inner)

    def into_boxed_path(self) -> Path:
        """Alias of ``to_path``."""
        return self.to_path()

    def into_os_string(self) -> str:
        """Give up the buffer as its raw OS string."""
        return self._inner

    def __fspath__(self) -> str:
        """Raw OS string, so the buffer works wherever os.PathLike does."""
        return self._inner

    # Mutation

    def push(self, path: PathLike) -> None:
        """
        Extend the buffer with ``path``.

        An absolute ``path`` replaces the current content; a relative one is
        appended after a separator.
        """
        self._set(os.path.join(self._inner, os.fsdecode(path)))

    def join(self, path: PathLike) -> 'PathBufD':
        """Return a new buffer with ``path`` adjoined, leaving this one untouched."""
        buf = self.copy()
        buf.push(path)
        return buf

    def pop(self) -> bool:
        """
        Truncate the buffer to its parent.

        Returns:
            False and no change if there is no parent (empty or root),
            True otherwise.
        """
        head, tail = PathUtils.split_last(self._inner)
        if not tail:
            return False
        self._inner = head
        return True

    def parent(self) -> Optional['PathBufD']:
        head, tail = PathUtils.split_last(self._inner)
        if not tail:
            return None
        return PathBufD(head)

    @property
    def file_name(self) -> Optional[str]:
        """
        Final segment, or None for empty, root and '..'-terminated paths.

        Trailing '.' segments are skipped: "foo.txt/." has file name "foo.txt".
        """
        return PathUtils.file_name(self._inner)

    @property
    def extension(self) -> Optional[str]:
        name = self.file_name
        if name is None:
            return None
        dot = name.rfind('.')
        if dot <= 0:
            return None
        return name[dot + 1:]

    def set_file_name(self, file_name: PathLike) -> None:
        """
        Replace the final segment with ``file_name``.

        If there is no final segment, ``file_name`` is pushed instead.
        """
        if self.file_name is not None:
            self.pop()
        self.push(file_name)

    def set_extension(self, extension: PathLike) -> bool:
        """
        Replace the extension of the final segment.

        An empty ``extension`` removes the current one. Trailing separators
        and '.' segments after the final segment are dropped.

        Returns:
            False and no change if there is no final segment, True otherwise.
        """
        name = self.file_name
        if name is None:
            return False

        stripped = PathUtils.strip_trailing_components(self._inner)
        stem_end = len(stripped)
        dot = name.rfind('.')
        if dot > 0:
            stem_end -= len(name) - dot

        value = stripped[:stem_end]
        extension = os.fsdecode(extension)
        if extension:
            value = f"{value}.{extension}"
        self._set(value)
        return True

    def extend(self, paths: Iterable[PathLike]) -> 'PathBufD':
        """Return a new buffer with every element of ``paths`` pushed in order."""
        buf = self.copy()
        for path in paths:
            buf.push(path)
        return buf

    def clear(self) -> None:
        """Truncate to empty; capacity is kept."""
        self._inner = ''

    # Capacity management

    def capacity(self) -> int:
        """Allocated storage, in bytes."""
        return self._capacity

    def reserve(self, additional: int) -> None:
        """
        Reserve room for at least ``additional`` more bytes.

        Raises:
            MemoryError: If the allocator limit is exceeded.
        """
        try:
            self.try_reserve(additional)
        except CapacityError as e:
            raise MemoryError(str(e)) from e

    def reserve_exact(self, additional: int) -> None:
        """
        Reserve room for exactly ``additional`` more bytes.

        Raises:
            MemoryError: If the allocator limit is exceeded.
        """
        try:
            self.try_reserve_exact(additional)
        except CapacityError as e:
            raise MemoryError(str(e)) from e

    def try_reserve(self, additional: int) -> None:
        """
        Reserve room for at least ``additional`` more bytes.

        Raises:
            CapacityError: If the allocator cannot satisfy the request. The
                buffer is left unchanged.
        """
        self._try_reserve(additional, exact=False)

    def try_reserve_exact(self, additional: int) -> None:
        """Like ``try_reserve`` but without over-allocating."""
        self._try_reserve(additional, exact=True)

    def shrink_to_fit(self) -> None:
        self._capacity = self._len()

    def shrink_to(self, min_capacity: int) -> None:
        """Lower the capacity to ``max(length, min_capacity)`` if it is above that."""
        _check_amount(min_capacity)
        if self._capacity > min_capacity:
            self._capacity = max(self._len(), min_capacity)

    # Copying and comparison

    def copy(self) -> 'PathBufD':
        """Independent buffer with the same content; its capacity fits the content."""
        return PathBufD(self._inner)

    def __copy__(self) -> 'PathBufD':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'PathBufD':
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathBufD):
            return NotImplemented
        return self._inner == other._inner

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PathBufD):
            return NotImplemented
        return self._inner < other._inner

    # Mutable, so not hashable
    __hash__ = None

    def __str__(self) -> str:
        return to_display_str(self._inner)

    def __repr__(self) -> str:
        return f"PathBufD({self._inner!r})"

    # Serialization

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from a string (or native path) and serialize as the display string."""
        from_str = core_schema.no_info_after_validator_function(cls, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([
                core_schema.is_instance_schema(cls),
                core_schema.no_info_plain_validator_function(cls._validate),
            ]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> 'PathBufD':
        if isinstance(value, (str, os.PathLike)):
            return cls(value)
        raise ValueError(f"expected a path string, got {type(value).__name__}")

    # Internals

    def _len(self) -> int:
        return len(os.fsencode(self._inner))

    def _set(self, value: str) -> None:
        """Replace the content, growing capacity the way a push would."""
        required = len(os.fsencode(value))
        if required > self._capacity:
            try:
                self._grow(required, exact=False)
            except CapacityError as e:
                raise MemoryError(str(e)) from e
        self._inner = value

    def _try_reserve(self, additional: int, exact: bool) -> None:
        _check_amount(additional)
        length = self._len()
        if self._capacity - length >= additional:
            return
        try:
            self._grow(length + additional, exact)
        except CapacityError as e:
            logger.debug(f"Reserve of {additional} bytes refused: {e}")
            raise

    def _grow(self, required: int, exact: bool) -> None:
        config = get_config()
        if required > config.max_capacity:
            raise CapacityError(required, config.max_capacity)

        if exact:
            self._capacity = required
        else:
            amortized = max(self._capacity * 2, required, config.min_non_zero_capacity)
            self._capacity = min(amortized, config.max_capacity)
