"""Exceptions raised by pathbufd."""


class PathBufDError(Exception):
    """Base class for pathbufd errors."""


class CapacityError(PathBufDError):
    """A capacity request could not be satisfied by the allocator."""
    
    def __init__(self, requested: int, limit: int):
        self.requested = requested
        self.limit = limit
        super().__init__(
            f"memory allocation failed: capacity of {requested} bytes exceeds the limit of {limit}"
        )
