"""
Error taxonomy for statictypes containers.

Every error here is a contract violation by the caller. Nothing is retried
or replaced by a default value.

Each class also derives from the matching builtin, so callers may catch
IndexError / KeyError / TypeError / ValueError as they would for the
standard containers.
"""

from typing import Any


class ContainerError(Exception):
    """Base class for all container errors."""
    pass


class OutOfRangeError(ContainerError, IndexError):
    """Raised when an index falls outside [0, size)."""

    def __init__(self, index: Any, size: int, where: str = "container"):
        self.index = index
        self.size = size
        super().__init__(f"index {index!r} out of range for {where} of size {size}")


class KeyNotFoundError(ContainerError, KeyError):
    """Raised when no map entry matches the requested key."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key not found in map: {self.key!r}"


class ValueShapeError(ContainerError, TypeError):
    """Raised when a list lookup hits an entry whose value is a scalar."""

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        super().__init__(
            f"value for key {key!r} is not list-shaped: {type(value).__name__}"
        )


class ConfigError(ContainerError, ValueError):
    """Raised when a configuration document cannot be turned into a container."""
    pass
