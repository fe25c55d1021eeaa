from typing import Any, Optional


class MenuError(Exception):
    """Base error for menu construction."""


class MenuNotFoundError(MenuError, LookupError):
    """Raised when no menu definition is registered under a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Menu '{name}' is not registered")


class CastError(MenuError, ValueError):
    """An attribute value could not be converted to its declared cast type."""

    def __init__(self, key: str, cast_type: Any, value: Any, reason: Optional[str] = None):
        self.key = key
        self.cast_type = cast_type
        self.value = value
        message = f"Cannot cast attribute '{key}' to {cast_type!r}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TypeMismatchError(MenuError, TypeError):
    """A value that is not a menu item was given where one is required."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Expected a MenuItem, got {type(value).__name__}")
