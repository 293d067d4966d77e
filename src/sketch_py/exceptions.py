"""Custom exceptions for sketch-py."""

from __future__ import annotations

from typing import Any


class SketchError(Exception):
    """Base exception class for all sketch-py errors."""


class ValidationError(SketchError, ValueError):
    """Raised when builder input is malformed and cannot enter a sketch."""


class InvalidColorError(ValidationError):
    """Raised when a color channel is missing, non-integer, or outside 0-255.

    Attributes:
        value: The rejected color value.
    """

    def __init__(self, value: Any, reason: str) -> None:
        """Initialize the exception with the rejected value.

        Args:
            value: The value that could not be turned into a color.
            reason: Description of why the value was rejected.
        """
        self.value = value
        super().__init__(f"Invalid color {value!r}: {reason}")


class InvalidItemError(ValidationError):
    """Raised when an item is invalid or malformed.

    This exception is used for validation errors related to shape parameters
    and to items passed to ``add_item``.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception with a custom message.

        Args:
            message: Description of why the item is invalid.
        """
        super().__init__(message)


class InvalidSketchError(ValidationError):
    """Raised when sketch options (title, canvas size, background) are invalid."""


class BackendError(SketchError):
    """Base class for failures raised while rendering a sketch."""


class MissingDependencyError(BackendError):
    """Raised when a backend's external rendering tool is not available.

    Attributes:
        tool: Name of the missing tool.
        hint: Remediation hint shown to the user.
    """

    def __init__(self, tool: str, hint: str) -> None:
        """Initialize the exception with the tool name and a remediation hint.

        Args:
            tool: Name of the missing tool.
            hint: How the user can install it.
        """
        self.tool = tool
        self.hint = hint
        super().__init__(f"It seems like you don't have {tool} installed. {hint}")


class UnsupportedItemError(BackendError):
    """Raised when the active backend cannot render an item.

    Attributes:
        item: The item that could not be dispatched.
    """

    def __init__(self, item: Any, backend: str | None = None) -> None:
        """Initialize the exception with the offending item.

        Args:
            item: The item that could not be dispatched.
            backend: Name of the backend that rejected it, if known.
        """
        self.item = item
        self.backend = backend
        item_id = getattr(item, "id", None)
        where = f" by backend {backend}" if backend else ""
        super().__init__(f"Item {item_id!r} of type {type(item).__name__} is not supported{where}")


class BackendIOError(BackendError):
    """Raised when a backend fails to write or produce its output."""
