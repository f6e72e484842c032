"""Errors raised by the interactive picker."""

from __future__ import annotations


class PickerError(RuntimeError):
    """Base error for picker operations."""


class EmptyInputError(PickerError, ValueError):
    """Raised when a picker is built from an empty entry list."""

    def __init__(self, message: str = "Picker needs at least one entry"):
        super().__init__(message)


class TerminalIOError(PickerError):
    """Raised when the terminal surface fails to enter, draw, read or release."""

    def __init__(self, operation: str, cause: BaseException | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Terminal {operation} failed{detail}")
