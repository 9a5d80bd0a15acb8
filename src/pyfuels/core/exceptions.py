"""Custom exceptions for pyfuels package."""

from __future__ import annotations


class PyFuelsError(Exception):
    """Base exception for all pyfuels errors."""

    pass


class FuelsIOError(PyFuelsError):
    """Error related to file I/O operations."""

    pass


class FileFormatError(FuelsIOError):
    """Error raised when a parameter file is malformed or fails validation.

    Attributes:
        message: Human-readable description of the problem.
        line_number: 1-based line number in the input file, if known.
        value: The literal text that caused the error, if any.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        value: str | None = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.value = value
        if line_number is not None:
            super().__init__(f"Line {line_number}: {message}")
        else:
            super().__init__(message)
