"""Unit tests for pyfuels custom exceptions (core/exceptions.py)."""

from __future__ import annotations

import pytest

from pyfuels.core.exceptions import FileFormatError, FuelsIOError, PyFuelsError


class TestExceptionHierarchy:
    """Tests for the exception class hierarchy."""

    def test_pyfuels_error_is_exception(self) -> None:
        assert issubclass(PyFuelsError, Exception)

    def test_io_error_inherits(self) -> None:
        assert issubclass(FuelsIOError, PyFuelsError)

    def test_file_format_error_inherits_from_io(self) -> None:
        assert issubclass(FileFormatError, FuelsIOError)
        assert issubclass(FileFormatError, PyFuelsError)


class TestFileFormatError:
    def test_with_line(self) -> None:
        exc = FileFormatError("bad format", line_number=42)
        assert str(exc) == "Line 42: bad format"
        assert exc.message == "bad format"
        assert exc.line_number == 42

    def test_no_line(self) -> None:
        exc = FileFormatError("bad format")
        assert str(exc) == "bad format"
        assert exc.line_number is None
        assert exc.value is None

    def test_value(self) -> None:
        exc = FileFormatError("not a number", line_number=3, value="abc")
        assert exc.value == "abc"

    def test_catch_as_pyfuels_error(self) -> None:
        with pytest.raises(PyFuelsError):
            raise FileFormatError("test")
