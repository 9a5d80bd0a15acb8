"""
Primitive value reading for a single input line.

A :class:`ValueReader` walks one data line left to right, reading
whitespace-separated fields and converting them to the expected type.
Every conversion failure raises :class:`FileFormatError` carrying the
line number and the offending literal.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TypeVar

from pyfuels.core.exceptions import FileFormatError

T = TypeVar("T")

QUOTE = '"'


def parse_int(value: str, context: str = "", line_number: int | None = None) -> int:
    """Parse a string as an integer with descriptive error on failure.

    Parameters
    ----------
    value : str
        The string to parse.
    context : str
        Description of what was being parsed (for error messages).
    line_number : int, optional
        Line number in the source file (for error messages).
    """
    try:
        if "_" in value:
            raise ValueError(value)
        return int(value)
    except (ValueError, TypeError) as exc:
        msg = (
            f"Expected integer for {context}, got {value!r}"
            if context
            else f"Expected integer, got {value!r}"
        )
        raise FileFormatError(msg, line_number=line_number, value=value) from exc


def parse_float(value: str, context: str = "", line_number: int | None = None) -> float:
    """Parse a string as a finite float with descriptive error on failure.

    Parameters
    ----------
    value : str
        The string to parse.
    context : str
        Description of what was being parsed (for error messages).
    line_number : int, optional
        Line number in the source file (for error messages).
    """
    try:
        if "_" in value:
            raise ValueError(value)
        result = float(value)
        if not math.isfinite(result):
            raise ValueError(value)
        return result
    except (ValueError, TypeError) as exc:
        msg = (
            f"Expected number for {context}, got {value!r}"
            if context
            else f"Expected number, got {value!r}"
        )
        raise FileFormatError(msg, line_number=line_number, value=value) from exc


class ValueReader:
    """Sequential field reader over the text of one line."""

    __slots__ = ("_text", "_pos", "line_number")

    def __init__(self, text: str, line_number: int | None = None) -> None:
        self._text = text
        self._pos = 0
        self.line_number = line_number

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remainder(self) -> str:
        """Unread text, including any leading whitespace."""
        return self._text[self._pos :]

    @property
    def at_end(self) -> bool:
        """True when only whitespace (or nothing) is left on the line."""
        return not self.remainder.strip()

    def peek(self) -> str:
        """Return the next unread character, or ``""`` at end of line."""
        if self._pos >= len(self._text):
            return ""
        return self._text[self._pos]

    def skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def read_word(self) -> str:
        """Read the next run of non-whitespace characters.

        Returns ``""`` if nothing but whitespace remains.  No conversion
        is done, so this is used for literal tokens such as ``to``.
        """
        self.skip_whitespace()
        start = self._pos
        while self._pos < len(self._text) and not self._text[self._pos].isspace():
            self._pos += 1
        return self._text[start : self._pos]

    def _read_required_word(self, name: str) -> str:
        word = self.read_word()
        if not word:
            raise self.error(f"Missing value for {name}")
        return word

    def read_int(self, name: str) -> int:
        word = self._read_required_word(name)
        return parse_int(word, name, self.line_number)

    def read_float(self, name: str) -> float:
        word = self._read_required_word(name)
        return parse_float(word, name, self.line_number)

    def read_string(self, name: str) -> str:
        """Read a double-quoted string or a bare word.

        Quoted strings may contain whitespace; the quotes are removed.
        """
        self.skip_whitespace()
        if self.peek() != QUOTE:
            return self._read_required_word(name)

        start = self._pos
        close = self._text.find(QUOTE, start + 1)
        if close < 0:
            raise self.error(
                f"Missing closing quote for {name}",
                value=self._text[start:],
            )
        self._pos = close + 1
        return self._text[start + 1 : close]

    def read_enum(self, name: str, parse: Callable[[str], T]) -> T:
        """Read a word and convert it with *parse*.

        *parse* signals an unrecognized word by raising ``ValueError``;
        its message is kept in the resulting :class:`FileFormatError`.
        """
        word = self._read_required_word(name)
        try:
            return parse(word)
        except ValueError as exc:
            raise self.error(f'Invalid {name} "{word}": {exc}', value=word) from exc

    def error(self, message: str, value: str | None = None) -> FileFormatError:
        """Build a :class:`FileFormatError` for the current line."""
        return FileFormatError(message, line_number=self.line_number, value=value)
