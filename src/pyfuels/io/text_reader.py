"""
Line-reading utilities for LANDIS-II style text input files.

Input files are line oriented.  ``>>`` starts a comment that runs to the
end of the line (unless it appears inside a double-quoted string), and
lines that are blank once comments are removed are skipped.  Retained
lines keep their 1-based physical line number for error messages.

Every ``io/`` reader should import helpers from this module rather than
defining its own copy.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO, TypeVar

from pyfuels.core.exceptions import FileFormatError
from pyfuels.io.values import QUOTE, ValueReader

T = TypeVar("T")

COMMENT_MARKER = ">>"
BYTE_ORDER_MARK = "\ufeff"


@dataclass(frozen=True)
class InputLine:
    """A data line and its 1-based line number in the source file."""

    number: int
    text: str


def strip_comment(line: str) -> str:
    """Remove a ``>>`` comment and the trailing newline from *line*.

    A ``>>`` between double quotes is data, not a comment.
    """
    in_quote = False
    for i, ch in enumerate(line):
        if ch == QUOTE:
            in_quote = not in_quote
        elif not in_quote and line.startswith(COMMENT_MARKER, i):
            return line[:i]
    return line.rstrip("\r\n")


def is_blank(line: str) -> bool:
    """Check if a line has no data once its comment is removed."""
    return not strip_comment(line).strip()


def iter_input_lines(lines: Iterable[str]) -> list[InputLine]:
    """Number raw lines and keep only those carrying data.

    A byte-order mark at the start of the first line is dropped.
    """
    result: list[InputLine] = []
    for number, raw in enumerate(lines, start=1):
        if number == 1 and raw.startswith(BYTE_ORDER_MARK):
            raw = raw[len(BYTE_ORDER_MARK) :]
        text = strip_comment(raw)
        if text.strip():
            result.append(InputLine(number=number, text=text))
    return result


def split_input_lines(source: str | TextIO) -> list[InputLine]:
    """Build data lines from file content or an open text stream."""
    if isinstance(source, str):
        return iter_input_lines(source.splitlines())
    return iter_input_lines(source)


def load_input_lines(filepath: Path | str, encoding: str = "utf-8-sig") -> list[InputLine]:
    """Read *filepath* and return its data lines.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Parameter file not found: {filepath}")
    with open(filepath, encoding=encoding) as f:
        return iter_input_lines(f)


class LineCursor:
    """Forward-only cursor over the data lines of one input file.

    The cursor always points at the *current* line; section parsers look
    at :attr:`current_name` to detect the header of the next section
    before consuming it.
    """

    __slots__ = ("_lines", "_pos")

    def __init__(self, lines: Sequence[InputLine]) -> None:
        self._lines = lines
        self._pos = 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    @property
    def current_line(self) -> str:
        """Text of the current line, or ``""`` at end of input."""
        if self.at_end:
            return ""
        return self._lines[self._pos].text

    @property
    def current_name(self) -> str:
        """First word of the current line, or ``""`` at end of input."""
        words = self.current_line.split(None, 1)
        return words[0] if words else ""

    @property
    def line_number(self) -> int:
        """Line number of the current line.

        At end of input this is the number of the last data line, so
        errors about missing trailing sections point at the end of file.
        """
        if not self._lines:
            return 0
        if self.at_end:
            return self._lines[-1].number
        return self._lines[self._pos].number

    def advance(self) -> None:
        if not self.at_end:
            self._pos += 1

    def reader(self) -> ValueReader:
        """Return a :class:`ValueReader` over the current line."""
        return ValueReader(self.current_line, self.line_number)

    def _expect_name(self, name: str) -> ValueReader:
        if self.at_end:
            raise FileFormatError(
                f'Expected "{name}" but reached the end of input',
                line_number=self.line_number,
            )
        reader = self.reader()
        word = reader.read_word()
        if word != name:
            raise FileFormatError(
                f'Expected "{name}" but found "{word}"',
                line_number=self.line_number,
                value=word,
            )
        return reader

    def read_name(self, name: str) -> None:
        """Consume a section header line consisting of *name* alone."""
        reader = self._expect_name(name)
        self.check_no_data_after(f'the "{name}" header', reader)
        self.advance()

    def read_optional_name(self, name: str) -> bool:
        """Consume the header *name* if it is the current line.

        Returns ``True`` if the header was present.
        """
        if self.at_end or self.current_name != name:
            return False
        self.read_name(name)
        return True

    def read_var(self, name: str, read_value: Callable[[ValueReader, str], T]) -> T:
        """Read a ``<name> <value>`` line and return the converted value.

        *read_value* is a :class:`ValueReader` method such as
        ``ValueReader.read_int``; it receives the variable name for its
        error messages.
        """
        reader = self._expect_name(name)
        value = read_value(reader, name)
        self.check_no_data_after(f"the {name} parameter", reader)
        self.advance()
        return value

    def check_no_data_after(self, description: str, reader: ValueReader) -> None:
        """Fail if anything other than whitespace is left in *reader*."""
        if reader.at_end:
            return
        extra = reader.read_word()
        raise FileFormatError(
            f'Found extra data after {description}: "{extra}"',
            line_number=reader.line_number,
            value=extra,
        )

    def check_end_of_input(self, description: str) -> None:
        """Fail if any data lines remain."""
        if self.at_end:
            return
        extra = self.current_line.strip()
        raise FileFormatError(
            f'Found extra data after {description}: "{extra}"',
            line_number=self.line_number,
            value=extra,
        )
