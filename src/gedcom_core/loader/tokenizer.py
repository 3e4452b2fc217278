# src/gedcom_core/loader/tokenizer.py

"""
Line tokenizer.

A GEDCOM line has the shape:

    level + delim + [xref_ID + delim] + tag + [delim + line_value] + terminator

The Tokenizer walks the text with a single-character lookahead cursor and
hands out one LineRecord per physical line. It does not know anything
about nesting; that is the assembler's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from gedcom_core.core.exceptions import (
    GedcomSyntaxError,
    LevelOutOfRange,
    MalformedLevel,
    MalformedXref,
    XrefTooLong,
)
from gedcom_core.loader.tags import Tag, classify_tag
from gedcom_core.logging import get_logger

log = get_logger("tokenizer")

DELIM = " "
TERMINATORS = ("\n", "\r")
BOM = "\ufeff"

MAX_LEVEL_DIGITS = 2
MAX_XREF_LENGTH = 22  # including both @ signs


@dataclass(frozen=True)
class LineRecord:
    """
    A single scanned GEDCOM line.

    Attributes:
        lineno: 1-based physical line number.
        level: Level number (0-99).
        tag: KnownTag or CustomTag.
        ref_id: "@XREF@" this line defines, if any.
        pointer: "@XREF@" this line refers to, if any.
        value: Literal line value. Never set together with ``pointer``.
    """

    lineno: int
    level: int
    tag: Tag
    ref_id: Optional[str] = None
    pointer: Optional[str] = None
    value: Optional[str] = None

    @property
    def line_value(self) -> Optional[str]:
        return self.pointer if self.pointer is not None else self.value


class Tokenizer:
    """
    Cursor over an in-memory GEDCOM text.

    ``next_line()`` returns the next LineRecord or None at end of input.
    When it raises a GedcomSyntaxError the cursor is left inside the bad
    line; call ``skip_line()`` to drop the rest of it and carry on.
    """

    def __init__(self, text: str):
        self.text = text
        self._end = len(text)
        self._pos = 0
        self._lineno = 1
        self._line_start = 0
        self.lines_read = 0

        if text.startswith(BOM):
            self._pos = self._line_start = len(BOM)

    # ------------------------------------------------------------------ #
    # Cursor primitives
    # ------------------------------------------------------------------ #

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def column(self) -> int:
        return self._pos - self._line_start + 1

    def _peek(self) -> Optional[str]:
        if self._pos < self._end:
            return self.text[self._pos]
        return None

    def _at_line_end(self) -> bool:
        c = self._peek()
        return c is None or c in TERMINATORS

    def _consume_delimiter(self) -> int:
        start = self._pos
        while self._peek() == DELIM:
            self._pos += 1
        return self._pos - start

    def _consume_terminator(self) -> None:
        # CR, LF and CRLF all end a line.
        c = self._peek()
        if c == "\r":
            self._pos += 1
            if self._peek() == "\n":
                self._pos += 1
        elif c == "\n":
            self._pos += 1
        else:
            return
        self._lineno += 1
        self._line_start = self._pos

    def _skip_blank_lines(self) -> None:
        while True:
            self._consume_delimiter()
            c = self._peek()
            if c is None or c not in TERMINATORS:
                return
            self._consume_terminator()

    def _scan_token(self) -> str:
        start = self._pos
        while not self._at_line_end() and self._peek() != DELIM:
            self._pos += 1
        return self.text[start:self._pos]

    # ------------------------------------------------------------------ #
    # Grammar pieces
    # ------------------------------------------------------------------ #

    def _scan_level(self) -> int:
        # level:= [digit | digit + digit], no leading zeroes ("02" is invalid)
        lineno, column = self._lineno, self.column
        start = self._pos
        while True:
            c = self._peek()
            if c is None or not ("0" <= c <= "9"):
                break
            self._pos += 1
        digits = self.text[start:self._pos]

        if not digits:
            raise MalformedLevel(
                f"expected a level number, found {self._peek()!r}", lineno, column
            )
        if len(digits) > MAX_LEVEL_DIGITS:
            raise LevelOutOfRange(f"level {digits} is above 99", lineno, column)
        if len(digits) > 1 and digits.startswith("0"):
            raise MalformedLevel(f"level {digits!r} has a leading zero", lineno, column)
        return int(digits)

    def _scan_xref(self) -> str:
        # xref_ID:= (0x40) + alphanum + pointer_string + (0x40)
        lineno, column = self._lineno, self.column
        token = self._scan_token()

        if len(token) > MAX_XREF_LENGTH:
            raise XrefTooLong(
                f"cross-reference {token!r} is longer than {MAX_XREF_LENGTH} characters",
                lineno,
                column,
            )
        if len(token) < 3 or not token.endswith("@") or "@" in token[1:-1]:
            raise MalformedXref(f"malformed cross-reference {token!r}", lineno, column)
        return token

    def _scan_line_value(self) -> Tuple[Optional[str], Optional[str]]:
        """Return (pointer, value); at most one of them is set."""
        if self._peek() != DELIM:
            return None, None

        self._consume_delimiter()
        if self._at_line_end():
            return None, None

        # "@#DJULIAN@ ..." is an escape inside a literal value, not a pointer.
        if self._peek() == "@" and not self.text.startswith("@#", self._pos):
            pointer = self._scan_xref()
            self._consume_delimiter()
            if not self._at_line_end():
                raise MalformedXref(
                    f"unexpected text after pointer {pointer}", self._lineno, self.column
                )
            return pointer, None

        start = self._pos
        while not self._at_line_end():
            self._pos += 1
        return None, self.text[start:self._pos]

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def next_line(self) -> Optional[LineRecord]:
        """
        Scan one line and return it, or None once the input is exhausted.

        Raises:
            GedcomSyntaxError (or a subclass) for a line that does not
            follow the grammar. The error carries the line and column.
        """
        self._skip_blank_lines()
        if self._peek() is None:
            return None

        lineno = self._lineno
        level = self._scan_level()

        if self._at_line_end():
            raise GedcomSyntaxError("missing tag after level", lineno, self.column)
        if not self._consume_delimiter():
            raise MalformedLevel(
                "level must be followed by a delimiter", lineno, self.column
            )

        ref_id = None
        if self._peek() == "@":
            ref_id = self._scan_xref()
            self._consume_delimiter()

        tag_column = self.column
        raw_tag = self._scan_token()
        if not raw_tag:
            raise GedcomSyntaxError("missing tag", lineno, tag_column)
        tag = classify_tag(raw_tag, lineno=lineno, column=tag_column)

        pointer, value = self._scan_line_value()
        self._consume_terminator()

        self.lines_read += 1
        return LineRecord(
            lineno=lineno,
            level=level,
            tag=tag,
            ref_id=ref_id,
            pointer=pointer,
            value=value,
        )

    def skip_line(self) -> None:
        """Drop the remainder of the current line, terminator included."""
        while not self._at_line_end():
            self._pos += 1
        self._consume_terminator()

    def __iter__(self) -> Iterator[LineRecord]:
        while True:
            line = self.next_line()
            if line is None:
                log.debug("Tokenized %d lines", self.lines_read)
                return
            yield line


def tokenize_text(text: str) -> Iterator[LineRecord]:
    """Yield LineRecords for every non-blank line of ``text``."""
    yield from Tokenizer(text)


def read_text(path: Union[str, Path]) -> str:
    """Read a GEDCOM file as UTF-8, replacing undecodable bytes."""
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()


def tokenize_file(path: Union[str, Path]) -> Iterator[LineRecord]:
    """
    Yield LineRecords for the given file.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    yield from tokenize_text(read_text(path))
