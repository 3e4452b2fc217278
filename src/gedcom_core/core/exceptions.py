# src/gedcom_core/core/exceptions.py

"""
Error hierarchy for the GEDCOM core.

Tokenizer errors (``GedcomSyntaxError`` and subclasses) only concern the
line being scanned; the caller may skip that line and keep going.
Structure errors (``GedcomStructureError`` and subclasses) abort assembly.
``UnresolvedXref`` is collected on the Document instead of being raised.
"""

from __future__ import annotations

from typing import Any, Optional


class GedcomError(Exception):
    """Base class for every error raised while reading GEDCOM text."""

    def __init__(self, message: str, lineno: int = 0, column: int = 0):
        self.message = message
        self.lineno = lineno
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if self.lineno and self.column:
            return f"Line {self.lineno}, column {self.column}: {self.message}"
        if self.lineno:
            return f"Line {self.lineno}: {self.message}"
        return self.message


# ---------------------------------------------------------------------------
# Tokenizer (per-line) errors
# ---------------------------------------------------------------------------

class GedcomSyntaxError(GedcomError):
    """Raised when a GEDCOM line cannot be scanned."""


class MalformedLevel(GedcomSyntaxError):
    """Missing level digits, a leading zero, or no delimiter after the level."""


class LevelOutOfRange(MalformedLevel):
    """Level has more than two digits (above 99)."""


class MalformedXref(GedcomSyntaxError):
    """An @-token that is not a well-formed cross-reference identifier."""


class XrefTooLong(MalformedXref):
    """Cross-reference identifier longer than 22 characters (with the @s)."""


class UnknownTag(GedcomSyntaxError):
    """Tag outside the known vocabulary and without a leading underscore."""

    def __init__(self, tag: str, lineno: int = 0, column: int = 0):
        self.tag = tag
        super().__init__(f"unknown tag {tag!r}", lineno=lineno, column=column)


# ---------------------------------------------------------------------------
# Assembler (structural) errors
# ---------------------------------------------------------------------------

class GedcomStructureError(GedcomError):
    """Raised when the level nesting rules are violated."""


class LevelSkip(GedcomStructureError):
    pass


class OrphanRecord(GedcomStructureError):
    pass


class DuplicateXref(GedcomStructureError):
    def __init__(self, ref_id: str, lineno: int = 0, first_lineno: int = 0):
        self.ref_id = ref_id
        self.first_lineno = first_lineno
        super().__init__(
            f"cross-reference {ref_id} already defined on line {first_lineno}",
            lineno=lineno,
        )


class UnresolvedXref(GedcomError):
    """A pointer whose target ref-id is never defined in the document."""

    def __init__(self, ref_id: str, record: Optional[Any] = None, lineno: int = 0):
        self.ref_id = ref_id
        self.record = record
        super().__init__(f"pointer to undefined {ref_id}", lineno=lineno)


# ---------------------------------------------------------------------------
# Driver boundary
# ---------------------------------------------------------------------------

class ParseExecutionError(Exception):
    """Raised when a parse run fails as a whole."""
