# src/gedcom_core/loader/assembler.py

"""
Document assembler.

Turns the flat LineRecord stream into a tree of Records using the level
numbers, keeps a table of defined cross-references and links every
pointer to the record it names once the whole stream has been read
(pointers may refer forward).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from gedcom_core.core.exceptions import (
    DuplicateXref,
    LevelSkip,
    OrphanRecord,
    UnresolvedXref,
)
from gedcom_core.loader.tags import Tag
from gedcom_core.loader.tokenizer import LineRecord
from gedcom_core.logging import get_logger

log = get_logger("assembler")


@dataclass(eq=False)
class Record:
    """
    A GEDCOM tree node: one defining line plus its nested lines.

    Attributes:
        level: Level number of the defining line.
        tag: KnownTag or CustomTag.
        value: Literal line value, if any.
        ref_id: "@XREF@" defined by this record, if any.
        pointer: "@XREF@" this record refers to, if any.
        lineno: Source line number.
        children: Child records in source order (level + 1).
        target: The record ``pointer`` resolves to, set by finalization.
    """

    level: int
    tag: Tag
    value: Optional[str] = None
    ref_id: Optional[str] = None
    pointer: Optional[str] = None
    lineno: int = 0
    children: List["Record"] = field(default_factory=list)
    target: Optional["Record"] = field(default=None, repr=False)

    @classmethod
    def from_line(cls, line: LineRecord) -> "Record":
        return cls(
            level=line.level,
            tag=line.tag,
            value=line.value,
            ref_id=line.ref_id,
            pointer=line.pointer,
            lineno=line.lineno,
        )

    @property
    def tag_name(self) -> str:
        return self.tag.value

    @property
    def line_value(self) -> Optional[str]:
        return self.pointer if self.pointer is not None else self.value

    def add_child(self, child: "Record") -> None:
        self.children.append(child)

    def find_children(self, tag: str) -> List["Record"]:
        """Return all direct children with the given tag."""
        return [c for c in self.children if c.tag_name == tag]

    def find_first(self, tag: str) -> Optional["Record"]:
        """Return the first direct child with the given tag, or None."""
        for c in self.children:
            if c.tag_name == tag:
                return c
        return None

    def iter_subtree(self) -> Iterator["Record"]:
        """Yield this record and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def __repr__(self) -> str:
        xref = f" {self.ref_id}" if self.ref_id else ""
        return f"<Record {self.level}{xref} {self.tag_name}: {self.line_value!r}>"


@dataclass
class Document:
    """
    A fully assembled GEDCOM document.

    Attributes:
        roots: Level-0 records in source order.
        xrefs: ref-id -> defining Record.
        unresolved: One UnresolvedXref per pointer whose target is missing.
    """

    roots: List[Record] = field(default_factory=list)
    xrefs: Dict[str, Record] = field(default_factory=dict)
    unresolved: List[UnresolvedXref] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.roots)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.roots)

    def resolve(self, ref_id: str) -> Optional[Record]:
        """Return the record defining ``ref_id`` (e.g. '@I1@'), or None."""
        if not ref_id:
            return None
        return self.xrefs.get(ref_id)

    def iter_records(self) -> Iterator[Record]:
        """Every record, depth-first, in source order."""
        for root in self.roots:
            yield from root.iter_subtree()

    def iter_lines(self) -> Iterator[Tuple[int, str, Optional[str]]]:
        """Read the tree back out as (level, tag, line value) tuples."""
        for record in self.iter_records():
            yield record.level, record.tag_name, record.line_value

    def find_records_by_tag(self, tag: str) -> List[Record]:
        """Level-0 records with the given tag."""
        return [r for r in self.roots if r.tag_name == tag]

    def referrers(self, ref_id: str) -> List[Record]:
        """Records whose pointer resolved to ``ref_id``."""
        target = self.resolve(ref_id)
        if target is None:
            return []
        return [r for r in self.iter_records() if r.target is target]

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return (
            f"<Document roots={len(self.roots)} xrefs={len(self.xrefs)} "
            f"unresolved={len(self.unresolved)}>"
        )


class Assembler:
    """
    Level-driven state machine building a Document.

    ``stack[i]`` is the currently open record at level ``i``, so the
    parent of a level-L line is always ``stack[L - 1]``.
    """

    def __init__(self) -> None:
        self.document = Document()
        self._stack: List[Record] = []
        self._pending: List[Record] = []
        self._finished = False

    def feed(self, line: LineRecord) -> Record:
        """
        Attach one line to the tree and return the Record built for it.

        Raises:
            LevelSkip: level is more than one deeper than the previous line.
            OrphanRecord: a level > 0 line with no open parent.
            DuplicateXref: ref-id defined twice.
        """
        if self._finished:
            raise RuntimeError("assembler already finished")
        level = line.level

        if self._stack and level > len(self._stack):
            raise LevelSkip(
                f"level jumped from {len(self._stack) - 1} to {level}",
                lineno=line.lineno,
            )
        if level > 0 and not self._stack:
            raise OrphanRecord(
                f"level {level} line has no level {level - 1} parent",
                lineno=line.lineno,
            )
        if line.ref_id is not None:
            first = self.document.xrefs.get(line.ref_id)
            if first is not None:
                raise DuplicateXref(
                    line.ref_id, lineno=line.lineno, first_lineno=first.lineno
                )

        # A rejected line leaves the stack and xref table untouched.
        del self._stack[level:]
        record = Record.from_line(line)
        if record.ref_id is not None:
            self.document.xrefs[record.ref_id] = record

        if self._stack:
            self._stack[-1].add_child(record)
        else:
            self.document.roots.append(record)
        self._stack.append(record)

        if record.pointer is not None:
            self._pending.append(record)

        return record

    def finish(self) -> Document:
        """Resolve pending pointers and return the Document."""
        if self._finished:
            return self.document

        for record in self._pending:
            target = self.document.xrefs.get(record.pointer)
            if target is None:
                log.warning(
                    "Line %d: %s points to undefined %s",
                    record.lineno,
                    record.tag_name,
                    record.pointer,
                )
                self.document.unresolved.append(
                    UnresolvedXref(record.pointer, record=record, lineno=record.lineno)
                )
            else:
                record.target = target

        log.debug(
            "Assembled %d root records, %d xrefs, %d unresolved pointers",
            len(self.document.roots),
            len(self.document.xrefs),
            len(self.document.unresolved),
        )
        self._pending = []
        self._stack = []
        self._finished = True
        return self.document

    def parse(self, lines: Iterable[LineRecord]) -> Document:
        for line in lines:
            self.feed(line)
        return self.finish()


def assemble(lines: Iterable[LineRecord]) -> Document:
    """
    Build a Document from a LineRecord stream.

        lines -> Document(roots=[Record, ...], xrefs={...})
    """
    return Assembler().parse(lines)
