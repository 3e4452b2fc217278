# src/gedcom_core/loader/value_reconstructor.py

"""
Value Reconstructor: folds GEDCOM CONC / CONT lines into their parent.

Rules (GEDCOM 5.5.1):
    - CONC: Append text directly to the parent's value.
            No newline added.

    - CONT: Append a newline + the text.

Examples:
    Parent NOTE value: "Line one"
    Child CONC value:  " and more"
        → "Line one and more"

    Child CONT value:  "Second line"
        → "Line one and more\nSecond line"

The assembler keeps CONC/CONT lines as ordinary children; this is an
opt-in pass over a finished Document.
"""

from __future__ import annotations

from typing import List

from gedcom_core.loader.assembler import Document, Record
from gedcom_core.loader.tags import KnownTag


def _reconstruct_record(record: Record) -> None:
    """
    Recursively reconstruct values for this record and its children.
    Mutates the record in place.
    """
    new_children: List[Record] = []
    parts: List[str] = [record.value or ""]
    merged = False

    for child in record.children:
        if child.tag is KnownTag.CONC:
            parts.append(child.value or "")
            merged = True
        elif child.tag is KnownTag.CONT:
            parts.append("\n")
            parts.append(child.value or "")
            merged = True
        else:
            _reconstruct_record(child)
            new_children.append(child)

    if merged:
        # Continuation text on a pointer line has nowhere to go.
        if record.pointer is None:
            record.value = "".join(parts)
        record.children = new_children


def reconstruct_values(document: Document) -> Document:
    """
    Reconstruct all values for every record of ``document``.

    Returns the same Document after in-place reconstruction; CONC/CONT
    records are removed from the tree.
    """
    for root in document.roots:
        _reconstruct_record(root)

    return document
