# src/gedcom_core/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_core.loader import (
        Tokenizer,
        LineRecord,
        Assembler,
        Document,
        Record,
        tokenize_text,
        tokenize_file,
        assemble,
    )
"""

from __future__ import annotations

from .tags import CustomTag, KnownTag, Tag, classify_tag, is_known_tag
from .tokenizer import LineRecord, Tokenizer, read_text, tokenize_file, tokenize_text
from .assembler import Assembler, Document, Record, assemble
from .value_reconstructor import reconstruct_values


__all__ = [
    "CustomTag",
    "KnownTag",
    "Tag",
    "classify_tag",
    "is_known_tag",
    "LineRecord",
    "Tokenizer",
    "read_text",
    "tokenize_file",
    "tokenize_text",
    "Assembler",
    "Document",
    "Record",
    "assemble",
    "reconstruct_values",
]
