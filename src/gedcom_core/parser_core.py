"""
parser_core.py
High-level parsing facade with logging and recovery policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from gedcom_core.config import get_config
from gedcom_core.core.exceptions import GedcomSyntaxError
from gedcom_core.loader.assembler import Assembler, Document
from gedcom_core.loader.tokenizer import LineRecord, Tokenizer, read_text
from gedcom_core.loader.value_reconstructor import reconstruct_values
from gedcom_core.logging import get_logger


@dataclass
class ParserOptions:
    """
    Caller-side policy knobs.

    Attributes:
        skip_bad_lines: Log and skip lines the tokenizer rejects instead
            of raising.
        unresolved_fatal: Raise the first UnresolvedXref instead of only
            reporting dangling pointers on the Document.
        reconstruct_values: Fold CONC/CONT lines into their parent's value.
    """

    skip_bad_lines: bool = False
    unresolved_fatal: bool = False
    reconstruct_values: bool = False

    @classmethod
    def from_config(cls, cfg: Any) -> "ParserOptions":
        section = getattr(cfg, "parser", None) or {}
        return cls(
            skip_bad_lines=bool(section.get("skip_bad_lines", False)),
            unresolved_fatal=bool(section.get("unresolved_fatal", False)),
            reconstruct_values=bool(section.get("reconstruct_values", False)),
        )


class GedcomParser:
    """
    High-level parser:
      - tokenizes
      - skips or raises on bad lines
      - assembles the record tree
      - resolves cross-references
      - optionally reconstructs CONC/CONT values
    """

    def __init__(self, config=None, options: Optional[ParserOptions] = None):
        self.cfg = config if config is not None else get_config()
        self.options = options if options is not None else ParserOptions.from_config(self.cfg)
        self.log = get_logger("parser_core")

        self.line_errors: List[GedcomSyntaxError] = []
        self.stats: Dict[str, int] = {}

    # ---------------------------------------------------------
    # Tokenizing with recovery
    # ---------------------------------------------------------
    def _iter_lines(self, tokenizer: Tokenizer) -> Iterator[LineRecord]:
        while True:
            try:
                line = tokenizer.next_line()
            except GedcomSyntaxError as exc:
                if not self.options.skip_bad_lines:
                    raise
                self.log.warning(f"Skipping line: {exc}")
                self.line_errors.append(exc)
                tokenizer.skip_line()
                continue

            if line is None:
                return
            yield line

    # ---------------------------------------------------------
    # Public API
    # ---------------------------------------------------------
    def parse_text(self, text: str) -> Document:
        """
        Parse GEDCOM text into a Document.

        Raises:
            GedcomSyntaxError: bad line, unless ``skip_bad_lines`` is set.
            GedcomStructureError: level nesting or duplicate ref-id problems.
            UnresolvedXref: dangling pointer, only if ``unresolved_fatal``.
        """
        self.line_errors = []
        tokenizer = Tokenizer(text)

        try:
            document = Assembler().parse(self._iter_lines(tokenizer))
        except Exception:
            self.log.exception("Parse failed.")
            raise

        if self.options.reconstruct_values:
            reconstruct_values(document)

        self.stats = {
            "lines": tokenizer.lines_read,
            "skipped_lines": len(self.line_errors),
            "roots": len(document.roots),
            "records": sum(1 for _ in document.iter_records()),
            "xrefs": len(document.xrefs),
            "unresolved": len(document.unresolved),
        }
        self.log.info(
            f"Parsed {self.stats['lines']} lines into {self.stats['roots']} records "
            f"({self.stats['unresolved']} unresolved pointers)"
        )

        if self.options.unresolved_fatal and document.unresolved:
            for err in document.unresolved[1:]:
                self.log.error(str(err))
            raise document.unresolved[0]

        return document

    def parse_file(self, path: Union[str, Path]) -> Document:
        """Read ``path`` as UTF-8 and parse it."""
        self.log.info(f"Reading GEDCOM input: {path}")
        return self.parse_text(read_text(path))
