from __future__ import annotations

import time
from pathlib import Path
from typing import Tuple

from rich.console import Console

from gedcom_core.core.exceptions import GedcomError, ParseExecutionError
from gedcom_core.loader.assembler import Document
from gedcom_core.parser_core import GedcomParser, ParserOptions

console = Console()


def load_gedcom(
    path: Path,
    *,
    skip_bad_lines: bool = False,
    verbose: bool = False,
) -> Tuple[Document, GedcomParser]:
    """
    Tokenize + assemble one GEDCOM file.

    Raises:
        ParseExecutionError: wrapping the GedcomError that stopped the parse.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    parser = GedcomParser(options=ParserOptions(skip_bad_lines=skip_bad_lines))
    try:
        document = parser.parse_file(path)
    except GedcomError as exc:
        raise ParseExecutionError(f"{path}: {exc}") from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return document, parser
