from __future__ import annotations

from collections import Counter
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_core.cli.utils import load_gedcom
from gedcom_core.core.exceptions import ParseExecutionError

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    skip_bad_lines: bool = typer.Option(
        False,
        "--skip-bad-lines",
        help="Skip lines the tokenizer rejects",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show record counts for a GEDCOM file.
    """
    try:
        document, parser = load_gedcom(
            gedcom, skip_bad_lines=skip_bad_lines, verbose=verbose
        )
    except ParseExecutionError as exc:
        console.print(f"[red]parse failed[/red] {exc}")
        raise typer.Exit(code=1)

    table = Table(title="GEDCOM Records")
    table.add_column("Tag", style="bold")
    table.add_column("Count", justify="right")

    counts = Counter(rec.tag_name for rec in document.roots)
    for tag, count in sorted(counts.items()):
        table.add_row(tag, str(count))

    table.add_section()
    table.add_row("Cross-references", str(len(document.xrefs)))
    table.add_row("Unresolved pointers", str(len(document.unresolved)))
    table.add_row("Skipped lines", str(len(parser.line_errors)))

    console.print(table)
