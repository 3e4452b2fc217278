from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gedcom_core.cli.utils import load_gedcom
from gedcom_core.core.exceptions import ParseExecutionError

console = Console()


def check_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
):
    """
    Report bad lines and dangling pointers. Exits with 1 if any are found.
    """
    try:
        document, parser = load_gedcom(gedcom, skip_bad_lines=True)
    except ParseExecutionError as exc:
        console.print(f"[red]parse failed[/red] {exc}")
        raise typer.Exit(code=1)

    for err in parser.line_errors:
        console.print(f"[yellow]bad line[/yellow] {err}")
    for err in document.unresolved:
        console.print(f"[yellow]unresolved[/yellow] {err}")

    problems = len(parser.line_errors) + len(document.unresolved)
    if problems:
        console.print(f"[red]{problems} problem(s) found[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]OK[/green] {len(document.roots)} records")
