from __future__ import annotations

import typer
from rich.console import Console

from gedcom_core.cli.commands.check import check_command
from gedcom_core.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-core",
    help="GEDCOM tokenizer and document assembler",
    add_completion=False,
)

console = Console()

app.command("stats")(stats_command)
app.command("check")(check_command)


def main():
    app()


if __name__ == "__main__":
    main()
