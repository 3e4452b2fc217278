"""
CLI command modules for gedcom_core.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_core.cli.commands.check import check_command
from gedcom_core.cli.commands.stats import stats_command

__all__ = [
    "check_command",
    "stats_command",
]
