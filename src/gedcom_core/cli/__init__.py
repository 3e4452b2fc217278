"""
CLI package for gedcom_core.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_core.cli.app import app, main

__all__ = [
    "app",
    "main",
]
