"""CLI package for gitprune.

This package contains the Typer application and all subcommands.
"""

from gitprune.cli.main import app

__all__ = ["app"]
