"""CLI commands for gitprune.

This package contains all subcommand implementations.
"""

from gitprune.cli.commands import branches, config, run, tags

__all__ = ["branches", "config", "run", "tags"]
