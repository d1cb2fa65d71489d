"""Config command implementation.

Creates and displays the gitprune configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer

from gitprune.cli.display import create_config_table, print_options
from gitprune.cli.types import load_run_config
from gitprune.core.config import ConfigError, get_default_config, save_config
from gitprune.core.paths import get_config_path
from gitprune.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Create and inspect the configuration.",
    no_args_is_help=True,
)

PathOption = Annotated[
    Path | None,
    typer.Option(
        "--path",
        "-p",
        help="Configuration file. Defaults to ~/.config/gitprune/config.toml.",
    ),
]


@app.command()
def init(
    path: PathOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write the built-in default configuration to disk.

    The defaults report only: allow_delete is false until you enable it.
    """
    config_path = path or get_config_path()

    if config_path.exists() and not force:
        print_error(f"Config already exists: {config_path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
    print_info("Adjust the repository paths and rules, then run: gitprune run")


@app.command()
def show(path: PathOption = None) -> None:
    """Show the effective configuration.

    Without a config file the built-in defaults are shown.
    """
    config = load_run_config(path)
    source = path or get_config_path()
    origin = str(source) if source.exists() else "built-in defaults"

    console.print(f"[bold_header]Configuration[/] [muted]({origin})[/muted]")
    print_options(config)
    console.print(create_config_table(config))
