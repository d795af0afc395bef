"""Main CLI entry point for env-utils."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from env_utils.cli import config, navigate, scan
from env_utils.cli.utils import fail

app = typer.Typer(
    name="env-utils",
    help="Resolve environment variable references against .env definitions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="scan")(scan.scan_cmd)
app.command(name="lookup")(scan.lookup_cmd)
app.command(name="definition")(navigate.definition_cmd)
app.command(name="references")(navigate.references_cmd)
app.command(name="hover")(navigate.hover_cmd)
app.command(name="annotate")(navigate.annotate_cmd)
app.add_typer(config.app, name="config")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: search standard locations)",
    ),
) -> None:
    """
    env-utils: resolve environment variable references.

    Finds `NAME=VALUE` definitions in `*.env` files and resolves
    `$NAME`, `${NAME}`, `'NAME'` and `"NAME"` references to them:

    - [bold]scan[/bold]: Build the index and list every variable
    - [bold]lookup[/bold]: Show the definitions of one variable
    - [bold]definition[/bold] / [bold]references[/bold]: Navigate from a reference in a file
    - [bold]hover[/bold]: Show the value of a reference in a file
    - [bold]annotate[/bold]: Show resolved values for a whole file
    """
    from env_utils.utils.config import load_config, set_config
    from env_utils.utils.errors import ConfigurationError
    from env_utils.utils.logging import configure_logging

    if verbose:
        configure_logging(level="DEBUG", structured=True)
    elif quiet:
        configure_logging(level="ERROR")
    else:
        configure_logging(level="WARNING")

    if config_file is None:
        set_config(None)
        return

    try:
        set_config(load_config(config_file))
    except (FileNotFoundError, ConfigurationError) as e:
        fail(e.message if isinstance(e, ConfigurationError) else str(e))


@app.command()
def version() -> None:
    """Show the env-utils version."""
    from env_utils import __version__

    console.print(f"env-utils version {__version__}")


if __name__ == "__main__":
    app()
