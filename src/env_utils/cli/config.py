"""CLI commands for inspecting configuration."""

import json

import typer
import yaml
from rich.markup import escape
from rich.table import Table

from env_utils.cli.utils import active_config, console

app = typer.Typer(
    name="config",
    help="Inspect env-utils configuration.",
    no_args_is_help=True,
)


@app.command()
def show(
    format: str = typer.Option("yaml", "--format", "-f", help="Output format (yaml, json)"),
) -> None:
    """
    Show the effective configuration.

    Example:
        env-utils config show --format json
    """
    data = active_config().model_dump(mode="json")
    if format == "json":
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(yaml.dump(data, default_flow_style=False, sort_keys=False).rstrip())


@app.command()
def paths() -> None:
    """List the locations searched for a configuration file."""
    from env_utils.utils.config import get_config_paths

    table = Table(title="Configuration search path")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path")
    table.add_column("Exists")
    for i, path in enumerate(get_config_paths(), start=1):
        exists = "[green]yes[/green]" if path.exists() else "[dim]no[/dim]"
        table.add_row(str(i), escape(str(path)), exists)
    console.print(table)

