"""Shared utilities for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from env_utils.renderers import OutputFormat, RenderContext, TerminalRenderer, get_renderer
from env_utils.utils.errors import ConfigurationError

if TYPE_CHECKING:
    from env_utils.core.service import EnvVarService
    from env_utils.utils.config import EnvUtilsConfig

# Shared console instance
console = Console()

FORMAT_HELP = "Output format (terminal, json; default: output.default_format)"


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def active_config() -> "EnvUtilsConfig":
    """Load the active configuration, exiting cleanly if it is invalid."""
    from env_utils.utils.config import get_config

    try:
        return get_config()
    except ConfigurationError as e:
        fail(e.message)


def build_service(
    roots: Optional[list[Path]] = None,
    ignore: Optional[list[str]] = None,
    exclude_roots: Optional[list[str]] = None,
) -> "EnvVarService":
    """Create a service and build its index.

    Extra ignore patterns and excluded root names are added to the ones
    from the configuration.

    Args:
        roots: Project roots (default: configured roots, then the current directory)
        ignore: Additional ignore glob patterns
        exclude_roots: Additional root names to exclude

    Returns:
        Service with a populated index
    """
    from env_utils.core.service import EnvVarService

    config = active_config()
    service = EnvVarService(config=config)

    root_paths = [str(p.resolve()) for p in roots] if roots else None
    ignore_globs = list(config.scan.ignore_folders) + list(ignore or [])
    excluded = list(config.scan.ignore_workspace_folders) + list(exclude_roots or [])

    with console.status("Indexing definition files..."):
        try:
            service.rebuild_index(root_paths, ignore_globs, excluded)
        except ConfigurationError as e:
            fail(e.message)
    return service


def parse_position(value: str) -> tuple[int, int]:
    """Parse a 1-based ``LINE:COL`` (or ``LINE``) position.

    Returns:
        Zero-based (line, character)
    """
    line_str, _, col_str = value.partition(":")
    try:
        line = int(line_str)
        col = int(col_str) if col_str else 1
    except ValueError:
        raise typer.BadParameter(f"Expected LINE:COL, got {value!r}")
    if line < 1 or col < 1:
        raise typer.BadParameter("Line and column start at 1")
    return line - 1, col - 1


def read_source(path: Path) -> str:
    """Read a file whose references should be resolved."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        fail(f"Cannot read {path}: {e}")


def resolve_format(format: Optional[str]) -> OutputFormat:
    """The requested output format, or the configured default."""
    name = format or active_config().output.default_format
    try:
        return OutputFormat(name)
    except ValueError:
        fail(f"Unsupported format: {name}")


def emit(data: Any, format: Optional[str], output: Optional[Path] = None) -> None:
    """Render a result to the console or to a file.

    Args:
        data: Report model to render
        format: Output format name (default: ``output.default_format``)
        output: Optional output file path
    """
    output_config = active_config().output
    output_format = resolve_format(format)

    context = RenderContext(
        format=output_format,
        output_path=output,
        verbose=output_config.verbose,
        color=output_config.color,
        relative_to=Path.cwd(),
    )
    if output_format == OutputFormat.TERMINAL:
        renderer = TerminalRenderer(console=Console(no_color=not output_config.color))
    else:
        renderer = get_renderer(output_format)

    if output:
        renderer.render_to_file(data, context)
        console.print(f"Report written to {output}")
    elif output_format == OutputFormat.JSON:
        typer.echo(renderer.render(data, context))
    else:
        renderer.render(data, context)
