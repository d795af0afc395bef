"""CLI commands that resolve references inside a source file."""

from pathlib import Path
from typing import Optional

import typer

from env_utils.cli.utils import (
    FORMAT_HELP,
    build_service,
    console,
    emit,
    fail,
    parse_position,
    read_source,
    resolve_format,
)


def _file_arg() -> typer.models.ArgumentInfo:
    return typer.Argument(..., help="File containing the reference", exists=True, dir_okay=False)


def _position_arg() -> typer.models.ArgumentInfo:
    return typer.Argument(..., help="Cursor position as LINE:COL (1-based)")


def _roots_arg() -> typer.models.ArgumentInfo:
    return typer.Argument(None, help="Project roots to scan")


def _format_opt() -> typer.models.OptionInfo:
    return typer.Option(None, "--format", "-f", help=FORMAT_HELP)


def _cursor(file: Path, position: str) -> tuple[str, int]:
    from env_utils.core.references import offset_at

    text = read_source(file)
    line, character = parse_position(position)
    return text, offset_at(text, line, character)


def definition_cmd(
    file: Path = _file_arg(),
    position: str = _position_arg(),
    roots: Optional[list[Path]] = _roots_arg(),
    format: Optional[str] = _format_opt(),
) -> None:
    """
    Go to the definition of the reference under the cursor.

    Example:
        env-utils definition docker-compose.yml 12:18
    """
    from env_utils.models.report import NavigationResult

    text, offset = _cursor(file, position)
    service = build_service(roots)
    ref = service.reference_at(text, offset)
    location = service.provide_definition(text, offset, str(file.resolve())) if ref else None

    emit(
        NavigationResult(name=ref.name if ref else None, locations=[location] if location else []),
        format,
    )
    if location is None:
        raise typer.Exit(1)


def references_cmd(
    file: Path = _file_arg(),
    position: str = _position_arg(),
    roots: Optional[list[Path]] = _roots_arg(),
    format: Optional[str] = _format_opt(),
) -> None:
    """
    List every definition of the reference under the cursor.

    Example:
        env-utils references deploy.sh 3:10
    """
    from env_utils.models.report import NavigationResult

    text, offset = _cursor(file, position)
    service = build_service(roots)
    ref = service.reference_at(text, offset)
    locations = service.provide_references(text, offset)

    emit(NavigationResult(name=ref.name if ref else None, locations=locations), format)
    if not locations:
        raise typer.Exit(1)


def hover_cmd(
    file: Path = _file_arg(),
    position: str = _position_arg(),
    roots: Optional[list[Path]] = _roots_arg(),
    format: Optional[str] = _format_opt(),
) -> None:
    """
    Show the value of the reference under the cursor.

    Example:
        env-utils hover docker-compose.yml 12:18
    """
    from env_utils.models.report import HoverResult

    text, offset = _cursor(file, position)
    service = build_service(roots)
    hover = service.provide_hover(text, offset, str(file.resolve()))

    emit(HoverResult(hover=hover), format)
    if hover is None:
        raise typer.Exit(1)


def annotate_cmd(
    file: Path = _file_arg(),
    roots: Optional[list[Path]] = _roots_arg(),
    inline: bool = typer.Option(
        False,
        "--inline",
        help="Print the file with resolved values appended to each line",
    ),
    format: Optional[str] = _format_opt(),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """
    Show the resolved value of every reference in a file.

    Example:
        env-utils annotate docker-compose.yml --inline
    """
    from env_utils.core.presentation import render_inline
    from env_utils.models.report import AnnotationReport
    from env_utils.renderers import OutputFormat

    if inline and format is not None and resolve_format(format) != OutputFormat.TERMINAL:
        fail("--inline prints annotated text and cannot be combined with --format json")

    text = read_source(file)
    service = build_service(roots)
    origin = str(file.resolve())
    annotations = service.annotate(text, origin)

    if inline:
        rendered = render_inline(text, annotations)
        if output:
            output.write_text(rendered, encoding="utf-8")
            console.print(f"Annotated file written to {output}")
        else:
            typer.echo(rendered)
        return

    resolved = {a.reference.name for a in annotations}
    unresolved: list[str] = []
    for ref in service.extract_references(text):
        if ref.name not in resolved and ref.name not in unresolved:
            unresolved.append(ref.name)

    emit(AnnotationReport(path=origin, annotations=annotations, unresolved=unresolved), format, output)
