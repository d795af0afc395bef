"""CLI commands for building and querying the definition index."""

from pathlib import Path
from typing import Optional

import typer

from env_utils.cli.utils import FORMAT_HELP, build_service, emit, fail


def scan_cmd(
    roots: Optional[list[Path]] = typer.Argument(
        None,
        help="Project roots to scan (default: configured roots or current directory)",
    ),
    ignore: Optional[list[str]] = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Additional glob pattern to exclude (repeatable)",
    ),
    exclude_root: Optional[list[str]] = typer.Option(
        None,
        "--exclude-root",
        "-x",
        help="Project root name to skip entirely (repeatable)",
    ),
    format: Optional[str] = typer.Option(None, "--format", "-f", help=FORMAT_HELP),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """
    Scan definition files and summarize the index.

    Example:
        env-utils scan ./services ./shared --ignore "**/fixtures/**"
    """
    from env_utils.models.report import IndexEntry, IndexReport

    service = build_service(roots, ignore, exclude_root)
    index = service.index

    entries = []
    for name in sorted(index.names()):
        definitions = index.get(name)
        entries.append(IndexEntry(name=name, count=len(definitions), first_value=definitions[0].value))

    scan = service.last_scan
    if scan is None:
        fail("Index was not built")

    emit(IndexReport(scan=scan, entries=entries), format, output)


def lookup_cmd(
    name: str = typer.Argument(..., help="Variable name, bare or as $NAME / ${NAME}"),
    roots: Optional[list[Path]] = typer.Argument(None, help="Project roots to scan"),
    origin: Optional[Path] = typer.Option(
        None,
        "--from",
        help="File the reference appears in; closer definitions are listed first",
    ),
    format: Optional[str] = typer.Option(None, "--format", "-f", help=FORMAT_HELP),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """
    List the definitions of a variable, most relevant first.

    Example:
        env-utils lookup PORT --from app/main.py
    """
    from env_utils.core.references import canonicalize
    from env_utils.models.report import LookupResult
    from env_utils.utils.errors import ValidationError, validate_env_var_name

    bare = canonicalize(name) or name
    try:
        validate_env_var_name(bare)
    except ValidationError as e:
        fail(e.message)

    service = build_service(roots)
    origin_path = str(origin.resolve()) if origin else None
    definitions = service.resolve(bare, origin_path)

    emit(LookupResult(name=bare, origin=origin_path, definitions=list(definitions)), format, output)

    if not definitions:
        raise typer.Exit(1)
