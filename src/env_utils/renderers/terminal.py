"""Terminal renderer for env-utils output."""

from __future__ import annotations

import io
import os
from typing import Any

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from env_utils.renderers.base import BaseRenderer, OutputFormat, RenderContext


class TerminalRenderer(BaseRenderer):
    """Renderer for rich terminal output.

    Example:
        renderer = TerminalRenderer()
        renderer.render(index_report, context)
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the terminal renderer.

        Args:
            console: Rich console to use. Creates a new one if None.
        """
        self._console = console or Console()

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.TERMINAL

    def render(self, data: Any, context: RenderContext) -> str:
        """Render data to the terminal.

        Prints to the console and returns an empty string. Use
        ``Console.capture()`` to collect the output.
        """
        class_name = data.__class__.__name__

        if class_name == "IndexReport":
            self._render_index_report(data, context)
        elif class_name == "ScanResult":
            self._render_scan_result(data, context)
        elif class_name == "LookupResult":
            self._render_lookup(data, context)
        elif class_name == "NavigationResult":
            self._render_navigation(data, context)
        elif class_name == "HoverResult":
            self._render_hover(data, context)
        elif class_name == "AnnotationReport":
            self._render_annotations(data, context)
        else:
            self._console.print(data)

        return ""

    def render_to_file(self, data: Any, context: RenderContext) -> None:
        """Render data to a file as plain text."""
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")

        file_console = Console(record=True, width=120, file=io.StringIO())
        original_console = self._console
        self._console = file_console

        try:
            self.render(data, context)
            context.output_path.write_text(file_console.export_text(), encoding="utf-8")
        finally:
            self._console = original_console

    def _path(self, path: str, context: RenderContext) -> str:
        if context.relative_to is not None:
            try:
                return os.path.relpath(path, context.relative_to)
            except ValueError:
                return path
        return path

    def _render_scan_result(self, result: Any, context: RenderContext) -> None:
        status = "[green]OK[/green]" if result.success else "[yellow]PARTIAL[/yellow]"
        self._console.print(
            Panel(
                f"[bold]Names:[/bold] {result.names_found}\n"
                f"[bold]Definitions:[/bold] {result.definitions_found}\n"
                f"[bold]Files:[/bold] {result.files_scanned} scanned, {result.files_skipped} skipped\n"
                f"[bold]Status:[/bold] {status}",
                title="Definition Index",
            )
        )
        if result.roots_excluded and context.verbose:
            for root in result.roots_excluded:
                self._console.print(f"  [dim]Excluded root: {escape(root)}[/dim]")
        for error in result.errors:
            self._console.print(f"  [yellow]![/yellow] {escape(error.message)}")

    def _render_index_report(self, report: Any, context: RenderContext) -> None:
        self._console.print()
        self._render_scan_result(report.scan, context)

        if not report.entries:
            self._console.print()
            self._console.print("[yellow]No definitions found.[/yellow]")
            return

        self._console.print()
        table = Table(title="Variables")
        table.add_column("Name", style="bold")
        table.add_column("Definitions", justify="right")
        table.add_column("Value", max_width=60)
        for entry in report.entries:
            count = str(entry.count) if entry.count == 1 else f"[cyan]{entry.count}[/cyan]"
            table.add_row(escape(entry.name), count, escape(entry.first_value))
        self._console.print(table)

    def _render_lookup(self, result: Any, context: RenderContext) -> None:
        if not result.definitions:
            self._console.print(f"[yellow]{escape(result.name)} is not defined[/yellow]")
            return

        title = f"{result.name}"
        if result.origin:
            title += f" (from {self._path(result.origin, context)})"
        table = Table(title=escape(title))
        table.add_column("#", justify="right", style="dim")
        table.add_column("Value", style="bold")
        table.add_column("Location")
        for i, definition in enumerate(result.definitions, start=1):
            location = f"{self._path(definition.location.path, context)}:{definition.location.line + 1}"
            table.add_row(str(i), escape(definition.value), escape(location))
        self._console.print(table)

    def _render_navigation(self, result: Any, context: RenderContext) -> None:
        if result.name is None:
            self._console.print("[yellow]No reference at this position[/yellow]")
            return
        if not result.locations:
            self._console.print(f"[yellow]{escape(result.name)} is not defined[/yellow]")
            return
        for location in result.locations:
            self._console.print(escape(f"{self._path(location.path, context)}:{location.line + 1}"))

    def _render_hover(self, result: Any, context: RenderContext) -> None:
        if result.hover is None:
            self._console.print("[yellow]Nothing to show[/yellow]")
            return
        hover = result.hover
        location = hover.definition.location
        self._console.print(
            Panel(
                Markdown(hover.markdown),
                title=escape(hover.reference.name),
                subtitle=escape(f"{self._path(location.path, context)}:{location.line + 1}"),
            )
        )

    def _render_annotations(self, report: Any, context: RenderContext) -> None:
        self._console.print()
        self._console.print(f"[bold]{escape(self._path(report.path, context))}[/bold]")
        if not report.annotations and not report.unresolved:
            self._console.print("[dim]No references found.[/dim]")
            return

        if report.annotations:
            table = Table()
            table.add_column("Line", justify="right", style="dim")
            table.add_column("Reference", style="bold")
            table.add_column("Value", style="cyan")
            table.add_column("Defined in")
            for annotation in report.annotations:
                location = annotation.definition.location
                table.add_row(
                    str(annotation.line + 1),
                    escape(annotation.reference.text),
                    escape(annotation.display_value),
                    escape(f"{self._path(location.path, context)}:{location.line + 1}"),
                )
            self._console.print(table)

        for name in report.unresolved:
            self._console.print(f"  [yellow]?[/yellow] {escape(name)} is not defined")
