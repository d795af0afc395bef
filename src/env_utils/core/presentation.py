"""Turning resolved definitions into hover text and inline values."""

from __future__ import annotations

import re

from env_utils.models.env import Annotation, EnvVarDefinition, Hover, Reference

_SURROUNDING_QUOTE = re.compile(r"^['\"]|['\"]$")


def display_value(value: str) -> str:
    """Value as shown inline: one leading and one trailing quote removed."""
    return _SURROUNDING_QUOTE.sub("", value)


def hover_markdown(definition: EnvVarDefinition) -> str:
    return f"**Value:** `{definition.value}`"


def make_hover(reference: Reference, definition: EnvVarDefinition) -> Hover:
    return Hover(reference=reference, definition=definition, markdown=hover_markdown(definition))


def make_annotation(reference: Reference, definition: EnvVarDefinition, line: int = 0) -> Annotation:
    return Annotation(
        reference=reference,
        definition=definition,
        display_value=display_value(definition.value),
        line=line,
    )


def render_inline(text: str, annotations: list[Annotation], marker: str = "  # => ") -> str:
    """Append each line's annotated values at the end of that line.

    Lines without annotations are returned unchanged.
    """
    by_line: dict[int, list[str]] = {}
    for annotation in annotations:
        by_line.setdefault(annotation.line, []).append(
            f"{annotation.reference.name}={annotation.display_value}"
        )

    out = []
    for line_no, line in enumerate(text.split("\n")):
        values = by_line.get(line_no)
        out.append(f"{line}{marker}{', '.join(values)}" if values else line)
    return "\n".join(out)
