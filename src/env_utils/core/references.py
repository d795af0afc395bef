"""Recognizing environment variable references in arbitrary text."""

from __future__ import annotations

import re
from typing import Iterator

from env_utils.models.env import Reference

_NAME = r"[A-Z_][A-Z0-9_]*"

# Alternatives are tried in order at each position; the braced form
# comes first so ``${NAME}`` is never read as ``$`` followed by text.
REFERENCE_PATTERN = re.compile(
    rf"\$\{{(?P<braced>{_NAME})\}}"
    rf"|\$(?P<bare>{_NAME})"
    rf"|'(?P<single>{_NAME})'"
    rf'|"(?P<double>{_NAME})"'
)


def _to_reference(match: re.Match[str]) -> Reference:
    return Reference(
        start=match.start(),
        end=match.end(),
        text=match.group(0),
        name=match.group(match.lastgroup or 0),
    )


def canonicalize(span: str) -> str | None:
    """Strip the syntax wrapper from a reference.

    Returns the bare name for ``${NAME}``, ``$NAME``, ``'NAME'`` or
    ``"NAME"``, and None for anything else.
    """
    match = REFERENCE_PATTERN.fullmatch(span)
    if match is None:
        return None
    return match.group(match.lastgroup or 0)


class ReferenceSequence:
    """Lazy view of the references in a text.

    Every iteration scans the text again from the start, so the sequence
    can be consumed more than once.
    """

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __iter__(self) -> Iterator[Reference]:
        for match in REFERENCE_PATTERN.finditer(self._text):
            yield _to_reference(match)

    def names(self) -> list[str]:
        """Canonical names in order of appearance, duplicates kept."""
        return [ref.name for ref in self]

    def __repr__(self) -> str:
        return f"ReferenceSequence(text={self._text[:40]!r})"


def extract_references(text: str) -> ReferenceSequence:
    """All non-overlapping references in ``text``, left to right."""
    return ReferenceSequence(text)


def reference_at(text: str, offset: int) -> Reference | None:
    """The reference whose span contains ``offset``, if any.

    A span contains both its start and its end offset, so a cursor sitting
    right after a reference still resolves to it.
    """
    if offset < 0 or offset > len(text):
        return None
    for match in REFERENCE_PATTERN.finditer(text):
        if match.start() > offset:
            break
        if match.end() >= offset:
            return _to_reference(match)
    return None


def offset_at(text: str, line: int, character: int) -> int:
    """Convert a zero-based (line, character) position to an offset.

    Positions past the end of a line or of the text are clamped.
    """
    lines = text.split("\n")
    if line < 0:
        return 0
    if line >= len(lines):
        return len(text)
    start = sum(len(l) + 1 for l in lines[:line])
    return start + max(0, min(character, len(lines[line])))


def position_at(text: str, offset: int) -> tuple[int, int]:
    """Convert an offset to a zero-based (line, character) position."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start
