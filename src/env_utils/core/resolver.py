"""Ordering same-named definitions by proximity to the referencing file."""

from __future__ import annotations

import os

from env_utils.core.index import DefinitionIndex
from env_utils.models.env import EnvVarDefinition

PARENT_STEP_WEIGHT = 2
CHILD_STEP_WEIGHT = 1


def distance_score(origin_path: str, definition_path: str) -> int:
    """Directory distance from an origin file to a definition file.

    Each step of the relative path between the two directories costs 1,
    except steps up to a parent, which cost 2. Files in the same directory
    score 0.

    Example:
        >>> distance_score("a/b/main.txt", "a/c/x.env")
        3
        >>> distance_score("a/main.txt", "a/c/x.env")
        1
    """
    origin_dir = os.path.dirname(origin_path) or os.curdir
    definition_dir = os.path.dirname(definition_path) or os.curdir
    rel = os.path.relpath(definition_dir, origin_dir)
    if rel == os.curdir:
        return 0

    score = 0
    for segment in rel.split(os.sep):
        if not segment:
            continue
        score += PARENT_STEP_WEIGHT if segment == os.pardir else CHILD_STEP_WEIGHT
    return score


def rank_by_proximity(
    definitions: tuple[EnvVarDefinition, ...] | list[EnvVarDefinition],
    origin_path: str,
) -> tuple[EnvVarDefinition, ...]:
    """Sort definitions by ascending distance; equal scores keep their order."""
    return tuple(
        sorted(definitions, key=lambda d: distance_score(origin_path, d.location.path))
    )


class ProximityResolver:
    """Resolves a name to its definitions, most relevant first."""

    def __init__(self, index: DefinitionIndex) -> None:
        self._index = index

    def resolve(self, name: str, origin_path: str | None = None) -> tuple[EnvVarDefinition, ...]:
        """Definitions of ``name`` ordered by relevance to ``origin_path``.

        Without an origin, or with at most one candidate, the index order
        is returned as-is.
        """
        definitions = self._index.get(name)
        if not origin_path or len(definitions) <= 1:
            return definitions
        return rank_by_proximity(definitions, origin_path)

    def resolve_best(self, name: str, origin_path: str | None = None) -> EnvVarDefinition | None:
        """The most relevant definition of ``name``, or None."""
        definitions = self.resolve(name, origin_path)
        return definitions[0] if definitions else None
