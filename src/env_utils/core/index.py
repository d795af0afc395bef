"""In-memory definition index keyed by variable name."""

from __future__ import annotations

import threading
from typing import Iterable, Iterator, Mapping

from env_utils.models.env import EnvVarDefinition


class DefinitionIndex:
    """Mapping from variable name to its definitions, in discovery order.

    Each name maps to an immutable tuple. ``put`` replaces the tuple for one
    name; ``replace`` and ``clear`` swap the whole map at once. Readers
    always see a complete tuple from before or after a change, never a
    partially updated one.

    Example:
        index = DefinitionIndex()
        index.replace(mapping)
        for definition in index.get("PORT"):
            print(definition.location, definition.value)
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[EnvVarDefinition, ...]] = {}
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of wholesale replacements so far."""
        return self._generation

    def put(self, definition: EnvVarDefinition) -> None:
        """Append a definition to the sequence for its name."""
        with self._lock:
            current = self._entries.get(definition.name, ())
            self._entries[definition.name] = current + (definition,)

    def get(self, name: str) -> tuple[EnvVarDefinition, ...]:
        """Definitions for ``name``, or an empty tuple if unknown."""
        return self._entries.get(name, ())

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries = {}
            self._generation += 1

    def replace(self, mapping: Mapping[str, Iterable[EnvVarDefinition]]) -> None:
        """Swap in a freshly built mapping as the active index."""
        fresh = {name: tuple(definitions) for name, definitions in mapping.items()}
        with self._lock:
            self._entries = fresh
            self._generation += 1

    def names(self) -> tuple[str, ...]:
        """Known names, in first-discovery order."""
        return tuple(self._entries)

    def snapshot(self) -> dict[str, tuple[EnvVarDefinition, ...]]:
        """A point-in-time copy of the whole index."""
        return dict(self._entries)

    def definition_count(self) -> int:
        return sum(len(v) for v in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
