"""Glob pattern helpers for ignore rules.

Patterns follow the editor convention used for exclusion settings:
``**`` and ``*`` both match across directory separators, and ``{a,b}``
brace groups expand into alternatives. Patterns are matched against
root-relative POSIX paths.
"""

from __future__ import annotations

import fnmatch
import re
from functools import lru_cache

from env_utils.utils.errors import ConfigurationError

_BRACE_GROUP = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` groups into separate patterns.

    Example:
        >>> expand_braces("**/{node_modules,dist}/**")
        ['**/node_modules/**', '**/dist/**']
    """
    match = _BRACE_GROUP.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def validate_glob(pattern: str) -> str:
    """Check that an ignore pattern is well formed.

    Args:
        pattern: Glob pattern to check

    Returns:
        The pattern, unchanged

    Raises:
        ConfigurationError: If the pattern is empty or has unbalanced
            brackets or braces
    """
    if not isinstance(pattern, str) or not pattern.strip():
        raise ConfigurationError("Ignore pattern cannot be empty", config_key="ignore_folders")

    for opening, closing in (("[", "]"), ("{", "}")):
        depth = 0
        for char in pattern:
            if char == opening:
                depth += 1
            elif char == closing:
                depth -= 1
                if depth < 0:
                    break
        if depth != 0:
            raise ConfigurationError(
                f"Ignore pattern {pattern!r} has unbalanced '{opening}{closing}'",
                config_key="ignore_folders",
            )

    for alternative in expand_braces(pattern):
        try:
            re.compile(fnmatch.translate(alternative))
        except re.error as e:
            raise ConfigurationError(
                f"Ignore pattern {pattern!r} is not a valid glob: {e}",
                config_key="ignore_folders",
            ) from e
    return pattern


@lru_cache(maxsize=256)
def _compiled(pattern: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(fnmatch.translate(p)) for p in expand_braces(pattern))


def matches_any(rel_path: str, patterns: tuple[str, ...] | list[str]) -> bool:
    """Return True if a root-relative POSIX path matches any pattern.

    The path is tried both as-is and with a leading slash so that
    ``**/name/**`` also matches ``name`` directly under the root.
    """
    candidates = (rel_path, "/" + rel_path)
    for pattern in patterns:
        for regex in _compiled(pattern):
            if any(regex.match(c) for c in candidates):
                return True
    return False


def is_ignored_dir(rel_dir: str, patterns: tuple[str, ...] | list[str]) -> bool:
    """Return True if the directory ``rel_dir`` is excluded.

    A pattern can name the directory itself (``dist``, ``**/dist``) or
    everything below it (``dist/``, ``**/dist/**``).
    """
    return matches_any(rel_dir, patterns) or matches_any(rel_dir + "/", patterns)
