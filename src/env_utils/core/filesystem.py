"""Filesystem views used to discover and read definition files."""

from __future__ import annotations

import os
import posixpath
from abc import ABC, abstractmethod
from typing import Sequence

from env_utils.utils.globs import is_ignored_dir, matches_any
from env_utils.utils.logging import get_logger

logger = get_logger(__name__)


class FilesystemView(ABC):
    """Abstract view of the files a project exposes."""

    @abstractmethod
    def find_files(self, root: str, suffix: str, ignore_globs: Sequence[str] = ()) -> list[str]:
        """List files under ``root`` ending with ``suffix``, sorted.

        Paths matching any of ``ignore_globs`` (relative to ``root``) are
        left out.
        """
        ...

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the full text of a file.

        Raises:
            OSError: If the file cannot be opened or read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        ...

    def is_dir(self, path: str) -> bool:
        """Whether ``path`` is a directory this view can walk."""
        return True


class LocalFilesystemView(FilesystemView):
    """Filesystem view backed by the local disk."""

    def find_files(self, root: str, suffix: str, ignore_globs: Sequence[str] = ()) -> list[str]:
        patterns = tuple(ignore_globs)
        found: list[str] = []

        def _on_error(error: OSError) -> None:
            logger.warning("Cannot list %s: %s", error.filename, error.strerror)

        for current, dirnames, filenames in os.walk(root, onerror=_on_error):
            rel_dir = os.path.relpath(current, root)
            rel_dir = "" if rel_dir == os.curdir else rel_dir.replace(os.sep, "/")

            # Prune in place so os.walk never descends into ignored trees
            kept = []
            for d in sorted(dirnames):
                rel = f"{rel_dir}/{d}" if rel_dir else d
                if patterns and is_ignored_dir(rel, patterns):
                    logger.debug("Skipping ignored directory %s", rel)
                    continue
                kept.append(d)
            dirnames[:] = kept

            for filename in sorted(filenames):
                if not filename.endswith(suffix):
                    continue
                rel = f"{rel_dir}/{filename}" if rel_dir else filename
                if patterns and matches_any(rel, patterns):
                    continue
                found.append(os.path.join(current, filename))

        return sorted(found)

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            return f.read()

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)


class MemoryFilesystemView(FilesystemView):
    """In-memory filesystem view for testing and embedding.

    Keys are POSIX paths; values are text or UTF-8 bytes.
    """

    def __init__(self, files: dict[str, str | bytes]):
        self._files = dict(files)

    def find_files(self, root: str, suffix: str, ignore_globs: Sequence[str] = ()) -> list[str]:
        patterns = tuple(ignore_globs)
        prefix = root.rstrip("/") + "/"
        found: list[str] = []
        for path in self._files:
            if not path.startswith(prefix) or not path.endswith(suffix):
                continue
            rel = path[len(prefix):]
            if patterns and (matches_any(rel, patterns) or self._in_ignored_dir(rel, patterns)):
                continue
            found.append(path)
        return sorted(found)

    @staticmethod
    def _in_ignored_dir(rel: str, patterns: tuple[str, ...]) -> bool:
        parent = posixpath.dirname(rel)
        while parent:
            if is_ignored_dir(parent, patterns):
                return True
            parent = posixpath.dirname(parent)
        return False

    def read_text(self, path: str) -> str:
        if path not in self._files:
            raise FileNotFoundError(2, "No such file", path)
        content = self._files[path]
        if isinstance(content, bytes):
            return content.decode("utf-8")
        return content

    def is_dir(self, path: str) -> bool:
        prefix = path.rstrip("/") + "/"
        return any(p.startswith(prefix) for p in self._files)
