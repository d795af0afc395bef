"""EnvVarService: the index owner and entry point for all lookups."""

from __future__ import annotations

import os
import threading
from typing import Iterable, Sequence

from env_utils.core.filesystem import FilesystemView
from env_utils.core.index import DefinitionIndex
from env_utils.core.presentation import make_annotation, make_hover
from env_utils.core.references import ReferenceSequence, extract_references, position_at, reference_at
from env_utils.core.resolver import ProximityResolver
from env_utils.core.scanner import DefinitionScanner, RootLike
from env_utils.models.env import Annotation, EnvVarDefinition, Hover, Location, Reference, ScanResult
from env_utils.utils.config import EnvUtilsConfig
from env_utils.utils.logging import get_logger

logger = get_logger(__name__)


class EnvVarService:
    """Resolves environment variable references against indexed definitions.

    The service owns one ``DefinitionIndex``. ``rebuild_index`` scans the
    configured roots into a new map and swaps it in; rebuilds are
    serialized, so the index always reflects exactly one completed scan.
    Lookups only read and may run from any thread.

    Example:
        service = EnvVarService()
        service.rebuild_index(["./deploy"])

        text = "docker run -p $PORT:80 app"
        ref = service.reference_at(text, 16)
        best = service.resolve_best(ref.name, origin_path="deploy/app/run.sh")
        print(best.value if best else "undefined")
    """

    def __init__(
        self,
        config: EnvUtilsConfig | None = None,
        fs: FilesystemView | None = None,
        index: DefinitionIndex | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Scan settings. Defaults to built-in defaults.
            fs: Filesystem view to scan. Defaults to the local disk.
            index: Index to populate. A new empty one by default.
        """
        self._config = config or EnvUtilsConfig()
        self._scanner = DefinitionScanner(
            fs=fs,
            suffix=self._config.scan.definition_suffix,
            max_workers=self._config.scan.max_workers,
        )
        self._index = index if index is not None else DefinitionIndex()
        self._resolver = ProximityResolver(self._index)
        self._rebuild_lock = threading.Lock()
        self._last_scan: ScanResult | None = None

    @property
    def config(self) -> EnvUtilsConfig:
        return self._config

    @property
    def index(self) -> DefinitionIndex:
        return self._index

    @property
    def last_scan(self) -> ScanResult | None:
        """Summary of the most recent completed rebuild."""
        return self._last_scan

    def default_roots(self) -> list[str]:
        return list(self._config.roots) or [os.getcwd()]

    def rebuild_index(
        self,
        roots: Iterable[RootLike] | None = None,
        ignore_globs: Sequence[str] | None = None,
        excluded_root_names: Iterable[str] | None = None,
    ) -> ScanResult:
        """Scan definition files and replace the index contents.

        Arguments left as None fall back to the configuration.

        Args:
            roots: Project roots to scan
            ignore_globs: Patterns for paths to leave out
            excluded_root_names: Root names to skip entirely

        Returns:
            Summary of the scan

        Raises:
            ConfigurationError: If an ignore pattern is malformed
        """
        scan_config = self._config.scan
        roots = list(roots) if roots is not None else self.default_roots()
        if ignore_globs is None:
            ignore_globs = scan_config.ignore_folders
        if excluded_root_names is None:
            excluded_root_names = scan_config.ignore_workspace_folders

        with self._rebuild_lock:
            mapping, result = self._scanner.scan(roots, ignore_globs, excluded_root_names)
            self._index.replace(mapping)
            self._last_scan = result

        logger.info(
            "Definition index rebuilt with %d names (%d definitions from %d files)",
            result.names_found,
            result.definitions_found,
            result.files_scanned,
        )
        return result

    def lookup_definitions(self, name: str) -> tuple[EnvVarDefinition, ...]:
        """All definitions of ``name`` in index order."""
        return self._index.get(name)

    def resolve(self, name: str, origin_path: str | None = None) -> tuple[EnvVarDefinition, ...]:
        """All definitions of ``name``, closest to ``origin_path`` first."""
        return self._resolver.resolve(name, origin_path)

    def resolve_best(self, name: str, origin_path: str | None = None) -> EnvVarDefinition | None:
        return self._resolver.resolve_best(name, origin_path)

    def extract_references(self, text: str) -> ReferenceSequence:
        return extract_references(text)

    def reference_at(self, text: str, offset: int) -> Reference | None:
        return reference_at(text, offset)

    # Editor-facing adapters

    def provide_definition(self, text: str, offset: int, origin_path: str | None = None) -> Location | None:
        """Location of the best definition for the reference at ``offset``."""
        ref = reference_at(text, offset)
        if ref is None:
            return None
        best = self.resolve_best(ref.name, origin_path)
        return best.location if best else None

    def provide_references(self, text: str, offset: int) -> list[Location]:
        """Locations of every definition for the reference at ``offset``."""
        ref = reference_at(text, offset)
        if ref is None:
            return []
        return [d.location for d in self.lookup_definitions(ref.name)]

    def provide_hover(self, text: str, offset: int, origin_path: str | None = None) -> Hover | None:
        """Hover content for the reference at ``offset``."""
        ref = reference_at(text, offset)
        if ref is None:
            return None
        best = self.resolve_best(ref.name, origin_path)
        if best is None:
            return None
        return make_hover(ref, best)

    def annotate(self, text: str, origin_path: str | None = None) -> list[Annotation]:
        """Inline values for every reference in ``text`` that resolves."""
        annotations: list[Annotation] = []
        for ref in extract_references(text):
            best = self.resolve_best(ref.name, origin_path)
            if best is None:
                continue
            line, _ = position_at(text, ref.start)
            annotations.append(make_annotation(ref, best, line))
        return annotations
