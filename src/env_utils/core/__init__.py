"""Core domain logic for env-utils.

This module provides the main library API for indexing and resolving
environment variable definitions.
"""

from env_utils.core.filesystem import FilesystemView, LocalFilesystemView, MemoryFilesystemView
from env_utils.core.index import DefinitionIndex
from env_utils.core.presentation import display_value, hover_markdown, render_inline
from env_utils.core.references import (
    REFERENCE_PATTERN,
    ReferenceSequence,
    canonicalize,
    extract_references,
    offset_at,
    position_at,
    reference_at,
)
from env_utils.core.resolver import ProximityResolver, distance_score, rank_by_proximity
from env_utils.core.scanner import DefinitionScanner, parse_definitions, scan_definitions
from env_utils.core.service import EnvVarService

__all__ = [
    # Filesystem
    "FilesystemView",
    "LocalFilesystemView",
    "MemoryFilesystemView",
    # Index
    "DefinitionIndex",
    # Scanner
    "DefinitionScanner",
    "parse_definitions",
    "scan_definitions",
    # References
    "REFERENCE_PATTERN",
    "ReferenceSequence",
    "canonicalize",
    "extract_references",
    "offset_at",
    "position_at",
    "reference_at",
    # Resolver
    "ProximityResolver",
    "distance_score",
    "rank_by_proximity",
    # Presentation
    "display_value",
    "hover_markdown",
    "render_inline",
    # Service
    "EnvVarService",
]
