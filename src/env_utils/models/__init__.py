"""Pydantic data models for env-utils."""

from env_utils.models.common import ErrorRecord
from env_utils.models.env import (
    NAME_PATTERN,
    Annotation,
    EnvVarDefinition,
    Hover,
    Location,
    ProjectRoot,
    Reference,
    ScanError,
    ScanResult,
)
from env_utils.models.report import (
    AnnotationReport,
    HoverResult,
    IndexEntry,
    IndexReport,
    LookupResult,
    NavigationResult,
)

__all__ = [
    "ErrorRecord",
    # Definitions and references
    "NAME_PATTERN",
    "Annotation",
    "EnvVarDefinition",
    "Hover",
    "Location",
    "ProjectRoot",
    "Reference",
    "ScanError",
    "ScanResult",
    # Reports
    "AnnotationReport",
    "HoverResult",
    "IndexEntry",
    "IndexReport",
    "LookupResult",
    "NavigationResult",
]
