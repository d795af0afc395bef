"""env-utils: resolve environment variable references to their definitions.

This package indexes ``NAME=VALUE`` lines found in ``*.env`` files across
a project tree and resolves references to them in arbitrary text:

- **Scanner**: Walk project roots and collect definitions
- **Index**: Name to definitions, swapped wholesale on rebuild
- **References**: Recognize ``$NAME``, ``${NAME}``, ``'NAME'`` and ``"NAME"``
- **Resolver**: Order same-named definitions by directory proximity

Usage:
    from env_utils import EnvVarService

    service = EnvVarService()
    service.rebuild_index(["./project"])

    best = service.resolve_best("PORT", origin_path="project/app/main.py")
    for ref in service.extract_references("listen on ${PORT}"):
        print(ref.name, service.resolve_best(ref.name))

CLI:
    env-utils scan ./project
    env-utils lookup PORT --from project/app/main.py
    env-utils hover docker-compose.yml 12:18
    env-utils annotate docker-compose.yml --inline
"""

__version__ = "0.1.0"

# Core classes
from env_utils.core.service import EnvVarService
from env_utils.core.index import DefinitionIndex
from env_utils.core.scanner import DefinitionScanner, scan_definitions
from env_utils.core.resolver import ProximityResolver, distance_score
from env_utils.core.references import canonicalize, extract_references, reference_at
from env_utils.core.filesystem import FilesystemView, LocalFilesystemView, MemoryFilesystemView

# Models (commonly used)
from env_utils.models.env import (
    Annotation,
    EnvVarDefinition,
    Hover,
    Location,
    ProjectRoot,
    Reference,
    ScanResult,
)

# Errors and configuration
from env_utils.utils.errors import ConfigurationError, EnvUtilsError, ValidationError
from env_utils.utils.config import EnvUtilsConfig, load_config

__all__ = [
    # Version
    "__version__",
    # Core
    "EnvVarService",
    "DefinitionIndex",
    "DefinitionScanner",
    "scan_definitions",
    "ProximityResolver",
    "distance_score",
    "canonicalize",
    "extract_references",
    "reference_at",
    "FilesystemView",
    "LocalFilesystemView",
    "MemoryFilesystemView",
    # Models
    "Annotation",
    "EnvVarDefinition",
    "Hover",
    "Location",
    "ProjectRoot",
    "Reference",
    "ScanResult",
    # Errors / config
    "ConfigurationError",
    "EnvUtilsError",
    "ValidationError",
    "EnvUtilsConfig",
    "load_config",
]
