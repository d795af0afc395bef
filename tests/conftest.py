"""Shared test fixtures for env-utils tests."""

import logging
from pathlib import Path

import pytest

from env_utils.core.filesystem import MemoryFilesystemView
from env_utils.utils.config import set_config


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make sure no test leaks a global configuration into the next."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any handler a test or CLI invocation installs."""
    logger = logging.getLogger("env_utils")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield
    logger.handlers, logger.level, logger.propagate = saved


@pytest.fixture
def memory_files() -> dict[str, str | bytes]:
    """An in-memory project with the same variable defined in several places."""
    return {
        "/ws/root/app/service.env": "PORT=8080\nDB_HOST=localhost\n",
        "/ws/root/app/main.txt": "connect ${DB_HOST}:$PORT\n",
        "/ws/root/lib/shared.env": "PORT=9090\nLOG_LEVEL='debug'\n",
        "/ws/root/node_modules/pkg/vendor.env": "PORT=1\n",
        "/ws/root/README.md": "PORT=0\n",
    }


@pytest.fixture
def memory_fs(memory_files) -> MemoryFilesystemView:
    """Filesystem view over ``memory_files``."""
    return MemoryFilesystemView(memory_files)


@pytest.fixture
def project_tree(tmp_path) -> Path:
    """Create a small project tree on disk and return its root."""
    root = tmp_path / "root"
    files = {
        "app/service.env": "PORT=8080\nDB_HOST=localhost\n",
        "app/main.txt": "connect ${DB_HOST}:$PORT\nlevel is \"LOG_LEVEL\"\nmissing $UNDEFINED_VAR\n",
        "lib/shared.env": "PORT=9090\nLOG_LEVEL='debug'\n",
        "node_modules/pkg/vendor.env": "PORT=1\n",
        "docs/notes.txt": "PORT=0\n",
    }
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root
