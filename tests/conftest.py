"""Shared pytest fixtures for the mktestdir test suite.

Provides reusable fixtures for:
- A host library project on disk (``package.json`` with a name)
- A TypeScript-flavoured host project
- A mocked package-manager runner
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest


# ---------------------------------------------------------------------------
# Host projects
# ---------------------------------------------------------------------------

def write_manifest(directory: Path, data: dict) -> Path:
    """Write *data* as ``package.json`` in *directory* and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "package.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def host_root(tmp_path: Path) -> Path:
    """A library project named ``mylib`` with ``src/`` and ``test/`` subdirectories."""
    root = tmp_path / "proj"
    write_manifest(root, {"name": "mylib", "version": "1.0.0", "main": "dist/index.js"})
    (root / "src").mkdir()
    (root / "test").mkdir()
    yield root


@pytest.fixture
def ts_host_root(host_root: Path) -> Path:
    """The ``mylib`` project with a ``tsconfig.json`` in its root."""
    (host_root / "tsconfig.json").write_text('{"compilerOptions": {}}', encoding="utf-8")
    yield host_root


# ---------------------------------------------------------------------------
# Mock package manager
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch the scaffolder's ``run_command`` to succeed without spawning npm."""
    with patch(
        "mktestdir.scaffolder.generator.run_command",
        new_callable=AsyncMock,
        return_value=(0, "\nadded 1 package in 1s\n", ""),
    ) as mocked:
        yield mocked
