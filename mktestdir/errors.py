"""Errors raised by the scaffolding pipeline.

Every domain error derives from ``ScaffoldError`` so callers (the CLI in
particular) can report them uniformly. I/O and subprocess failures are not
wrapped and propagate with their original exception types.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for fatal scaffolding errors."""


class NameRequiredError(ScaffoldError):
    """Raised when the ``name`` option is missing."""

    def __init__(self) -> None:
        super().__init__('The option "name" was required')


class ConfigNotFoundError(ScaffoldError):
    """Raised when no ``package.json`` is found above the working directory."""

    def __init__(self, start_dir: str | Path | None = None) -> None:
        self.start_dir = Path(start_dir) if start_dir is not None else None
        message = "package.json not found"
        if self.start_dir is not None:
            message += f" in {self.start_dir} or any parent directory"
        super().__init__(message)


class InvalidManifestError(ScaffoldError):
    """Raised when the host ``package.json`` does not declare a usable name."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f'package.json at "{self.path}" does not declare a "name"')


class TargetExistsError(ScaffoldError):
    """Raised when the target directory is already present on disk."""

    def __init__(self, target_dir: str | Path) -> None:
        self.target_dir = Path(target_dir)
        super().__init__(f'Target directory already exists "{self.target_dir}"')


class UnknownUsageError(ScaffoldError, ValueError):
    """Raised when ``use`` is neither ``link`` nor ``install``."""

    def __init__(self, use: object) -> None:
        self.use = use
        super().__init__(f'Unknown LibraryUsage "{use}"')
