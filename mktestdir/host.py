"""Host project discovery.

The host project is the library being developed: the nearest ``package.json``
found by walking up from a start directory. Discovery is a pure function of
that directory so it can be exercised without changing the process's working
directory.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigNotFoundError, InvalidManifestError
from .utils import load_json

MANIFEST_FILENAME = "package.json"

_TS_CONFIG_PATTERN = re.compile(r"(t|j)sconfig")


@dataclass(frozen=True)
class ManifestLookup:
    """A manifest file found on disk and its parsed contents."""

    path: Path
    data: Any


@dataclass(frozen=True)
class HostProject:
    """The library the generated test project depends on."""

    name: str
    root_directory: Path
    manifest_path: Path


def find_nearest_manifest(start_dir: str | Path) -> ManifestLookup | None:
    """Return the closest ``package.json`` at or above *start_dir*.

    The directory is made absolute without resolving symlinks, then each
    ancestor is checked in turn up to the filesystem root.

    Raises:
        json.JSONDecodeError: If the first manifest found is not valid JSON.
    """
    current = Path(os.path.abspath(start_dir))
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_FILENAME
        if candidate.is_file():
            return ManifestLookup(path=candidate, data=load_json(candidate))
    return None


def read_host_project(start_dir: str | Path) -> HostProject:
    """Locate and validate the host project's manifest.

    Raises:
        ConfigNotFoundError: If no manifest exists at or above *start_dir*.
        InvalidManifestError: If the manifest lacks a non-empty string ``name``.
    """
    lookup = find_nearest_manifest(start_dir)
    if lookup is None:
        raise ConfigNotFoundError(start_dir)

    name = lookup.data.get("name") if isinstance(lookup.data, dict) else None
    if not isinstance(name, str) or not name.strip():
        raise InvalidManifestError(lookup.path)

    return HostProject(
        name=name.strip(),
        root_directory=lookup.path.parent,
        manifest_path=lookup.path,
    )


def ts_config_exists(root: str | Path) -> bool:
    """Return ``True`` if any entry in *root* looks like a ts/js config file.

    Matches ``tsconfig.json``, ``jsconfig.json``, ``tsconfig.build.json`` and
    so on: any name containing ``tsconfig`` or ``jsconfig``.
    """
    return any(_TS_CONFIG_PATTERN.search(entry) for entry in os.listdir(root))
