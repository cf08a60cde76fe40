"""``package.json`` generation for the test project.

Builds the manifest document that wires the host library in as a
dependency, either by local ``file:`` path or by registry version.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from ..config import LibraryUsage
from ..errors import UnknownUsageError

REGISTRY_VERSION = "latest"

TS_DEV_DEPENDENCIES: dict[str, str] = {
    "ts-node": REGISTRY_VERSION,
    "typescript": REGISTRY_VERSION,
}


def resolve_relative_path(target_dir: str | Path, root: str | Path, output: str) -> str:
    """Path from *target_dir* to ``root/output``, for a ``file:`` dependency.

    Separators are normalised to ``/``. Identical locations give ``"./"``.
    A trailing ``/`` is added only when the path ends in ``.``, so ``..``
    becomes ``../`` while ``../../dist`` is returned unchanged.
    """
    out_path = os.path.abspath(os.path.join(root, output))
    rel = os.path.relpath(out_path, os.path.abspath(target_dir))
    if rel == os.curdir:
        return "./"
    fmt = rel.replace("\\", "/")
    return fmt + "/" if fmt.endswith(".") else fmt


def make_library_dependency(
    use: LibraryUsage | str, lib_name: str, lib_path: str
) -> dict[str, dict[str, str]]:
    """Return the ``dependencies`` section referencing the host library.

    Raises:
        UnknownUsageError: If *use* is not a ``LibraryUsage`` value.
    """
    try:
        usage = LibraryUsage(use)
    except ValueError:
        raise UnknownUsageError(use) from None

    if usage is LibraryUsage.LINK:
        return {"dependencies": {lib_name: f"file:{lib_path}"}}
    return {"dependencies": {lib_name: REGISTRY_VERSION}}


def make_package_json(
    name: str,
    library_dependency: dict[str, Any],
    ext: str,
    ts: bool,
) -> dict[str, Any]:
    """Assemble the manifest document.

    Keys merge in order (base fields, TypeScript-conditional fields, then the
    library dependency); later keys override earlier ones.
    """
    base: dict[str, Any] = {
        "private": True,
        "name": name,
        "description": f"test for {name}",
        "main": f"./index.{ext}",
    }

    if ts:
        ts_fields: dict[str, Any] = {
            "script": {"start": "ts-node index.ts"},
            "devDependencies": dict(TS_DEV_DEPENDENCIES),
        }
    else:
        ts_fields = {"script": {"start": "node index.js"}}

    return {**base, **ts_fields, **library_dependency}


def dump_package_json(document: dict[str, Any]) -> str:
    """Serialise a manifest tab-indented, without a trailing newline."""
    return json.dumps(document, indent="\t", ensure_ascii=False)
