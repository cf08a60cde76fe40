"""Main scaffolding orchestrator.

Takes ``Options`` and generates a throwaway test project next to the host
library: an entry script importing the library and a ``package.json`` that
declares it as a dependency, optionally followed by a package install.
"""

from __future__ import annotations

import asyncio
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..config import Options, merge_options
from ..errors import NameRequiredError, TargetExistsError
from ..host import HostProject, read_host_project, ts_config_exists
from ..utils import print_output, run_command
from .manifest import (
    dump_package_json,
    make_library_dependency,
    make_package_json,
    resolve_relative_path,
)
from .templates import TemplateRenderer

MANIFEST_NAME = "package.json"


@dataclass
class GeneratedArtifacts:
    """Everything a scaffolding run wrote to disk."""

    target_dir: Path
    script_path: Path
    script: str
    manifest_path: Path
    manifest: dict[str, Any]
    installed: bool = False

    @property
    def files(self) -> list[Path]:
        return [self.script_path, self.manifest_path]


class Scaffolder:
    """Generates a test project for the library enclosing *cwd*.

    The working directory is explicit: it is where the host manifest search
    starts and what a relative ``context`` is resolved against.
    """

    def __init__(self, options: Options, cwd: str | Path | None = None) -> None:
        self.options = options
        self.cwd = Path(os.path.abspath(cwd if cwd is not None else Path.cwd()))
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self) -> GeneratedArtifacts:
        """Run the whole pipeline.

        Raises:
            NameRequiredError: ``name`` is missing.
            ConfigNotFoundError: No ``package.json`` above the working directory.
            InvalidManifestError: The host manifest has no ``name``.
            TargetExistsError: The target directory already exists.
            UnknownUsageError: ``use`` is not ``link`` or ``install``.
            subprocess.CalledProcessError: The install command failed.
        """
        opts = self.options
        if not opts.name:
            raise NameRequiredError()

        host = await asyncio.to_thread(read_host_project, self.cwd)
        dir_name = f"{host.name}-{opts.name}"
        target_dir = self.target_dir
        if target_dir.exists():
            raise TargetExistsError(target_dir)

        # Resolved before mkdir so an unknown usage leaves nothing behind.
        relative_path = resolve_relative_path(target_dir, host.root_directory, opts.output)
        library_dependency = make_library_dependency(opts.use, host.name, relative_path)

        await asyncio.to_thread(target_dir.mkdir)

        ts = await self._resolve_typescript(host)
        ext = "ts" if ts else "js"

        script = self.renderer.render(
            f"index.{ext}.j2", {"library_name": host.name, "exporter": opts.exporter}
        )
        script_path = target_dir / f"index.{ext}"
        await asyncio.to_thread(script_path.write_text, script, encoding="utf-8")

        manifest = make_package_json(dir_name, library_dependency, ext, ts)
        manifest_path = target_dir / MANIFEST_NAME
        await asyncio.to_thread(
            manifest_path.write_text, dump_package_json(manifest), encoding="utf-8"
        )

        artifacts = GeneratedArtifacts(
            target_dir=target_dir,
            script_path=script_path,
            script=script,
            manifest_path=manifest_path,
            manifest=manifest,
        )

        if opts.install:
            await self.install(target_dir)
            artifacts.installed = True

        return artifacts

    @property
    def target_dir(self) -> Path:
        """Absolute ``<cwd>/<context>/<name>``, symlinks left unresolved."""
        return Path(os.path.abspath(self.cwd / self.options.context / (self.options.name or "")))

    async def install(self, target_dir: Path) -> None:
        """Run ``<package_manager> install`` in *target_dir* and echo its output.

        Raises:
            subprocess.CalledProcessError: The command exited non-zero.
            FileNotFoundError: The package manager executable was not found.
        """
        cmd = [self.options.package_manager, "install"]
        returncode, stdout, stderr = await run_command(cmd, cwd=target_dir)
        print_output(stdout)
        print_output(stderr)
        if returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd, output=stdout, stderr=stderr)

    # -- Internals ---------------------------------------------------------

    async def _resolve_typescript(self, host: HostProject) -> bool:
        if self.options.ts is not None:
            return self.options.ts
        return await asyncio.to_thread(ts_config_exists, host.root_directory)


async def scaffold(
    options: Options | dict[str, Any] | None = None,
    *,
    cwd: str | Path | None = None,
    **overrides: Any,
) -> GeneratedArtifacts:
    """Merge *options* and *overrides* over the defaults and run a ``Scaffolder``."""
    merged = merge_options(options)
    if overrides:
        merged = merge_options(overrides, base=merged)
    return await Scaffolder(merged, cwd=cwd).generate()
