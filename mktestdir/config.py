"""mktestdir configuration.

Typed, immutable options for a single scaffolding run. ``Options`` is a frozen
Pydantic v2 model so that values coming from the command line, the
environment, or library callers are validated in one place.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LibraryUsage(str, Enum):
    """How the generated test project references the host library."""

    LINK = "link"
    INSTALL = "install"


DEFAULT_OPTIONS: dict[str, Any] = {
    "context": ".",
    "output": ".",
    "use": LibraryUsage.INSTALL.value,
    "exporter": "lib",
    "install": True,
    "package_manager": "npm",
}

# Environment variable -> Options field
_ENV_FIELDS: dict[str, str] = {
    "MKTESTDIR_CONTEXT": "context",
    "MKTESTDIR_OUTPUT": "output",
    "MKTESTDIR_USE": "use",
    "MKTESTDIR_TS": "ts",
    "MKTESTDIR_EXPORTER": "exporter",
    "MKTESTDIR_INSTALL": "install",
    "MKTESTDIR_PACKAGE_MANAGER": "package_manager",
}


class Options(BaseModel):
    """Options for one scaffolding run.

    Only ``name`` is mandatory, and it is checked by the scaffolder rather
    than here so that a missing name is reported as ``NameRequiredError``.
    ``use`` is kept as a plain string for the same reason: an unrecognised
    value surfaces as ``UnknownUsageError`` once the pipeline resolves it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = Field(default=None, description="Leaf name of the new test directory")
    context: str = Field(
        default=DEFAULT_OPTIONS["context"],
        description="Directory in which the test directory is created",
    )
    output: str = Field(
        default=DEFAULT_OPTIONS["output"],
        description="Host build output directory, relative to the host root",
    )
    use: str = Field(
        default=DEFAULT_OPTIONS["use"],
        description="Library reference mode: 'link' (file: path) or 'install' (registry)",
    )
    ts: bool | None = Field(
        default=None,
        description="TypeScript mode; None auto-detects from the host root",
    )
    exporter: str = Field(
        default=DEFAULT_OPTIONS["exporter"],
        description="Identifier bound to the library in the entry script",
    )
    install: bool = Field(
        default=DEFAULT_OPTIONS["install"],
        description="Run the package manager's install after generation",
    )
    package_manager: str = Field(
        default=DEFAULT_OPTIONS["package_manager"],
        description="Executable invoked as '<package_manager> install'",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Options":
        """Build ``Options`` from ``MKTESTDIR_*`` environment variables.

        Recognised variables (all optional):
            MKTESTDIR_CONTEXT, MKTESTDIR_OUTPUT, MKTESTDIR_USE, MKTESTDIR_TS,
            MKTESTDIR_EXPORTER, MKTESTDIR_INSTALL, MKTESTDIR_PACKAGE_MANAGER.

        Empty values are ignored. Booleans accept ``true``/``false``/``1``/``0``
        and the other spellings Pydantic understands.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}
        for var, field_name in _ENV_FIELDS.items():
            if env.get(var):
                kwargs[field_name] = env[var]
        return cls(**kwargs)


def merge_options(
    supplied: Mapping[str, Any] | Options | None = None,
    base: Options | None = None,
) -> Options:
    """Fill the fields missing from *supplied* with those of *base*.

    A field counts as missing when it is absent or ``None``. *base* defaults
    to ``Options()``, i.e. the built-in defaults.

    Raises:
        pydantic.ValidationError: If *supplied* names an unknown field or a
            value of the wrong type.
    """
    if base is None:
        base = Options()
    if isinstance(supplied, Options):
        supplied = supplied.model_dump(exclude_unset=True)

    overrides = {key: value for key, value in (supplied or {}).items() if value is not None}
    return Options.model_validate({**base.model_dump(), **overrides})
