"""mktestdir: scaffold a test project that consumes the library you are writing."""

from mktestdir.config import LibraryUsage, Options, merge_options
from mktestdir.errors import (
    ConfigNotFoundError,
    InvalidManifestError,
    NameRequiredError,
    ScaffoldError,
    TargetExistsError,
    UnknownUsageError,
)
from mktestdir.scaffolder import GeneratedArtifacts, Scaffolder, scaffold

__version__ = "0.1.0"

__all__ = [
    "ConfigNotFoundError",
    "GeneratedArtifacts",
    "InvalidManifestError",
    "LibraryUsage",
    "NameRequiredError",
    "Options",
    "ScaffoldError",
    "Scaffolder",
    "TargetExistsError",
    "UnknownUsageError",
    "merge_options",
    "scaffold",
]
