"""mktestdir scaffolder -- generates a throwaway test project for a library.

Quick usage::

    from mktestdir.scaffolder import scaffold

    artifacts = await scaffold({"name": "basic", "use": "link", "install": False})
    print(artifacts.manifest["dependencies"])
"""

from mktestdir.scaffolder.generator import GeneratedArtifacts, Scaffolder, scaffold
from mktestdir.scaffolder.templates import TemplateRenderer

__all__ = [
    "GeneratedArtifacts",
    "Scaffolder",
    "TemplateRenderer",
    "scaffold",
]
