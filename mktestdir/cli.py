"""Command-line entry point for mktestdir.

Usage::

    mktestdir basic --context test --use link --output dist --no-install
    python -m mktestdir --name basic --ts
"""

from __future__ import annotations

import argparse
import asyncio
import subprocess
import sys

from pydantic import ValidationError

from mktestdir.config import LibraryUsage, Options, merge_options
from mktestdir.errors import ScaffoldError
from mktestdir.scaffolder import GeneratedArtifacts, Scaffolder
from mktestdir.utils import print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mktestdir",
        usage="%(prog)s name [options]",
        description="Create a test directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mktestdir basic\n"
            "  mktestdir basic -c test --use link --output dist\n"
            "  mktestdir --name typed --ts --exporter mylib --no-install\n"
        ),
    )
    parser.add_argument(
        "positional_name",
        nargs="?",
        metavar="name",
        help="The directory name (same as --name)",
    )
    parser.add_argument("--name", help="The directory name")
    parser.add_argument("--context", "-c", help="The directory context")
    parser.add_argument(
        "--output",
        help="Project build dir, used for link library, should follow outDir if use typescript",
    )
    parser.add_argument(
        "--use",
        choices=[usage.value for usage in LibraryUsage],
        help="How to link library, use npm link or npm install",
    )
    parser.add_argument(
        "--ts",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Mark test project as a typescript project",
    )
    parser.add_argument(
        "--exporter",
        help='Generated test script exporter name, default to "lib"',
    )
    parser.add_argument(
        "--install",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Install dependency after dir and file created",
    )
    return parser


def options_from_args(args: argparse.Namespace, base: Options | None = None) -> Options:
    """Merge parsed arguments over *base* (environment or built-in defaults)."""
    supplied = vars(args).copy()
    positional = supplied.pop("positional_name", None)
    if supplied.get("name") is None:
        supplied["name"] = positional
    return merge_options(supplied, base=base)


def _summarise(artifacts: GeneratedArtifacts) -> None:
    print_summary_table(
        {
            "Target": str(artifacts.target_dir),
            "Script": artifacts.script_path.name,
            "Manifest": artifacts.manifest_path.name,
            "Dependencies": ", ".join(
                f"{name}@{value}"
                for name, value in artifacts.manifest.get("dependencies", {}).items()
            ),
            "Installed": "yes" if artifacts.installed else "no",
        },
        title="Test project",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``mktestdir`` and ``python -m mktestdir``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        options = options_from_args(args, base=Options.from_env())
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    try:
        artifacts = asyncio.run(Scaffolder(options).generate())
    except (ScaffoldError, OSError, ValueError, subprocess.CalledProcessError) as exc:
        print_error(str(exc))
        sys.exit(1)

    _summarise(artifacts)
    print_success(f"Created {artifacts.target_dir}")


if __name__ == "__main__":
    main()
