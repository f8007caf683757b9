"""CLI for generating content-type documentation pages."""

import argparse
import dataclasses
import sys
from pathlib import Path

from content_autodoc.declarations.loader import ManifestLoader
from content_autodoc.declarations.models import DeclarationSource
from content_autodoc.declarations.scanner import DeclarationScanner
from content_autodoc.exceptions import AutoDocError
from content_autodoc.families import FAMILIES, ContentFamily, get_family
from content_autodoc.logging import setup_logging
from content_autodoc.runner import run_family
from content_autodoc.settings import settings


def main(argv: list[str] | None = None) -> int:
    """Entry point with generate/families subcommands."""
    parser = argparse.ArgumentParser(prog="content-autodoc", description="Content-type documentation generator")
    parser.add_argument("--log-level", default=None, help="Log level override (DEBUG, INFO, ...)")
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser("generate", help="Write one <Key>.md page per content type of a family")
    generate.add_argument("family", help="Content family name, see 'families'")
    generate.add_argument("--repo", type=Path, help="Repository holding the family's sources")
    generate.add_argument("--output", type=Path, help="Directory to write pages into")
    generate.add_argument("--format", choices=("python", "manifest"), help="Declaration source format")
    generate.add_argument(
        "--initializer",
        action="append",
        metavar="NAME",
        help="Initializer method whose XML field assignments are documented (repeatable)",
    )
    subparsers.add_parser("families", help="List known content families")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    if args.log_level:
        setup_logging(level=args.log_level)

    if args.command == "families":
        return _run_families()
    return _run_generate(args)


def _run_families() -> int:
    for name, family in sorted(FAMILIES.items()):
        print(f"{name}: root {family.root_type}, variants {', '.join(family.variants)}")
    return 0


def _run_generate(args: argparse.Namespace) -> int:
    try:
        family = get_family(args.family)
    except AutoDocError as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return 1

    if args.initializer:
        family = dataclasses.replace(family, initializer_method_names=frozenset(args.initializer))

    repo_path = args.repo or settings.repo_path
    output_dir = args.output or settings.output_dir
    source = _declaration_source(args.format or settings.source_format, family)

    try:
        report = run_family(family, repo_path, output_dir, source)
        report.raise_for_failures()
    except AutoDocError as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return 1

    print(f"Generated {len(report.written)} pages in {output_dir}")
    return 0


def _declaration_source(source_format: str, family: ContentFamily) -> DeclarationSource:
    if source_format == "manifest":
        return ManifestLoader()
    return DeclarationScanner(family.initializer_method_names)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
