"""Command-line interface for the icon maintenance helpers."""

from __future__ import annotations

import argparse
import logging
import subprocess
from pathlib import Path
from typing import Iterable

from .fingerprint.scan import (
    fingerprint_rows,
    scan_directory,
    summarise,
    write_fingerprint_table,
)
from .fingerprint.svg_children import SvgParseError
from .io.metadata import MetadataError, read_all_metadata
from .rename.aliases import validate_aliases
from .rename.workflow import RenameError, rename_icon
from .svg.minify import minify_file


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the icon helpers."""
    parser = argparse.ArgumentParser(
        description="Maintenance helpers for an SVG icon collection."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    rename = subparsers.add_parser(
        "rename", help="Rename an icon and keep the old name as an alias."
    )
    rename.add_argument("icons_dir", help="Directory containing the icon files.")
    rename.add_argument("old_name", help="Current icon name.")
    rename.add_argument("new_name", help="New icon name.")
    rename.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the suggested follow-up commands.",
    )
    rename.add_argument(
        "--no-validate-metadata",
        dest="validate_metadata",
        action="store_false",
        help="Skip parsing the metadata file before moving anything.",
    )

    duplicates = subparsers.add_parser(
        "duplicates", help="Report icons containing duplicated children."
    )
    duplicates.add_argument("icons_dir", help="Directory containing the icon files.")
    duplicates.add_argument(
        "--out",
        default=None,
        help="Directory where the fingerprint table will be written.",
    )

    aliases = subparsers.add_parser("aliases", help="Check alias consistency.")
    aliases.add_argument("icons_dir", help="Directory containing the metadata files.")

    minify = subparsers.add_parser("minify", help="Minify SVG files in place.")
    minify.add_argument("files", nargs="+", help="SVG files to minify.")

    return parser.parse_args(list(argv) if argv is not None else None)


def _run_rename(args: argparse.Namespace) -> int:
    rename_icon(
        args.icons_dir,
        args.old_name,
        args.new_name,
        log_info=not args.quiet,
        validate_metadata=args.validate_metadata,
    )
    return 0


def _run_duplicates(args: argparse.Namespace) -> int:
    groups = scan_directory(args.icons_dir)
    summarise(groups)
    if args.out:
        write_fingerprint_table(fingerprint_rows(args.icons_dir), Path(args.out))
    return 1 if groups else 0


def _run_aliases(args: argparse.Namespace) -> int:
    issues = validate_aliases(read_all_metadata(args.icons_dir))
    for issue in issues:
        print(f"[aliases] {issue.icon}: '{issue.alias}' {issue.reason}")
    if not issues:
        print("[aliases] all aliases are consistent")
        return 0
    print(f"[aliases] {len(issues)} issues found")
    return 1


def _run_minify(args: argparse.Namespace) -> int:
    changed = 0
    for value in args.files:
        path = Path(value)
        if not path.is_file():
            print(f"[warn] {path}: not a file")
            continue
        if minify_file(path):
            print(f"[minify] {path}")
            changed += 1
    print(f"[minify] {changed} of {len(args.files)} files changed")
    return 0


_COMMANDS = {
    "rename": _run_rename,
    "duplicates": _run_duplicates,
    "aliases": _run_aliases,
    "minify": _run_minify,
}


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return _COMMANDS[args.command](args)
    except (
        RenameError,
        MetadataError,
        SvgParseError,
        subprocess.CalledProcessError,
        OSError,
    ) as exc:
        print(f"[error] {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
