"""
playmark.commands.check - Check playbooks for parse errors.

A playbook with any error (critical or warning) is not runnable, so the
command fails if any file reports an error.
"""

import argparse
import json
import sys
import textwrap
from fnmatch import fnmatch
from pathlib import Path
from typing import Any, Dict, List, Optional

from playmark.commands.common import load_configuration
from playmark.parser import ParseResult, parse_file


def run(args: argparse.Namespace) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 if every playbook parsed cleanly, 1 otherwise)
    """
    config = load_configuration(args)
    if config is None:
        return 1

    files_config = config.get("files", {})
    files = collect_files(
        [Path(p) for p in args.paths],
        extensions=files_config.get("extensions", [".md"]),
        skip_files=files_config.get("skip_files", []),
    )
    if files is None:
        return 1
    if not files:
        print("Error: No playbook files found", file=sys.stderr)
        return 1

    results: Dict[Path, ParseResult] = {}
    for path in files:
        if args.verbose:
            print(f"Checking {path}", file=sys.stderr)
        try:
            results[path] = parse_file(path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {path}: {e}", file=sys.stderr)
            return 1

    output_format = "json" if args.json else config.get("output", {}).get("format", "text")
    if output_format == "json":
        indent = config.get("output", {}).get("indent", 2)
        print(json.dumps(format_json(results), indent=indent or None, ensure_ascii=False))
    else:
        print_report(results, quiet=args.quiet)

    return 0 if all(r.is_valid for r in results.values()) else 1


def collect_files(
    paths: List[Path], extensions: List[str], skip_files: List[str]
) -> Optional[List[Path]]:
    """
    Expand command line paths into playbook files.

    Files are taken as given; directories are searched recursively for the
    configured extensions. Names matching a skip pattern are dropped.

    Returns:
        Sorted list of files, or None if a path does not exist
    """
    found: List[Path] = []
    for path in paths:
        if path.is_file():
            candidates = [path]
        elif path.is_dir():
            candidates = sorted(
                p for p in path.rglob("*") if p.is_file() and p.name.endswith(tuple(extensions))
            )
        else:
            print(f"Error: No such file or directory: {path}", file=sys.stderr)
            return None
        found.extend(p for p in candidates if not any(fnmatch(p.name, pat) for pat in skip_files))
    return sorted(set(found))


def format_json(results: Dict[Path, ParseResult]) -> List[Dict[str, Any]]:
    """Build the JSON report: one entry per file."""
    return [
        {
            "file": str(path),
            "valid": result.is_valid,
            "blocks": len(result.blocks),
            "errors": [e.to_dict() for e in result.errors],
        }
        for path, result in results.items()
    ]


def print_report(results: Dict[Path, ParseResult], quiet: bool = False) -> None:
    """Print a human-readable report. Errors always go to stdout."""
    invalid = 0
    for path, result in results.items():
        if result.is_valid:
            continue
        invalid += 1
        print(f"\n{path}")
        for error in result.errors:
            print(textwrap.indent(str(error), "  "))

    if quiet:
        return
    total = len(results)
    if invalid:
        print(f"\n✗ {invalid} of {total} playbook(s) have errors and will not run")
    else:
        print(f"✓ {total} playbook(s) parsed without errors")
