"""
playmark.cli - Command-line interface.

Main entry point for the playmark CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from playmark import __version__
from playmark.commands import check, config_cmd, parse_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="playmark",
        description="Parser and checker for playbook markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  playmark parse playbook.md        # Print blocks and errors as JSON
  playmark check playbook.md        # Exit 1 if the playbook has errors
  playmark check docs/ -j           # Check a directory, JSON report

Configuration:
  playmark config path              # Show config file location
  playmark config show              # View all settings

For detailed command help: playmark <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"playmark {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a playbook and print the result as JSON",
    )
    parse_parser.add_argument(
        "file",
        type=Path,
        help="Playbook markdown file",
    )
    parse_parser.add_argument(
        "--indent",
        type=int,
        help="JSON indentation (0 for compact output)",
        metavar="N",
    )

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check playbooks for parse errors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit status is 1 if any playbook has an error. Warnings count: a
playbook with any reported problem will not be run.
""",
    )
    check_parser.add_argument(
        "paths",
        nargs="+",
        help="Playbook files or directories",
        metavar="PATH",
    )
    check_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output report as JSON",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_action")
    config_subparsers.add_parser("show", help="Show merged configuration")
    config_subparsers.add_parser("path", help="Show config file location")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install playmark[completion]
    # Then activate: eval "$(register-python-argcomplete playmark)"
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "parse":
            return parse_cmd.run(args)
        elif args.command == "check":
            return check.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        else:
            parser.print_help()
            return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
