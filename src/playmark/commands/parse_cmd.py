"""
playmark.commands.parse_cmd - Print the parse result of a playbook as JSON.
"""

import argparse
import json
import sys

from playmark.commands.common import load_configuration
from playmark.parser import parse_file


def run(args: argparse.Namespace) -> int:
    """
    Run the parse command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 when the file was parsed, 1 if it could not be read)
    """
    config = load_configuration(args)
    if config is None:
        return 1

    indent = args.indent if args.indent is not None else config["output"]["indent"]

    try:
        result = parse_file(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), indent=indent or None, ensure_ascii=False))
    return 0
