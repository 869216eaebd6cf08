"""
playmark.commands.config_cmd - Inspect configuration.

- `playmark config show` - Print the merged configuration as TOML
- `playmark config path` - Print the config file in use
"""

import argparse
import sys
from pathlib import Path

import tomlkit

from playmark.commands.common import load_configuration
from playmark.config import find_config_file


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    action = getattr(args, "config_action", None)
    if action == "show":
        return cmd_show(args)
    elif action == "path":
        return cmd_path(args)
    print("Usage: playmark config <show|path>", file=sys.stderr)
    return 1


def cmd_show(args: argparse.Namespace) -> int:
    config = load_configuration(args)
    if config is None:
        return 1
    print(tomlkit.dumps(config), end="")
    return 0


def cmd_path(args: argparse.Namespace) -> int:
    config_path = args.config or find_config_file(Path.cwd())
    if config_path is None:
        if not args.quiet:
            print("No .playmark.toml found (using defaults)", file=sys.stderr)
        return 1
    print(config_path)
    return 0
