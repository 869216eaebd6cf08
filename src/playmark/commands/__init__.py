"""
playmark.commands - CLI command implementations
"""

from playmark.commands import check, config_cmd, parse_cmd

__all__ = ["check", "config_cmd", "parse_cmd"]
