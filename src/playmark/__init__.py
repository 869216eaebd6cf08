"""
playmark - Parser for playbook markdown

playmark turns playbook markdown (annotations with flags, fenced code,
comments and prose) into an ordered list of typed blocks plus an
authoritative error list. A playbook with any error must not be run.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("playmark")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from playmark.parser import (
    Block,
    BlockMetadata,
    ErrorType,
    Flag,
    ParseResult,
    ParserError,
    Severity,
    TokenPosition,
    parse,
    parse_file,
)

__all__ = [
    "__version__",
    "parse",
    "parse_file",
    "ParseResult",
    "Block",
    "BlockMetadata",
    "Flag",
    "TokenPosition",
    "ParserError",
    "Severity",
    "ErrorType",
]
