"""
playmark.parser - Playbook markdown parser.

Exports:
- parse / parse_file: Parse playbook markdown into a ParseResult
- ParseResult, Block, Flag, BlockMetadata, TokenPosition: Parsed data model
- ParserError, Severity, ErrorType: Error model
"""

from playmark.parser.errors import ErrorType, ParserError, Severity, create_error
from playmark.parser.flags import parse_values
from playmark.parser.models import (
    PLAIN_CODE_BLOCK,
    PLAIN_COMMENT,
    PLAIN_TEXT,
    RESERVED_BLOCK_NAMES,
    Block,
    BlockMetadata,
    Flag,
    ParseResult,
    TokenPosition,
    create_code_block,
    create_comment_block,
    create_plain_text_block,
    flatten_flag_value,
)
from playmark.parser.playbook import parse, parse_file

__all__ = [
    "parse",
    "parse_file",
    "parse_values",
    "ParseResult",
    "Block",
    "BlockMetadata",
    "Flag",
    "TokenPosition",
    "ParserError",
    "Severity",
    "ErrorType",
    "create_error",
    "create_code_block",
    "create_comment_block",
    "create_plain_text_block",
    "flatten_flag_value",
    "PLAIN_TEXT",
    "PLAIN_COMMENT",
    "PLAIN_CODE_BLOCK",
    "RESERVED_BLOCK_NAMES",
]
