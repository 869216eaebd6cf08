"""
playmark.parser.playbook - Playbook parsing entry point.

Parses playbook markdown into annotation blocks, code blocks, comments and
plain text. The parser is generic: any ``@identifier`` is an annotation and
no identifier has special meaning.

Usage:
    from playmark.parser import parse

    result = parse(markdown)
    if result.errors:
        ...  # the playbook must not be executed
    else:
        for block in result.blocks:
            ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from playmark.parser.annotation import AnnotationParser
from playmark.parser.base import ParseContext, ParserRegistry
from playmark.parser.code_block import CodeBlockParser
from playmark.parser.comments import CommentsParser
from playmark.parser.errors import ParserError
from playmark.parser.models import Block, ParseResult
from playmark.parser.plain_text import PlainTextParser
from playmark.parser.utils import is_empty_line
from playmark.parser.validation import validate_structure


def create_registry() -> ParserRegistry:
    """Create a registry with the standard block parsers.

    Dispatch order: code fence, comment, annotation, plain text.
    """
    registry = ParserRegistry()
    registry.register(CodeBlockParser())
    registry.register(CommentsParser())
    registry.register(AnnotationParser())
    registry.register(PlainTextParser())
    return registry


_REGISTRY = create_registry()


def _error_sort_key(error: ParserError) -> tuple[int, int]:
    if error.line is None:
        return (1, 0)
    return (0, error.line)


def parse(markdown: str) -> ParseResult:
    """
    Parse playbook markdown.

    Never raises for malformed markdown; problems are returned in
    ``ParseResult.errors``. If ``errors`` is non-empty, ``blocks`` is
    diagnostic only.

    Args:
        markdown: Playbook markdown text

    Returns:
        ParseResult with blocks in source order and errors ordered by line
    """
    if not isinstance(markdown, str):
        raise TypeError(f"markdown must be str, not {type(markdown).__name__}")

    if not markdown.strip():
        return ParseResult(blocks=[], errors=[])

    context = ParseContext.from_text(markdown)
    blocks: list[Block] = []
    errors: list[ParserError] = validate_structure(context)

    index = 0
    while index < len(context):
        if is_empty_line(context.lines[index]):
            index += 1
            continue

        result = _REGISTRY.dispatch(index, context)
        if result is None:  # unreachable with PlainTextParser registered
            index += 1
            continue
        if result.block is not None:
            blocks.append(result.block)
        errors.extend(result.errors)
        index = max(result.next_line, index + 1)

    errors.sort(key=_error_sort_key)
    return ParseResult(blocks=blocks, errors=errors)


def parse_file(path: Union[str, Path]) -> ParseResult:
    """
    Parse a playbook file.

    Args:
        path: Path to a UTF-8 markdown file

    Returns:
        ParseResult for the file content
    """
    return parse(Path(path).read_text(encoding="utf-8"))
