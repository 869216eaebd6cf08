"""
playmark.parser.validation - Structural validation pre-pass.

Runs once over the document before block parsing and reports stray bare
tokens that follow a quoted value on an annotation line, e.g.::

    @task --prompt "Summarize the topic" now

Only annotation headers and their continuation lines are checked; fenced
code and comments are skipped the same way the block parsers skip them.
The pre-pass produces errors only and never changes the blocks.
"""

from __future__ import annotations

from playmark.parser.annotation import is_flag_continuation
from playmark.parser.base import ParseContext
from playmark.parser.code_block import is_code_fence_close, opening_fence
from playmark.parser.comments import is_comment, is_comment_end, is_comment_start
from playmark.parser.errors import ErrorType, ParserError, Severity, create_error
from playmark.parser.flags import find_stray_tokens
from playmark.parser.patterns import ANNOTATION_MARKER, PATTERNS


def _skip_code_block(lines: list[str], index: int, fence: str) -> int:
    cursor = index + 1
    while cursor < len(lines):
        cursor += 1
        if is_code_fence_close(lines[cursor - 1], fence):
            break
    return cursor


def _skip_comment(lines: list[str], index: int) -> int:
    if is_comment(lines[index].strip()):
        return index + 1
    cursor = index + 1
    while cursor < len(lines):
        cursor += 1
        if is_comment_end(lines[cursor - 1]):
            break
    return cursor


def _check_material(material: str, line_number: int, trimmed: str) -> list[ParserError]:
    return [
        create_error(
            ErrorType.INVALID_SYNTAX,
            f"Unexpected token '{token.text}' after quoted value",
            line_number,
            Severity.CRITICAL,
            trimmed,
        )
        for token in find_stray_tokens(material)
    ]


def validate_structure(context: ParseContext) -> list[ParserError]:
    """
    Report malformed trailing tokens on annotation lines.

    Args:
        context: Parsing context for the document

    Returns:
        One INVALID_SYNTAX error per stray token run, in line order
    """
    errors: list[ParserError] = []
    lines = context.lines
    in_annotation = False
    index = 0

    while index < len(lines):
        trimmed = lines[index].strip()

        if not trimmed:
            in_annotation = False
            index += 1
            continue

        fence = opening_fence(trimmed)
        if fence:
            in_annotation = False
            index = _skip_code_block(lines, index, fence)
            continue

        if is_comment_start(trimmed) and index <= context.last_comment_close:
            in_annotation = False
            index = _skip_comment(lines, index)
            continue

        if trimmed.startswith(ANNOTATION_MARKER):
            match = PATTERNS.ANNOTATION.match(trimmed)
            rest = match.group("rest") if match else ""
            if rest.strip():
                errors.extend(_check_material(rest, index + 1, trimmed))
            in_annotation = match is not None and not rest.strip()
        elif in_annotation and is_flag_continuation(trimmed):
            errors.extend(_check_material(trimmed, index + 1, trimmed))
        else:
            in_annotation = False

        index += 1

    return errors
