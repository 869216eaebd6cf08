"""CodeBlockParser - Parser for backtick fenced code blocks.

Claims everything between an opening fence (three or more backticks) and
the next line made only of backticks, at least as many as the opening
run, so a longer fence can hold ``` lines. Interior lines are kept
verbatim and are never parsed as annotations or comments. The language tag
is passed through as written.
"""

from __future__ import annotations

from typing import Optional

from playmark.parser.base import BlockParseResult, ParseContext
from playmark.parser.errors import ErrorType, Severity, create_error
from playmark.parser.models import create_code_block
from playmark.parser.patterns import CODE_FENCE, PATTERNS
from playmark.parser.utils import trim_line


def is_code_fence_open(line: str) -> bool:
    """Return True if the line opens a code fence."""
    return bool(PATTERNS.CODE_FENCE_OPEN.match(trim_line(line)))


def opening_fence(line: str) -> Optional[str]:
    """Return the backtick run that opens a fence, or None."""
    match = PATTERNS.CODE_FENCE_OPEN.match(trim_line(line))
    return match.group("fence") if match else None


def is_code_fence_close(line: str, fence: str = CODE_FENCE) -> bool:
    """Return True if the line closes a block opened with ``fence``."""
    match = PATTERNS.CODE_FENCE_CLOSE.match(trim_line(line))
    return bool(match) and len(match.group("fence")) >= len(fence)


def extract_language(line: str) -> Optional[str]:
    """
    Extract the language from an opening fence line.

    Args:
        line: The opening fence line (e.g. "```python")

    Returns:
        The language exactly as written, or None if absent
    """
    match = PATTERNS.CODE_FENCE_OPEN.match(trim_line(line))
    if not match:
        return None
    language = match.group("language").strip()
    return language or None


class CodeBlockParser:
    """Parser for fenced code blocks.

    Priority: 0 (highest priority, runs first)
    """

    priority = 0

    def matches(self, trimmed: str, index: int, context: ParseContext) -> bool:
        return bool(PATTERNS.CODE_FENCE_OPEN.match(trimmed))

    def parse(self, index: int, context: ParseContext) -> BlockParseResult:
        """Parse a code block whose opening fence is at ``index``.

        Returns:
            BlockParseResult with a plainCodeBlock block, or an
            UnclosedCodeBlock error if the input ends before a closing fence.
        """
        lines = context.lines
        fence = opening_fence(lines[index]) or CODE_FENCE
        language = extract_language(lines[index])

        code_lines: list[str] = []
        cursor = index + 1
        while cursor < len(lines):
            line = lines[cursor]
            cursor += 1
            if is_code_fence_close(line, fence):
                return BlockParseResult(
                    next_line=cursor,
                    block=create_code_block("\n".join(code_lines), language, index + 1),
                )
            code_lines.append(line)

        return BlockParseResult(
            next_line=cursor,
            errors=[
                create_error(
                    ErrorType.UNCLOSED_CODE_BLOCK,
                    "Unclosed code block detected.",
                    index + 1,
                    Severity.CRITICAL,
                    trim_line(lines[index]),
                )
            ],
        )
