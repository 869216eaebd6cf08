"""CommentsParser - Parser for HTML comment blocks.

Handles:
- Single-line comments: <!-- comment -->
- Multi-line comments: <!-- ... -->

Comment text is never interpreted further, so annotation- or fence-looking
text inside a comment stays comment content. A comment that is opened but
never closed is not claimed; its first line falls through to plain text.
"""

from __future__ import annotations

from playmark.parser.base import BlockParseResult, ParseContext
from playmark.parser.models import create_comment_block
from playmark.parser.patterns import COMMENT_CLOSE, COMMENT_OPEN, PATTERNS
from playmark.parser.utils import trim_line


def is_comment_start(line: str) -> bool:
    """Return True if a trimmed line opens a comment."""
    return bool(PATTERNS.COMMENT_START.match(line))


def is_comment(line: str) -> bool:
    """Return True if a trimmed line holds a complete comment."""
    return is_comment_start(line) and COMMENT_CLOSE in line[len(COMMENT_OPEN) :]


def is_comment_end(line: str) -> bool:
    """Return True if the line closes a comment."""
    return COMMENT_CLOSE in line


def extract_comment_content(line: str) -> str:
    """
    Extract the text of a single-line comment.

    Args:
        line: Trimmed comment line, e.g. "<!-- note -->"

    Returns:
        Text between the opener and the last closing marker, trimmed
    """
    body = line[len(COMMENT_OPEN) :]
    end = body.rfind(COMMENT_CLOSE)
    if end >= 0:
        body = body[:end]
    return body.strip()


class CommentsParser:
    """Parser for HTML comment blocks.

    Priority: 10 (after code fences, before annotations)
    """

    priority = 10

    def matches(self, trimmed: str, index: int, context: ParseContext) -> bool:
        # No closing marker anywhere from here on: leave the line unclaimed
        return is_comment_start(trimmed) and index <= context.last_comment_close

    def parse(self, index: int, context: ParseContext) -> BlockParseResult:
        """Parse the comment opened at ``index``.

        Args:
            index: 0-indexed line holding the opening marker.
            context: Parsing context.

        Returns:
            BlockParseResult with a plainComment block.
        """
        lines = context.lines
        first = trim_line(lines[index])

        if is_comment(first):
            return BlockParseResult(
                next_line=index + 1,
                block=create_comment_block(extract_comment_content(first), index + 1),
            )

        comment_lines: list[str] = []
        first_content = PATTERNS.COMMENT_OPEN_PREFIX.sub("", first, count=1)
        if first_content:
            comment_lines.append(first_content)

        cursor = index + 1
        while cursor < len(lines):
            line = lines[cursor]
            cursor += 1
            if is_comment_end(line):
                last_content = PATTERNS.COMMENT_CLOSE_SUFFIX.sub("", line, count=1)
                if last_content.strip():
                    comment_lines.append(last_content)
                break
            comment_lines.append(line)

        content = "\n".join(comment_lines).strip()
        return BlockParseResult(next_line=cursor, block=create_comment_block(content, index + 1))
