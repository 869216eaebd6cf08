"""PlainTextParser - Catch-all parser for lines nothing else claims."""

from __future__ import annotations

from playmark.parser.base import BlockParseResult, ParseContext
from playmark.parser.models import create_plain_text_block


class PlainTextParser:
    """Parser for plain text lines.

    Priority: 999 (lowest priority, runs last)

    Each unclaimed non-empty line becomes its own plainText block holding
    the original, untrimmed line.
    """

    priority = 999

    def matches(self, trimmed: str, index: int, context: ParseContext) -> bool:
        return True

    def parse(self, index: int, context: ParseContext) -> BlockParseResult:
        return BlockParseResult(
            next_line=index + 1,
            block=create_plain_text_block(context.lines[index], index + 1),
        )
