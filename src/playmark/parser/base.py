"""Block parser infrastructure.

The orchestrator owns a single forward cursor over the document lines. At
each non-empty line it asks the registered block parsers, in priority order,
whether they recognize the line; the first that does consumes one or more
lines and reports where the cursor resumes.

Exports:
- ParseContext: Per-call view of the document shared by the block parsers
- BlockParseResult: What a block parser produced and where to resume
- BlockParser: Protocol for block parser implementations
- ParserRegistry: Priority-ordered dispatch over block parsers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from playmark.parser.errors import ParserError
from playmark.parser.models import Block
from playmark.parser.patterns import COMMENT_CLOSE


def find_last_comment_close(lines: list[str]) -> int:
    """Return the index of the last line containing a comment close marker, or -1."""
    for index in range(len(lines) - 1, -1, -1):
        if COMMENT_CLOSE in lines[index]:
            return index
    return -1


@dataclass
class ParseContext:
    """Context passed to block parsers during one parse call.

    Attributes:
        lines: Document lines without line terminators.
        last_comment_close: Index of the last line holding ``-->`` (-1 if none).
            A comment opened after this line can never be closed.
    """

    lines: list[str]
    last_comment_close: int = -1

    @classmethod
    def from_text(cls, markdown: str) -> ParseContext:
        lines = markdown.split("\n")
        return cls(lines=lines, last_comment_close=find_last_comment_close(lines))

    def __len__(self) -> int:
        return len(self.lines)


@dataclass
class BlockParseResult:
    """Result of running one block parser at the cursor.

    Attributes:
        next_line: Index of the first line not consumed.
        block: The block produced, if any.
        errors: Errors and warnings raised while parsing the block.
    """

    next_line: int
    block: Optional[Block] = None
    errors: list[ParserError] = field(default_factory=list)


@runtime_checkable
class BlockParser(Protocol):
    """Protocol for block parsers.

    Parsers are consulted in priority order (lower = earlier).
    """

    @property
    def priority(self) -> int:
        """Priority for this parser (lower = earlier)."""
        ...

    def matches(self, trimmed: str, index: int, context: ParseContext) -> bool:
        """Return True if this parser handles the line at ``index``."""
        ...

    def parse(self, index: int, context: ParseContext) -> BlockParseResult:
        """Consume lines starting at ``index``."""
        ...


class ParserRegistry:
    """Registry of block parsers, dispatched in priority order."""

    def __init__(self) -> None:
        self.parsers: list[BlockParser] = []

    def register(self, parser: BlockParser) -> None:
        """Register a parser.

        Args:
            parser: A parser implementing the BlockParser protocol.
        """
        self.parsers.append(parser)
        self.parsers.sort(key=lambda p: p.priority)

    def get_ordered(self) -> list[BlockParser]:
        """Get parsers sorted by priority (ascending)."""
        return list(self.parsers)

    def dispatch(self, index: int, context: ParseContext) -> Optional[BlockParseResult]:
        """Run the first parser that recognizes the line at ``index``.

        Returns:
            The parser's result, or None if no parser matched.
        """
        trimmed = context.lines[index].strip()
        for parser in self.parsers:
            if parser.matches(trimmed, index, context):
                return parser.parse(index, context)
        return None
