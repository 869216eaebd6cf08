"""
playmark.parser.models - Data model for parsed playbooks.

A playbook parses into a flat, ordered list of blocks. A block's ``name`` is
either the verbatim annotation identifier or one of the reserved tags for
non-annotation content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from playmark.parser.errors import ParserError

PLAIN_TEXT = "plainText"
PLAIN_COMMENT = "plainComment"
PLAIN_CODE_BLOCK = "plainCodeBlock"

RESERVED_BLOCK_NAMES = frozenset({PLAIN_TEXT, PLAIN_COMMENT, PLAIN_CODE_BLOCK})


@dataclass(frozen=True)
class TokenPosition:
    """
    Location of a single-line token in the source document.

    Attributes:
        line: 1-indexed line number
        start: 0-indexed character offset in the original line
        length: Token length in characters
    """

    line: int
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "start": self.start, "length": self.length}


@dataclass
class Flag:
    """
    A flag attached to an annotation.

    ``value`` is always a list, even for zero or one value. Bare quoted
    values that follow no flag name are collected under the empty name.
    Positions are excluded from equality.

    Attributes:
        name: Flag name without the ``--`` marker ('' for bare values)
        value: Flag values in source order
        position: Position of the ``--name`` token
        value_positions: Positions of each quoted value token
    """

    name: str
    value: list[str] = field(default_factory=list)
    position: Optional[TokenPosition] = field(default=None, compare=False)
    value_positions: Optional[list[TokenPosition]] = field(default=None, compare=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "value": list(self.value)}
        if self.position is not None:
            data["position"] = self.position.to_dict()
        if self.value_positions is not None:
            data["valuePositions"] = [p.to_dict() for p in self.value_positions]
        return data


@dataclass
class BlockMetadata:
    """Extra block data; currently only the language of code blocks."""

    language: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.language is not None:
            data["language"] = self.language
        return data


@dataclass
class Block:
    """
    A parsed unit of a playbook.

    Attributes:
        name: Annotation identifier or a reserved block name
        flags: Flags in left-to-right, top-to-bottom source order
        content: Source text of the block
        line: 1-indexed line where the block starts
        metadata: Optional metadata (code blocks only)
        annotation_position: Position of the ``@name`` token
    """

    name: str
    flags: list[Flag] = field(default_factory=list)
    content: str = ""
    line: Optional[int] = None
    metadata: Optional[BlockMetadata] = None
    annotation_position: Optional[TokenPosition] = field(default=None, compare=False)

    @property
    def is_annotation(self) -> bool:
        return self.name not in RESERVED_BLOCK_NAMES

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "flags": [f.to_dict() for f in self.flags],
            "content": self.content,
        }
        if self.line is not None:
            data["line"] = self.line
        if self.metadata is not None:
            data["metadata"] = self.metadata.to_dict()
        if self.annotation_position is not None:
            data["annotationPosition"] = self.annotation_position.to_dict()
        return data


@dataclass
class ParseResult:
    """
    Outcome of parsing one playbook.

    If ``errors`` is non-empty the blocks are kept for diagnostics only and
    must not be executed.
    """

    blocks: list[Block] = field(default_factory=list)
    errors: list[ParserError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def executable_blocks(self) -> list[Block]:
        """Return the blocks an executor may run: all of them, or none if any error exists."""
        if self.errors:
            return []
        return list(self.blocks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "blocks": [b.to_dict() for b in self.blocks],
            "errors": [e.to_dict() for e in self.errors],
        }


def flatten_flag_value(flag: Flag) -> str:
    """Join a flag's values into one parameter string (space separated)."""
    return " ".join(flag.value)


def create_plain_text_block(content: str, line_number: Optional[int] = None) -> Block:
    """Create a plainText block."""
    return Block(name=PLAIN_TEXT, flags=[], content=content, line=line_number)


def create_comment_block(content: str, line_number: Optional[int] = None) -> Block:
    """Create a plainComment block from comment text without its markers."""
    return Block(name=PLAIN_COMMENT, flags=[], content=content, line=line_number)


def create_code_block(
    content: str,
    language: Optional[str] = None,
    line_number: Optional[int] = None,
) -> Block:
    """
    Create a plainCodeBlock block.

    Args:
        content: Code between the fences, lines joined with newlines
        language: Language tag exactly as written on the opening fence
        line_number: Line of the opening fence (1-indexed)

    Returns:
        Code block
    """
    return Block(
        name=PLAIN_CODE_BLOCK,
        flags=[],
        content=content,
        line=line_number,
        metadata=BlockMetadata(language=language),
    )
