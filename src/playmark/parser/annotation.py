"""AnnotationParser - Parser for ``@name`` annotation blocks.

Handles:
- Same-line flags: ``@task --prompt "Summarize" --variable "out"``
- Bare values: ``@context "main" "research"``
- Flags stacked directly beneath a bare header::

    @task
      --prompt "Check the specifications"
      --variable "relevant_specs"

The annotation identifier is never interpreted.
"""

from __future__ import annotations

from playmark.parser.base import BlockParseResult, ParseContext
from playmark.parser.errors import ErrorType, Severity, create_error
from playmark.parser.flags import extract_flags
from playmark.parser.models import Block, Flag, TokenPosition
from playmark.parser.patterns import ANNOTATION_MARKER, PATTERNS
from playmark.parser.utils import is_empty_line, leading_width, starts_with, trim_line


def is_flag_continuation(trimmed: str) -> bool:
    """Return True if a trimmed line can continue a multi-line annotation."""
    return bool(PATTERNS.FLAG_LINE.match(trimmed))


class AnnotationParser:
    """Parser for annotation blocks.

    Priority: 20 (after code fences and comments)
    """

    priority = 20

    def matches(self, trimmed: str, index: int, context: ParseContext) -> bool:
        return starts_with(trimmed, ANNOTATION_MARKER)

    def parse(self, index: int, context: ParseContext) -> BlockParseResult:
        """Parse the annotation starting at ``index`` and any continuation lines.

        Args:
            index: 0-indexed line of the annotation header.
            context: Parsing context.

        Returns:
            BlockParseResult with the block (or an INVALID_ANNOTATION error)
            and any flag warnings.
        """
        lines = context.lines
        line = lines[index]
        trimmed = trim_line(line)
        line_number = index + 1

        match = PATTERNS.ANNOTATION.match(trimmed)
        if not match:
            return BlockParseResult(
                next_line=index + 1,
                errors=[
                    create_error(
                        ErrorType.INVALID_ANNOTATION,
                        f"Invalid annotation syntax: {trimmed}",
                        line_number,
                        Severity.CRITICAL,
                        trimmed,
                    )
                ],
            )

        name = match.group("name")
        rest = match.group("rest")
        lead = leading_width(line)
        annotation_position = TokenPosition(line=line_number, start=lead, length=len(name) + 1)

        flags: list[Flag] = []
        errors = []
        content_lines = [trimmed]
        cursor = index + 1

        if rest.strip():
            extraction = extract_flags(rest, line_number, lead + match.start("rest"), trimmed)
            flags.extend(extraction.flags)
            errors.extend(extraction.errors)
        else:
            while cursor < len(lines):
                next_line = lines[cursor]
                if is_empty_line(next_line):
                    break
                next_trimmed = trim_line(next_line)
                if not is_flag_continuation(next_trimmed):
                    break
                content_lines.append(next_trimmed)
                extraction = extract_flags(next_trimmed, cursor + 1, leading_width(next_line))
                flags.extend(extraction.flags)
                errors.extend(extraction.errors)
                cursor += 1

        block = Block(
            name=name,
            flags=flags,
            content="\n".join(content_lines),
            line=line_number,
            annotation_position=annotation_position,
        )
        return BlockParseResult(next_line=cursor, block=block, errors=errors)
