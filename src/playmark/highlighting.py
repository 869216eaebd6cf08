"""
playmark.highlighting - Token spans for syntax highlighting.

Turns the positions recorded by the parser into a flat, sorted list of
single-line spans. Spans never overlap within a line. Rendering them is up
to the consumer.
"""

from __future__ import annotations

from dataclasses import dataclass

from playmark.parser.models import ParseResult, TokenPosition

ANNOTATION = "annotation"
FLAG = "flag"
VALUE = "value"
ERROR = "error"

TOKEN_KINDS = (ANNOTATION, FLAG, VALUE, ERROR)


@dataclass(frozen=True)
class TokenSpan:
    """A highlighted range on one line (1-indexed line, 0-indexed start)."""

    line: int
    start: int
    length: int
    kind: str

    @property
    def end(self) -> int:
        return self.start + self.length

    def to_dict(self) -> dict:
        return {"line": self.line, "start": self.start, "length": self.length, "kind": self.kind}


def _span(position: TokenPosition, kind: str) -> TokenSpan:
    return TokenSpan(line=position.line, start=position.start, length=position.length, kind=kind)


def token_spans(result: ParseResult) -> list[TokenSpan]:
    """
    Collect annotation, flag and value spans from parsed blocks.

    Reserved blocks (plain text, comments, code) carry no spans.

    Args:
        result: Parse result to read positions from

    Returns:
        Spans sorted by line then start
    """
    spans: list[TokenSpan] = []
    for block in result.blocks:
        if not block.is_annotation:
            continue
        if block.annotation_position is not None:
            spans.append(_span(block.annotation_position, ANNOTATION))
        for flag in block.flags:
            if flag.position is not None:
                spans.append(_span(flag.position, FLAG))
            for position in flag.value_positions or []:
                spans.append(_span(position, VALUE))
    spans.sort(key=lambda s: (s.line, s.start))
    return spans


def error_spans(markdown: str, result: ParseResult) -> list[TokenSpan]:
    """
    Collect one underline span per erroneous line.

    The span covers the line's text without surrounding whitespace. Errors
    without a line, or pointing past the end of the document, are skipped.

    Args:
        markdown: The source that was parsed
        result: Parse result holding the errors

    Returns:
        Spans sorted by line, at most one per line
    """
    lines = markdown.split("\n")
    seen: set[int] = set()
    spans: list[TokenSpan] = []
    for error in result.errors:
        line_number = error.line
        if line_number is None or line_number in seen or not 1 <= line_number <= len(lines):
            continue
        seen.add(line_number)
        text = lines[line_number - 1]
        stripped = text.strip()
        start = len(text) - len(text.lstrip())
        spans.append(TokenSpan(line=line_number, start=start, length=len(stripped), kind=ERROR))
    spans.sort(key=lambda s: s.line)
    return spans
