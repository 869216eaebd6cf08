"""
playmark.parser.utils - Line helpers shared by the block parsers.
"""


def is_empty_line(line: str) -> bool:
    """Return True if the line is empty or whitespace-only."""
    return not line.strip()


def trim_line(line: str) -> str:
    """Strip surrounding whitespace from a line."""
    return line.strip()


def starts_with(content: str, prefix: str) -> bool:
    """Return True if content starts with prefix."""
    return content.startswith(prefix)


def leading_width(line: str) -> int:
    """
    Count leading whitespace characters.

    Used to translate offsets in a trimmed line back to the original line.
    """
    return len(line) - len(line.lstrip())
