"""
playmark.parser.patterns - Structural recognizers for playbook markdown.

All entries are compiled ``re`` patterns. They hold no scan position, so a
single table is shared by every parse call.
"""

import re

# Structural markers
ANNOTATION_MARKER = "@"
FLAG_MARKER = "--"
QUOTE = '"'
CODE_FENCE = "```"
COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"


class PATTERNS:
    """Pattern table used by the block parsers."""

    # "@name rest-of-line"; identifiers are ASCII word characters
    ANNOTATION = re.compile(r"^@(?P<name>\w+)(?P<rest>.*)$", re.ASCII)

    # One token of flag material: a flag marker, a quoted value (possibly
    # empty) or any other run of non-space characters.
    FLAG_TOKEN = re.compile(
        r"(?P<flag>--(?P<name>\w+))|\"(?P<quoted>[^\"]*)\"|(?P<bare>\S+)",
        re.ASCII,
    )

    # Quoted strings or unquoted words, for plain value splitting
    VALUE = re.compile(r"\"([^\"]*)\"|(\S+)")

    # A fence is a run of three or more backticks; a block closes on a run at
    # least as long as the one that opened it
    CODE_FENCE_OPEN = re.compile(r"^(?P<fence>`{3,})(?P<language>[^`]*)$")
    CODE_FENCE_CLOSE = re.compile(r"^(?P<fence>`{3,})$")

    COMMENT_START = re.compile(r"^<!--")
    COMMENT_OPEN_PREFIX = re.compile(r"^<!--\s*")
    COMMENT_CLOSE_SUFFIX = re.compile(r"\s*-->.*$")

    # Lines that may continue a multi-line annotation: "--name" or a quote
    FLAG_LINE = re.compile(r"^(?:--\w|\")", re.ASCII)
