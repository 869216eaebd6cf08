"""
playmark.parser.flags - Flag extraction from annotation lines.

Flag material is everything after ``@name`` on an annotation line, or a whole
continuation line below a bare annotation header. It is scanned into three
token kinds:

- flag markers: ``--name``
- quoted values: ``"any text"`` (may be empty, interior whitespace kept)
- bare tokens: any other run of non-space characters

Named flags take the quoted values that follow them. Quoted values that
follow no flag name are collected into a single flag with an empty name.
Bare tokens are never values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from playmark.parser.errors import ErrorType, ParserError, Severity, create_error
from playmark.parser.models import Flag, TokenPosition
from playmark.parser.patterns import PATTERNS

FLAG = "flag"
QUOTED = "quoted"
BARE = "bare"


@dataclass(frozen=True)
class FlagToken:
    """
    One token of flag material.

    Attributes:
        kind: FLAG, QUOTED or BARE
        text: Flag name, quoted value without quotes, or the bare token
        start: Offset of the token within the scanned text
        length: Length of the token as written (markers and quotes included)
    """

    kind: str
    text: str
    start: int
    length: int


@dataclass
class FlagExtraction:
    """Flags found in a piece of flag material plus any syntax warnings."""

    flags: list[Flag] = field(default_factory=list)
    errors: list[ParserError] = field(default_factory=list)


@dataclass
class _PendingFlag:
    name: str
    position: Optional[TokenPosition]
    values: list[str] = field(default_factory=list)
    value_positions: list[TokenPosition] = field(default_factory=list)

    def build(self) -> Flag:
        return Flag(
            name=self.name,
            value=self.values,
            position=self.position,
            value_positions=self.value_positions,
        )


def tokenize_flag_material(text: str) -> Iterator[FlagToken]:
    """
    Scan flag material into tokens.

    Args:
        text: Flag material (may contain leading/trailing whitespace)

    Yields:
        FlagToken for each token, left to right
    """
    for match in PATTERNS.FLAG_TOKEN.finditer(text):
        if match.group("flag") is not None:
            kind, value = FLAG, match.group("name")
        elif match.group("quoted") is not None:
            kind, value = QUOTED, match.group("quoted")
        else:
            kind, value = BARE, match.group("bare")
        yield FlagToken(kind=kind, text=value, start=match.start(), length=match.end() - match.start())


def find_stray_tokens(text: str) -> list[FlagToken]:
    """
    Find bare tokens that directly follow a quoted value.

    ``--prompt "hello" world`` yields the ``world`` token. A run of several
    bare tokens after one quoted value is reported once, at its first token.
    """
    stray: list[FlagToken] = []
    previous: Optional[str] = None
    for token in tokenize_flag_material(text):
        if token.kind == BARE and previous == QUOTED:
            stray.append(token)
        previous = token.kind
    return stray


def extract_flags(
    material: str, line_number: int, offset: int = 0, context: Optional[str] = None
) -> FlagExtraction:
    """
    Extract flags from one line of flag material.

    Args:
        material: Flag material to scan
        line_number: 1-indexed source line of the material
        offset: Column of ``material[0]`` in the original source line
        context: Trimmed source line attached to warnings (defaults to the
            trimmed material)

    Returns:
        FlagExtraction with flags in source order and FlagSyntaxError warnings
    """
    result = FlagExtraction()
    current: Optional[_PendingFlag] = None
    discarding = False
    after_stray = False
    previous: Optional[str] = None

    def position(token: FlagToken) -> TokenPosition:
        return TokenPosition(line=line_number, start=offset + token.start, length=token.length)

    def warn(message: str) -> None:
        result.errors.append(
            create_error(
                ErrorType.FLAG_SYNTAX_ERROR,
                message,
                line_number,
                Severity.WARNING,
                context if context is not None else material.strip(),
            )
        )

    for token in tokenize_flag_material(material):
        if token.kind == FLAG:
            if current is not None:
                result.flags.append(current.build())
            current = _PendingFlag(name=token.text, position=position(token))
            discarding = False
            after_stray = False

        elif token.kind == QUOTED:
            after_stray = False
            if not discarding:
                if current is None:
                    current = _PendingFlag(name="", position=None)
                current.values.append(token.text)
                current.value_positions.append(position(token))

        elif discarding or after_stray:
            pass

        elif previous == QUOTED:
            # Reported by the structural pre-pass as INVALID_SYNTAX
            after_stray = True

        elif current is not None and current.name and not current.values:
            warn(f"Flag '--{current.name}' expects a quoted value, found '{token.text}'")
            current = None
            discarding = True

        else:
            warn(f"Unquoted value '{token.text}'; values must be wrapped in double quotes")
            if current is not None:
                result.flags.append(current.build())
                current = None
            discarding = True

        previous = token.kind

    if current is not None:
        result.flags.append(current.build())
    return result


def parse_values(value_string: str) -> list[str]:
    """
    Split a string into values, quoted (possibly empty) or unquoted words.

    >>> parse_values('"quoted" unquoted ""')
    ['quoted', 'unquoted', '']
    """
    values: list[str] = []
    for match in PATTERNS.VALUE.finditer(value_string):
        quoted, word = match.groups()
        values.append(quoted if quoted is not None else word)
    return values
