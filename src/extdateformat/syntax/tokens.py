"""Pattern token definitions.

A pattern such as ``'Today is' MMM do, yyyy`` is lexed into a flat sequence
of tokens, each tagged with a TokenKind:

    TEXT       'Today is'
    SEPARATOR  " "
    FORMATTER  MMM
    SEPARATOR  " "
    FORMATTER  d
    FORMATTER  o
    SEPARATOR  ", "
    FORMATTER  yyyy

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass

from extdateformat.constants import QUOTE
from extdateformat.enums import TokenKind

__all__ = ["Token", "unquote"]

_ESCAPED_QUOTE = QUOTE * 2


@dataclass(frozen=True, slots=True)
class Token:
    """Immutable pattern token.

    Attributes:
        kind: TEXT, FORMATTER or SEPARATOR
        content: Characters as written in the pattern (never empty). TEXT
            tokens keep their quote delimiters and doubled-quote escapes.
        start: Offset of the first character in the source pattern

    Example:
        >>> Token(TokenKind.FORMATTER, "yyyy").width
        4
        >>> Token(TokenKind.TEXT, "'o''clock'").literal
        "o'clock"
    """

    kind: TokenKind
    content: str
    start: int = 0

    def __post_init__(self) -> None:
        """Validate token invariants."""
        if not self.content:
            msg = f"{self.kind} token content cannot be empty"
            raise ValueError(msg)
        if self.start < 0:
            msg = f"Token.start must be >= 0, got {self.start}"
            raise ValueError(msg)

    @property
    def letter(self) -> str:
        """First character; the format letter of a FORMATTER run."""
        return self.content[0]

    @property
    def width(self) -> int:
        """Run length; drives padding and short/long name selection."""
        return len(self.content)

    @property
    def literal(self) -> str:
        """Text this token stands for when rendered.

        TEXT tokens lose their delimiters and collapse escaped quotes;
        other kinds render their content unchanged.
        """
        if self.kind is TokenKind.TEXT:
            return unquote(self.content)
        return self.content


def unquote(content: str) -> str:
    """Strip quote delimiters and collapse '' escapes.

    A bare ``''`` (written outside a quoted region) is an escaped apostrophe.
    A region that was never closed keeps everything after its opening quote.

    Args:
        content: Raw TEXT token content

    Returns:
        Literal text

    Examples:
        >>> unquote("'Today is'")
        'Today is'
        >>> unquote("''")
        "'"
        >>> unquote("'it''s'")
        "it's"
        >>> unquote("'unterminated")
        'unterminated'
    """
    if content == _ESCAPED_QUOTE:
        return QUOTE

    body = content[1:] if content.startswith(QUOTE) else content
    chars: list[str] = []
    i = 0
    n = len(body)

    while i < n:
        char = body[i]
        if char == QUOTE:
            if i + 1 < n and body[i + 1] == QUOTE:
                chars.append(QUOTE)
                i += 2
                continue
            # Closing delimiter
            break
        chars.append(char)
        i += 1

    return "".join(chars)
