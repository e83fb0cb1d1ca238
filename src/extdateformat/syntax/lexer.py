"""Pattern lexer: raw pattern string to token sequence.

Single left-to-right scan over the pattern, O(n). A pending run accumulates
characters; as soon as the next character cannot extend it the run is sealed
into an immutable Token and a new run starts.

Quote Escaping:
    - Single quotes delimit literal text: 'at' renders "at"
    - Two consecutive single quotes '' render a literal single quote
    - '' inside quoted text also renders a literal single quote
    - Example: "h 'o''clock' a" -> "3 o'clock PM"

Run Splitting:
    Formatter runs split whenever the letter changes, so "Hm" yields two
    runs (H, m) without any separator between them. Separator runs merge
    regardless of character and only split on a transition to or from a
    quote or a format letter.

The lexer never rejects input. Letters outside the recognized set become
separator text; an unterminated quote is sealed at end of input.

Python 3.11+. Zero external dependencies.
"""

import logging
from enum import Enum, auto
from functools import lru_cache

from extdateformat.constants import FORMAT_LETTERS, MAX_PATTERN_CACHE_SIZE, QUOTE
from extdateformat.enums import TokenKind

from .tokens import Token

__all__ = ["PatternLexer", "tokenize"]

logger = logging.getLogger(__name__)


class _Mode(Enum):
    """Mutually exclusive states of the pending run."""

    IDLE = auto()
    QUOTED = auto()
    FORMATTER = auto()
    SEPARATOR = auto()


_MODE_KINDS: dict[_Mode, TokenKind] = {
    _Mode.QUOTED: TokenKind.TEXT,
    _Mode.FORMATTER: TokenKind.FORMATTER,
    _Mode.SEPARATOR: TokenKind.SEPARATOR,
}


class _RunBuilder:
    """Accumulates the pending run; only sealed tokens leave the lexer."""

    __slots__ = ("_chars", "_start", "mode", "tokens")

    def __init__(self) -> None:
        self.tokens: list[Token] = []
        self.mode = _Mode.IDLE
        self._chars: list[str] = []
        self._start = 0

    @property
    def last(self) -> str | None:
        """Last accumulated character, or None when idle."""
        return self._chars[-1] if self._chars else None

    def open(self, mode: _Mode, char: str, start: int) -> None:
        """Seal the pending run and start a new one with char."""
        self.seal()
        self.mode = mode
        self._chars = [char]
        self._start = start

    def append(self, char: str) -> None:
        self._chars.append(char)

    def emit(self, kind: TokenKind, content: str, start: int) -> None:
        """Seal the pending run and add a complete token directly."""
        self.seal()
        self.tokens.append(Token(kind, content, start))

    def seal(self) -> None:
        if self.mode is not _Mode.IDLE and self._chars:
            content = "".join(self._chars)
            self.tokens.append(Token(_MODE_KINDS[self.mode], content, self._start))
        self.mode = _Mode.IDLE
        self._chars = []


class PatternLexer:
    """Converts date-format patterns into token sequences.

    Stateless; every call to tokenize() uses its own run builder, so one
    lexer may be shared across threads.

    Example:
        >>> lexer = PatternLexer()
        >>> [t.content for t in lexer.tokenize("HH:mm")]
        ['HH', ':', 'mm']
        >>> [t.kind.value for t in lexer.tokenize("'at' h")]
        ['text', 'separator', 'formatter']
    """

    __slots__ = ()

    def tokenize(self, pattern: str) -> tuple[Token, ...]:
        """Lex pattern into tokens.

        Args:
            pattern: Date-format pattern

        Returns:
            Tokens in pattern order. Empty for an empty pattern.
        """
        builder = _RunBuilder()
        i = 0
        n = len(pattern)

        while i < n:
            char = pattern[i]

            # Inside a quoted region everything is literal until the
            # closing quote; '' is an escaped quote and keeps the region open
            if builder.mode is _Mode.QUOTED:
                builder.append(char)
                if char == QUOTE:
                    if i + 1 < n and pattern[i + 1] == QUOTE:
                        builder.append(QUOTE)
                        i += 2
                        continue
                    builder.seal()
                i += 1
                continue

            if char == QUOTE:
                if i + 1 < n and pattern[i + 1] == QUOTE:
                    # '' outside quoting -> literal apostrophe
                    builder.emit(TokenKind.TEXT, QUOTE * 2, i)
                    i += 2
                    continue
                builder.open(_Mode.QUOTED, char, i)
                i += 1
                continue

            if char in FORMAT_LETTERS:
                if builder.mode is _Mode.FORMATTER and builder.last == char:
                    builder.append(char)
                else:
                    builder.open(_Mode.FORMATTER, char, i)
            elif builder.mode is _Mode.SEPARATOR:
                builder.append(char)
            else:
                builder.open(_Mode.SEPARATOR, char, i)
            i += 1

        # End of input seals the final run, including an unterminated quote
        builder.seal()
        return tuple(builder.tokens)


_LEXER = PatternLexer()


@lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def tokenize(pattern: str) -> tuple[Token, ...]:
    """Lex pattern into tokens, memoized per pattern string.

    Tokens are immutable, so cached sequences are safe to share between
    formatters and threads.

    Args:
        pattern: Date-format pattern

    Returns:
        Tokens in pattern order

    Example:
        >>> [t.content for t in tokenize("'Today is' MMM do, yyyy")]
        ["'Today is'", ' ', 'MMM', ' ', 'd', 'o', ', ', 'yyyy']
    """
    tokens = _LEXER.tokenize(pattern)
    logger.debug("Tokenized pattern %r into %d tokens", pattern, len(tokens))
    return tokens
