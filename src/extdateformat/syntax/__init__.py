"""Pattern syntax: tokens and the lexer that produces them.

This package has no Babel dependency; patterns can be tokenized and
inspected in parser-only installations.

Python 3.11+. Zero external dependencies.
"""

from extdateformat.enums import TokenKind

from .lexer import PatternLexer, tokenize
from .tokens import Token, unquote

__all__ = [
    "PatternLexer",
    "Token",
    "TokenKind",
    "tokenize",
    "unquote",
]
