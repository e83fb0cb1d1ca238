"""Tests for Token and unquote()."""

import pytest

from extdateformat.enums import TokenKind
from extdateformat.syntax import Token, unquote


class TestToken:
    """Token construction and convenience properties."""

    def test_formatter_properties(self) -> None:
        """letter and width describe a formatter run."""
        token = Token(TokenKind.FORMATTER, "MMMM", 3)
        assert token.letter == "M"
        assert token.width == 4
        assert token.start == 3

    def test_non_text_literal_is_content(self) -> None:
        """Separators and formatters render their content as the literal."""
        assert Token(TokenKind.SEPARATOR, ", ").literal == ", "

    def test_text_literal_strips_quotes(self) -> None:
        """TEXT literal drops delimiters and collapses escapes."""
        assert Token(TokenKind.TEXT, "'it''s'").literal == "it's"

    def test_empty_content_rejected(self) -> None:
        """Empty content violates the token invariant."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Token(TokenKind.SEPARATOR, "")

    def test_negative_start_rejected(self) -> None:
        """start must be non-negative."""
        with pytest.raises(ValueError, match="must be >= 0"):
            Token(TokenKind.FORMATTER, "d", -1)

    def test_frozen(self) -> None:
        """Tokens are immutable."""
        token = Token(TokenKind.FORMATTER, "d")
        with pytest.raises(AttributeError):
            token.content = "dd"  # type: ignore[misc]

    def test_hashable_and_equal_by_value(self) -> None:
        """Tokens compare and hash by value."""
        assert Token(TokenKind.FORMATTER, "d") == Token(TokenKind.FORMATTER, "d")
        assert len({Token(TokenKind.FORMATTER, "d"), Token(TokenKind.FORMATTER, "d")}) == 1


class TestUnquote:
    """unquote() over TEXT token contents."""

    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            ("'Today is'", "Today is"),
            ("''", "'"),
            ("'it''s'", "it's"),
            ("''''", "'"),
            ("'a'''", "a'"),
            ("'unterminated", "unterminated"),
            ("'", ""),
            ("'a''", "a'"),
        ],
    )
    def test_unquote(self, content: str, expected: str) -> None:
        """Delimiters dropped, doubled quotes collapsed."""
        assert unquote(content) == expected
