"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "DateFormatError",
    "InvalidFormatLetterError",
    "InvalidValueError",
    "InvalidWidthError",
]


class DateFormatError(Exception):
    """Base exception for all formatting errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Error category from the diagnostic code, if any."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.code.category


class InvalidFormatLetterError(DateFormatError):
    """Formatter token letter is not a recognized format letter.

    The lexer never produces such tokens; this surfaces when tokens are
    built by hand and handed to the renderer.

    Attributes:
        letter: The offending character
    """

    def __init__(self, message: str | Diagnostic, *, letter: str) -> None:
        """Initialize InvalidFormatLetterError.

        Args:
            message: Error message string OR Diagnostic object
            letter: The offending character
        """
        super().__init__(message)
        self.letter = letter


class InvalidWidthError(DateFormatError):
    """Field width outside the supported bound.

    Attributes:
        width: The rejected width
    """

    def __init__(self, message: str | Diagnostic, *, width: int) -> None:
        """Initialize InvalidWidthError.

        Args:
            message: Error message string OR Diagnostic object
            width: The rejected width
        """
        super().__init__(message)
        self.width = width


class InvalidValueError(DateFormatError, TypeError):
    """Value passed to format() is not a datetime, date, or ISO 8601 string.

    Also a TypeError so callers treating bad input generically still catch it.

    Attributes:
        value: The rejected value
    """

    def __init__(self, message: str | Diagnostic, *, value: object) -> None:
        """Initialize InvalidValueError.

        Args:
            message: Error message string OR Diagnostic object
            value: The rejected value
        """
        super().__init__(message)
        self.value = value
