"""Diagnostic codes and data structures.

Defines error codes, pattern positions, and diagnostic messages.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for DateFormatError.

    Categories:
        PATTERN: A pattern token cannot be rendered (unknown letter, bad width)
        VALUE: The value handed to format() is not a usable date/time
    """

    PATTERN = "pattern"
    VALUE = "value"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (raised while rendering a token)
        2000-2999: Value errors (raised before rendering starts)
    """

    # Pattern errors (1000-1999)
    INVALID_FORMAT_LETTER = 1001
    INVALID_WIDTH = 1002

    # Value errors (2000-2999)
    INVALID_VALUE = 2001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.PATTERN
        return ErrorCategory.VALUE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to point at
    the offending pattern token.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        pattern: Pattern being rendered (None for value errors)
        position: Character offset of the offending token in the pattern
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    pattern: str | None = None
    position: int | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INVALID_FORMAT_LETTER]: Illegal pattern character 'q'
              --> yyyy-qq
                       ^
              = help: Quote literal text, e.g. 'q'

        Returns:
            Formatted error message
        """
        parts = [f"error[{self.code.name}]: {self.message}"]

        if self.pattern is not None:
            parts.append(f"  --> {self.pattern}")
            if self.position is not None:
                parts.append("      " + " " * self.position + "^")

        if self.hint:
            parts.append(f"  = help: {self.hint}")

        return "\n".join(parts)
