"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # PATTERN ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def invalid_format_letter(
        letter: str,
        pattern: str | None = None,
        position: int | None = None,
    ) -> Diagnostic:
        """Formatter token uses a letter outside the recognized set.

        Args:
            letter: The offending character
            pattern: Pattern the token came from, if known
            position: Offset of the token in the pattern, if known

        Returns:
            Diagnostic for INVALID_FORMAT_LETTER
        """
        msg = f"Illegal pattern character '{letter}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_FORMAT_LETTER,
            message=msg,
            pattern=pattern,
            position=position,
            hint=f"Quote literal text, e.g. '{letter}'",
        )

    @staticmethod
    def invalid_width(width: int, field: str) -> Diagnostic:
        """Field cannot be rendered at the requested width.

        Args:
            width: The rejected width
            field: Name of the field being rendered

        Returns:
            Diagnostic for INVALID_WIDTH
        """
        msg = f"Invalid width {width} for {field}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_WIDTH,
            message=msg,
            hint="Numeric fields need a width of at least 1",
        )

    @staticmethod
    def offset_out_of_range(offset_minutes: int, digits: int) -> Diagnostic:
        """UTC offset does not fit the fixed-width RFC 822 field.

        Args:
            offset_minutes: Total offset in minutes
            digits: Number of HHMM digits available

        Returns:
            Diagnostic for INVALID_WIDTH
        """
        msg = f"UTC offset of {offset_minutes} minutes does not fit {digits} digits"
        return Diagnostic(
            code=DiagnosticCode.INVALID_WIDTH,
            message=msg,
            hint="RFC 822 offsets must be less than 100 hours",
        )

    # =========================================================================
    # VALUE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def invalid_value(value: object, reason: str) -> Diagnostic:
        """Value handed to format() is not a date/time.

        Args:
            value: The rejected value
            reason: Why it was rejected

        Returns:
            Diagnostic for INVALID_VALUE
        """
        msg = f"Cannot format {value!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=msg,
            hint="Pass a datetime, a date, or an ISO 8601 string",
        )
