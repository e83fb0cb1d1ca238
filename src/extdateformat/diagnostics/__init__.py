"""Diagnostic system for formatting errors.

Provides structured error diagnostics with codes, pattern positions and hints.
Inspired by Rust compiler diagnostics.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    DateFormatError,
    InvalidFormatLetterError,
    InvalidValueError,
    InvalidWidthError,
)
from .templates import ErrorTemplate

__all__ = [
    "DateFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidFormatLetterError",
    "InvalidValueError",
    "InvalidWidthError",
]
