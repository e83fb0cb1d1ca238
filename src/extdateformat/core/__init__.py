"""Core utilities shared across syntax and runtime layers.

Exports:
    BabelImportError: Raised when a Babel-backed feature runs without Babel
    is_babel_available: Check whether rendering support is installed

Python 3.11+.
"""

from .babel_compat import BabelImportError, is_babel_available

__all__ = ["BabelImportError", "is_babel_available"]
