"""Hypothesis strategies for generating date-format patterns and values.

Provides custom strategies for property-based testing of the pattern lexer
and the field renderer.
"""

from __future__ import annotations

import string
from datetime import UTC, datetime, timedelta, timezone

from hypothesis import strategies as st
from hypothesis.strategies import composite

from extdateformat.constants import FORMAT_LETTERS, QUOTE

# Printable characters that are neither format letters nor the quote
SEPARATOR_ALPHABET = "".join(
    c for c in string.printable if c not in FORMAT_LETTERS and c != QUOTE and c not in "\r\x0b\x0c"
)


def separator_text(min_size: int = 0, max_size: int = 40) -> st.SearchStrategy[str]:
    """Generate text the lexer treats entirely as separators."""
    return st.text(alphabet=SEPARATOR_ALPHABET, min_size=min_size, max_size=max_size)


@composite
def formatter_runs(draw: st.DrawFn) -> str:
    """Generate a run of one repeated format letter, e.g. "yyyy"."""
    letter = draw(st.sampled_from(sorted(FORMAT_LETTERS)))
    width = draw(st.integers(min_value=1, max_value=5))
    return letter * width


@composite
def quoted_literals(draw: st.DrawFn) -> str:
    """Generate a closed quoted region, escaping quotes in its body."""
    body = draw(st.text(alphabet=string.ascii_letters + " ,.'", max_size=15))
    return QUOTE + body.replace(QUOTE, QUOTE * 2) + QUOTE


@composite
def patterns(draw: st.DrawFn) -> str:
    """Generate well-formed patterns mixing runs, separators and literals."""
    parts = draw(
        st.lists(
            st.one_of(formatter_runs(), separator_text(min_size=1, max_size=5), quoted_literals()),
            max_size=12,
        )
    )
    return "".join(parts)


def any_patterns() -> st.SearchStrategy[str]:
    """Generate arbitrary strings, including unbalanced quotes."""
    return st.text(alphabet=string.ascii_letters + string.digits + " :,.-/'", max_size=60)


def aware_datetimes() -> st.SearchStrategy[datetime]:
    """Generate aware datetimes with whole-minute fixed offsets."""
    offsets = st.integers(min_value=-14 * 60, max_value=14 * 60).map(
        lambda minutes: timezone(timedelta(minutes=minutes))
    )
    return st.datetimes(
        min_value=datetime(1900, 1, 1),
        max_value=datetime(2100, 12, 31),
        timezones=st.one_of(st.just(UTC), offsets),
    )
