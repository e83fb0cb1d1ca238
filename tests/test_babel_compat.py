"""Tests for babel_compat - lazy Babel loading and missing-Babel errors."""

import pytest

from extdateformat import BabelImportError, ExtendedDateFormat, tokenize
from extdateformat.core import babel_compat
from extdateformat.core.babel_compat import (
    get_babel_dates,
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
    require_babel,
)
from extdateformat.runtime import LocaleContext


@pytest.fixture
def babel_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend Babel is not installed."""
    monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)


class TestBabelAvailable:
    """Normal operation with Babel installed."""

    def test_is_available(self) -> None:
        """Babel is installed in the test environment."""
        assert is_babel_available() is True

    def test_require_babel_passes(self) -> None:
        """require_babel is silent when Babel is present."""
        require_babel("format")

    def test_accessors(self) -> None:
        """Accessors return the real Babel objects."""
        from babel import Locale, dates  # noqa: PLC0415
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        assert get_locale_class() is Locale
        assert get_unknown_locale_error() is UnknownLocaleError
        assert get_babel_dates() is dates


class TestBabelImportError:
    """BabelImportError construction."""

    def test_message(self) -> None:
        """Message names the feature and the install command."""
        error = BabelImportError("format")
        assert "format requires Babel" in str(error)
        assert "pip install Babel" in str(error)
        assert error.feature == "format"

    def test_is_import_error(self) -> None:
        """BabelImportError is an ImportError."""
        assert issubclass(BabelImportError, ImportError)


class TestBabelMissing:
    """Behaviour when Babel cannot be imported."""

    def test_require_babel_raises(self, babel_missing: None) -> None:
        """require_babel raises with the feature name."""
        with pytest.raises(BabelImportError, match="rendering"):
            require_babel("rendering")

    def test_accessors_raise(self, babel_missing: None) -> None:
        """Every accessor checks availability first."""
        for accessor in (get_locale_class, get_unknown_locale_error, get_babel_dates):
            with pytest.raises(BabelImportError):
                accessor()

    def test_tokenize_still_works(self, babel_missing: None) -> None:
        """The lexer never needs Babel."""
        assert [t.content for t in tokenize("d MMM")] == ["d", " ", "MMM"]

    def test_formatter_raises(self, babel_missing: None) -> None:
        """Building a formatter needs locale data."""
        LocaleContext.clear_cache()
        with pytest.raises(BabelImportError, match="LocaleContext.create"):
            ExtendedDateFormat("d MMM", "en_US")
