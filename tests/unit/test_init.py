r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import apicontext


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(apicontext.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in apicontext.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in apicontext.__all__:
        assert hasattr(apicontext, name), f"{name} is in __all__ but not defined in module"


def test_exceptions_are_exported() -> None:
    assert issubclass(apicontext.InvalidContextStateError, apicontext.ApiContextError)
    assert issubclass(apicontext.UnsupportedHttpStatusError, apicontext.ApiContextError)
    assert issubclass(apicontext.InvalidParameterStateError, apicontext.ApiContextError)
