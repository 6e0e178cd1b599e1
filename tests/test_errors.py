"""Tests for error messages and hierarchy."""

import pytest

from scriptloader.errors import (
    ArityMismatchError,
    IdentifierRequiredError,
    LoadFailedError,
    MemberNameRequiredError,
    MemberNotFoundError,
    NotAClassError,
    NotAFunctionError,
    PropertyNotFoundError,
    ScriptLoaderError,
)


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (IdentifierRequiredError(), "Script identifier not defined"),
        (MemberNameRequiredError("lib.py"), "Object not defined: lib.py"),
        (MemberNotFoundError("lib.py", "x"), "Object not found: lib.py, x"),
        (PropertyNotFoundError("lib.py", "x.y"), "Property not found: lib.py, x.y"),
        (NotAFunctionError("lib.py", "x"), "Object is not a function: lib.py, x"),
        (NotAClassError("lib.py", "x"), "Object is not a class: lib.py, x"),
        (
            ArityMismatchError("lib.py", "f", expected=3, actual=2),
            "Mismatched number of parameters: lib.py, f (expected 3, got 2)",
        ),
        (
            ArityMismatchError("lib.py", "f", expected=None, actual=2),
            "Mismatched number of parameters: lib.py, f (expected unknown, got 2)",
        ),
    ],
)
def test_messages(error: ScriptLoaderError, message: str) -> None:
    assert str(error) == message
    assert isinstance(error, ScriptLoaderError)


def test_load_failed_keeps_cause() -> None:
    cause = OSError("disk on fire")

    error = LoadFailedError("lib.py", cause)

    assert error.cause is cause
    assert error.identifier == "lib.py"
    assert str(error) == "Failed to load script: lib.py: disk on fire"


def test_builtin_bases() -> None:
    """Test that errors can be caught by the matching builtin exception."""
    assert isinstance(MemberNotFoundError("a", "b"), LookupError)
    assert isinstance(NotAClassError("a", "b"), TypeError)
    assert isinstance(IdentifierRequiredError(), ValueError)
