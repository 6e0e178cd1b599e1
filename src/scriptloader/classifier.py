"""Classify members of a loaded script.

A member is either a function (anything callable), a constructor (a class),
or a plain value. Classes are callable too, so ``is_constructible`` is a
strict subset of ``is_callable``.
"""

import inspect
from enum import Enum
from typing import Any


class MemberKind(str, Enum):
    """Capability tag of a script member."""

    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    VALUE = "value"


_COUNTED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def is_callable(value: Any) -> bool:
    """Check if the value can be invoked as a function."""
    return callable(value)


def is_constructible(value: Any) -> bool:
    """Check if the value is a class that can be instantiated."""
    return isinstance(value, type)


def classify(value: Any) -> MemberKind:
    """Get the capability tag for a value using reflection."""
    if is_constructible(value):
        return MemberKind.CONSTRUCTOR
    if is_callable(value):
        return MemberKind.FUNCTION
    return MemberKind.VALUE


def declared_arity(value: Any) -> int | None:
    """Count the required positional parameters a callable declares.

    Counting stops at the first parameter with a default value. Variadic and
    keyword-only parameters are not counted. For classes the constructor
    signature is used, without ``self``.

    Args:
        value: A callable.

    Returns:
        The declared parameter count, or None if the signature cannot be
        introspected.

    """
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        return None

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind not in _COUNTED_KINDS:
            break
        if parameter.default is not inspect.Parameter.empty:
            break
        count += 1
    return count
