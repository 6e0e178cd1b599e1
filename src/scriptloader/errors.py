"""Errors raised while loading scripts and resolving their members.

Every error carries the script identifier it relates to, so a failure can be
traced back to the resource and member path involved.
"""

OBJECT_NOT_FOUND = "Object not found"
PROPERTY_NOT_FOUND = "Property not found"
OBJECT_IS_NOT_A_FUNCTION = "Object is not a function"
OBJECT_IS_NOT_A_CLASS = "Object is not a class"
MISMATCHED_NUMBER_OF_PARAMETERS = "Mismatched number of parameters"


class ScriptLoaderError(Exception):
    """Base exception for script loading and member resolution errors."""


class IdentifierRequiredError(ScriptLoaderError, ValueError):
    """Raised when a script is created without an identifier."""

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__("Script identifier not defined")


class MemberNameRequiredError(ScriptLoaderError, ValueError):
    """Raised when a member, function, class or object name is empty."""

    def __init__(self, identifier: str) -> None:
        """Initialize with the identifier of the script being queried.

        Args:
            identifier: Identifier of the script.

        """
        self.identifier = identifier
        super().__init__(f"Object not defined: {identifier}")


class LoadFailedError(ScriptLoaderError):
    """Raised when the loading function fails to produce a script.

    The original exception is kept in ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, identifier: str, cause: BaseException) -> None:
        """Initialize load failure.

        Args:
            identifier: Identifier of the script that failed to load.
            cause: The exception raised by the loading function.

        """
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Failed to load script: {identifier}: {cause}")


class _MemberError(ScriptLoaderError):
    """Error about a member path of a loaded script."""

    reason: str = ""

    def __init__(self, identifier: str, path: str) -> None:
        """Initialize with the script identifier and the dotted member path.

        Args:
            identifier: Identifier of the script.
            path: Dotted member path the error refers to.

        """
        self.identifier = identifier
        self.path = path
        super().__init__(f"{self.reason}: {identifier}, {path}")


class MemberNotFoundError(_MemberError, LookupError):
    """Raised when a top-level member is absent from the loaded script."""

    reason = OBJECT_NOT_FOUND


class PropertyNotFoundError(_MemberError, LookupError):
    """Raised when a nested property is absent during a path walk."""

    reason = PROPERTY_NOT_FOUND


class NotAFunctionError(_MemberError, TypeError):
    """Raised when a resolved member cannot be called."""

    reason = OBJECT_IS_NOT_A_FUNCTION


class NotAClassError(_MemberError, TypeError):
    """Raised when a resolved member cannot be instantiated."""

    reason = OBJECT_IS_NOT_A_CLASS


class ArityMismatchError(_MemberError, TypeError):
    """Raised by safe calls when the argument count differs from the signature."""

    reason = MISMATCHED_NUMBER_OF_PARAMETERS

    def __init__(
        self,
        identifier: str,
        path: str,
        *,
        expected: int | None,
        actual: int,
    ) -> None:
        """Initialize arity mismatch.

        Args:
            identifier: Identifier of the script.
            path: Dotted path of the callable.
            expected: Declared parameter count, None if it cannot be determined.
            actual: Number of supplied arguments.

        """
        self.expected = expected
        self.actual = actual
        super().__init__(identifier, path)
        declared = "unknown" if expected is None else str(expected)
        self.args = (f"{self.args[0]} (expected {declared}, got {actual})",)
