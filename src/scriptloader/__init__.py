"""Lazy, single-flight script loading with typed member access."""

from scriptloader.classifier import (
    MemberKind,
    classify,
    declared_arity,
    is_callable,
    is_constructible,
)
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
from scriptloader.invoker import Invoker
from scriptloader.loader import LoadFunction, LoadState, SingleFlightLoader
from scriptloader.location import ScriptLocation
from scriptloader.resolver import MemberResolver
from scriptloader.resource import LoadedResource
from scriptloader.script import Script

__all__ = [
    "ArityMismatchError",
    "IdentifierRequiredError",
    "Invoker",
    "LoadFailedError",
    "LoadFunction",
    "LoadState",
    "LoadedResource",
    "MemberKind",
    "MemberNameRequiredError",
    "MemberNotFoundError",
    "MemberResolver",
    "NotAClassError",
    "NotAFunctionError",
    "PropertyNotFoundError",
    "Script",
    "ScriptLoaderError",
    "ScriptLocation",
    "SingleFlightLoader",
    "classify",
    "declared_arity",
    "is_callable",
    "is_constructible",
]
