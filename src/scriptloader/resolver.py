"""Resolve named members of a loaded script."""

import inspect
from collections.abc import Callable, Mapping
from typing import Any

from scriptloader.classifier import MemberKind, is_callable
from scriptloader.errors import (
    MemberNameRequiredError,
    MemberNotFoundError,
    NotAClassError,
    NotAFunctionError,
    PropertyNotFoundError,
)
from scriptloader.loader import SingleFlightLoader


def _project(value: Any, name: str) -> Any:
    """Get a property of a value, or None if it has no such property."""
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


class MemberResolver:
    """Looks up members of a script, loading the script on first use.

    A member that is missing or None is reported as not found.
    """

    def __init__(self, loader: SingleFlightLoader) -> None:
        """Initialize with the loader of the script to resolve members from."""
        self._loader = loader

    @property
    def loader(self) -> SingleFlightLoader:
        """Get the underlying loader."""
        return self._loader

    @property
    def identifier(self) -> str:
        """Get the script identifier."""
        return self._loader.identifier

    async def _lookup(self, name: str) -> tuple[Any, MemberKind]:
        if not name:
            raise MemberNameRequiredError(self.identifier)

        script = await self._loader.ensure_loaded()
        value = script.get(name)
        if value is None:
            raise MemberNotFoundError(self.identifier, name)
        return value, script.kind(name)

    async def resolve_member(self, name: str) -> Any:
        """Get a top-level member of the script.

        Raises:
            MemberNameRequiredError: If the name is empty.
            MemberNotFoundError: If the script has no such member.

        """
        value, _ = await self._lookup(name)
        return value

    async def resolve_nested_member(self, name: str, *path: str) -> Any:
        """Get a member, then walk the given property path on it.

        The walk stops at the first missing property.

        Raises:
            PropertyNotFoundError: Naming the dotted path up to and including
                the first missing property.

        """
        value = await self.resolve_member(name)
        walked = [name]
        for segment in path:
            walked.append(segment)
            value = _project(value, segment)
            if value is None:
                raise PropertyNotFoundError(self.identifier, ".".join(walked))
        return value

    async def resolve_property(self, object_name: str, property_name: str) -> Any:
        """Get a single property of a top-level member."""
        return await self.resolve_nested_member(object_name, property_name)

    async def member_kind(self, name: str) -> MemberKind:
        """Get the capability tag of a top-level member."""
        _, kind = await self._lookup(name)
        return kind

    async def get_function(self, name: str) -> Callable[..., Any]:
        """Get a top-level member that can be called.

        Raises:
            NotAFunctionError: If the member is not callable.

        """
        value, kind = await self._lookup(name)
        if kind is MemberKind.VALUE or not is_callable(value):
            raise NotAFunctionError(self.identifier, name)
        return value  # type: ignore[no-any-return]

    async def get_class(self, name: str) -> Callable[..., Any]:
        """Get a top-level member that can be instantiated.

        Raises:
            NotAClassError: If the member is not a class.

        """
        value, kind = await self._lookup(name)
        if kind is not MemberKind.CONSTRUCTOR or not is_callable(value):
            raise NotAClassError(self.identifier, name)
        return value  # type: ignore[no-any-return]

    async def class_methods(self, class_name: str) -> dict[str, Callable[..., Any]]:
        """Get the public methods of a class exposed by the script.

        Inherited methods are included, names starting with an underscore
        are not.
        """
        cls = await self.get_class(class_name)
        return {
            name: method
            for name, method in inspect.getmembers(cls, inspect.isroutine)
            if not name.startswith("_")
        }
