"""Loaded script model.

A loaded script is an immutable, string-keyed mapping from member name to
value. Each member carries a capability tag. Tags reported by the loading
function take precedence over reflection.
"""

import inspect
from collections.abc import Iterator, Mapping
from types import MappingProxyType, ModuleType
from typing import Any

from scriptloader.classifier import MemberKind, classify


def _defined_in(module: ModuleType, value: Any) -> bool:
    """Check that a module attribute was not imported from another module."""
    if isinstance(value, ModuleType):
        return False
    if inspect.isfunction(value) or inspect.isclass(value) or inspect.isbuiltin(value):
        return getattr(value, "__module__", module.__name__) == module.__name__
    return True


class LoadedResource(Mapping[str, Any]):
    """Read-only view of the members exposed by a loaded script."""

    def __init__(
        self,
        members: Mapping[str, Any],
        kinds: Mapping[str, MemberKind] | None = None,
        *,
        module: ModuleType | None = None,
    ) -> None:
        """Initialize the resource.

        Args:
            members: Member values keyed by name.
            kinds: Explicit capability tags reported by the loading function.
            module: The module the members were taken from, if any.

        """
        self._members = MappingProxyType(dict(members))
        self._kinds = MappingProxyType(dict(kinds or {}))
        self.module = module

    @classmethod
    def from_module(cls, module: ModuleType) -> "LoadedResource":
        """Create a resource from the public names of an imported module.

        ``__all__`` is honoured when the module defines it. Otherwise every
        name not starting with an underscore is exported, except modules and
        functions or classes the script imported from elsewhere.
        """
        exported = getattr(module, "__all__", None)
        if exported is not None:
            names = [str(name) for name in exported]
            members = {name: getattr(module, name) for name in names if hasattr(module, name)}
        else:
            members = {
                name: value
                for name, value in vars(module).items()
                if not name.startswith("_") and _defined_in(module, value)
            }
        return cls(members, module=module)

    @classmethod
    def coerce(cls, loaded: Any) -> "LoadedResource":
        """Convert a loading function's return value into a resource.

        Raises:
            TypeError: If the value is not a resource, mapping or module.

        """
        if isinstance(loaded, LoadedResource):
            return loaded
        if isinstance(loaded, ModuleType):
            return cls.from_module(loaded)
        if isinstance(loaded, Mapping):
            return cls(loaded)
        msg = (
            "Loading function must return a mapping or a module, "
            f"got {type(loaded).__name__}"
        )
        raise TypeError(msg)

    def __getitem__(self, name: str) -> Any:
        return self._members[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"LoadedResource({sorted(self._members)!r})"

    def kind(self, name: str) -> MemberKind:
        """Get the capability tag of a member.

        Raises:
            KeyError: If there is no member with that name.

        """
        value = self._members[name]
        explicit = self._kinds.get(name)
        if explicit is not None:
            return explicit
        return classify(value)

    def kinds(self) -> dict[str, MemberKind]:
        """Get the capability tags of all members."""
        return {name: self.kind(name) for name in self._members}
