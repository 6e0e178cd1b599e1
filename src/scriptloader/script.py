"""Script facade bundling loading, member resolution and invocation."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from scriptloader.classifier import MemberKind
from scriptloader.config import LoaderSettings
from scriptloader.invoker import Invoker
from scriptloader.loader import LoadFunction, LoadState, SingleFlightLoader
from scriptloader.location import ScriptLocation
from scriptloader.module_loader import make_load_function
from scriptloader.resolver import MemberResolver
from scriptloader.resource import LoadedResource


class Script:
    """A script loaded on first use, with typed access to its members.

    Every instance owns its own loader. Two instances for the same identifier
    load the script independently.
    """

    def __init__(
        self,
        identifier: "str | Path | ScriptLocation",
        load_fn: LoadFunction | None = None,
        *,
        poison_on_failure: bool = False,
        search_paths: list[Path] | None = None,
    ) -> None:
        """Initialize the script.

        Args:
            identifier: Script path, module name, or location.
            load_fn: Loading function. Python files and modules are imported
                when omitted.
            poison_on_failure: Keep the first load failure instead of retrying.
            search_paths: Directories to look up relative script paths in,
                used by the default loading function only.

        Raises:
            IdentifierRequiredError: If the identifier is empty.

        """
        if isinstance(identifier, ScriptLocation):
            identifier = identifier.full_path
        elif isinstance(identifier, Path):
            identifier = str(identifier)
        self._loader = SingleFlightLoader(
            identifier,
            load_fn or make_load_function(search_paths),
            poison_on_failure=poison_on_failure,
        )
        self._resolver = MemberResolver(self._loader)
        self._invoker = Invoker(self._resolver)

    @classmethod
    def from_settings(
        cls,
        identifier: "str | Path | ScriptLocation",
        settings: LoaderSettings,
        load_fn: LoadFunction | None = None,
    ) -> "Script":
        """Create a script configured by loader settings."""
        return cls(
            identifier,
            load_fn,
            poison_on_failure=settings.poison_on_failure,
            search_paths=settings.search_paths,
        )

    def __repr__(self) -> str:
        return f"Script({self.identifier!r}, state={self.state.value})"

    @property
    def identifier(self) -> str:
        """Get the script identifier."""
        return self._loader.identifier

    @property
    def state(self) -> LoadState:
        """Get the load state of the script."""
        return self._loader.state

    @property
    def loader(self) -> SingleFlightLoader:
        """Get the loader of the script."""
        return self._loader

    async def loaded_script(self, timeout: float | None = None) -> LoadedResource:
        """Get the loaded script, loading it on first use."""
        return await self._loader.ensure_loaded(timeout)

    async def get_object(self, name: str) -> Any:
        """Get a top-level member of the script."""
        return await self._resolver.resolve_member(name)

    async def get_object_property(self, object_name: str, property_name: str) -> Any:
        """Get a property of a top-level member."""
        return await self._resolver.resolve_property(object_name, property_name)

    async def get_nested_object_property(self, object_name: str, *property_names: str) -> Any:
        """Get a property nested under a top-level member."""
        return await self._resolver.resolve_nested_member(object_name, *property_names)

    async def get_kind(self, name: str) -> MemberKind:
        """Get the capability tag of a top-level member."""
        return await self._resolver.member_kind(name)

    async def get_function(self, name: str) -> Callable[..., Any]:
        """Get a function of the script."""
        return await self._resolver.get_function(name)

    async def get_class(self, name: str) -> Callable[..., Any]:
        """Get a class of the script."""
        return await self._resolver.get_class(name)

    async def get_class_methods(self, class_name: str) -> dict[str, Callable[..., Any]]:
        """Get the public methods of a class of the script."""
        return await self._resolver.class_methods(class_name)

    async def call_function(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call a function of the script."""
        return await self._invoker.call_function(name, *args, **kwargs)

    async def safe_call_function(self, name: str, *args: Any) -> Any:
        """Call a function of the script, checking the argument count first."""
        return await self._invoker.safe_call_function(name, *args)

    async def call_new(self, class_name: str, *args: Any, **kwargs: Any) -> Any:
        """Create an instance of a class of the script."""
        return await self._invoker.instantiate(class_name, *args, **kwargs)

    async def safe_call_new(self, class_name: str, *args: Any) -> Any:
        """Create an instance of a class, checking the argument count first."""
        return await self._invoker.safe_instantiate(class_name, *args)

    async def call_object_method(
        self,
        object_name: str,
        method_name: str,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Call a method of an object of the script."""
        return await self._invoker.call_method(object_name, method_name, *args, **kwargs)

    async def safe_call_object_method(
        self,
        object_name: str,
        method_name: str,
        *args: Any,
    ) -> Any:
        """Call a method of an object, checking the argument count first."""
        return await self._invoker.safe_call_method(object_name, method_name, *args)
