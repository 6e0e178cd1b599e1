"""Call functions, instantiate classes and call methods of a loaded script.

Arguments are passed through unmodified. Exceptions raised by the callee
propagate unwrapped. When the callee returns an awaitable (a coroutine
function, for instance) it is awaited and its result returned.

The ``safe_*`` forms compare the callee's declared parameter count with the
number of positional arguments before calling it.
"""

import inspect
from collections.abc import Callable
from typing import Any

from scriptloader.classifier import declared_arity, is_callable
from scriptloader.errors import ArityMismatchError, NotAFunctionError
from scriptloader.log import get_logger
from scriptloader.resolver import MemberResolver

logger = get_logger(__name__)


async def _settle(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class Invoker:
    """Invokes members of a script resolved through a MemberResolver."""

    def __init__(self, resolver: MemberResolver) -> None:
        """Initialize with the resolver to look members up with."""
        self._resolver = resolver

    @property
    def resolver(self) -> MemberResolver:
        """Get the underlying resolver."""
        return self._resolver

    def _check_arity(
        self,
        target: Callable[..., Any],
        path: str,
        args: tuple[Any, ...],
    ) -> None:
        expected = declared_arity(target)
        if expected != len(args):
            logger.debug(
                "Arity mismatch for %s in %s: expected %s, got %d",
                path,
                self._resolver.identifier,
                expected,
                len(args),
            )
            raise ArityMismatchError(
                self._resolver.identifier,
                path,
                expected=expected,
                actual=len(args),
            )

    async def _get_method(self, object_name: str, method_name: str) -> Callable[..., Any]:
        method = await self._resolver.resolve_property(object_name, method_name)
        if not is_callable(method):
            raise NotAFunctionError(
                self._resolver.identifier,
                f"{object_name}.{method_name}",
            )
        return method  # type: ignore[no-any-return]

    async def call_function(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call a function of the script and return its result."""
        fn = await self._resolver.get_function(name)
        return await _settle(fn(*args, **kwargs))

    async def safe_call_function(self, name: str, *args: Any) -> Any:
        """Call a function of the script after checking the argument count."""
        fn = await self._resolver.get_function(name)
        self._check_arity(fn, name, args)
        return await _settle(fn(*args))

    async def instantiate(self, class_name: str, *args: Any, **kwargs: Any) -> Any:
        """Create a new instance of a class of the script."""
        cls = await self._resolver.get_class(class_name)
        return cls(*args, **kwargs)

    async def safe_instantiate(self, class_name: str, *args: Any) -> Any:
        """Create a new instance of a class after checking the argument count."""
        cls = await self._resolver.get_class(class_name)
        self._check_arity(cls, class_name, args)
        return cls(*args)

    async def call_method(
        self,
        object_name: str,
        method_name: str,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Call a method of an object of the script and return its result."""
        method = await self._get_method(object_name, method_name)
        return await _settle(method(*args, **kwargs))

    async def safe_call_method(
        self,
        object_name: str,
        method_name: str,
        *args: Any,
    ) -> Any:
        """Call a method of an object after checking the argument count."""
        method = await self._get_method(object_name, method_name)
        self._check_arity(method, f"{object_name}.{method_name}", args)
        return await _settle(method(*args))
