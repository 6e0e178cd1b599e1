"""Single-flight script loading.

``SingleFlightLoader`` loads a script at most once, however many callers ask
for it concurrently. Callers arriving while a load is in flight wait for that
same load and share its outcome.

Plain loading functions run in the default executor, so a slow import never
blocks the event loop. Coroutine loading functions are awaited on the loop.

The loader is bound to the event loop it is first used on. The pending load is
a shared task awaited through ``asyncio.shield``, so a waiter that gets
cancelled or times out never cancels the load for everyone else.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Mapping
from enum import Enum
from types import ModuleType
from typing import Any, TypeAlias

from scriptloader.errors import IdentifierRequiredError, LoadFailedError
from scriptloader.log import get_logger
from scriptloader.resource import LoadedResource

logger = get_logger(__name__)

Loaded: TypeAlias = LoadedResource | Mapping[str, Any] | ModuleType
LoadFunction: TypeAlias = Callable[[str], Loaded | Awaitable[Loaded]]
"""Collaborator that retrieves the script named by an identifier."""


class LoadState(str, Enum):
    """Load state of a script."""

    NOT_STARTED = "not_started"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


def _consume_result(task: "asyncio.Task[LoadedResource]") -> None:
    # Waiters may all have timed out; mark the outcome as retrieved.
    if not task.cancelled():
        task.exception()


def _is_async(fn: Callable[..., Any]) -> bool:
    return inspect.iscoroutinefunction(fn) or inspect.iscoroutinefunction(
        getattr(fn, "__call__", None),
    )


class SingleFlightLoader:
    """Loads a script once and shares the result with every caller."""

    def __init__(
        self,
        identifier: str,
        load_fn: LoadFunction,
        *,
        poison_on_failure: bool = False,
    ) -> None:
        """Initialize the loader.

        Args:
            identifier: Identifier of the script, passed to ``load_fn``.
            load_fn: Function that loads the script. May be a coroutine function.
            poison_on_failure: Keep the first load failure forever instead of
                retrying on the next call.

        Raises:
            IdentifierRequiredError: If the identifier is empty.

        """
        if not identifier or not identifier.strip():
            raise IdentifierRequiredError

        self._identifier = identifier
        self._load_fn = load_fn
        self._poison_on_failure = poison_on_failure
        self._resource: LoadedResource | None = None
        self._pending: asyncio.Task[LoadedResource] | None = None
        self._failure: LoadFailedError | None = None
        self._load_count = 0

    @property
    def identifier(self) -> str:
        """Get the script identifier."""
        return self._identifier

    @property
    def state(self) -> LoadState:
        """Get the current load state."""
        if self._resource is not None:
            return LoadState.LOADED
        if self._pending is not None:
            return LoadState.LOADING
        if self._failure is not None:
            return LoadState.FAILED
        return LoadState.NOT_STARTED

    @property
    def load_count(self) -> int:
        """Get the number of load attempts started so far."""
        return self._load_count

    @property
    def resource(self) -> LoadedResource | None:
        """Get the loaded script, or None if it is not loaded yet."""
        return self._resource

    async def ensure_loaded(self, timeout: float | None = None) -> LoadedResource:
        """Get the loaded script, loading it if needed.

        Args:
            timeout: Seconds this caller is willing to wait. The load itself
                keeps running for other callers when the wait times out.
                No timeout by default.

        Returns:
            The loaded script. Every caller gets the same instance.

        Raises:
            LoadFailedError: If the loading function failed.
            TimeoutError: If ``timeout`` elapsed before the load settled.

        """
        if self._resource is not None:
            return self._resource

        if self._pending is None:
            if self._failure is not None and self._poison_on_failure:
                raise self._failure
            self._pending = asyncio.ensure_future(self._load())
            self._pending.add_done_callback(_consume_result)
        else:
            logger.debug("Waiting for in-flight load of %s", self._identifier)

        shielded = asyncio.shield(self._pending)
        if timeout is None:
            return await shielded
        return await asyncio.wait_for(shielded, timeout)

    async def _load(self) -> LoadedResource:
        self._load_count += 1
        if self._failure is not None:
            logger.info(
                "Retrying load of %s after a failed attempt",
                self._identifier,
            )
        logger.debug("Loading script %s", self._identifier)

        try:
            if _is_async(self._load_fn):
                loaded = await self._load_fn(self._identifier)
            else:
                # Imports block, keep the event loop free while they run
                loop = asyncio.get_running_loop()
                loaded = await loop.run_in_executor(
                    None, self._load_fn, self._identifier,
                )
            if inspect.isawaitable(loaded):
                loaded = await loaded
            resource = LoadedResource.coerce(loaded)
        except Exception as ex:
            logger.warning(
                "Failed to load script",
                extra={"identifier": self._identifier, "error": str(ex)},
            )
            self._failure = LoadFailedError(self._identifier, ex)
            raise self._failure from ex
        finally:
            # Cleared on every outcome, including cancellation and SystemExit
            self._pending = None

        self._resource = resource
        self._failure = None
        logger.debug(
            "Loaded script %s with %d members",
            self._identifier,
            len(resource),
        )
        return resource
