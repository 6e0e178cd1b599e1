"""Shared fixtures for scriptloader tests."""

from collections.abc import Callable
from typing import Any

import pytest

from scriptloader.loader import SingleFlightLoader


class Vector:
    """Constructible member used by the math utils script."""

    def __init__(self, x: int) -> None:
        self.x = x

    def scaled(self, factor: int) -> "Vector":
        return Vector(self.x * factor)

    @classmethod
    def origin(cls) -> "Vector":
        return cls(0)


def add(a: int, b: int) -> int:
    return a + b


class CountingLoad:
    """Loading function that counts calls and returns fixed members."""

    def __init__(self, members: dict[str, Any]) -> None:
        self.members = members
        self.calls: list[str] = []

    def __call__(self, identifier: str) -> dict[str, Any]:
        self.calls.append(identifier)
        return self.members


@pytest.fixture
def math_members() -> dict[str, Any]:
    """Members of the math utils script."""
    return {
        "add": add,
        "Vector": Vector,
        "PI": 3.14,
        "constants": {"e": 2.71, "nested": {"zero": 0}},
        "origin": Vector(0),
    }


@pytest.fixture
def counting_load(math_members: dict[str, Any]) -> CountingLoad:
    """Loading function returning the math utils members."""
    return CountingLoad(math_members)


@pytest.fixture
def make_loader(
    counting_load: CountingLoad,
) -> Callable[..., SingleFlightLoader]:
    """Create loaders for the math utils script."""

    def _make(**kwargs: Any) -> SingleFlightLoader:
        return SingleFlightLoader("mathutils", counting_load, **kwargs)

    return _make
