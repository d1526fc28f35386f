"""
Shared fixtures for the dokind test-suite.

Containers that are descriptions (IO, State, Function1) cannot be compared
with ``==``; the ``*_eq`` fixtures compare them by running both sides.
"""

from collections.abc import Callable
from typing import Any

import pytest

from dokind import IO, Function1, Kind, State, standard_registry
from dokind.registry import Registry


class Counter:
    """Callable that counts how many times it ran."""

    def __init__(self, value: Any = None) -> None:
        self.calls = 0
        self.value = value

    def __call__(self) -> Any:
        self.calls += 1
        return self.value if self.value is not None else self.calls


@pytest.fixture
def registry() -> Registry:
    return standard_registry()


@pytest.fixture
def counter() -> Counter:
    return Counter()


@pytest.fixture
def io_eq() -> Callable[[Kind[Any, Any], Kind[Any, Any]], bool]:
    def eq(left: Kind[Any, Any], right: Kind[Any, Any]) -> bool:
        return IO.fix(left).unsafe_run_try() == IO.fix(right).unsafe_run_try()

    return eq


@pytest.fixture
def state_eq() -> Callable[[Kind[Any, Any], Kind[Any, Any]], bool]:
    initial_states = (0, 7, -3)

    def eq(left: Kind[Any, Any], right: Kind[Any, Any]) -> bool:
        return all(
            State.fix(left).run(state) == State.fix(right).run(state)
            for state in initial_states
        )

    return eq


@pytest.fixture
def function1_eq() -> Callable[[Kind[Any, Any], Kind[Any, Any]], bool]:
    inputs = (0, 1, 42)

    def eq(left: Kind[Any, Any], right: Kind[Any, Any]) -> bool:
        return all(Function1.fix(left)(x) == Function1.fix(right)(x) for x in inputs)

    return eq
