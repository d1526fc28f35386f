"""
State: a computation threading an explicit state value.

``State(run)`` wraps ``run: S -> (S, A)``. Nothing is shared or mutated:
the state is an ordinary value passed in and returned, which is why State is
the reference interpreter for testing programs written against capability
interfaces. Construct an instance of the capability for ``State``, run the
polymorphic program with it from a known initial state, and assert on the
final state.

Evaluation is a loop over pending continuations, so a long chain of
``flat_map`` calls does not grow the Python stack.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, Generic, TypeVar

from dokind.kind import Kind, Witness
from dokind.typeclasses.monad import Monad

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


class ForState(Witness):
    """Witness for :class:`State` partially applied to its state type."""


@dataclass(frozen=True)
class _Step:
    run: Callable[[Any], tuple[Any, Any]]


@dataclass(frozen=True)
class _Pure:
    value: Any


@dataclass(frozen=True)
class _Bind:
    source: State[Any, Any]
    f: Callable[[Any], State[Any, Any]]


class State(Kind[ForState, A], Generic[S, A]):
    """``S -> (S, A)`` as a composable value."""

    __slots__ = ("_node",)

    witness = ForState

    def __init__(self, run: Callable[[S], tuple[S, A]]) -> None:
        if not callable(run):
            raise TypeError("State expects a callable S -> (S, A)")
        self._node: _Step | _Pure | _Bind = _Step(run)

    @classmethod
    def _of(cls, node: _Step | _Pure | _Bind) -> State[Any, Any]:
        state = cls.__new__(cls)
        state._node = node
        return state

    @staticmethod
    def pure(value: B) -> State[Any, B]:
        return State._of(_Pure(value))

    @staticmethod
    def get() -> State[S, S]:
        return State(lambda state: (state, state))

    @staticmethod
    def set(new_state: S) -> State[S, None]:
        return State(lambda _: (new_state, None))

    @staticmethod
    def modify(f: Callable[[S], S]) -> State[S, None]:
        return State(lambda state: (f(state), None))

    @staticmethod
    def inspect(f: Callable[[S], B]) -> State[S, B]:
        return State(lambda state: (state, f(state)))

    def map(self, f: Callable[[A], B]) -> State[S, B]:
        return State._of(_Bind(self, lambda value: State.pure(f(value))))

    def flat_map(self, f: Callable[[A], State[S, B]]) -> State[S, B]:
        return State._of(_Bind(self, f))

    def run(self, initial: S) -> tuple[S, A]:
        """Run from ``initial`` and return ``(final_state, result)``."""

        continuations: list[Callable[[Any], State[Any, Any]]] = []
        current: State[Any, Any] = self
        state: Any = initial
        while True:
            node = current._node
            if isinstance(node, _Bind):
                continuations.append(node.f)
                current = node.source
                continue
            if isinstance(node, _Pure):
                value = node.value
            else:
                state, value = node.run(state)
            if not continuations:
                return state, value
            current = _expect_state(continuations.pop()(value))

    def run_a(self, initial: S) -> A:
        """Result only."""

        return self.run(initial)[1]

    def run_s(self, initial: S) -> S:
        """Final state only."""

        return self.run(initial)[0]

    def __repr__(self) -> str:
        return f"State({self._node!r})"

    # Instances

    @staticmethod
    def functor() -> StateMonad:
        return _STATE_MONAD

    @staticmethod
    def applicative() -> StateMonad:
        return _STATE_MONAD

    @staticmethod
    def monad() -> StateMonad:
        return _STATE_MONAD


def _expect_state(value: Any) -> State[Any, Any]:
    if not isinstance(value, State):
        raise TypeError(f"flat_map must return a State; got {type(value).__name__}")
    return value


class StateMonad(Monad[ForState]):
    """``pure(a) = s -> (s, a)``; ``flat_map`` feeds the next state forward."""

    witness = ForState

    def pure(self, value: A) -> State[Any, A]:
        return State.pure(value)

    def map(self, fa: Kind[ForState, A], f: Callable[[A], B]) -> State[Any, B]:
        return State.fix(fa).map(f)

    def flat_map(
        self, fa: Kind[ForState, A], f: Callable[[A], Kind[ForState, B]]
    ) -> State[Any, B]:
        return State.fix(fa).flat_map(lambda value: State.fix(f(value)))

    def get(self) -> State[Any, Any]:
        return State.get()

    def set(self, new_state: S) -> State[S, None]:
        return State.set(new_state)

    def modify(self, f: Callable[[S], S]) -> State[S, None]:
        return State.modify(f)


_STATE_MONAD: Final = StateMonad()

__all__ = ["ForState", "State", "StateMonad"]
