"""Function1: a unary function as a Kind (the reader monad)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, Generic, TypeVar

from dokind.kind import Kind, Witness
from dokind.typeclasses.monad import Monad

I = TypeVar("I")
O = TypeVar("O")
U = TypeVar("U")


class ForFunction1(Witness):
    """Witness for :class:`Function1` partially applied to its input type."""


@dataclass(frozen=True)
class Function1(Kind[ForFunction1, O], Generic[I, O]):
    """Wraps ``f: I -> O``.

    ``f >> g`` reads left to right (first ``f``, then ``g``) and ``g << f``
    is classic composition. Plain callables are accepted on either side.
    """

    f: Callable[[I], O]

    witness = ForFunction1

    def __call__(self, value: I) -> O:
        return self.f(value)

    def and_then(self, g: Callable[[O], U]) -> Function1[I, U]:
        return Function1(lambda value: g(self.f(value)))

    def compose(self, g: Callable[[U], I]) -> Function1[U, O]:
        return Function1(lambda value: self.f(g(value)))

    def __rshift__(self, g: Callable[[O], U]) -> Function1[I, U]:
        return self.and_then(g)

    def __rrshift__(self, g: Callable[[U], I]) -> Function1[U, O]:
        return self.compose(g)

    def __lshift__(self, g: Callable[[U], I]) -> Function1[U, O]:
        return self.compose(g)

    def __rlshift__(self, g: Callable[[O], U]) -> Function1[I, U]:
        return self.and_then(g)

    def map(self, g: Callable[[O], U]) -> Function1[I, U]:
        return self.and_then(g)

    def flat_map(self, g: Callable[[O], Function1[I, U]]) -> Function1[I, U]:
        """Both functions read the same input."""

        return Function1(lambda value: _expect_function1(g(self.f(value)))(value))

    # Instances

    @staticmethod
    def functor() -> Function1Monad:
        return _FUNCTION1_MONAD

    @staticmethod
    def monad() -> Function1Monad:
        return _FUNCTION1_MONAD


def _expect_function1(value: Any) -> Function1[Any, Any]:
    if not isinstance(value, Function1):
        raise TypeError("flat_map must return a Function1 instance")
    return value


class Function1Monad(Monad[ForFunction1]):
    witness = ForFunction1

    def pure(self, value: O) -> Function1[Any, O]:
        return Function1(lambda _: value)

    def map(self, fa: Kind[ForFunction1, O], f: Callable[[O], U]) -> Function1[Any, U]:
        return Function1.fix(fa).map(f)

    def flat_map(
        self, fa: Kind[ForFunction1, O], f: Callable[[O], Kind[ForFunction1, U]]
    ) -> Function1[Any, U]:
        return Function1.fix(fa).flat_map(lambda value: Function1.fix(f(value)))


_FUNCTION1_MONAD: Final = Function1Monad()

__all__ = ["ForFunction1", "Function1", "Function1Monad"]
