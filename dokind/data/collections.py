"""
Kind wrappers over builtin collections.

Builtin ``list`` and ``set`` cannot derive from ``Kind``, so ``ListK`` and
``SetK`` wrap immutable copies (``tuple`` and ``frozenset``) to give them a
witness and typeclass instances.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Final, Generic, TypeVar

from dokind.kind import Kind, Witness
from dokind.typeclasses.applicative import Applicative
from dokind.typeclasses.eq import Eq
from dokind.typeclasses.functor import Functor
from dokind.typeclasses.monad import Monad
from dokind.typeclasses.monoid import Monoid

T = TypeVar("T")
U = TypeVar("U")
G = TypeVar("G")


class ForListK(Witness):
    """Witness for :class:`ListK`."""


class ForSetK(Witness):
    """Witness for :class:`SetK`."""


@dataclass(frozen=True)
class ListK(Kind[ForListK, T], Generic[T]):
    """Immutable list; its Monad is the list comprehension."""

    values: tuple[T, ...] = ()

    witness = ForListK

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    @staticmethod
    def of(*values: U) -> ListK[U]:
        return ListK(values)

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __add__(self, other: ListK[T]) -> ListK[T]:
        return ListK(self.values + other.values)

    def map(self, f: Callable[[T], U]) -> ListK[U]:
        return ListK(tuple(f(value) for value in self.values))

    def flat_map(self, f: Callable[[T], ListK[U]]) -> ListK[U]:
        out: list[U] = []
        for value in self.values:
            result = f(value)
            if not isinstance(result, ListK):
                raise TypeError("flat_map must return a ListK instance")
            out.extend(result.values)
        return ListK(tuple(out))

    def filter(self, predicate: Callable[[T], bool]) -> ListK[T]:
        return ListK(tuple(value for value in self.values if predicate(value)))

    def fold_left(self, initial: U, f: Callable[[U, T], U]) -> U:
        acc = initial
        for value in self.values:
            acc = f(acc, value)
        return acc

    def traverse(
        self, applicative: Applicative[G], f: Callable[[T], Kind[G, U]]
    ) -> Kind[G, ListK[U]]:
        """Map each element into ``G`` and collect the results, left to right."""

        return applicative.map(applicative.traverse(self.values, f), ListK)

    def sequence(self: ListK[Kind[G, U]], applicative: Applicative[G]) -> Kind[G, ListK[U]]:
        return self.traverse(applicative, lambda kind: kind)

    # Instances

    @staticmethod
    def functor() -> ListKMonad:
        return _LISTK_MONAD

    @staticmethod
    def applicative() -> ListKMonad:
        return _LISTK_MONAD

    @staticmethod
    def monad() -> ListKMonad:
        return _LISTK_MONAD

    @staticmethod
    def monoid() -> ListKMonoid:
        return _LISTK_MONOID

    @staticmethod
    def eq(eq_value: Eq[U]) -> ListKEq[U]:
        return ListKEq(eq_value)


@dataclass(frozen=True)
class SetK(Kind[ForSetK, T], Generic[T]):
    """Immutable set; mapping may merge elements."""

    values: frozenset[T] = frozenset()

    witness = ForSetK

    def __post_init__(self) -> None:
        if not isinstance(self.values, frozenset):
            object.__setattr__(self, "values", frozenset(self.values))

    @staticmethod
    def of(*values: U) -> SetK[U]:
        return SetK(frozenset(values))

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def map(self, f: Callable[[T], U]) -> SetK[U]:
        return SetK(frozenset(f(value) for value in self.values))

    def combine(self, other: SetK[T]) -> SetK[T]:
        return SetK(self.values | other.values)

    # Instances

    @staticmethod
    def functor() -> SetKFunctor:
        return _SETK_FUNCTOR

    @staticmethod
    def monoid() -> SetKMonoid:
        return _SETK_MONOID


class ListKMonad(Monad[ForListK]):
    witness = ForListK

    def pure(self, value: T) -> ListK[T]:
        return ListK((value,))

    def map(self, fa: Kind[ForListK, T], f: Callable[[T], U]) -> ListK[U]:
        return ListK.fix(fa).map(f)

    def flat_map(
        self, fa: Kind[ForListK, T], f: Callable[[T], Kind[ForListK, U]]
    ) -> ListK[U]:
        return ListK.fix(fa).flat_map(lambda value: ListK.fix(f(value)))


class ListKMonoid(Monoid[ListK[Any]]):
    def empty(self) -> ListK[Any]:
        return ListK(())

    def combine(self, a: ListK[Any], b: ListK[Any]) -> ListK[Any]:
        return a + b


class ListKEq(Eq[ListK[T]]):
    def __init__(self, eq_value: Eq[T]) -> None:
        self._eq_value = eq_value

    def eqv(self, a: ListK[T], b: ListK[T]) -> bool:
        return len(a) == len(b) and all(
            self._eq_value.eqv(x, y) for x, y in zip(a.values, b.values)
        )


class SetKFunctor(Functor[ForSetK]):
    witness = ForSetK

    def map(self, fa: Kind[ForSetK, T], f: Callable[[T], U]) -> SetK[U]:
        return SetK.fix(fa).map(f)


class SetKMonoid(Monoid[SetK[Any]]):
    def empty(self) -> SetK[Any]:
        return SetK(frozenset())

    def combine(self, a: SetK[Any], b: SetK[Any]) -> SetK[Any]:
        return a.combine(b)


def listk(values: Iterable[T]) -> ListK[T]:
    """Wrap any iterable as a ``ListK``."""

    return ListK(tuple(values))


def setk(values: Iterable[T]) -> SetK[T]:
    """Wrap any iterable as a ``SetK``."""

    return SetK(frozenset(values))


_LISTK_MONAD: Final = ListKMonad()
_LISTK_MONOID: Final = ListKMonoid()
_SETK_FUNCTOR: Final = SetKFunctor()
_SETK_MONOID: Final = SetKMonoid()

__all__ = [
    "ForListK",
    "ForSetK",
    "ListK",
    "ListKEq",
    "ListKMonad",
    "ListKMonoid",
    "SetK",
    "SetKFunctor",
    "SetKMonoid",
    "listk",
    "setk",
]
