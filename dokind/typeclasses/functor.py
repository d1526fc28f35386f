"""Functor: map a function over the contents of a container."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

from dokind.kind import Kind
from dokind.typeclasses.base import Typeclass

F = TypeVar("F")
A = TypeVar("A")
B = TypeVar("B")


class Functor(Typeclass, Generic[F]):
    """Laws: ``map(fa, id) == fa`` and ``map(map(fa, f), g) == map(fa, g . f)``."""

    @abstractmethod
    def map(self, fa: Kind[F, A], f: Callable[[A], B]) -> Kind[F, B]:
        """Transform the contents of ``fa`` with ``f``."""

    def lift(self, f: Callable[[A], B]) -> Callable[[Kind[F, A]], Kind[F, B]]:
        """Turn ``A -> B`` into ``F[A] -> F[B]``."""

        def lifted(fa: Kind[F, A]) -> Kind[F, B]:
            return self.map(fa, f)

        return lifted

    def void(self, fa: Kind[F, A]) -> Kind[F, None]:
        return self.map(fa, lambda _: None)

    def as_(self, fa: Kind[F, A], value: B) -> Kind[F, B]:
        return self.map(fa, lambda _: value)

    def fproduct(self, fa: Kind[F, A], f: Callable[[A], B]) -> Kind[F, tuple[A, B]]:
        """Pair every element with the result of ``f`` applied to it."""

        return self.map(fa, lambda a: (a, f(a)))


__all__ = ["Functor"]
