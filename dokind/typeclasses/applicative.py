"""Applicative: independent computations combined inside a container."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from dokind.kind import Kind
from dokind.typeclasses.functor import Functor

F = TypeVar("F")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class Applicative(Functor[F]):
    """Functor with ``pure`` and ``ap``.

    ``map`` is derived from them, so an instance only needs the two
    primitives; instances are free to override ``map`` with a direct version.
    """

    @abstractmethod
    def pure(self, value: A) -> Kind[F, A]:
        """Lift a plain value into the container."""

    @abstractmethod
    def ap(self, ff: Kind[F, Callable[[A], B]], fa: Kind[F, A]) -> Kind[F, B]:
        """Apply the function(s) inside ``ff`` to the value(s) inside ``fa``."""

    def map(self, fa: Kind[F, A], f: Callable[[A], B]) -> Kind[F, B]:
        return self.ap(self.pure(f), fa)

    def product(self, fa: Kind[F, A], fb: Kind[F, B]) -> Kind[F, tuple[A, B]]:
        return self.ap(self.map(fa, lambda a: lambda b: (a, b)), fb)

    def map2(
        self, fa: Kind[F, A], fb: Kind[F, B], f: Callable[[A, B], C]
    ) -> Kind[F, C]:
        return self.map(self.product(fa, fb), lambda pair: f(pair[0], pair[1]))

    def sequence(self, kinds: Iterable[Kind[F, A]]) -> Kind[F, tuple[A, ...]]:
        """Turn ``[F[A]]`` into ``F[(A, ...)]``, combining left to right."""

        acc: Kind[F, tuple[Any, ...]] = self.pure(())
        for kind in kinds:
            acc = self.map2(acc, kind, lambda values, value: values + (value,))
        return acc

    def traverse(
        self, items: Iterable[A], f: Callable[[A], Kind[F, B]]
    ) -> Kind[F, tuple[B, ...]]:
        return self.sequence(f(item) for item in items)


__all__ = ["Applicative"]
