"""Monad: sequential computations where each step depends on the last."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from dokind.kind import Kind
from dokind.typeclasses.applicative import Applicative

F = TypeVar("F")
A = TypeVar("A")
B = TypeVar("B")


class Monad(Applicative[F]):
    """Applicative with ``flat_map``.

    Laws:

    * left identity: ``flat_map(pure(a), f) == f(a)``
    * right identity: ``flat_map(fa, pure) == fa``
    * associativity: ``flat_map(flat_map(fa, f), g)
      == flat_map(fa, lambda a: flat_map(f(a), g))``
    """

    @abstractmethod
    def flat_map(self, fa: Kind[F, A], f: Callable[[A], Kind[F, B]]) -> Kind[F, B]:
        """Feed the value(s) of ``fa`` to ``f`` and flatten the result."""

    def map(self, fa: Kind[F, A], f: Callable[[A], B]) -> Kind[F, B]:
        return self.flat_map(fa, lambda a: self.pure(f(a)))

    def ap(self, ff: Kind[F, Callable[[A], B]], fa: Kind[F, A]) -> Kind[F, B]:
        return self.flat_map(ff, lambda f: self.map(fa, f))

    def flatten(self, ffa: Kind[F, Kind[F, A]]) -> Kind[F, A]:
        return self.flat_map(ffa, lambda fa: fa)

    def follow_with(self, fa: Kind[F, Any], fb: Kind[F, B]) -> Kind[F, B]:
        """Run ``fa``, discard its value, then run ``fb``."""

        return self.flat_map(fa, lambda _: fb)

    def binding(
        self,
        *steps: Callable[..., Kind[F, Any]],
        yield_: Callable[..., B] | None = None,
    ) -> Kind[F, Any]:
        """Monad comprehension; see :func:`dokind.comprehension.binding`."""

        from dokind.comprehension import binding

        return binding(self, *steps, yield_=yield_)


__all__ = ["Monad"]
