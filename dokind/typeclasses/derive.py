"""
Adapters narrowing an instance to a weaker capability.

A Monad instance already *is* an Applicative and a Functor through class
inheritance. These adapters are for the opposite need: handing a program
only the surface it is allowed to use, so a Functor-only program cannot
call ``flat_map`` on what it was given.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from dokind.kind import Kind
from dokind.typeclasses.applicative import Applicative
from dokind.typeclasses.functor import Functor

F = TypeVar("F")
A = TypeVar("A")
B = TypeVar("B")


class _DerivedFunctor(Functor[F]):
    def __init__(self, base: Functor[F]) -> None:
        self._base = base
        self.witness = base.witness  # type: ignore[misc]

    def map(self, fa: Kind[F, A], f: Callable[[A], B]) -> Kind[F, B]:
        return self._base.map(fa, f)


class _DerivedApplicative(Applicative[F]):
    def __init__(self, base: Applicative[F]) -> None:
        self._base = base
        self.witness = base.witness  # type: ignore[misc]

    def pure(self, value: A) -> Kind[F, A]:
        return self._base.pure(value)

    def ap(self, ff: Kind[F, Callable[[A], B]], fa: Kind[F, A]) -> Kind[F, B]:
        return self._base.ap(ff, fa)

    def map(self, fa: Kind[F, A], f: Callable[[A], B]) -> Kind[F, B]:
        return self._base.map(fa, f)


def derive_functor(instance: Functor[F]) -> Functor[F]:
    """Functor view of any Functor refinement (Applicative, Monad, ...)."""

    if not isinstance(instance, Functor):
        raise TypeError(f"Expected a Functor instance, got {type(instance).__name__}")
    return _DerivedFunctor(instance)


def derive_applicative(instance: Applicative[F]) -> Applicative[F]:
    """Applicative view of a Monad (or any Applicative refinement)."""

    if not isinstance(instance, Applicative):
        raise TypeError(
            f"Expected an Applicative instance, got {type(instance).__name__}"
        )
    return _DerivedApplicative(instance)


__all__ = ["derive_applicative", "derive_functor"]
