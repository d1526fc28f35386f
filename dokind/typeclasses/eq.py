"""Eq: decidable equality for a type."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dokind.typeclasses.base import Typeclass

A = TypeVar("A")
B = TypeVar("B")


class Eq(Typeclass, Generic[A]):
    """Reflexive, symmetric and transitive equality."""

    @abstractmethod
    def eqv(self, a: A, b: A) -> bool: ...

    def neqv(self, a: A, b: A) -> bool:
        return not self.eqv(a, b)

    def contramap(self, f: Callable[[B], A]) -> Eq[B]:
        """Compare ``B`` values by comparing their images under ``f``."""

        return _ContramapEq(self, f)


class _ContramapEq(Eq[B]):
    def __init__(self, base: Eq[Any], f: Callable[[B], Any]) -> None:
        self._base = base
        self._f = f

    def eqv(self, a: B, b: B) -> bool:
        return self._base.eqv(self._f(a), self._f(b))


__all__ = ["Eq"]
