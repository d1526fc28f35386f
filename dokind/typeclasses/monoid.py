"""Monoid: a Semigroup with an identity element."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import TypeVar

from dokind.typeclasses.semigroup import Semigroup

A = TypeVar("A")


class Monoid(Semigroup[A]):
    """Law: ``combine(empty(), a) == a == combine(a, empty())``."""

    @abstractmethod
    def empty(self) -> A: ...

    def combine_all(self, values: Iterable[A]) -> A:
        acc = self.empty()
        for value in values:
            acc = self.combine(acc, value)
        return acc


__all__ = ["Monoid"]
