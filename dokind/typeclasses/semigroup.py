"""Semigroup: an associative binary combination."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Generic, TypeVar

from dokind.typeclasses.base import Typeclass

if TYPE_CHECKING:
    from dokind.data.option import Option

A = TypeVar("A")


class Semigroup(Typeclass, Generic[A]):
    """Law: ``combine(combine(a, b), c) == combine(a, combine(b, c))``."""

    @abstractmethod
    def combine(self, a: A, b: A) -> A: ...

    def combine_all_option(self, values: Iterable[A]) -> Option[A]:
        """Combine left to right; ``Nothing`` for an empty iterable."""

        from dokind.data.option import NOTHING, Some

        iterator = iter(values)
        try:
            acc = next(iterator)
        except StopIteration:
            return NOTHING
        for value in iterator:
            acc = self.combine(acc, value)
        return Some(acc)


__all__ = ["Semigroup"]
