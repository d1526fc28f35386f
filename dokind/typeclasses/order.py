"""Order: a total order on a type."""

from __future__ import annotations

from abc import abstractmethod
from typing import TypeVar

from dokind.typeclasses.eq import Eq

A = TypeVar("A")


class Order(Eq[A]):
    """``compare`` returns a negative number, zero or a positive number."""

    @abstractmethod
    def compare(self, a: A, b: A) -> int: ...

    def eqv(self, a: A, b: A) -> bool:
        return self.compare(a, b) == 0

    def lt(self, a: A, b: A) -> bool:
        return self.compare(a, b) < 0

    def lteq(self, a: A, b: A) -> bool:
        return self.compare(a, b) <= 0

    def gt(self, a: A, b: A) -> bool:
        return self.compare(a, b) > 0

    def gteq(self, a: A, b: A) -> bool:
        return self.compare(a, b) >= 0

    def max(self, a: A, b: A) -> A:
        return b if self.lt(a, b) else a

    def min(self, a: A, b: A) -> A:
        return b if self.gt(a, b) else a


__all__ = ["Order"]
