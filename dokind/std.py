"""Eq, Order, Semigroup and Monoid instances for builtin Python types."""

from __future__ import annotations

from typing import Any, Final, TypeVar

from dokind.typeclasses.eq import Eq
from dokind.typeclasses.monoid import Monoid
from dokind.typeclasses.order import Order

A = TypeVar("A")


class NaturalEq(Eq[Any]):
    """Equality through ``==``."""

    def eqv(self, a: Any, b: Any) -> bool:
        return bool(a == b)


class NaturalOrder(Order[Any]):
    """Order through ``<``; values must be mutually comparable."""

    def compare(self, a: Any, b: Any) -> int:
        if a < b:
            return -1
        if b < a:
            return 1
        return 0


class SumMonoid(Monoid[Any]):
    def empty(self) -> int:
        return 0

    def combine(self, a: Any, b: Any) -> Any:
        return a + b


class ProductMonoid(Monoid[Any]):
    def empty(self) -> int:
        return 1

    def combine(self, a: Any, b: Any) -> Any:
        return a * b


class StrMonoid(Monoid[str]):
    def empty(self) -> str:
        return ""

    def combine(self, a: str, b: str) -> str:
        return a + b


class TupleMonoid(Monoid[tuple[Any, ...]]):
    def empty(self) -> tuple[Any, ...]:
        return ()

    def combine(self, a: tuple[Any, ...], b: tuple[Any, ...]) -> tuple[Any, ...]:
        return a + b


NATURAL_EQ: Final = NaturalEq()
NATURAL_ORDER: Final = NaturalOrder()
SUM: Final = SumMonoid()
PRODUCT: Final = ProductMonoid()
STR: Final = StrMonoid()
TUPLE: Final = TupleMonoid()

__all__ = [
    "NATURAL_EQ",
    "NATURAL_ORDER",
    "PRODUCT",
    "STR",
    "SUM",
    "TUPLE",
    "NaturalEq",
    "NaturalOrder",
    "ProductMonoid",
    "StrMonoid",
    "SumMonoid",
    "TupleMonoid",
]
