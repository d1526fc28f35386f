"""Ior: inclusive-or of two types.

An ``Ior[L, R]`` holds only a left value, only a right value, or both. It
models outcomes with warnings: a fatal problem is ``IorLeft``, a clean
result is ``IorRight`` and a result that comes with a non-fatal problem is
``IorBoth``.

Converting to ``Either`` is lossy. ``IorBoth(l, r).to_either()`` is
``Right(r)``: the left component is dropped. This is a convention kept for
compatibility, not a law; nothing guarantees that dropping the warning is
right for a given caller, who should ``fold`` instead when it matters.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Generic, NoReturn, TypeVar

from dokind.kind import Kind, Witness
from dokind.typeclasses.eq import Eq
from dokind.typeclasses.functor import Functor
from dokind.typeclasses.monad import Monad
from dokind.typeclasses.semigroup import Semigroup

if TYPE_CHECKING:
    from dokind.data.either import Either
    from dokind.data.option import Option

L = TypeVar("L")
L_co = TypeVar("L_co", covariant=True)
R = TypeVar("R")
R_co = TypeVar("R_co", covariant=True)
U = TypeVar("U")
V = TypeVar("V")


class ForIor(Witness):
    """Witness for :class:`Ior` partially applied to its left type."""


class Ior(Kind[ForIor, R_co], Generic[L_co, R_co]):
    """Inclusive-or: ``IorLeft``, ``IorRight`` or ``IorBoth``."""

    __slots__ = ()

    witness = ForIor

    @staticmethod
    def left(value: U) -> Ior[U, Any]:
        return IorLeft(value)

    @staticmethod
    def right(value: U) -> Ior[Any, U]:
        return IorRight(value)

    @staticmethod
    def both(left: U, right: V) -> Ior[U, V]:
        return IorBoth(left, right)

    @staticmethod
    def from_options(left: Option[U], right: Option[V]) -> Option[Ior[U, V]]:
        """Build an ``Ior`` from two options; ``Nothing`` when both are empty."""

        from dokind.data.option import NOTHING, Some

        if left.is_some() and right.is_some():
            return Some(IorBoth(left.get(), right.get()))
        if left.is_some():
            return Some(IorLeft(left.get()))
        if right.is_some():
            return Some(IorRight(right.get()))
        return NOTHING

    def is_left(self) -> bool:
        return isinstance(self, IorLeft)

    def is_right(self) -> bool:
        return isinstance(self, IorRight)

    def is_both(self) -> bool:
        return isinstance(self, IorBoth)

    def fold(
        self,
        if_left: Callable[[L_co], U],
        if_right: Callable[[R_co], U],
        if_both: Callable[[L_co, R_co], U],
    ) -> U:
        """Total pattern match: one handler per variant, all three required."""

        if isinstance(self, IorLeft):
            return if_left(self.value)
        if isinstance(self, IorRight):
            return if_right(self.value)
        if isinstance(self, IorBoth):
            return if_both(self.left_value, self.right_value)
        raise TypeError(f"Unknown Ior variant: {type(self).__name__}")

    def bimap(
        self, if_left: Callable[[L_co], U], if_right: Callable[[R_co], V]
    ) -> Ior[U, V]:
        return self.fold(
            lambda left: IorLeft(if_left(left)),
            lambda right: IorRight(if_right(right)),
            lambda left, right: IorBoth(if_left(left), if_right(right)),
        )

    def map(self, f: Callable[[R_co], U]) -> Ior[L_co, U]:
        return self.bimap(lambda left: left, f)

    def map_left(self, f: Callable[[L_co], U]) -> Ior[U, R_co]:
        return self.bimap(f, lambda right: right)

    def flat_map(
        self, f: Callable[[R_co], Ior[L_co, U]], semigroup: Semigroup[L_co]
    ) -> Ior[L_co, U]:
        """Sequence on the right side, accumulating lefts with ``semigroup``.

        Only ``IorLeft`` stops the chain; a left carried by ``IorBoth`` is
        combined with whatever left the continuation produces.
        """

        if isinstance(self, IorLeft):
            return self  # type: ignore[return-value]
        if isinstance(self, IorRight):
            return _expect_ior(f(self.value))
        if not isinstance(self, IorBoth):
            raise TypeError(f"Unknown Ior variant: {type(self).__name__}")
        carried = self.left_value
        return _expect_ior(f(self.right_value)).fold(
            lambda left: IorLeft(semigroup.combine(carried, left)),
            lambda right: IorBoth(carried, right),
            lambda left, right: IorBoth(semigroup.combine(carried, left), right),
        )

    def swap(self) -> Ior[R_co, L_co]:
        return self.fold(
            IorRight, IorLeft, lambda left, right: IorBoth(right, left)
        )

    def to_either(self) -> Either[L_co, R_co]:
        """Lossy conversion: ``IorBoth(l, r)`` becomes ``Right(r)``."""

        from dokind.data.either import Left, Right

        return self.fold(Left, Right, lambda _left, right: Right(right))

    def to_option(self) -> Option[R_co]:
        from dokind.data.option import NOTHING, Some

        return self.fold(lambda _: NOTHING, Some, lambda _left, right: Some(right))

    def left_option(self) -> Option[L_co]:
        from dokind.data.option import NOTHING, Some

        return self.fold(Some, lambda _: NOTHING, lambda left, _right: Some(left))

    def pad(self) -> tuple[Option[L_co], Option[R_co]]:
        return (self.left_option(), self.to_option())

    # Instances

    @staticmethod
    def functor() -> IorFunctor:
        return _IOR_FUNCTOR

    @staticmethod
    def monad(semigroup: Semigroup[U]) -> IorMonad[U]:
        """Monad instance; needs a semigroup to merge accumulated lefts."""

        return IorMonad(semigroup)

    @staticmethod
    def eq(eq_left: Eq[U], eq_right: Eq[V]) -> IorEq[U, V]:
        return IorEq(eq_left, eq_right)


@dataclass(frozen=True)
class IorLeft(Ior[L, NoReturn], Generic[L]):
    """Only a left value."""

    value: L


@dataclass(frozen=True)
class IorRight(Ior[NoReturn, R], Generic[R]):
    """Only a right value."""

    value: R


@dataclass(frozen=True)
class IorBoth(Ior[L, R], Generic[L, R]):
    """A left and a right value at the same time."""

    left_value: L
    right_value: R


def _expect_ior(value: Any) -> Ior[Any, Any]:
    if not isinstance(value, Ior):
        raise TypeError("flat_map must return an Ior instance")
    return value


class IorFunctor(Functor[ForIor]):
    witness = ForIor

    def map(self, fa: Kind[ForIor, R], f: Callable[[R], U]) -> Ior[Any, U]:
        return Ior.fix(fa).map(f)


class IorMonad(Monad[ForIor], Generic[L]):
    witness = ForIor

    def __init__(self, semigroup: Semigroup[L]) -> None:
        self._semigroup = semigroup

    def pure(self, value: R) -> Ior[L, R]:
        return IorRight(value)

    def map(self, fa: Kind[ForIor, R], f: Callable[[R], U]) -> Ior[L, U]:
        return Ior.fix(fa).map(f)

    def flat_map(
        self, fa: Kind[ForIor, R], f: Callable[[R], Kind[ForIor, U]]
    ) -> Ior[L, U]:
        return Ior.fix(fa).flat_map(lambda value: Ior.fix(f(value)), self._semigroup)


class IorEq(Eq[Ior[L, R]]):
    def __init__(self, eq_left: Eq[L], eq_right: Eq[R]) -> None:
        self._eq_left = eq_left
        self._eq_right = eq_right

    def eqv(self, a: Ior[L, R], b: Ior[L, R]) -> bool:
        if isinstance(a, IorLeft) and isinstance(b, IorLeft):
            return self._eq_left.eqv(a.value, b.value)
        if isinstance(a, IorRight) and isinstance(b, IorRight):
            return self._eq_right.eqv(a.value, b.value)
        if isinstance(a, IorBoth) and isinstance(b, IorBoth):
            return self._eq_left.eqv(a.left_value, b.left_value) and self._eq_right.eqv(
                a.right_value, b.right_value
            )
        return False


_IOR_FUNCTOR: Final = IorFunctor()

__all__ = [
    "ForIor",
    "Ior",
    "IorBoth",
    "IorEq",
    "IorFunctor",
    "IorLeft",
    "IorMonad",
    "IorRight",
]
