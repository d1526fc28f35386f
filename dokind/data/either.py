"""Either: a value of one of two types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Generic, NoReturn, TypeVar

from dokind.errors import UnwrapError
from dokind.kind import Kind, Witness
from dokind.typeclasses.eq import Eq
from dokind.typeclasses.monad_error import MonadError

if TYPE_CHECKING:
    from dokind.data.option import Option

L = TypeVar("L")
L_co = TypeVar("L_co", covariant=True)
R = TypeVar("R")
R_co = TypeVar("R_co", covariant=True)
U = TypeVar("U")
V = TypeVar("V")


class ForEither(Witness):
    """Witness for :class:`Either` partially applied to its left type."""


class Either(Kind[ForEither, R_co], Generic[L_co, R_co]):
    """Sum type holding either a ``Left`` or a ``Right``.

    Neither side is preferred by the type itself. By convention ``Left``
    carries the error or alternate branch, so ``map`` and ``flat_map`` act on
    ``Right`` and pass a ``Left`` through untouched.
    """

    __slots__ = ()

    witness = ForEither

    @staticmethod
    def left(value: U) -> Either[U, Any]:
        return Left(value)

    @staticmethod
    def right(value: U) -> Either[Any, U]:
        return Right(value)

    @staticmethod
    def cond(test: bool, right: Callable[[], U], left: Callable[[], V]) -> Either[V, U]:
        """``Right(right())`` when ``test`` holds, ``Left(left())`` otherwise."""

        if test:
            return Right(right())
        return Left(left())

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def fold(self, if_left: Callable[[L_co], U], if_right: Callable[[R_co], U]) -> U:
        """Total pattern match: one handler per variant, both required."""

        if isinstance(self, Right):
            return if_right(self.value)
        return if_left(self.value)  # type: ignore[attr-defined]

    def map(self, f: Callable[[R_co], U]) -> Either[L_co, U]:
        if isinstance(self, Right):
            return Right(f(self.value))
        return self  # type: ignore[return-value]

    def map_left(self, f: Callable[[L_co], U]) -> Either[U, R_co]:
        if isinstance(self, Left):
            return Left(f(self.value))
        return self  # type: ignore[return-value]

    def bimap(
        self, if_left: Callable[[L_co], U], if_right: Callable[[R_co], V]
    ) -> Either[U, V]:
        return self.fold(lambda value: Left(if_left(value)), lambda value: Right(if_right(value)))

    def flat_map(self, f: Callable[[R_co], Either[Any, U]]) -> Either[Any, U]:
        """Chain computations that return ``Either``; ``Left`` short-circuits."""

        if isinstance(self, Right):
            result = f(self.value)
            if not isinstance(result, Either):
                raise TypeError("flat_map must return an Either instance")
            return result
        return self  # type: ignore[return-value]

    def swap(self) -> Either[R_co, L_co]:
        return self.fold(Right, Left)

    def exists(self, predicate: Callable[[R_co], bool]) -> bool:
        return isinstance(self, Right) and predicate(self.value)

    def filter_or_else(
        self, predicate: Callable[[R_co], bool], zero: Callable[[], U]
    ) -> Either[L_co | U, R_co]:
        """Turn a ``Right`` that fails ``predicate`` into ``Left(zero())``."""

        if isinstance(self, Right) and not predicate(self.value):
            return Left(zero())
        return self

    def get(self) -> R_co:
        """Return the right value or raise ``UnwrapError``."""

        if isinstance(self, Right):
            return self.value
        raise UnwrapError(f"Called get on {self!r}")

    def get_or_else(self, default: U) -> R_co | U:
        if isinstance(self, Right):
            return self.value
        return default

    def to_option(self) -> Option[R_co]:
        from dokind.data.option import NOTHING, Some

        if isinstance(self, Right):
            return Some(self.value)
        return NOTHING

    # Instances

    @staticmethod
    def functor() -> EitherMonadError:
        return _EITHER_MONAD_ERROR

    @staticmethod
    def applicative() -> EitherMonadError:
        return _EITHER_MONAD_ERROR

    @staticmethod
    def monad() -> EitherMonadError:
        return _EITHER_MONAD_ERROR

    @staticmethod
    def applicative_error() -> EitherMonadError:
        return _EITHER_MONAD_ERROR

    @staticmethod
    def monad_error() -> EitherMonadError:
        return _EITHER_MONAD_ERROR

    @staticmethod
    def eq(eq_left: Eq[U], eq_right: Eq[V]) -> EitherEq[U, V]:
        return EitherEq(eq_left, eq_right)


@dataclass(frozen=True)
class Left(Either[L, NoReturn], Generic[L]):
    """Left branch, conventionally the error."""

    value: L


@dataclass(frozen=True)
class Right(Either[NoReturn, R], Generic[R]):
    """Right branch, conventionally the success."""

    value: R


class EitherMonadError(MonadError[ForEither, Any]):
    """Either instances; ``raise_error`` builds a ``Left``."""

    witness = ForEither

    def pure(self, value: R) -> Either[Any, R]:
        return Right(value)

    def map(self, fa: Kind[ForEither, R], f: Callable[[R], U]) -> Either[Any, U]:
        return Either.fix(fa).map(f)

    def flat_map(
        self, fa: Kind[ForEither, R], f: Callable[[R], Kind[ForEither, U]]
    ) -> Either[Any, U]:
        return Either.fix(fa).flat_map(lambda value: Either.fix(f(value)))

    def raise_error(self, error: L) -> Either[L, Any]:
        return Left(error)

    def handle_error_with(
        self, fa: Kind[ForEither, R], f: Callable[[Any], Kind[ForEither, R]]
    ) -> Either[Any, R]:
        either = Either.fix(fa)
        if isinstance(either, Left):
            return Either.fix(f(either.value))
        return either


class EitherEq(Eq[Either[L, R]]):
    def __init__(self, eq_left: Eq[L], eq_right: Eq[R]) -> None:
        self._eq_left = eq_left
        self._eq_right = eq_right

    def eqv(self, a: Either[L, R], b: Either[L, R]) -> bool:
        if isinstance(a, Left) and isinstance(b, Left):
            return self._eq_left.eqv(a.value, b.value)
        if isinstance(a, Right) and isinstance(b, Right):
            return self._eq_right.eqv(a.value, b.value)
        return False


_EITHER_MONAD_ERROR: Final = EitherMonadError()

__all__ = [
    "Either",
    "EitherEq",
    "EitherMonadError",
    "ForEither",
    "Left",
    "Right",
]
