"""Try: the outcome of a computation that may raise."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Generic, NoReturn, TypeVar

from dokind.errors import UnwrapError
from dokind.kind import Kind, Witness
from dokind.typeclasses.monad_error import MonadError

if TYPE_CHECKING:
    from dokind.data.either import Either
    from dokind.data.option import Option

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


class ForTry(Witness):
    """Witness for :class:`Try`."""


class Try(Kind[ForTry, T_co]):
    """``Success(value)`` or ``Failure(error)`` where ``error`` is an ``Exception``."""

    __slots__ = ()

    witness = ForTry

    @staticmethod
    def success(value: U) -> Try[U]:
        return Success(value)

    @staticmethod
    def failure(error: Exception) -> Try[Any]:
        return Failure(error)

    @staticmethod
    def invoke(thunk: Callable[[], U]) -> Try[U]:
        """Call ``thunk`` and capture its outcome.

        Any ``Exception`` becomes a ``Failure``; nothing escapes. Exceptions
        outside the ``Exception`` hierarchy (``KeyboardInterrupt``,
        ``SystemExit``) are not captured.
        """

        try:
            return Success(thunk())
        except Exception as exc:
            return Failure(exc)

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def fold(
        self, if_failure: Callable[[Exception], U], if_success: Callable[[T_co], U]
    ) -> U:
        """Total pattern match: one handler per variant, both required."""

        if isinstance(self, Success):
            return if_success(self.value)
        return if_failure(self.error)  # type: ignore[attr-defined]

    def map(self, f: Callable[[T_co], U]) -> Try[U]:
        if isinstance(self, Success):
            return Success(f(self.value))
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T_co], Try[U]]) -> Try[U]:
        if isinstance(self, Success):
            result = f(self.value)
            if not isinstance(result, Try):
                raise TypeError("flat_map must return a Try instance")
            return result
        return self  # type: ignore[return-value]

    def filter(self, predicate: Callable[[T_co], bool]) -> Try[T_co]:
        """Fail with ``UnwrapError`` when a success does not satisfy ``predicate``."""

        if isinstance(self, Success) and not predicate(self.value):
            return Failure(UnwrapError(f"Predicate does not hold for {self.value!r}"))
        return self

    def recover(self, f: Callable[[Exception], U]) -> Try[T_co | U]:
        """Turn a failure into a success computed from the error."""

        if isinstance(self, Failure):
            return Success(f(self.error))
        return self

    def recover_with(self, f: Callable[[Exception], Try[U]]) -> Try[T_co | U]:
        if isinstance(self, Failure):
            return f(self.error)
        return self

    def get(self) -> T_co:
        """Return the value or raise the stored error."""

        if isinstance(self, Success):
            return self.value
        raise self.error  # type: ignore[attr-defined]

    def get_or_else(self, default: U) -> T_co | U:
        if isinstance(self, Success):
            return self.value
        return default

    def to_either(self) -> Either[Exception, T_co]:
        from dokind.data.either import Left, Right

        return self.fold(Left, Right)

    def to_option(self) -> Option[T_co]:
        from dokind.data.option import NOTHING, Some

        return self.fold(lambda _: NOTHING, Some)

    # Instances

    @staticmethod
    def functor() -> TryMonadError:
        return _TRY_MONAD_ERROR

    @staticmethod
    def applicative() -> TryMonadError:
        return _TRY_MONAD_ERROR

    @staticmethod
    def monad() -> TryMonadError:
        return _TRY_MONAD_ERROR

    @staticmethod
    def applicative_error() -> TryMonadError:
        return _TRY_MONAD_ERROR

    @staticmethod
    def monad_error() -> TryMonadError:
        return _TRY_MONAD_ERROR


@dataclass(frozen=True)
class Success(Try[T], Generic[T]):
    """Successful outcome."""

    value: T


@dataclass(frozen=True)
class Failure(Try[NoReturn]):
    """Failed outcome."""

    error: Exception

    def __post_init__(self) -> None:
        if not isinstance(self.error, Exception):
            raise TypeError("Failure expects an Exception instance")


class TryMonadError(MonadError[ForTry, Exception]):
    witness = ForTry

    def pure(self, value: T) -> Try[T]:
        return Success(value)

    def map(self, fa: Kind[ForTry, T], f: Callable[[T], U]) -> Try[U]:
        return Try.fix(fa).map(f)

    def flat_map(self, fa: Kind[ForTry, T], f: Callable[[T], Kind[ForTry, U]]) -> Try[U]:
        return Try.fix(fa).flat_map(lambda value: Try.fix(f(value)))

    def raise_error(self, error: Exception) -> Try[Any]:
        return Failure(error)

    def handle_error_with(
        self, fa: Kind[ForTry, T], f: Callable[[Exception], Kind[ForTry, T]]
    ) -> Try[T]:
        return Try.fix(fa).recover_with(lambda error: Try.fix(f(error)))


_TRY_MONAD_ERROR: Final = TryMonadError()

__all__ = [
    "Failure",
    "ForTry",
    "Success",
    "Try",
    "TryMonadError",
]
