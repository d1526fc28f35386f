"""
Result: success or a typed error, for interop with code using ``Ok``/``Err``.

Unlike ``Try``, the error payload can be any value. Conversions to the other
data types are provided so that callers returning ``Result`` can be consumed
by code written against ``Either``, ``Try`` or ``Option``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Generic, NoReturn, TypeVar, cast

from dokind.errors import ResultError, UnwrapError
from dokind.kind import Kind, Witness
from dokind.typeclasses.monad_error import MonadError

if TYPE_CHECKING:
    from dokind.data.either import Either
    from dokind.data.option import Option
    from dokind.data.try_ import Try

E = TypeVar("E")
E_co = TypeVar("E_co", covariant=True)
T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


class ForResult(Witness):
    """Witness for :class:`Result` partially applied to its error type."""


class Result(Kind[ForResult, T_co], Generic[E_co, T_co]):
    """Sum type representing either a successful value or an error."""

    __slots__ = ()

    witness = ForResult

    @staticmethod
    def ok(value: U) -> Result[Any, U]:
        return Ok(value)

    @staticmethod
    def err(error: U) -> Result[U, Any]:
        return Err(error)

    def is_ok(self) -> bool:
        """Return ``True`` when the result is successful."""

        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Return ``True`` when the result represents a failure."""

        return isinstance(self, Err)

    def fold(self, if_err: Callable[[E_co], U], if_ok: Callable[[T_co], U]) -> U:
        """Total pattern match: one handler per variant, both required."""

        if isinstance(self, Ok):
            return if_ok(self.value)
        return if_err(self.error)  # type: ignore[attr-defined]

    def unwrap(self) -> T_co:
        """Return the value or raise ``UnwrapError``."""

        if isinstance(self, Ok):
            return self.value
        raise UnwrapError(f"Called unwrap on {self!r}")

    def unwrap_err(self) -> E_co:
        """Return the error or raise ``UnwrapError`` if this is a success."""

        if isinstance(self, Err):
            return self.error
        raise UnwrapError("Called unwrap_err on Ok value")

    def unwrap_or(self, default: U) -> T_co | U:
        """Return the contained value, or ``default`` if this is an error."""

        if isinstance(self, Ok):
            return self.value
        return default

    def unwrap_or_else(self, default_fn: Callable[[E_co], U]) -> T_co | U:
        """Return the contained value, or compute a default from the error."""

        if isinstance(self, Ok):
            return self.value
        return default_fn(self.error)  # type: ignore[attr-defined]

    def map(self, f: Callable[[T_co], U]) -> Result[E_co, U]:
        """Apply ``f`` to the contained value if this is a success."""

        if isinstance(self, Ok):
            return Ok(f(self.value))
        return cast(Result[E_co, U], self)

    def map_err(self, f: Callable[[E_co], U]) -> Result[U, T_co]:
        """Apply ``f`` to the contained error if this is a failure."""

        if isinstance(self, Err):
            return Err(f(self.error))
        return cast(Result[U, T_co], self)

    def flat_map(self, f: Callable[[T_co], Result[Any, U]]) -> Result[Any, U]:
        """Chain computations that return ``Result``."""

        if isinstance(self, Ok):
            result = f(self.value)
            if not isinstance(result, Result):
                raise TypeError("flat_map must return a Result instance")
            return result
        return cast(Result[Any, U], self)

    def and_then(self, f: Callable[[T_co], Result[Any, U]]) -> Result[Any, U]:
        """Alias for :meth:`flat_map`."""

        return self.flat_map(f)

    def to_either(self) -> Either[E_co, T_co]:
        from dokind.data.either import Left, Right

        return self.fold(Left, Right)

    def to_try(self) -> Try[T_co]:
        """Convert to ``Try``; non-exception errors are wrapped in ``ResultError``."""

        from dokind.data.try_ import Failure, Success

        return self.fold(
            lambda error: Failure(error if isinstance(error, Exception) else ResultError(error)),
            Success,
        )

    def to_option(self) -> Option[T_co]:
        """Drop the error. Inverse of ``Option.to_result`` for unit errors."""

        from dokind.data.option import NOTHING, Some

        return self.fold(lambda _: NOTHING, Some)

    def __or__(self, other: Result[Any, U]) -> Result[E_co, T_co] | Result[Any, U]:
        """Return this result if it is ``Ok``, otherwise return ``other``.

        Example::

            Ok(1) | Ok(2)   # Ok(1)
            Err(e) | Ok(2)  # Ok(2)
            Err(e) | Err(f) # Err(f)
        """

        if isinstance(self, Ok):
            return self
        return other

    def __bool__(self) -> bool:
        """Truthiness matches :meth:`is_ok`."""

        return self.is_ok()

    # Instances

    @staticmethod
    def monad() -> ResultMonadError:
        return _RESULT_MONAD_ERROR

    @staticmethod
    def monad_error() -> ResultMonadError:
        return _RESULT_MONAD_ERROR


@dataclass(frozen=True)
class Ok(Result[NoReturn, T], Generic[T]):
    """Success result."""

    value: T


@dataclass(frozen=True)
class Err(Result[E, NoReturn], Generic[E]):
    """Error result."""

    error: E


class ResultMonadError(MonadError[ForResult, Any]):
    witness = ForResult

    def pure(self, value: T) -> Result[Any, T]:
        return Ok(value)

    def map(self, fa: Kind[ForResult, T], f: Callable[[T], U]) -> Result[Any, U]:
        return Result.fix(fa).map(f)

    def flat_map(
        self, fa: Kind[ForResult, T], f: Callable[[T], Kind[ForResult, U]]
    ) -> Result[Any, U]:
        return Result.fix(fa).flat_map(lambda value: Result.fix(f(value)))

    def raise_error(self, error: E) -> Result[E, Any]:
        return Err(error)

    def handle_error_with(
        self, fa: Kind[ForResult, T], f: Callable[[Any], Kind[ForResult, T]]
    ) -> Result[Any, T]:
        result = Result.fix(fa)
        if isinstance(result, Err):
            return Result.fix(f(result.error))
        return result


_RESULT_MONAD_ERROR: Final = ResultMonadError()

__all__ = [
    "Err",
    "ForResult",
    "Ok",
    "Result",
    "ResultMonadError",
]
