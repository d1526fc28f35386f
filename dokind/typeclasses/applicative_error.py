"""ApplicativeError: an Applicative that can raise and recover from errors."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from dokind.kind import Kind
from dokind.typeclasses.applicative import Applicative

if TYPE_CHECKING:
    from dokind.data.either import Either
    from dokind.data.option import Option

F = TypeVar("F")
E = TypeVar("E")
A = TypeVar("A")


class ApplicativeError(Applicative[F], Generic[F, E]):
    """Errors of type ``E`` are raised into, and handled inside, the container.

    The error is a value of the container (``Left``, ``Failure``, ``Nothing``,
    a failing IO); nothing here raises a Python exception.
    """

    @abstractmethod
    def raise_error(self, error: E) -> Kind[F, Any]:
        """Build the failed container carrying ``error``."""

    @abstractmethod
    def handle_error_with(
        self, fa: Kind[F, A], f: Callable[[E], Kind[F, A]]
    ) -> Kind[F, A]:
        """Recover from a failed ``fa`` with another container."""

    def handle_error(self, fa: Kind[F, A], f: Callable[[E], A]) -> Kind[F, A]:
        return self.handle_error_with(fa, lambda error: self.pure(f(error)))

    def attempt(self, fa: Kind[F, A]) -> Kind[F, Either[E, A]]:
        """Expose the error as a value: ``F[A]`` becomes ``F[Either[E, A]]``."""

        from dokind.data.either import Left, Right

        return self.handle_error_with(
            self.map(fa, Right), lambda error: self.pure(Left(error))
        )

    def from_either(self, either: Either[E, A]) -> Kind[F, A]:
        return either.fold(self.raise_error, self.pure)

    def from_option(self, option: Option[A], if_none: Callable[[], E]) -> Kind[F, A]:
        return option.fold(lambda: self.raise_error(if_none()), self.pure)

    def catch_nonfatal(
        self,
        thunk: Callable[[], A],
        on_error: Callable[[Exception], E] | None = None,
    ) -> Kind[F, A]:
        """Call ``thunk`` now and capture an ``Exception`` as a raised error.

        Without ``on_error`` the exception itself becomes the error, which is
        only meaningful for instances whose ``E`` is ``Exception``.
        """

        try:
            value = thunk()
        except Exception as exc:
            return self.raise_error(on_error(exc) if on_error is not None else exc)
        return self.pure(value)


__all__ = ["ApplicativeError"]
