"""MonadError: a Monad with ApplicativeError's raising and handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Generic, TypeVar

from dokind.kind import Kind
from dokind.typeclasses.applicative_error import ApplicativeError
from dokind.typeclasses.monad import Monad

if TYPE_CHECKING:
    from dokind.data.either import Either

F = TypeVar("F")
E = TypeVar("E")
A = TypeVar("A")


class MonadError(Monad[F], ApplicativeError[F, E], Generic[F, E]):
    """Refines both Monad and ApplicativeError; adds nothing abstract."""

    def ensure(
        self,
        fa: Kind[F, A],
        error: Callable[[], E],
        predicate: Callable[[A], bool],
    ) -> Kind[F, A]:
        """Turn a successful ``fa`` into a failure when ``predicate`` rejects it."""

        return self.flat_map(
            fa, lambda a: self.pure(a) if predicate(a) else self.raise_error(error())
        )

    def rethrow(self, fea: Kind[F, Either[E, A]]) -> Kind[F, A]:
        """Inverse of ``attempt``."""

        return self.flat_map(fea, self.from_either)


__all__ = ["MonadError"]
