"""Option: a value that may be absent."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Generic, NoReturn, TypeVar

from dokind.errors import UnwrapError
from dokind.kind import Kind, Witness
from dokind.typeclasses.eq import Eq
from dokind.typeclasses.monad_error import MonadError
from dokind.typeclasses.monoid import Monoid
from dokind.typeclasses.semigroup import Semigroup

if TYPE_CHECKING:
    from dokind.data.either import Either
    from dokind.data.result import Result

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")
L = TypeVar("L")


class ForOption(Witness):
    """Witness for :class:`Option`."""


class Option(Kind[ForOption, T_co]):
    """Optional value that is either ``Some(value)`` or ``Nothing``.

    ``Option`` and Python's ``T | None`` are isomorphic through
    :meth:`from_optional` and :meth:`to_optional` as long as the payload is
    not ``None`` itself: ``Some(None).to_optional()`` is ``None``, which
    converts back to ``Nothing``.
    """

    __slots__ = ()

    witness = ForOption

    @staticmethod
    def some(value: U) -> Option[U]:
        return Some(value)

    @staticmethod
    def none() -> Option[Any]:
        return NOTHING

    @classmethod
    def from_optional(cls, value: U | None) -> Option[U]:
        """Create an ``Option`` from an optional Python value."""

        if value is None:
            return NOTHING
        return Some(value)

    def to_optional(self) -> T_co | None:
        """Convert to a Python optional value."""

        if isinstance(self, Some):
            return self.value
        return None

    def is_some(self) -> bool:
        """Return ``True`` when the value is present."""

        return isinstance(self, Some)

    def is_none(self) -> bool:
        """Return ``True`` when no value is present."""

        return isinstance(self, Nothing)

    def fold(self, if_none: Callable[[], U], if_some: Callable[[T_co], U]) -> U:
        """Total pattern match: one handler per variant, both required."""

        if isinstance(self, Some):
            return if_some(self.value)
        return if_none()

    def map(self, func: Callable[[T_co], U]) -> Option[U]:
        """Apply ``func`` to the contained value when present."""

        if isinstance(self, Some):
            return Some(func(self.value))
        return NOTHING

    def flat_map(self, func: Callable[[T_co], Option[U]]) -> Option[U]:
        """Chain computations that themselves return ``Option``."""

        if isinstance(self, Some):
            result = func(self.value)
            if not isinstance(result, Option):
                raise TypeError("flat_map must return an Option instance")
            return result
        return NOTHING

    def filter(self, predicate: Callable[[T_co], bool]) -> Option[T_co]:
        """Return ``self`` if the predicate passes, otherwise ``Nothing``."""

        if isinstance(self, Some) and predicate(self.value):
            return self
        return NOTHING

    def exists(self, predicate: Callable[[T_co], bool]) -> bool:
        return isinstance(self, Some) and predicate(self.value)

    def get(self) -> T_co:
        """Return the contained value or raise ``UnwrapError``."""

        if isinstance(self, Some):
            return self.value
        raise UnwrapError("Called get on Nothing")

    def get_or_else(self, default: U) -> T_co | U:
        """Return the value if present, otherwise ``default``."""

        if isinstance(self, Some):
            return self.value
        return default

    def or_else(self, alternative: Callable[[], Option[U]]) -> Option[T_co] | Option[U]:
        """Return ``self`` if present, otherwise the lazily built alternative."""

        if isinstance(self, Some):
            return self
        return alternative()

    def to_either(self, if_none: Callable[[], L]) -> Either[L, T_co]:
        from dokind.data.either import Left, Right

        if isinstance(self, Some):
            return Right(self.value)
        return Left(if_none())

    def to_result(self) -> Result[None, T_co]:
        """Convert to a ``Result`` whose error is unit (``None``)."""

        from dokind.data.result import Err, Ok

        if isinstance(self, Some):
            return Ok(self.value)
        return Err(None)

    def to_list(self) -> list[T_co]:
        if isinstance(self, Some):
            return [self.value]
        return []

    def __bool__(self) -> bool:
        """Truthiness matches :meth:`is_some`."""

        return self.is_some()

    # Instances

    @staticmethod
    def functor() -> OptionMonadError:
        return _OPTION_MONAD_ERROR

    @staticmethod
    def applicative() -> OptionMonadError:
        return _OPTION_MONAD_ERROR

    @staticmethod
    def monad() -> OptionMonadError:
        return _OPTION_MONAD_ERROR

    @staticmethod
    def applicative_error() -> OptionMonadError:
        return _OPTION_MONAD_ERROR

    @staticmethod
    def monad_error() -> OptionMonadError:
        return _OPTION_MONAD_ERROR

    @staticmethod
    def eq(eq_value: Eq[U]) -> OptionEq[U]:
        return OptionEq(eq_value)

    @staticmethod
    def monoid(semigroup: Semigroup[U]) -> OptionMonoid[U]:
        return OptionMonoid(semigroup)


@dataclass(frozen=True)
class Some(Option[T], Generic[T]):
    """Presence of a value."""

    value: T


class Nothing(Option[NoReturn]):
    """Singleton representing the absence of a value."""

    __slots__ = ()
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing()"

    def __reduce__(self) -> tuple[Any, ...]:
        return (Nothing, ())


NOTHING: Final[Option[NoReturn]] = Nothing()


class OptionMonadError(MonadError[ForOption, None]):
    """Option instances; the error type is unit, raised as ``Nothing``."""

    witness = ForOption

    def pure(self, value: T) -> Option[T]:
        return Some(value)

    def map(self, fa: Kind[ForOption, T], f: Callable[[T], U]) -> Option[U]:
        return Option.fix(fa).map(f)

    def flat_map(
        self, fa: Kind[ForOption, T], f: Callable[[T], Kind[ForOption, U]]
    ) -> Option[U]:
        return Option.fix(fa).flat_map(lambda value: Option.fix(f(value)))

    def raise_error(self, error: None = None) -> Option[Any]:
        return NOTHING

    def handle_error_with(
        self, fa: Kind[ForOption, T], f: Callable[[None], Kind[ForOption, T]]
    ) -> Option[T]:
        option = Option.fix(fa)
        if isinstance(option, Some):
            return option
        return Option.fix(f(None))


class OptionEq(Eq[Option[T]]):
    def __init__(self, eq_value: Eq[T]) -> None:
        self._eq_value = eq_value

    def eqv(self, a: Option[T], b: Option[T]) -> bool:
        if isinstance(a, Some) and isinstance(b, Some):
            return self._eq_value.eqv(a.value, b.value)
        return a.is_none() and b.is_none()


class OptionMonoid(Monoid[Option[T]]):
    """Combines present values with the inner semigroup; ``Nothing`` is empty."""

    def __init__(self, semigroup: Semigroup[T]) -> None:
        self._semigroup = semigroup

    def empty(self) -> Option[T]:
        return NOTHING

    def combine(self, a: Option[T], b: Option[T]) -> Option[T]:
        if isinstance(a, Some) and isinstance(b, Some):
            return Some(self._semigroup.combine(a.value, b.value))
        return a if isinstance(a, Some) else b


_OPTION_MONAD_ERROR: Final = OptionMonadError()

__all__ = [
    "NOTHING",
    "ForOption",
    "Nothing",
    "Option",
    "OptionEq",
    "OptionMonadError",
    "OptionMonoid",
    "Some",
]
