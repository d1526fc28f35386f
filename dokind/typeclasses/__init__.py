"""Capability descriptors (typeclasses) for the dokind system."""

from dokind.typeclasses.applicative import Applicative
from dokind.typeclasses.applicative_error import ApplicativeError
from dokind.typeclasses.base import Typeclass
from dokind.typeclasses.derive import derive_applicative, derive_functor
from dokind.typeclasses.eq import Eq
from dokind.typeclasses.functor import Functor
from dokind.typeclasses.monad import Monad
from dokind.typeclasses.monad_error import MonadError
from dokind.typeclasses.monoid import Monoid
from dokind.typeclasses.order import Order
from dokind.typeclasses.semigroup import Semigroup

__all__ = [
    "Applicative",
    "ApplicativeError",
    "Eq",
    "Functor",
    "Monad",
    "MonadError",
    "Monoid",
    "Order",
    "Semigroup",
    "Typeclass",
    "derive_applicative",
    "derive_functor",
]
