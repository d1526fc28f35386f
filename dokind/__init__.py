"""
dokind - Higher-kinded types, typeclasses and effects for Python.

Containers carry a witness tag so that programs can be written once against
a capability (Functor, Monad, MonadError, ...) and run with any container
family that provides it.

Example:
    >>> from dokind import Option, Either, binding
    >>>
    >>> def divide(monad, num, den):
    ...     if den == 0:
    ...         return monad.raise_error("Division by 0")
    ...     return monad.pure(num // den)
    >>>
    >>> divide(Either.monad_error(), 4, 0)
    Left(value='Division by 0')
"""

# Kind emulation
from dokind.kind import Kind, Witness, fix, widen, witness_of

# Data types
from dokind.data import (
    IO,
    NOTHING,
    Either,
    Err,
    Failure,
    ForEither,
    ForFunction1,
    ForIO,
    ForIor,
    ForListK,
    ForOption,
    ForResult,
    ForSetK,
    ForState,
    ForTry,
    Function1,
    Ior,
    IorBoth,
    IorLeft,
    IorRight,
    Left,
    ListK,
    Nothing,
    Ok,
    Option,
    Result,
    Right,
    SetK,
    Some,
    State,
    Success,
    Try,
    listk,
    setk,
)

# Capabilities
from dokind.typeclasses import (
    Applicative,
    ApplicativeError,
    Eq,
    Functor,
    Monad,
    MonadError,
    Monoid,
    Order,
    Semigroup,
    Typeclass,
    derive_applicative,
    derive_functor,
)

from dokind.comprehension import Binding, binding, comprehension
from dokind.console import (
    Console,
    IOConsole,
    StateConsole,
    TestData,
    greet,
    greet_comprehension,
)
from dokind.errors import (
    CapabilityNotFound,
    DokindError,
    EffectFailure,
    InputExhausted,
    ResultError,
    UnwrapError,
    WitnessMismatch,
)
from dokind.registry import Registry, standard_registry

__version__ = "0.1.0"

__all__ = [
    # Kind
    "Kind",
    "Witness",
    "fix",
    "widen",
    "witness_of",
    # Data
    "IO",
    "NOTHING",
    "Either",
    "Err",
    "Failure",
    "ForEither",
    "ForFunction1",
    "ForIO",
    "ForIor",
    "ForListK",
    "ForOption",
    "ForResult",
    "ForSetK",
    "ForState",
    "ForTry",
    "Function1",
    "Ior",
    "IorBoth",
    "IorLeft",
    "IorRight",
    "Left",
    "ListK",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Right",
    "SetK",
    "Some",
    "State",
    "Success",
    "Try",
    "listk",
    "setk",
    # Capabilities
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
    # Comprehensions
    "Binding",
    "binding",
    "comprehension",
    # Console
    "Console",
    "IOConsole",
    "StateConsole",
    "TestData",
    "greet",
    "greet_comprehension",
    # Errors
    "CapabilityNotFound",
    "DokindError",
    "EffectFailure",
    "InputExhausted",
    "ResultError",
    "UnwrapError",
    "WitnessMismatch",
    # Registry
    "Registry",
    "standard_registry",
]
