"""
Explicit typeclass instance registry.

A ``Registry`` maps ``(capability, witness)`` pairs to instances. It is an
ordinary immutable value: ``register`` returns a new registry, and nothing
in dokind consults a registry behind the caller's back. Code that wants a
looked-up instance resolves it itself and passes it on as a parameter:

    registry = standard_registry()
    monad = registry.resolve(Monad, ForOption)
    program = greet(console, monad)

Resolution never searches across witnesses. When the exact pair is missing,
an instance registered for the *same* witness under a stronger capability
is accepted (a Monad is a Functor); otherwise ``CapabilityNotFound`` is
raised.

Keeping at most one canonical instance per pair is the caller's
responsibility. Registering a pair twice replaces the previous instance and
logs a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeVar

from frozendict import frozendict

from dokind.errors import CapabilityNotFound
from dokind.typeclasses.base import Typeclass
from dokind.utils import report_misuse, type_name

logger = logging.getLogger(__name__)

TC = TypeVar("TC", bound=Typeclass)

_Key = tuple[type[Typeclass], type]


class Registry:
    """Immutable mapping from (capability, witness) to an instance."""

    __slots__ = ("_entries",)

    def __init__(self, entries: frozendict[_Key, Typeclass] | None = None) -> None:
        self._entries: frozendict[_Key, Typeclass] = (
            entries if entries is not None else frozendict()
        )

    def register(
        self, capability: type[TC], witness: type, implementation: TC
    ) -> Registry:
        """Return a new registry with ``implementation`` added.

        Raises ``TypeError`` if ``implementation`` does not implement
        ``capability`` or declares a different witness.
        """

        if not (isinstance(capability, type) and issubclass(capability, Typeclass)):
            raise TypeError(f"{capability!r} is not a capability class")
        if not isinstance(implementation, capability):
            raise TypeError(
                f"{type_name(implementation)} does not implement {type_name(capability)}"
            )
        declared = implementation.witness
        if declared is not None and declared is not witness:
            raise TypeError(
                f"{type_name(implementation)} targets {type_name(declared)}, "
                f"not {type_name(witness)}"
            )

        key = (capability, witness)
        previous = self._entries.get(key)
        if previous is not None and previous is not implementation:
            logger.warning(
                "Replacing %s instance for %s: %r -> %r",
                type_name(capability),
                type_name(witness),
                previous,
                implementation,
            )
        return Registry(self._entries.set(key, implementation))

    def resolve(self, capability: type[TC], witness: type) -> TC:
        """Return the instance of ``capability`` for ``witness``."""

        exact = self._entries.get((capability, witness))
        if exact is not None:
            return exact  # type: ignore[return-value]

        for (registered, registered_witness), implementation in self._entries.items():
            if registered_witness is witness and isinstance(implementation, capability):
                logger.debug(
                    "Resolved %s for %s through %s",
                    type_name(capability),
                    type_name(witness),
                    type_name(registered),
                )
                return implementation  # type: ignore[return-value]

        error = CapabilityNotFound(capability, witness)
        report_misuse(logger, error)
        raise error

    def contains(self, capability: type[Typeclass], witness: type) -> bool:
        """True when ``resolve(capability, witness)`` would succeed."""

        try:
            self.resolve(capability, witness)
        except CapabilityNotFound:
            return False
        return True

    def __contains__(self, key: object) -> bool:
        """Exact-key membership, consistent with iteration and ``len``.

        ``(Functor, ForIO) in registry`` is False when only ``(Monad, ForIO)``
        was registered; use ``contains`` to apply the resolution rules.
        """

        return key in self._entries

    def __iter__(self) -> Iterator[_Key]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{type_name(capability)}[{type_name(witness)}]"
            for capability, witness in self._entries
        )
        return f"Registry({pairs})"


def standard_registry() -> Registry:
    """A fresh registry holding dokind's built-in instances.

    Each call builds a new value; there is no shared global registry.
    """

    from dokind.data.collections import ForListK, ForSetK, ListK, SetK
    from dokind.data.either import Either, ForEither
    from dokind.data.function1 import ForFunction1, Function1
    from dokind.data.io import IO, ForIO
    from dokind.data.ior import ForIor, Ior
    from dokind.data.option import ForOption, Option
    from dokind.data.result import ForResult, Result
    from dokind.data.state import ForState, State
    from dokind.data.try_ import ForTry, Try
    from dokind.typeclasses.functor import Functor
    from dokind.typeclasses.monad import Monad
    from dokind.typeclasses.monad_error import MonadError

    entries: list[tuple[type[Typeclass], type, Any]] = [
        (MonadError, ForOption, Option.monad_error()),
        (MonadError, ForEither, Either.monad_error()),
        (MonadError, ForTry, Try.monad_error()),
        (MonadError, ForResult, Result.monad_error()),
        (MonadError, ForIO, IO.monad_error()),
        (Monad, ForState, State.monad()),
        (Monad, ForListK, ListK.monad()),
        (Monad, ForFunction1, Function1.monad()),
        (Functor, ForSetK, SetK.functor()),
        (Functor, ForIor, Ior.functor()),
    ]
    registry = Registry()
    for capability, witness, implementation in entries:
        registry = registry.register(capability, witness, implementation)
    return registry


__all__ = ["Registry", "standard_registry"]
