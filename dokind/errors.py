"""Exceptions raised by dokind.

Only programming errors are raised: asking a handle for the wrong family,
asking a registry for an instance nobody registered, or running an IO whose
thunk failed. Business failures travel as values inside ``Left``,
``Failure`` or ``Err``.
"""

from __future__ import annotations

from typing import Any


class DokindError(Exception):
    """Base class for every exception raised by dokind itself."""


def _name(target: Any) -> str:
    return getattr(target, "__qualname__", None) or repr(target)


class WitnessMismatch(DokindError, TypeError):
    """Raised when a Kind handle is fixed to a family it does not belong to."""

    def __init__(self, expected: Any, actual: Any, value: Any = None) -> None:
        self.expected = expected
        self.actual = actual
        self.value = value
        super().__init__(
            f"Cannot fix Kind of witness {_name(actual)} as {_name(expected)}: {value!r}\n"
            "Hint: the value was produced by a different container family; "
            "check which instance built it."
        )


class CapabilityNotFound(DokindError, LookupError):
    """Raised when no instance is registered for a (capability, witness) pair."""

    def __init__(self, capability: Any, witness: Any) -> None:
        self.capability = capability
        self.witness = witness
        super().__init__(
            f"No {_name(capability)} instance registered for {_name(witness)}\n"
            f"Hint: registry.register({_name(capability)}, {_name(witness)}, instance) "
            "or pass the instance explicitly."
        )


class EffectFailure(DokindError, RuntimeError):
    """Raised by ``IO.unsafe_perform_io`` when a thunk in the description failed."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"IO failed: [{cause.__class__.__name__}] {cause}")


class UnwrapError(DokindError, ValueError):
    """Raised when a value is extracted from the empty/error variant."""


class InputExhausted(DokindError, LookupError):
    """Raised by ``StateConsole.get_string`` when no pending input is left."""


class ResultError(DokindError):
    """Carries a non-exception ``Err`` payload into ``Try``."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f"Result error: {error!r}")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ResultError) and other.error == self.error

    def __hash__(self) -> int:
        return hash((ResultError, repr(self.error)))


__all__ = [
    "CapabilityNotFound",
    "DokindError",
    "EffectFailure",
    "InputExhausted",
    "ResultError",
    "UnwrapError",
    "WitnessMismatch",
]
