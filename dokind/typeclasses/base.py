"""Common base for capability descriptors."""

from __future__ import annotations

from abc import ABC
from typing import ClassVar

from dokind.kind import Witness


class Typeclass(ABC):
    """A named contract: a set of operations plus the laws they obey.

    Instances of container capabilities (Functor and its refinements) set
    ``witness`` to the family they operate on. Value capabilities (Eq, Order,
    Semigroup, Monoid) describe plain Python types and leave it as ``None``.

    At most one canonical instance per (capability, witness) pair should be
    in scope for a call. dokind does not enforce this; callers choose which
    instance they pass.
    """

    witness: ClassVar[type[Witness] | None] = None

    def __repr__(self) -> str:
        witness = self.witness.__qualname__ if self.witness is not None else "-"
        return f"{type(self).__qualname__}(witness={witness})"


__all__ = ["Typeclass"]
