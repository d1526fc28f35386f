"""
Higher-kinded type emulation for the dokind system.

Python generics cannot abstract over a type constructor: there is no way to
write ``F[int]`` for "some container of int" with ``F`` left open. dokind
works around this the same way typed FP libraries do in languages without
HKTs. Every container class derives from ``Kind[F, A]`` where ``F`` is a
*witness*: an empty marker class naming the container family.

    class ForOption(Witness): ...

    class Option(Kind[ForOption, A]):
        witness = ForOption

Polymorphic code receives and returns ``Kind[F, A]``; code that needs the
concrete API calls ``fix`` (or ``Option.fix``) to get the concrete class
back. Fixing to the wrong family raises ``WitnessMismatch``: it means the
program mixed values from two families, which is never recoverable.

Since the concrete classes are themselves ``Kind`` subclasses, ``widen`` and
``fix`` do not copy anything; they only check and re-type.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, TypeVar

from dokind.errors import WitnessMismatch
from dokind.utils import report_misuse

logger = logging.getLogger(__name__)

F = TypeVar("F")
A = TypeVar("A")
K = TypeVar("K", bound="Kind[Any, Any]")


class Witness:
    """Marker base class for container family tags.

    Witnesses are never instantiated; the class object itself is the tag.
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Witness:
        raise TypeError(f"{cls.__qualname__} is a witness tag and cannot be instantiated")


class Kind(Generic[F, A]):
    """Base class of every container: ``Kind[F, A]`` stands for ``F[A]``."""

    __slots__ = ()

    witness: ClassVar[type[Witness]]

    @classmethod
    def fix(cls: type[K], kind: Kind[Any, Any]) -> K:
        """Downcast ``kind`` to this concrete container class."""

        fixed = fix(kind, cls.witness)
        if not isinstance(fixed, cls):
            error = WitnessMismatch(cls, type(fixed), fixed)
            report_misuse(logger, error)
            raise error
        return fixed


def witness_of(kind: Kind[Any, Any]) -> type[Witness]:
    """Return the witness tag of ``kind``."""

    if not isinstance(kind, Kind):
        raise TypeError(f"Expected a Kind, got {type(kind).__name__}")
    return type(kind).witness


def widen(value: Kind[F, A]) -> Kind[F, A]:
    """View a concrete container as an opaque ``Kind`` handle."""

    if not isinstance(value, Kind):
        raise TypeError(
            f"{type(value).__name__} is not a Kind; wrap builtins first "
            "(ListK, SetK, Function1)"
        )
    return value


def fix(kind: Kind[F, A], witness: type[Witness]) -> Kind[F, A]:
    """Check that ``kind`` belongs to ``witness`` and return it unchanged."""

    actual = witness_of(kind)
    if actual is not witness:
        error = WitnessMismatch(witness, actual, kind)
        report_misuse(logger, error)
        raise error
    return kind


__all__ = ["Kind", "Witness", "fix", "widen", "witness_of"]
