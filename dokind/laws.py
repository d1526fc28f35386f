"""
Functor and Monad law checks.

Each check takes an instance, sample inputs and an equality used to compare
the two sides. The default equality is ``==``, which works for the value
types (Option, Either, Try, ListK, ...). Containers that are descriptions
rather than values (IO, State, Function1) are compared by running them:

    check_monad_laws(
        State.monad(),
        fa=State.modify(lambda n: n + 1),
        a=3,
        f=lambda n: State.inspect(lambda s: s * n),
        g=lambda n: State.pure(n - 1),
        eq=lambda x, y: State.fix(x).run(10) == State.fix(y).run(10),
    )

A check returns ``None`` when the law holds and a ``LawViolation``
otherwise; the ``check_*_laws`` helpers collect every violation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from dokind.kind import Kind
from dokind.typeclasses.functor import Functor
from dokind.typeclasses.monad import Monad
from dokind.utils import type_name

F = TypeVar("F")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

KindEq = Callable[[Kind[Any, Any], Kind[Any, Any]], bool]


@dataclass(frozen=True)
class LawViolation:
    """The law that failed, for which instance, and both sides as observed."""

    law: str
    instance: str
    left: Any
    right: Any

    def __str__(self) -> str:
        return f"{self.instance}: {self.law} does not hold ({self.left!r} != {self.right!r})"


def _natural_eq(left: Kind[Any, Any], right: Kind[Any, Any]) -> bool:
    return bool(left == right)


def _check(
    law: str,
    instance: Any,
    left: Kind[Any, Any],
    right: Kind[Any, Any],
    eq: KindEq,
) -> LawViolation | None:
    if eq(left, right):
        return None
    return LawViolation(law, type_name(instance), left, right)


def functor_identity(
    functor: Functor[F], fa: Kind[F, A], eq: KindEq = _natural_eq
) -> LawViolation | None:
    """``map(fa, id) == fa``"""

    return _check("functor identity", functor, functor.map(fa, lambda a: a), fa, eq)


def functor_composition(
    functor: Functor[F],
    fa: Kind[F, A],
    f: Callable[[A], B],
    g: Callable[[B], C],
    eq: KindEq = _natural_eq,
) -> LawViolation | None:
    """``map(map(fa, f), g) == map(fa, g . f)``"""

    return _check(
        "functor composition",
        functor,
        functor.map(functor.map(fa, f), g),
        functor.map(fa, lambda a: g(f(a))),
        eq,
    )


def monad_left_identity(
    monad: Monad[F],
    a: A,
    f: Callable[[A], Kind[F, B]],
    eq: KindEq = _natural_eq,
) -> LawViolation | None:
    """``flat_map(pure(a), f) == f(a)``"""

    return _check("monad left identity", monad, monad.flat_map(monad.pure(a), f), f(a), eq)


def monad_right_identity(
    monad: Monad[F], fa: Kind[F, A], eq: KindEq = _natural_eq
) -> LawViolation | None:
    """``flat_map(fa, pure) == fa``"""

    return _check("monad right identity", monad, monad.flat_map(fa, monad.pure), fa, eq)


def monad_associativity(
    monad: Monad[F],
    fa: Kind[F, A],
    f: Callable[[A], Kind[F, B]],
    g: Callable[[B], Kind[F, C]],
    eq: KindEq = _natural_eq,
) -> LawViolation | None:
    """``flat_map(flat_map(fa, f), g) == flat_map(fa, a -> flat_map(f(a), g))``"""

    return _check(
        "monad associativity",
        monad,
        monad.flat_map(monad.flat_map(fa, f), g),
        monad.flat_map(fa, lambda a: monad.flat_map(f(a), g)),
        eq,
    )


def check_functor_laws(
    functor: Functor[F],
    fa: Kind[F, A],
    f: Callable[[A], B],
    g: Callable[[B], C],
    eq: KindEq = _natural_eq,
) -> list[LawViolation]:
    results = [
        functor_identity(functor, fa, eq),
        functor_composition(functor, fa, f, g, eq),
    ]
    return [violation for violation in results if violation is not None]


def check_monad_laws(
    monad: Monad[F],
    fa: Kind[F, A],
    a: A,
    f: Callable[[A], Kind[F, B]],
    g: Callable[[B], Kind[F, C]],
    eq: KindEq = _natural_eq,
) -> list[LawViolation]:
    """Run the Functor laws (through ``monad.map``) and the three Monad laws.

    ``f`` and ``g`` are Kleisli arrows. The composition law is checked with
    two fixed plain functions that accept any value.
    """

    results = [
        functor_identity(monad, fa, eq),
        functor_composition(monad, fa, lambda x: (x,), lambda t: t + t, eq),
        monad_left_identity(monad, a, f, eq),
        monad_right_identity(monad, fa, eq),
        monad_associativity(monad, fa, f, g, eq),
    ]
    return [violation for violation in results if violation is not None]


__all__ = [
    "LawViolation",
    "check_functor_laws",
    "check_monad_laws",
    "functor_composition",
    "functor_identity",
    "monad_associativity",
    "monad_left_identity",
    "monad_right_identity",
]
