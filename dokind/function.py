"""
Function composition, currying and partial application.

    compose(f2, f1)(x) == f2(f1(x))
    and_then(f1, f2)(x) == f2(f1(x))
    curry(operator.add)(17)(3) == 20
    reverse(operator.sub)(13, 40) == 27
    pipe(1, add17, double) == 36
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

from dokind.data.function1 import Function1

A = TypeVar("A")
B = TypeVar("B")


def identity(value: A) -> A:
    return value


def constant(value: A) -> Callable[..., A]:
    """Function ignoring its arguments and always returning ``value``."""

    def _constant(*_args: Any, **_kwargs: Any) -> A:
        return value

    return _constant


def compose(*functions: Callable[[Any], Any]) -> Function1[Any, Any]:
    """Right-to-left composition: the last function runs first."""

    if not functions:
        return Function1(identity)
    return Function1(
        lambda value: reduce(lambda acc, f: f(acc), reversed(functions), value)
    )


def and_then(*functions: Callable[[Any], Any]) -> Function1[Any, Any]:
    """Left-to-right composition: the first function runs first."""

    return compose(*reversed(functions))


def _arity(f: Callable[..., Any]) -> int:
    try:
        signature = inspect.signature(f)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"Cannot infer the arity of {f!r}; pass arity= explicitly"
        ) from exc
    positional = [
        param
        for param in signature.parameters.values()
        if param.kind
        in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        and param.default is inspect.Parameter.empty
    ]
    return len(positional)


def curry(f: Callable[..., B], arity: int | None = None) -> Callable[[Any], Any]:
    """``(A, B) -> C`` becomes ``A -> B -> C``."""

    count = _arity(f) if arity is None else arity
    if count < 1:
        raise ValueError("curry needs a function of at least one argument")

    def collect(args: tuple[Any, ...]) -> Callable[[Any], Any]:
        def take(value: Any) -> Any:
            bound = args + (value,)
            if len(bound) == count:
                return f(*bound)
            return collect(bound)

        return take

    return collect(())


def uncurry(f: Callable[[Any], Any]) -> Callable[..., Any]:
    """``A -> B -> C`` becomes ``(A, B) -> C``."""

    def uncurried(*args: Any) -> Any:
        return reduce(lambda g, value: g(value), args, f)

    return uncurried


def reverse(f: Callable[..., B]) -> Callable[..., B]:
    """Same function with its positional arguments in reverse order."""

    def reversed_args(*args: Any) -> B:
        return f(*reversed(args))

    return reversed_args


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """Feed ``value`` through ``functions`` from left to right."""

    return reduce(lambda acc, f: f(acc), functions, value)


__all__ = [
    "and_then",
    "compose",
    "constant",
    "curry",
    "identity",
    "pipe",
    "reverse",
    "uncurry",
]
