"""
Monad comprehensions for the dokind system.

Three spellings of the same thing, all of which desugar to nested
``monad.flat_map`` calls, left to right:

    # 1. binding: step i receives the i values bound before it
    binding(
        monad,
        lambda: console.put_string("What's your name?"),
        lambda _: console.get_string(),
        lambda _, name: console.put_string(f"Hello {name}!"),
    )

    # 2. Binding: the same, as a builder
    Binding(monad).bind(...).bind(...).run()

    # 3. comprehension: generator syntax, one yield per bind
    @comprehension(monad)
    def greet(console):
        yield console.put_string("What's your name?")
        name = yield console.get_string()
        yield console.put_string(f"Hello {name}!")

None of them adds semantics: effects happen in exactly the order the
equivalent hand-written ``flat_map`` chain would produce.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Generator
from dataclasses import dataclass, replace
from functools import wraps
from typing import Any, Generic, ParamSpec, TypeVar

from dokind.kind import Kind
from dokind.typeclasses.monad import Monad

logger = logging.getLogger(__name__)

F = TypeVar("F")
P = ParamSpec("P")
T = TypeVar("T")


def binding(
    monad: Monad[F],
    *steps: Callable[..., Kind[F, Any]],
    yield_: Callable[..., T] | None = None,
) -> Kind[F, Any]:
    """Sequence ``steps`` with ``monad``.

    Step ``i`` (0-based) is called with the ``i`` values bound by the steps
    before it. Without ``yield_`` the result is the last step's Kind; with
    it, ``yield_`` receives every bound value and its return value is the
    comprehension's result.
    """

    if not steps:
        raise ValueError("binding requires at least one step")
    for step in steps:
        if not callable(step):
            raise TypeError(f"binding steps must be callable; got {step!r}")

    last = len(steps) - 1

    def bind_from(index: int, bound: tuple[Any, ...]) -> Kind[F, Any]:
        kind = _expect_kind(steps[index](*bound), index)
        if index == last:
            if yield_ is None:
                return kind
            return monad.map(kind, lambda value: yield_(*bound, value))
        return monad.flat_map(kind, lambda value: bind_from(index + 1, bound + (value,)))

    return bind_from(0, ())


@dataclass(frozen=True)
class Binding(Generic[F]):
    """Immutable builder for :func:`binding`."""

    monad: Monad[F]
    steps: tuple[Callable[..., Kind[F, Any]], ...] = ()

    def bind(self, step: Callable[..., Kind[F, Any]]) -> Binding[F]:
        """Return a new builder with ``step`` appended."""

        return replace(self, steps=self.steps + (step,))

    def yield_(self, f: Callable[..., T]) -> Kind[F, T]:
        return binding(self.monad, *self.steps, yield_=f)

    def run(self) -> Kind[F, Any]:
        return binding(self.monad, *self.steps)


def comprehension(
    monad: Monad[F],
) -> Callable[[Callable[P, Generator[Kind[F, Any], Any, T]]], Callable[P, Kind[F, T]]]:
    """
    Decorator turning a generator function into a function returning a Kind.

    Each ``yield`` of a Kind is one ``flat_map``; the value sent back into
    the generator is the bound value, and the generator's return value is
    lifted with ``monad.pure``.

    Python generators are single-use, while a continuation may be invoked
    many times (``ListK``) or the resulting Kind run many times (``State``,
    ``IO``). Each continuation therefore rebuilds the generator and replays
    the values bound so far. The generator body must be pure between
    yields; effects belong in the yielded Kinds. A body that finishes early on
    replay, such as one consuming an iterator argument, raises
    ``RuntimeError``.
    """

    def decorator(
        func: Callable[P, Generator[Kind[F, Any], Any, T]],
    ) -> Callable[P, Kind[F, T]]:
        if not inspect.isgeneratorfunction(func):
            logger.debug("comprehension applied to non-generator %r", func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Kind[F, T]:
            def resume(history: tuple[Any, ...]) -> Kind[F, T]:
                gen_or_value = func(*args, **kwargs)
                if not inspect.isgenerator(gen_or_value):
                    return monad.pure(gen_or_value)

                gen = gen_or_value
                sent = 0
                try:
                    current = next(gen)
                    for value in history:
                        sent += 1
                        current = gen.send(value)
                except StopIteration as stop_exc:
                    if sent < len(history):
                        raise RuntimeError(
                            f"comprehension body {func.__qualname__} is not replayable: "
                            f"it returned before receiving all {len(history)} bound values "
                            "(generator bodies must not consume their arguments)"
                        ) from None
                    return monad.pure(stop_exc.value)

                kind = _expect_kind(current, len(history))
                return monad.flat_map(kind, lambda value: resume(history + (value,)))

            return resume(())

        return wrapper

    return decorator


def _expect_kind(value: Any, index: int) -> Kind[Any, Any]:
    if not isinstance(value, Kind):
        raise TypeError(
            f"comprehension step {index} must produce a Kind; got {type(value).__name__}"
        )
    return value


__all__ = ["Binding", "binding", "comprehension"]
