"""
Console capability and its interpreters.

``Console`` is a tagless-final capability: it declares ``put_string`` and
``get_string`` for some container family ``F`` without saying which. A
program written against ``Console`` plus a ``Monad`` for the same ``F``
runs unchanged on any family that provides both:

    greet(IOConsole(), IO.monad()).unsafe_perform_io()       # real console

    program = State.fix(greet(StateConsole(), State.monad()))
    final, _ = program.run(TestData(input=("Tomás",)))     # deterministic
    final.output == ("What's your name?", "Hello Tomás!")
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from dokind.comprehension import binding
from dokind.data.io import IO, ForIO
from dokind.data.state import ForState, State
from dokind.errors import InputExhausted
from dokind.kind import Kind
from dokind.typeclasses.base import Typeclass
from dokind.typeclasses.monad import Monad

F = TypeVar("F")


class Console(Typeclass, Generic[F]):
    """Read and write lines inside the container family ``F``."""

    @abstractmethod
    def put_string(self, line: str) -> Kind[F, None]: ...

    @abstractmethod
    def get_string(self) -> Kind[F, str]: ...


class IOConsole(Console[ForIO]):
    """Console backed by real callables, deferred in ``IO``."""

    witness = ForIO

    def __init__(
        self,
        reader: Callable[[], str] = input,
        writer: Callable[[str], Any] = print,
    ) -> None:
        self._reader = reader
        self._writer = writer

    def put_string(self, line: str) -> IO[None]:
        return IO.invoke(lambda: self._write(line))

    def get_string(self) -> IO[str]:
        return IO.invoke(self._reader)

    def _write(self, line: str) -> None:
        self._writer(line)


@dataclass(frozen=True)
class TestData:
    """Fixture for :class:`StateConsole`.

    ``input`` is consumed front to back by ``get_string``; ``output``
    collects every ``put_string`` line in order. Instances are never
    changed in place; ``copy`` returns a new one.
    """

    __test__ = False  # not a pytest test class

    input: tuple[str, ...] = ()
    output: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "input", tuple(self.input))
        object.__setattr__(self, "output", tuple(self.output))

    def copy(
        self,
        input: Iterable[str] | None = None,
        output: Iterable[str] | None = None,
    ) -> TestData:
        return replace(
            self,
            input=tuple(input) if input is not None else self.input,
            output=tuple(output) if output is not None else self.output,
        )


class StateConsole(Console[ForState]):
    """Console interpreted as ``State[TestData, _]``."""

    witness = ForState

    def put_string(self, line: str) -> State[TestData, None]:
        return State(lambda data: (data.copy(output=data.output + (line,)), None))

    def get_string(self) -> State[TestData, str]:
        def read(data: TestData) -> tuple[TestData, str]:
            if not data.input:
                raise InputExhausted("StateConsole.get_string: no pending input left")
            return data.copy(input=data.input[1:]), data.input[0]

        return State(read)


def greet(console: Console[F], monad: Monad[F]) -> Kind[F, None]:
    """Ask for a name, then greet it; written with nested ``flat_map``."""

    return monad.flat_map(
        console.put_string("What's your name?"),
        lambda _: monad.flat_map(
            console.get_string(),
            lambda name: console.put_string(f"Hello {name}!"),
        ),
    )


def greet_comprehension(console: Console[F], monad: Monad[F]) -> Kind[F, None]:
    """Same program as :func:`greet`, as a monad comprehension."""

    return binding(
        monad,
        lambda: console.put_string("What's your name?"),
        lambda _: console.get_string(),
        lambda _, name: console.put_string(f"Hello {name}!"),
    )


__all__ = [
    "Console",
    "IOConsole",
    "StateConsole",
    "TestData",
    "greet",
    "greet_comprehension",
]
