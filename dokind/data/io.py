"""
IO: a description of a side-effecting computation.

Building an ``IO`` never runs anything. ``IO.invoke(thunk)`` stores the
thunk, ``map`` and ``flat_map`` build bigger descriptions, and only
``unsafe_perform_io()`` executes them:

    write = IO.invoke(lambda: print("Hello, world!"))   # prints nothing
    write.unsafe_perform_io()                           # prints once
    write.unsafe_perform_io()                           # prints again

Every call to ``unsafe_perform_io`` re-executes the whole description from
scratch; results are not memoized.

Each run moves through Unevaluated -> Running -> Completed. The Running
state exists only inside one ``unsafe_perform_io`` call on the calling
thread. Evaluation is a loop over an explicit continuation stack, so long
``flat_map`` chains do not consume Python stack frames.

A thunk or continuation that raises makes the run fail. Errors can be
recovered inside the description with ``handle_error_with``; an error that
reaches the top surfaces once, as ``EffectFailure`` wrapping the cause.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, TypeVar

from loguru import logger as loguru_logger

from dokind.errors import EffectFailure
from dokind.kind import Kind, Witness
from dokind.typeclasses.monad_error import MonadError
from dokind import utils

if TYPE_CHECKING:
    from dokind.data.either import Either
    from dokind.data.try_ import Try

A = TypeVar("A")
B = TypeVar("B")

loguru_logger = loguru_logger.bind(component="io")


class ForIO(Witness):
    """Witness for :class:`IO`."""


class IO(Kind[ForIO, A]):
    """Deferred, re-runnable description of an effect producing ``A``."""

    __slots__ = ()

    witness = ForIO

    @staticmethod
    def invoke(thunk: Callable[[], B]) -> IO[B]:
        """Suspend ``thunk``; it runs each time the IO is performed."""

        if not callable(thunk):
            raise TypeError("IO.invoke expects a callable")
        return _Suspend(thunk)

    @staticmethod
    def pure(value: B) -> IO[B]:
        return _Pure(value)

    @staticmethod
    def unit() -> IO[None]:
        return _UNIT

    @staticmethod
    def raise_error(error: Exception) -> IO[Any]:
        if not isinstance(error, Exception):
            raise TypeError("IO.raise_error expects an Exception instance")
        return _Raise(error)

    @staticmethod
    def sequence(ios: Iterable[IO[B]]) -> IO[tuple[B, ...]]:
        """Run ``ios`` in order and collect their results."""

        acc: IO[tuple[Any, ...]] = _Pure(())
        for io in ios:
            acc = acc.flat_map(_append_result(_expect_io(io)))
        return acc

    def map(self, f: Callable[[A], B]) -> IO[B]:
        if not callable(f):
            raise TypeError("mapper must be callable")
        return _FlatMap(self, lambda value: _Pure(f(value)))

    def flat_map(self, f: Callable[[A], IO[B]]) -> IO[B]:
        if not callable(f):
            raise TypeError("binder must be callable returning an IO")
        return _FlatMap(self, f)

    def follow_with(self, other: IO[B]) -> IO[B]:
        """Run ``self``, discard its value, then run ``other``."""

        return _FlatMap(self, lambda _: other)

    def product(self, other: IO[B]) -> IO[tuple[A, B]]:
        return self.flat_map(lambda a: other.map(lambda b: (a, b)))

    def handle_error_with(self, f: Callable[[Exception], IO[A]]) -> IO[A]:
        """Recover from a failure anywhere in ``self`` with another IO."""

        return _HandleErrorWith(self, f)

    def handle_error(self, f: Callable[[Exception], A]) -> IO[A]:
        return _HandleErrorWith(self, lambda error: _Pure(f(error)))

    def attempt(self) -> IO[Either[Exception, A]]:
        """Expose failures as ``Left`` values instead of failing the run."""

        from dokind.data.either import Left, Right

        return self.map(Right).handle_error(Left)

    def unsafe_perform_io(self) -> A:
        """Execute the description and return its result.

        Raises ``EffectFailure`` (with ``cause`` set and chained) when the
        run fails. An ``EffectFailure`` raised by a nested run is passed
        through unchanged rather than wrapped twice.
        """

        if utils.DEBUG_KINDS:
            loguru_logger.debug("IO run started: {} at {:#x}", type(self).__name__, id(self))
        try:
            value = _run(self)
        except EffectFailure as failure:
            if utils.DEBUG_KINDS:
                loguru_logger.debug("IO run failed: {}", failure)
            raise
        except Exception as error:
            if utils.DEBUG_KINDS:
                loguru_logger.debug("IO run failed: {!r}", error)
            raise EffectFailure(error) from error
        if utils.DEBUG_KINDS:
            loguru_logger.debug("IO run completed: {!r}", value)
        return value

    def unsafe_run_try(self) -> Try[A]:
        """Execute the description, capturing failure as ``Failure``."""

        from dokind.data.try_ import Failure, Success

        try:
            return Success(_run(self))
        except EffectFailure as failure:
            return Failure(failure.cause if isinstance(failure.cause, Exception) else failure)
        except Exception as error:
            return Failure(error)

    # Instances

    @staticmethod
    def functor() -> IOMonadError:
        return _IO_MONAD_ERROR

    @staticmethod
    def applicative() -> IOMonadError:
        return _IO_MONAD_ERROR

    @staticmethod
    def monad() -> IOMonadError:
        return _IO_MONAD_ERROR

    @staticmethod
    def applicative_error() -> IOMonadError:
        return _IO_MONAD_ERROR

    @staticmethod
    def monad_error() -> IOMonadError:
        return _IO_MONAD_ERROR


@dataclass(frozen=True, eq=False)
class _Pure(IO[A]):
    value: A

    def __repr__(self) -> str:
        return f"IO.pure({self.value!r})"


@dataclass(frozen=True, eq=False)
class _Suspend(IO[A]):
    thunk: Callable[[], A]

    def __repr__(self) -> str:
        name = getattr(self.thunk, "__qualname__", repr(self.thunk))
        return f"IO.invoke({name})"


@dataclass(frozen=True, eq=False)
class _Raise(IO[Any]):
    error: Exception

    def __repr__(self) -> str:
        return f"IO.raise_error({self.error!r})"


@dataclass(frozen=True, eq=False)
class _FlatMap(IO[B]):
    source: IO[Any]
    f: Callable[[Any], IO[B]]

    def __repr__(self) -> str:
        return "IO.flat_map(...)"


@dataclass(frozen=True, eq=False)
class _HandleErrorWith(IO[A]):
    source: IO[A]
    handler: Callable[[Exception], IO[A]]

    def __repr__(self) -> str:
        return "IO.handle_error_with(...)"


@dataclass(frozen=True)
class _Frame:
    """Pending continuation; ``recovers`` frames only run on failure."""

    fn: Callable[[Any], IO[Any]]
    recovers: bool


_UNIT: Final[IO[None]] = _Pure(None)


def _expect_io(value: Any) -> IO[Any]:
    if not isinstance(value, IO):
        raise TypeError(f"binder must return an IO; got {type(value).__name__}")
    return value


def _append_result(io: IO[B]) -> Callable[[tuple[Any, ...]], IO[tuple[Any, ...]]]:
    return lambda values: io.map(lambda value: values + (value,))


def _run(io: IO[A]) -> A:
    """Evaluate ``io`` with an explicit stack; raises the raw failure."""

    frames: list[_Frame] = []
    current: IO[Any] = io
    while True:
        if isinstance(current, _FlatMap):
            frames.append(_Frame(current.f, recovers=False))
            current = current.source
            continue
        if isinstance(current, _HandleErrorWith):
            frames.append(_Frame(current.handler, recovers=True))
            current = current.source
            continue

        try:
            if isinstance(current, _Pure):
                value = current.value
            elif isinstance(current, _Suspend):
                value = current.thunk()
            elif isinstance(current, _Raise):
                raise current.error
            else:
                raise TypeError(f"Unknown IO node: {type(current).__name__}")

            while frames:
                frame = frames.pop()
                if not frame.recovers:
                    current = _expect_io(frame.fn(value))
                    break
            else:
                return value
        except Exception as error:
            while frames:
                frame = frames.pop()
                if frame.recovers:
                    # The handler runs as a bind step so its own failure unwinds further.
                    current = _FlatMap(_Pure(error), frame.fn)
                    break
            else:
                raise


class IOMonadError(MonadError[ForIO, Exception]):
    witness = ForIO

    def pure(self, value: A) -> IO[A]:
        return _Pure(value)

    def map(self, fa: Kind[ForIO, A], f: Callable[[A], B]) -> IO[B]:
        return IO.fix(fa).map(f)

    def flat_map(self, fa: Kind[ForIO, A], f: Callable[[A], Kind[ForIO, B]]) -> IO[B]:
        return IO.fix(fa).flat_map(lambda value: IO.fix(f(value)))

    def raise_error(self, error: Exception) -> IO[Any]:
        return IO.raise_error(error)

    def handle_error_with(
        self, fa: Kind[ForIO, A], f: Callable[[Exception], Kind[ForIO, A]]
    ) -> IO[A]:
        return IO.fix(fa).handle_error_with(lambda error: IO.fix(f(error)))

    def catch_nonfatal(
        self,
        thunk: Callable[[], A],
        on_error: Callable[[Exception], Exception] | None = None,
    ) -> IO[A]:
        """Deferred: the thunk runs when the IO is performed, not now."""

        io = IO.invoke(thunk)
        if on_error is None:
            return io
        return io.handle_error_with(lambda error: IO.raise_error(on_error(error)))


_IO_MONAD_ERROR: Final = IOMonadError()

__all__ = ["ForIO", "IO", "IOMonadError"]
