"""Tests for the IO effect wrapper."""

import pytest
from loguru import logger

from dokind import IO, EffectFailure, Failure, Left, Right, Success


class TestDeferredExecution:
    def test_building_runs_nothing(self, counter) -> None:
        io = IO.invoke(counter).map(lambda v: v + 1).flat_map(IO.pure)

        assert counter.calls == 0
        assert isinstance(io, IO)

    def test_each_run_re_executes(self, counter) -> None:
        """Results are not memoized between runs."""

        io = IO.invoke(counter)

        assert io.unsafe_perform_io() == 1
        assert io.unsafe_perform_io() == 2
        assert counter.calls == 2

    def test_side_effect_happens_per_run(self) -> None:
        lines: list[str] = []
        write = IO.invoke(lambda: lines.append("Hello, world!"))

        write.unsafe_perform_io()
        write.unsafe_perform_io()

        assert lines == ["Hello, world!", "Hello, world!"]

    def test_invoke_requires_callable(self) -> None:
        with pytest.raises(TypeError):
            IO.invoke(42)  # type: ignore[arg-type]


class TestComposition:
    def test_map_and_flat_map(self) -> None:
        io = IO.pure(2).map(lambda v: v * 5).flat_map(lambda v: IO.invoke(lambda: v + 1))

        assert io.unsafe_perform_io() == 11

    def test_sequence_runs_in_order(self) -> None:
        order: list[int] = []

        def effect(n: int) -> IO[int]:
            return IO.invoke(lambda: order.append(n) or n)

        assert IO.sequence([effect(1), effect(2), effect(3)]).unsafe_perform_io() == (1, 2, 3)
        assert order == [1, 2, 3]

    def test_product_and_follow_with(self) -> None:
        assert IO.pure(1).product(IO.pure("a")).unsafe_perform_io() == (1, "a")
        assert IO.pure(1).follow_with(IO.pure(2)).unsafe_perform_io() == 2
        assert IO.unit().unsafe_perform_io() is None

    def test_binder_must_return_io(self) -> None:
        with pytest.raises(EffectFailure) as exc_info:
            IO.pure(1).flat_map(lambda v: v).unsafe_perform_io()  # type: ignore[arg-type,return-value]

        assert isinstance(exc_info.value.cause, TypeError)


class TestFailure:
    def test_failure_surfaces_once_as_effect_failure(self) -> None:
        cause = ValueError("bad input")

        def boom() -> int:
            raise cause

        with pytest.raises(EffectFailure) as exc_info:
            IO.invoke(boom).map(lambda v: v + 1).unsafe_perform_io()

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause
        assert "ValueError" in str(exc_info.value)

    def test_nested_run_is_not_wrapped_twice(self) -> None:
        inner = IO.raise_error(KeyError("k"))
        outer = IO.invoke(inner.unsafe_perform_io)

        with pytest.raises(EffectFailure) as exc_info:
            outer.unsafe_perform_io()

        assert isinstance(exc_info.value.cause, KeyError)

    def test_raise_error_requires_exception(self) -> None:
        with pytest.raises(TypeError):
            IO.raise_error("nope")  # type: ignore[arg-type]

    def test_handle_error_recovers(self) -> None:
        io = IO.raise_error(ValueError("x")).handle_error(lambda e: str(e))

        assert io.unsafe_perform_io() == "x"

    def test_handler_is_skipped_on_success(self) -> None:
        io = IO.pure(1).handle_error(lambda e: -1).map(lambda v: v + 1)

        assert io.unsafe_perform_io() == 2

    def test_handler_covers_whole_source_chain(self) -> None:
        def fail(_: int) -> IO[int]:
            raise RuntimeError("in continuation")

        io = IO.pure(1).flat_map(fail).map(lambda v: v * 2).handle_error_with(
            lambda e: IO.pure(len(str(e)))
        )

        assert io.unsafe_perform_io() == len("in continuation")

    def test_failing_handler_propagates(self) -> None:
        def reraise(error: Exception) -> IO[int]:
            raise LookupError("handler failed") from error

        io = IO.raise_error(ValueError("x")).handle_error_with(reraise)

        with pytest.raises(EffectFailure) as exc_info:
            io.unsafe_perform_io()

        assert isinstance(exc_info.value.cause, LookupError)

    def test_attempt_exposes_errors_as_values(self) -> None:
        error = ValueError("x")

        assert IO.pure(1).attempt().unsafe_perform_io() == Right(1)
        assert IO.raise_error(error).attempt().unsafe_perform_io() == Left(error)

    def test_unsafe_run_try(self) -> None:
        error = ValueError("x")

        assert IO.pure(1).unsafe_run_try() == Success(1)
        assert IO.raise_error(error).unsafe_run_try() == Failure(error)


class TestStackSafety:
    def test_deep_left_nested_map_chain(self) -> None:
        io = IO.pure(0)
        for _ in range(100_000):
            io = io.map(lambda v: v + 1)

        assert io.unsafe_perform_io() == 100_000

    def test_deep_recursive_flat_map(self) -> None:
        def count_down(n: int) -> IO[int]:
            if n == 0:
                return IO.pure("done")
            return IO.unit().flat_map(lambda _: count_down(n - 1))

        assert count_down(50_000).unsafe_perform_io() == "done"

    def test_deep_chain_with_tracing_enabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("dokind.utils.DEBUG_KINDS", True)
        io = IO.pure(0)
        for _ in range(100_000):
            io = io.map(lambda v: v + 1)

        assert io.unsafe_perform_io() == 100_000
        assert IO.sequence([IO.pure(i) for i in range(2_000)]).unsafe_perform_io() == tuple(
            range(2_000)
        )

    def test_repr_of_deep_chain_is_flat(self) -> None:
        io = IO.pure(0)
        for _ in range(5_000):
            io = io.flat_map(IO.pure)

        assert repr(io) == "IO.flat_map(...)"
        assert repr(io.handle_error(lambda e: 0)) == "IO.handle_error_with(...)"


class TestRunTracing:
    @pytest.fixture
    def messages(self):
        captured: list[str] = []
        sink_id = logger.add(captured.append, level="DEBUG", format="{message}")
        yield captured
        logger.remove(sink_id)

    def test_runs_are_traced_in_debug_mode(
        self, monkeypatch: pytest.MonkeyPatch, messages: list[str]
    ) -> None:
        monkeypatch.setattr("dokind.utils.DEBUG_KINDS", True)

        IO.pure(1).map(lambda v: v + 1).unsafe_perform_io()

        assert any("IO run started: _FlatMap" in message for message in messages)
        assert any("IO run completed: 2" in message for message in messages)

    def test_failures_are_traced_in_debug_mode(
        self, monkeypatch: pytest.MonkeyPatch, messages: list[str]
    ) -> None:
        monkeypatch.setattr("dokind.utils.DEBUG_KINDS", True)

        with pytest.raises(EffectFailure):
            IO.raise_error(ValueError("boom")).unsafe_perform_io()

        assert any("IO run failed: ValueError('boom')" in message for message in messages)

    def test_runs_are_silent_by_default(
        self, monkeypatch: pytest.MonkeyPatch, messages: list[str]
    ) -> None:
        monkeypatch.setattr("dokind.utils.DEBUG_KINDS", False)

        IO.pure(1).unsafe_perform_io()

        assert not any("IO run" in message for message in messages)


class TestMonadErrorInstance:
    def test_catch_nonfatal_is_deferred(self, counter) -> None:
        io = IO.monad_error().catch_nonfatal(counter)

        assert counter.calls == 0
        assert IO.fix(io).unsafe_perform_io() == 1

    def test_catch_nonfatal_maps_error(self) -> None:
        io = IO.monad_error().catch_nonfatal(
            lambda: int("x"), on_error=lambda e: LookupError(str(e))
        )

        with pytest.raises(EffectFailure) as exc_info:
            IO.fix(io).unsafe_perform_io()

        assert isinstance(exc_info.value.cause, LookupError)

    def test_ensure(self) -> None:
        instance = IO.monad_error()
        io = instance.ensure(IO.pure(3), lambda: ValueError("odd"), lambda v: v % 2 == 0)

        assert isinstance(IO.fix(io).unsafe_run_try().fold(lambda e: e, lambda v: v), ValueError)
