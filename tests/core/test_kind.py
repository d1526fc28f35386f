"""Tests for witness tags, widen and fix."""

import logging

import pytest

from dokind import (
    IO,
    NOTHING,
    Either,
    ForEither,
    ForIO,
    ForOption,
    Kind,
    Left,
    Option,
    Right,
    Some,
    Witness,
    WitnessMismatch,
    fix,
    widen,
    witness_of,
)
from dokind.data.collections import ForListK, ListK


def test_each_container_carries_its_witness() -> None:
    assert witness_of(Some(1)) is ForOption
    assert witness_of(NOTHING) is ForOption
    assert witness_of(Left("e")) is ForEither
    assert witness_of(IO.pure(1)) is ForIO
    assert witness_of(ListK.of(1, 2)) is ForListK


def test_widen_and_fix_return_the_same_object() -> None:
    value = Some(3)

    widened = widen(value)
    fixed = fix(widened, ForOption)

    assert widened is value
    assert fixed is value
    assert Option.fix(widened) is value


def test_fix_to_another_family_raises_witness_mismatch() -> None:
    with pytest.raises(WitnessMismatch) as exc_info:
        fix(Right(1), ForOption)

    error = exc_info.value
    assert error.expected is ForOption
    assert error.actual is ForEither
    assert "Hint" in str(error)


def test_concrete_fix_rejects_other_families() -> None:
    with pytest.raises(WitnessMismatch):
        Either.fix(Some(1))


def test_witness_mismatch_is_a_type_error() -> None:
    """Callers catching TypeError still see the mismatch."""

    with pytest.raises(TypeError):
        Option.fix(IO.pure(1))


def test_widen_rejects_non_kinds() -> None:
    with pytest.raises(TypeError, match="not a Kind"):
        widen([1, 2, 3])  # type: ignore[arg-type]


def test_witness_of_rejects_non_kinds() -> None:
    with pytest.raises(TypeError):
        witness_of(42)  # type: ignore[arg-type]


def test_witnesses_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError, match="witness tag"):
        ForOption()


def test_user_defined_witness_plugs_in() -> None:
    class ForBox(Witness):
        pass

    class Box(Kind[ForBox, int]):
        __slots__ = ("value",)
        witness = ForBox

        def __init__(self, value: int) -> None:
            self.value = value

    box = Box(1)
    assert Box.fix(widen(box)) is box
    with pytest.raises(WitnessMismatch):
        Option.fix(box)


def test_mismatch_is_logged_in_debug_mode(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr("dokind.utils.DEBUG_KINDS", True)

    with caplog.at_level(logging.ERROR, logger="dokind.kind"):
        with pytest.raises(WitnessMismatch):
            fix(Some(1), ForIO)

    assert any("WitnessMismatch" in record.getMessage() for record in caplog.records)


def test_mismatch_is_silent_by_default(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr("dokind.utils.DEBUG_KINDS", False)

    with caplog.at_level(logging.ERROR, logger="dokind.kind"):
        with pytest.raises(WitnessMismatch):
            fix(Some(1), ForIO)

    assert caplog.records == []
