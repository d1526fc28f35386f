"""Tests for Option."""

import pickle

import pytest

from dokind import NOTHING, Err, Left, Nothing, Ok, Option, Right, Some, UnwrapError
from dokind.std import NATURAL_EQ, SUM


class TestConstruction:
    def test_some_and_none(self) -> None:
        assert Option.some(1) == Some(1)
        assert Option.none() is NOTHING

    def test_nothing_is_a_singleton(self) -> None:
        assert Nothing() is NOTHING
        assert pickle.loads(pickle.dumps(NOTHING)) is NOTHING

    def test_variants_are_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Some(1).value = 2  # type: ignore[misc]


class TestNativeIsomorphism:
    @pytest.mark.parametrize("value", [0, "", "text", [1], False])
    def test_round_trip_from_native(self, value: object) -> None:
        assert Option.from_optional(value).to_optional() == value

    def test_none_maps_to_nothing(self) -> None:
        assert Option.from_optional(None) is NOTHING
        assert NOTHING.to_optional() is None

    @pytest.mark.parametrize("option", [Some(1), Some("a"), NOTHING])
    def test_round_trip_from_option(self, option: Option[object]) -> None:
        assert Option.from_optional(option.to_optional()) == option

    def test_some_none_is_lossy(self) -> None:
        assert Option.from_optional(Some(None).to_optional()) is NOTHING


class TestFold:
    def test_fold_dispatches_on_variant(self) -> None:
        assert Some(2).fold(lambda: "empty", lambda v: f"got {v}") == "got 2"
        assert NOTHING.fold(lambda: "empty", lambda v: f"got {v}") == "empty"

    def test_match_statement(self) -> None:
        def describe(option: Option[int]) -> str:
            match option:
                case Some(value):
                    return f"some {value}"
                case _:
                    return "nothing"

        assert describe(Some(3)) == "some 3"
        assert describe(NOTHING) == "nothing"


class TestCombinators:
    def test_map_and_flat_map(self) -> None:
        assert Some(2).map(lambda v: v + 1) == Some(3)
        assert NOTHING.map(lambda v: v + 1) is NOTHING
        assert Some(2).flat_map(lambda v: Some(v * 2)) == Some(4)
        assert Some(2).flat_map(lambda _: NOTHING) is NOTHING

    def test_flat_map_requires_option(self) -> None:
        with pytest.raises(TypeError):
            Some(1).flat_map(lambda v: v)  # type: ignore[arg-type,return-value]

    def test_filter_and_exists(self) -> None:
        assert Some(4).filter(lambda v: v > 3) == Some(4)
        assert Some(2).filter(lambda v: v > 3) is NOTHING
        assert Some(4).exists(lambda v: v > 3)
        assert not NOTHING.exists(lambda v: True)

    def test_get(self) -> None:
        assert Some(1).get() == 1
        with pytest.raises(UnwrapError):
            NOTHING.get()

    def test_get_or_else_and_or_else(self) -> None:
        assert Some(1).get_or_else(0) == 1
        assert NOTHING.get_or_else(0) == 0
        assert NOTHING.or_else(lambda: Some(5)) == Some(5)
        assert Some(1).or_else(lambda: Some(5)) == Some(1)

    def test_truthiness(self) -> None:
        assert Some(0)
        assert not NOTHING


class TestConversions:
    def test_to_either(self) -> None:
        assert Some(1).to_either(lambda: "missing") == Right(1)
        assert NOTHING.to_either(lambda: "missing") == Left("missing")

    def test_result_round_trip(self) -> None:
        assert Some(1).to_result() == Ok(1)
        assert NOTHING.to_result() == Err(None)
        for option in (Some(1), NOTHING):
            assert option.to_result().to_option() == option

    def test_to_list(self) -> None:
        assert Some(1).to_list() == [1]
        assert NOTHING.to_list() == []


class TestInstances:
    def test_monad_error_raises_nothing(self) -> None:
        instance = Option.monad_error()

        assert instance.raise_error(None) is NOTHING
        assert instance.handle_error_with(NOTHING, lambda _: Some(0)) == Some(0)
        assert instance.handle_error(Some(1), lambda _: 0) == Some(1)

    def test_applicative_sequence(self) -> None:
        applicative = Option.applicative()

        assert applicative.sequence([Some(1), Some(2)]) == Some((1, 2))
        assert applicative.sequence([Some(1), NOTHING]) is NOTHING
        assert applicative.map2(Some(2), Some(3), lambda a, b: a * b) == Some(6)

    def test_eq_instance(self) -> None:
        eq = Option.eq(NATURAL_EQ)

        assert eq.eqv(Some(1), Some(1))
        assert not eq.eqv(Some(1), NOTHING)
        assert eq.eqv(NOTHING, NOTHING)

    def test_monoid_instance(self) -> None:
        monoid = Option.monoid(SUM)

        assert monoid.combine_all([Some(1), NOTHING, Some(2)]) == Some(3)
        assert monoid.combine_all([]) is NOTHING
