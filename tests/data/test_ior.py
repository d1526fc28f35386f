"""Tests for Ior and its conversion to Either."""

import pytest

from dokind import NOTHING, Ior, IorBoth, IorLeft, IorRight, Left, Right, Some
from dokind.std import NATURAL_EQ, STR


class TestConversionToEither:
    def test_left_maps_to_left(self) -> None:
        assert Ior.left("warn").to_either() == Left("warn")

    def test_right_maps_to_right(self) -> None:
        assert Ior.right(1).to_either() == Right(1)

    def test_both_maps_to_right_dropping_left(self) -> None:
        assert Ior.both("warn", 1).to_either() == Right(1)


def test_fold_requires_all_three_handlers() -> None:
    handlers = (lambda l: f"L{l}", lambda r: f"R{r}", lambda l, r: f"B{l}{r}")

    assert IorLeft(1).fold(*handlers) == "L1"
    assert IorRight(2).fold(*handlers) == "R2"
    assert IorBoth(1, 2).fold(*handlers) == "B12"

    with pytest.raises(TypeError):
        IorBoth(1, 2).fold(handlers[0], handlers[1])  # type: ignore[call-arg]


def test_map_variants() -> None:
    assert IorBoth("w", 1).map(lambda v: v + 1) == IorBoth("w", 2)
    assert IorLeft("w").map(lambda v: v + 1) == IorLeft("w")
    assert IorBoth("w", 1).map_left(str.upper) == IorBoth("W", 1)
    assert IorRight(1).bimap(str.upper, str) == IorRight("1")


def test_swap_and_pad() -> None:
    assert IorBoth("w", 1).swap() == IorBoth(1, "w")
    assert IorLeft("w").pad() == (Some("w"), NOTHING)
    assert IorBoth("w", 1).pad() == (Some("w"), Some(1))


def test_from_options() -> None:
    assert Ior.from_options(Some("w"), Some(1)) == Some(IorBoth("w", 1))
    assert Ior.from_options(NOTHING, Some(1)) == Some(IorRight(1))
    assert Ior.from_options(Some("w"), NOTHING) == Some(IorLeft("w"))
    assert Ior.from_options(NOTHING, NOTHING) is NOTHING


class TestFlatMap:
    def test_right_continues(self) -> None:
        assert IorRight(1).flat_map(lambda v: IorRight(v + 1), STR) == IorRight(2)

    def test_left_stops(self) -> None:
        assert IorLeft("a").flat_map(lambda v: IorRight(v + 1), STR) == IorLeft("a")

    def test_both_accumulates_lefts(self) -> None:
        result = IorBoth("a", 1).flat_map(lambda v: IorBoth("b", v + 1), STR)

        assert result == IorBoth("ab", 2)

    def test_both_followed_by_left(self) -> None:
        assert IorBoth("a", 1).flat_map(lambda _: IorLeft("b"), STR) == IorLeft("ab")

    def test_monad_instance_carries_semigroup(self) -> None:
        monad = Ior.monad(STR)

        program = monad.flat_map(IorBoth("x", 1), lambda v: monad.pure(v * 3))

        assert program == IorBoth("x", 3)

    def test_unknown_variant_is_rejected(self) -> None:
        class Stray(Ior[str, int]):
            __slots__ = ()

        with pytest.raises(TypeError, match="Unknown Ior variant: Stray"):
            Stray().flat_map(lambda v: IorRight(v), STR)


def test_eq_instance() -> None:
    eq = Ior.eq(NATURAL_EQ, NATURAL_EQ)

    assert eq.eqv(IorBoth(1, 2), IorBoth(1, 2))
    assert not eq.eqv(IorBoth(1, 2), IorRight(2))
