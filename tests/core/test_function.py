"""Tests for composition, currying and Function1."""

import operator

import pytest

from dokind import Function1
from dokind.function import (
    and_then,
    compose,
    constant,
    curry,
    identity,
    pipe,
    reverse,
    uncurry,
)


def add17(x: int) -> int:
    return x + 17


def double(x: int) -> int:
    return x * 2


def test_compose_runs_right_to_left() -> None:
    assert compose(double, add17)(1) == 36
    assert compose(add17, double)(1) == 19


def test_and_then_runs_left_to_right() -> None:
    assert and_then(add17, double)(1) == 36


def test_compose_without_functions_is_identity() -> None:
    assert compose()(5) == 5
    assert identity("x") == "x"


def test_function1_operators() -> None:
    f = Function1(add17)

    assert (f >> double)(1) == 36
    assert (f << double)(1) == 19
    assert (double >> f)(1) == 19
    assert (double << f)(1) == 36


def test_curry_and_uncurry() -> None:
    curried_add = curry(operator.add)

    assert curried_add(17)(3) == 20
    assert uncurry(curried_add)(17, 3) == 20


def test_curry_three_arguments() -> None:
    def volume(length: int, width: int, height: int) -> int:
        return length * width * height

    assert curry(volume)(2)(3)(4) == 24


def test_curry_needs_an_argument() -> None:
    with pytest.raises(ValueError):
        curry(lambda: 1)


def test_partial_application_of_curried_function() -> None:
    def birthday(month: int, day: int) -> int:
        return month * 100 + day

    january = curry(birthday)(1)

    assert january(20) == 120


def test_reverse_flips_positional_arguments() -> None:
    assert reverse(operator.sub)(13, 40) == 27


def test_pipe_and_constant() -> None:
    assert pipe(1, add17, double) == 36
    assert constant(7)("ignored", key="ignored") == 7


def test_function1_reader_monad_shares_input() -> None:
    monad = Function1.monad()
    program = monad.flat_map(
        Function1(lambda env: env["a"]),
        lambda a: Function1(lambda env: a + env["b"]),
    )

    assert Function1.fix(program)({"a": 1, "b": 2}) == 3
    assert monad.pure(9)({"anything": True}) == 9
