"""Function composition, currying and comprehensions.

Key concepts:
- ``compose`` runs right to left, ``and_then`` and ``>>`` left to right
- ``curry`` enables partial application
- ``@comprehension`` writes flat_map chains as generators

Run with: uv run python examples/composition.py
"""

import operator
from collections.abc import Generator
from typing import Any

from dokind import Function1, ListK, Option, Some, comprehension
from dokind.function import compose, curry, pipe, reverse


def birthday(month: int, day: int) -> int:
    return month * 100 + day


def main_functions() -> None:
    add17 = curry(operator.add)(17)
    double = Function1(lambda x: x * 2)

    print(compose(double, add17)(1))
    print((Function1(add17) >> double)(1))
    print(reverse(operator.sub)(13, 40))
    print(pipe(20, curry(birthday)(1)))


@comprehension(ListK.monad())
def coordinates() -> Generator[Any, Any, tuple[int, str]]:
    row = yield ListK.of(1, 2)
    column = yield ListK.of("a", "b")
    return (row, column)


@comprehension(Option.monad())
def add_options(x: Option[int], y: Option[int]) -> Generator[Any, Any, int]:
    a = yield x
    b = yield y
    return a + b


if __name__ == "__main__":
    print("=== Functions ===")
    main_functions()

    print("\n=== Comprehensions ===")
    print(coordinates())
    print(add_options(Some(1), Some(2)))
    print(add_options(Some(1), Option.none()))
