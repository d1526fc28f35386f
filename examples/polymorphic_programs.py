"""Programs written once and run with several container families.

This example shows the tagless-final style: programs take their capability
instances as ordinary parameters and never name a concrete container.

Key concepts:
- ApplicativeError lets one ``divide`` produce Option, Either, Try or IO
- Ior separates fatal errors from warnings during validation
- The same ``greet`` program runs on a real console (IO) and on a
  deterministic State interpreter

Run with: uv run python examples/polymorphic_programs.py
"""

from enum import Enum
from typing import Any

from dokind import (
    IO,
    ApplicativeError,
    Either,
    ForEither,
    Ior,
    IOConsole,
    MonadError,
    Option,
    State,
    StateConsole,
    TestData,
    Try,
    greet,
    standard_registry,
)


# ============================================================================
# Division with ApplicativeError
# ============================================================================


def divide(instance: ApplicativeError[Any, Any], error: Any, x: int, y: int) -> Any:
    if y == 0:
        return instance.raise_error(error)
    return instance.pure(x // y)


def main_divide() -> None:
    print(divide(Option.applicative_error(), None, 6, 3))
    print(divide(Option.applicative_error(), None, 2, 0))
    print(divide(Either.applicative_error(), "Division by 0", 2, 0))
    print(divide(Try.applicative_error(), ZeroDivisionError("Division by 0"), 2, 0))

    registry = standard_registry()
    print(divide(registry.resolve(MonadError, ForEither), "Division by 0", 9, 3))


# ============================================================================
# Validation with Ior
# ============================================================================


class ValidationError(Enum):
    EMPTY_NAME = "emptyName"
    DEPRECATED_DOT = "deprecatedDot"


def validate(name: str) -> Ior[ValidationError, str]:
    if not name:
        return Ior.left(ValidationError.EMPTY_NAME)
    if "." in name:
        return Ior.both(ValidationError.DEPRECATED_DOT, name)
    return Ior.right(name)


def main_validate() -> None:
    for name in ("", "tomas.ruiz", "tomasruiz"):
        outcome = validate(name).fold(
            lambda error: f"rejected ({error.value})",
            lambda valid: f"accepted {valid}",
            lambda warning, valid: f"accepted {valid} with warning {warning.value}",
        )
        print(f"{name!r}: {outcome}")


# ============================================================================
# Greeting with two interpreters
# ============================================================================


def main_greet_state() -> None:
    program = State.fix(greet(StateConsole(), State.monad()))
    final = program.run_s(TestData(input=("Tomás",)))
    print(f"pending input: {final.input}")
    print(f"output: {final.output}")


def main_greet_io() -> None:
    IO.fix(greet(IOConsole(), IO.monad())).unsafe_perform_io()


if __name__ == "__main__":
    print("=== Divide ===")
    main_divide()

    print("\n=== Validate name ===")
    main_validate()

    print("\n=== Greet (State interpreter) ===")
    main_greet_state()

    print("\n=== Greet (console) ===")
    main_greet_io()
