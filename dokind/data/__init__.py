"""Algebraic data types, effect wrappers and collection kinds."""

from dokind.data.collections import ForListK, ForSetK, ListK, SetK, listk, setk
from dokind.data.either import Either, ForEither, Left, Right
from dokind.data.function1 import ForFunction1, Function1
from dokind.data.io import IO, ForIO
from dokind.data.ior import ForIor, Ior, IorBoth, IorLeft, IorRight
from dokind.data.option import NOTHING, ForOption, Nothing, Option, Some
from dokind.data.result import Err, ForResult, Ok, Result
from dokind.data.state import ForState, State
from dokind.data.try_ import Failure, ForTry, Success, Try

__all__ = [
    "IO",
    "NOTHING",
    "Either",
    "Err",
    "Failure",
    "ForEither",
    "ForFunction1",
    "ForIO",
    "ForIor",
    "ForListK",
    "ForOption",
    "ForResult",
    "ForSetK",
    "ForState",
    "ForTry",
    "Function1",
    "Ior",
    "IorBoth",
    "IorLeft",
    "IorRight",
    "Left",
    "ListK",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "Right",
    "SetK",
    "State",
    "Some",
    "Success",
    "Try",
    "listk",
    "setk",
]
