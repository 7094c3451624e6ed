"""Built-in primitives for the Sprig root environment.

Arithmetic, comparison, list operations and console output. Every primitive
takes the list of evaluated arguments and checks their number and types
itself.
"""
from __future__ import annotations

import math
import sys

from sprig import SchemeValue
from sprig.errors import SchemeError
from sprig.printer import to_string
from sprig.types.empty import Empty
from sprig.types.environment import Environment
from sprig.types.primitive import Primitive
from sprig.types.symbol import Symbol


def _is_number(x: SchemeValue) -> bool:
    return isinstance(x, float)


def _numbers(name: str, args: list[SchemeValue]) -> list[float]:
    if not all(_is_number(x) for x in args):
        raise SchemeError(f"{name}: expected Number")
    return args


def _number_pair(name: str, args: list[SchemeValue]) -> tuple[float, float]:
    if len(args) != 2:
        raise SchemeError(f"{name}: expected 2 arguments, got {len(args)}")
    a, b = _numbers(name, args)
    return a, b


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[SchemeValue]) -> float:
    """Variadic; (+) is 0."""
    return sum(_numbers("add", args), 0.0)


def sub(args: list[SchemeValue]) -> float:
    a, b = _number_pair("sub", args)
    return a - b


def mul(args: list[SchemeValue]) -> float:
    """Variadic; (*) is 1."""
    result = 1.0
    for x in _numbers("mul", args):
        result *= x
    return result


def div(args: list[SchemeValue]) -> float:
    a, b = _number_pair("div", args)
    if b == 0:
        raise SchemeError("div: division by zero")
    return a / b


# -------------------------------
# Comparison
# -------------------------------
def eq(args: list[SchemeValue]) -> bool:
    a, b = _number_pair("eq", args)
    return a == b


def lt(args: list[SchemeValue]) -> bool:
    a, b = _number_pair("lt", args)
    return a < b


def le(args: list[SchemeValue]) -> bool:
    a, b = _number_pair("le", args)
    return a <= b


def gt(args: list[SchemeValue]) -> bool:
    a, b = _number_pair("gt", args)
    return a > b


def ge(args: list[SchemeValue]) -> bool:
    a, b = _number_pair("ge", args)
    return a >= b


# -------------------------------
# List operations
# -------------------------------
# Lists are flat Python lists and a "pair" is a two-element list, so cdr is
# the second element rather than the rest of the list.
def car(args: list[SchemeValue]) -> SchemeValue:
    if len(args) != 1:
        raise SchemeError("car: expected exactly 1 argument")
    (pair,) = args
    if not isinstance(pair, list):
        raise SchemeError("car: expected a List")
    if not pair:
        raise SchemeError("car: expected a non-empty List")
    return pair[0]


def cdr(args: list[SchemeValue]) -> SchemeValue:
    if len(args) != 1:
        raise SchemeError("cdr: expected exactly 1 argument")
    (pair,) = args
    if not isinstance(pair, list):
        raise SchemeError("cdr: expected a List")
    if len(pair) < 2:
        raise SchemeError("cdr: expected a List of length 2")
    return pair[1]


def cons(args: list[SchemeValue]) -> list[SchemeValue]:
    if len(args) != 2:
        raise SchemeError("cons: expected two values to cons")
    return list(args)


def is_null(args: list[SchemeValue]) -> bool:
    if len(args) != 1:
        raise SchemeError("null?: expected exactly 1 argument")
    (lst,) = args
    if not isinstance(lst, list):
        raise SchemeError("null?: expected a List")
    return not lst


# -------------------------------
# Console
# -------------------------------
def display(args: list[SchemeValue]) -> SchemeValue:
    if len(args) != 1:
        raise SchemeError("display: expected exactly 1 argument")
    sys.stdout.write(to_string(args[0]))
    return Empty


def newline(args: list[SchemeValue]) -> SchemeValue:
    if args:
        raise SchemeError("newline: too many arguments")
    sys.stdout.write("\n")
    return Empty


def exit_(args: list[SchemeValue]) -> SchemeValue:
    code = 0
    if args:
        if len(args) > 1 or not _is_number(args[0]) or not math.isfinite(args[0]):
            raise SchemeError("exit: invalid exit code")
        code = int(args[0])
    raise SystemExit(code)


PRIMITIVES = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": eq,
    "<": lt,
    "<=": le,
    ">": gt,
    ">=": ge,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "null?": is_null,
    "display": display,
    "newline": newline,
    "exit": exit_,
}

CONSTANTS = {
    "#t": True,
    "#f": False,
    "null": [],
}


def register(env: Environment) -> None:
    """Install the primitive table and constants into `env`."""
    env.update({Symbol(name): Primitive(name, fn) for name, fn in PRIMITIVES.items()})
    env.update({Symbol(name): value for name, value in CONSTANTS.items()})
