"""Text rendering of Sprig values, as shown by the REPL and `display`."""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from sprig import SchemeValue
from sprig.types.closure import Closure
from sprig.types.empty import EmptyType
from sprig.types.primitive import Primitive
from sprig.types.symbol import Symbol


def format_number(n: float) -> str:
    """Shortest round-tripping digits of `n`, written without an exponent."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n.is_integer():
        return str(int(n))
    return format(Decimal(repr(n)), "f")


def _write(value: SchemeValue, buffer: StringIO) -> None:
    match value:
        case bool():
            buffer.write("true" if value else "false")
        case float():
            buffer.write(format_number(value))
        case Symbol():
            buffer.write(f"'{value}")
        case list():
            buffer.write("[")
            for i, item in enumerate(value):
                if i:
                    buffer.write(", ")
                _write(item, buffer)
            buffer.write("]")
        case Closure():
            buffer.write("<Closure>")
        case Primitive():
            buffer.write("<Primitive>")
        case EmptyType():
            pass
        case _:
            buffer.write(repr(value))


def to_string(value: SchemeValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
