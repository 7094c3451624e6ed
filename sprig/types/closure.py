"""User-defined function values."""

from __future__ import annotations

from io import StringIO

from sprig import SExpression, SchemeValue
from sprig.errors import SchemeError
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


class Closure:
    """A lambda's parameter list and single body expression, plus the
    environment that was current when the lambda was evaluated."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"

    def extend_env(self, args: list[SchemeValue]) -> Environment:
        """Return a fresh call frame binding each parameter to its argument.

        The frame's outer scope is the captured environment, not the caller's.
        Raises SchemeError when the argument count does not match.
        """
        if len(args) != len(self.params):
            raise SchemeError(
                f"apply: expected {len(self.params)} arguments, got {len(args)}"
            )
        frame = Environment(outer=self.env)
        for param, arg in zip(self.params, args):
            frame.define(param, arg)
        return frame
