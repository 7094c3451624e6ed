"""Core evaluator for the Sprig interpreter.

Plain recursion on the host stack: there is no trampoline, so very deep
Scheme recursion ends in Python's RecursionError.
"""

from __future__ import annotations

from sprig import SExpression, SchemeValue
from sprig.errors import SchemeError
from sprig.evaluation.apply import apply
from sprig.evaluation.special_forms import SPECIAL_FORMS
from sprig.types.closure import Closure
from sprig.types.environment import Environment
from sprig.types.primitive import Primitive
from sprig.types.symbol import Symbol


def _resolve_head(head: SExpression, env: Environment) -> SchemeValue:
    """Turn the operator position of a call into the value to apply."""
    match head:
        case Symbol():
            return env.lookup(head)
        case list():
            # Inline lambda, or any expression producing a function
            return evaluate(head, env)
        case Closure() | Primitive():
            return head
    raise SchemeError("eval: head of the list is not a function")


def evaluate(expr: SExpression, env: Environment) -> SchemeValue:
    """Evaluate `expr` in `env`, raising SchemeError on the first failure."""
    match expr:
        case bool():
            return expr
        case float():
            return expr
        case Symbol():
            return env.lookup(expr)
        case []:
            raise SchemeError("eval: expect a non-empty list")
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)
        case [head, *tail]:
            fn = _resolve_head(head, env)
            # Arguments are evaluated left to right before the call
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, evaluate)

    raise SchemeError(f"eval: unexpected expression {expr!r}")
