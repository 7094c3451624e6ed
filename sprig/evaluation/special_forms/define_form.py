from sprig import EvaluatorFn
from sprig import SExpression, SchemeValue
from sprig.errors import SchemeError
from sprig.types.empty import Empty
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SchemeValue:
    """
    (define name value)
    Binds in the current frame only; outer bindings of `name` are shadowed, not changed.
    """
    if len(tail) != 2:
        raise SchemeError("define: expected a Symbol and a definition")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SchemeError("define: expected Symbol")
    env.define(name, evaluate_fn(val_expr, env))
    return Empty
