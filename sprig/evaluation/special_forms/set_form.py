from sprig import EvaluatorFn
from sprig import SExpression, SchemeValue
from sprig.errors import SchemeError
from sprig.types.empty import Empty
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SchemeValue:
    if len(tail) != 2:
        raise SchemeError("set!: expected exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SchemeError("set!: expected Symbol")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return Empty
