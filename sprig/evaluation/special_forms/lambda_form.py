from sprig import EvaluatorFn
from sprig import SExpression, SchemeValue
from sprig.errors import SchemeError
from sprig.types.closure import Closure
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SchemeValue:
    # Desugared input always has exactly one body expression; raw input with
    # several gets the same implicit begin.
    if len(tail) < 2:
        raise SchemeError("lambda: expected a parameter list and a body")

    params, *body_forms = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise SchemeError("lambda: expected a list of Symbols")

    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [Symbol("begin"), *body_forms]

    return Closure(list(params), body, env)
