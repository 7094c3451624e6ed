from sprig import EvaluatorFn
from sprig import SExpression, SchemeValue
from sprig.types.empty import Empty
from sprig.types.environment import Environment


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SchemeValue:
    result: SchemeValue = Empty
    for e in tail:
        result = evaluate_fn(e, env)
    return result
