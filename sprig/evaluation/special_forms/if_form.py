from sprig import EvaluatorFn
from sprig import SExpression, SchemeValue
from sprig.errors import SchemeError
from sprig.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SchemeValue:
    if len(tail) != 3:
        raise SchemeError("if: expected a condition, a then clause and an else clause")

    condition, then_, else_ = tail
    # No truthiness: only a Bool may steer the branch
    match evaluate_fn(condition, env):
        case True:
            return evaluate_fn(then_, env)
        case False:
            return evaluate_fn(else_, env)
        case _:
            raise SchemeError("if: expected Bool")
