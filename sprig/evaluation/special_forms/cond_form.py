from sprig import EvaluatorFn
from sprig import SExpression, SchemeValue
from sprig.errors import SchemeError
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> SchemeValue:
    """(cond (test result) ... (else result))

    Clauses are tried in order and the first true test wins; later clauses
    are never evaluated. A literal `else` test always matches.
    """
    for clause in tail:
        if not isinstance(clause, list) or len(clause) != 2:
            raise SchemeError("cond: expected (test result) pairs")
        test, result = clause
        if test == ELSE:
            return evaluate_fn(result, env)
        match evaluate_fn(test, env):
            case True:
                return evaluate_fn(result, env)
            case False:
                continue
            case _:
                raise SchemeError("cond: expected Bool")
    raise SchemeError("cond: missing else clause")
