from sprig import SExpression, SchemeValue, EvaluatorFn
from sprig.errors import SchemeError
from sprig.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> SchemeValue:
    """(quote datum)

    Hands back the parsed datum itself: nested lists stay the reader's lists,
    nothing is copied or rebuilt into pairs.
    """
    if len(tail) != 1:
        raise SchemeError("quote: expected exactly 1 argument")
    return tail[0]
