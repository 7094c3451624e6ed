"""Application engine for Sprig.

Applies a callable value to arguments that have already been evaluated:
- Primitives receive the argument list directly and do their own checking.
- Closures get a fresh call frame, parented to the environment captured when
  the lambda was evaluated, and their body is evaluated in it.
"""

from sprig import SchemeValue, EvaluatorFn
from sprig.errors import SchemeError
from sprig.types.closure import Closure
from sprig.types.primitive import Primitive


def apply_closure(
    fn: Closure, args: list[SchemeValue], evaluate_fn: EvaluatorFn
) -> SchemeValue:
    frame = fn.extend_env(args)
    return evaluate_fn(fn.body, frame)


def apply(
    head: Closure | Primitive | object,
    args: list[SchemeValue],
    evaluate_fn: EvaluatorFn,
) -> SchemeValue:
    """Apply either a Closure or a Primitive; anything else is not a function."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Primitive):
        return head(args)
    else:
        raise SchemeError(f"apply: {head!r} is not a function")
