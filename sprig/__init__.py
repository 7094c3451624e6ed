# Core type aliases for Sprig's data model.
# Code and data share one representation: parsed forms are the same values the
# evaluator produces (bool, float, list, Symbol, Closure, Primitive, Empty).
#
# Naming guidance:
# - SExpression: Use in reader/desugar code to denote syntactic forms.
# - SchemeValue: Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
SchemeValue = Any
SExpression = SchemeValue

# Evaluator function type, handed to special forms and apply
EvaluatorFn = Callable[..., SchemeValue]
