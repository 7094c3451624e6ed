"""Rewrites applied to each top-level form before evaluation.

    (define (f . params) body...)    =>  (define f (lambda params body...))
    (lambda params b1 b2 ...)        =>  (lambda params (begin b1 b2 ...))

Every other list is rebuilt from its desugared children; atoms pass through.
Already-canonical forms come back structurally equal.
"""

from __future__ import annotations

from sprig import SExpression
from sprig.errors import SchemeError
from sprig.types.symbol import Symbol

DEFINE = Symbol("define")
LAMBDA = Symbol("lambda")
BEGIN = Symbol("begin")


def _require_len(form: list[SExpression], min_len: int) -> None:
    if len(form) < min_len:
        raise SchemeError(f"desugar: too few arguments ({len(form)}/{min_len})")


def _desugar_define(form: list[SExpression]) -> SExpression:
    _require_len(form, 3)
    target = form[1]
    if not isinstance(target, list):
        return [desugar(x) for x in form]
    _require_len(target, 1)
    name, *params = target
    if not isinstance(name, Symbol):
        raise SchemeError("desugar: can only define a Symbol")
    body = form[2:]
    return desugar([DEFINE, name, [LAMBDA, params, *body]])


def _desugar_lambda(form: list[SExpression]) -> SExpression:
    if len(form) > 3:
        params, *body = form[1:]
        form = [LAMBDA, params, [BEGIN, *body]]
    return [desugar(x) for x in form]


def desugar(expr: SExpression) -> SExpression:
    if not isinstance(expr, list):
        return expr
    if expr:
        head = expr[0]
        if head == DEFINE:
            return _desugar_define(expr)
        if head == LAMBDA:
            return _desugar_lambda(expr)
    return [desugar(x) for x in expr]
