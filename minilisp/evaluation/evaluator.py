"""Core evaluator for the minilisp interpreter.

Evaluation dispatches on the type of the expression:
- Symbols are looked up in the environment chain.
- Pairs are applications: the car is evaluated to a function and the cdr is
  handed, unevaluated, to the apply engine.
- Integers, Nil, T, primitives and closures evaluate to themselves.
"""

from __future__ import annotations

from minilisp import LispValue, SExpression
from minilisp.errors import LispTypeError
from minilisp.evaluation.apply import apply
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.integer import is_integer
from minilisp.types.nil import NilType, TrueType
from minilisp.types.pair import Pair, is_list
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol

_SELF_EVALUATING = (NilType, TrueType, Primitive, Closure)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    if isinstance(expr, Symbol):
        return env.lookup(expr)

    if isinstance(expr, Pair):
        head = evaluate(expr.car, env)
        if not isinstance(head, (Primitive, Closure)):
            raise LispTypeError("The first element of list must be a function")
        if not is_list(expr.cdr):
            raise LispTypeError("Function argument must be a list")
        return apply(head, expr.cdr, env, evaluate)

    # --- Atoms return as-is ---
    if is_integer(expr) or isinstance(expr, _SELF_EVALUATING):
        return expr

    # Nothing else comes out of the reader
    return None
