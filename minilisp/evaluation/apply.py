"""Application engine for minilisp.

This module centralizes function application semantics for the interpreter:
- Primitives tagged `special` receive their argument expressions unevaluated.
- Other primitives and closures receive arguments evaluated left to right in
  the caller's environment.
- Closure bodies run in a fresh frame chained to either the defining
  environment (lexical scoping) or the caller's environment (dynamic scoping),
  as selected by the runtime context.
"""

from __future__ import annotations

from minilisp import EvaluatorFn, LispValue, SExpression
from minilisp.errors import LispArityError, LispTypeError
from minilisp.runtime_context import get_current_scoping
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.pair import to_list
from minilisp.types.primitive import Primitive


def eval_args(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[LispValue]:
    """Evaluate every expression in `tail` left to right."""
    return [evaluate_fn(arg, env) for arg in tail]


def eval_sequence(
    body: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Evaluate expressions in order and return the last value (Nil if empty)."""
    result: LispValue = Nil
    for expr in body:
        result = evaluate_fn(expr, env)
    return result


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Parameters are bound positionally in a new frame; the arity must match
    exactly. The value of the last body expression is returned.
    """
    if len(args) != len(fn.params):
        raise LispArityError(
            f"function expects {len(fn.params)} arguments, got {len(args)}"
        )
    parent = fn.env if get_current_scoping() == "lexical" else caller_env
    frame = parent.child()
    for param, value in zip(fn.params, args):
        frame.define(param, value)
    return eval_sequence(fn.body, frame, evaluate_fn)


def apply(
    head: LispValue,
    arg_exprs: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Primitive or Closure to an unevaluated argument list.

    `arg_exprs` is the Lisp list of argument expressions (Nil or a Pair chain).
    """
    tail = to_list(arg_exprs, "Function argument")
    if isinstance(head, Primitive):
        head.check_arity(len(tail))
        if head.special:
            return head.fn(tail, env, evaluate_fn)
        return head.fn(env, eval_args(tail, env, evaluate_fn))
    if isinstance(head, Closure):
        return apply_closure(head, eval_args(tail, env, evaluate_fn), env, evaluate_fn)
    raise LispTypeError("The first element of list must be a function")
