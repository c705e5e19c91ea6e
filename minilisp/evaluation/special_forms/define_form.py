from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispTypeError
from minilisp.types.symbol import Symbol
from minilisp.types.environment import Environment
from minilisp.evaluation.special_forms.lambda_form import make_closure


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds name in the innermost frame and returns the value.
    """
    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispTypeError(
            "define accepts two arguments only, with first one being a symbol"
        )
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params...) body...)
    Same as (define name (lambda (params...) body...)).
    """
    name, params, *body = tail
    if not isinstance(name, Symbol):
        raise LispTypeError("defun name must be a symbol")
    fn = make_closure(params, body, env)
    env.define(name, fn)
    return fn
