from minilisp import EvaluatorFn, SExpression
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, T


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Short-circuiting logical AND.

    (and a b c ...) evaluates each operand left-to-right and returns Nil as soon
    as one evaluates to Nil. If every operand is truthy (or there are none),
    returns True.
    """
    for expr in tail:
        if evaluate_fn(expr, env) is Nil:
            return Nil
    return T


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """Short-circuiting logical OR.

    (or a b c ...) evaluates each operand left-to-right and returns True as soon
    as one is truthy. If none are (or there are none), returns Nil.
    """
    for expr in tail:
        if evaluate_fn(expr, env) is not Nil:
            return T
    return Nil
