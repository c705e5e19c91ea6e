from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.nil import Nil
from minilisp.types.environment import Environment


def while_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(while cond body...)

    Re-evaluates `cond` before every pass and evaluates each body form once per
    pass. Runs as a Python loop, so iteration count never touches the stack.
    """
    cond, *body = tail
    while evaluate_fn(cond, env) is not Nil:
        for expr in body:
            evaluate_fn(expr, env)
    return Nil
