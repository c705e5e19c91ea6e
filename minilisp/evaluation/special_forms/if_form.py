from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.nil import Nil
from minilisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    cond = evaluate_fn(tail[0], env)
    # Lisp truthiness: anything not Nil is true
    if cond is not Nil:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
