from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.evaluation.apply import eval_sequence
from minilisp.types.environment import Environment


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    return eval_sequence(tail, env, evaluate_fn)
