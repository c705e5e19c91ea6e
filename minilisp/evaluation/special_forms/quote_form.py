from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x) returns x without evaluating it."""
    return tail[0]
