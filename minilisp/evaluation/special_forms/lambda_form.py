from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.closure import Closure
from minilisp.types.environment import Environment
from minilisp.types.pair import to_list
from minilisp.types.symbol import Symbol


def make_closure(
    params: SExpression, body: list[SExpression], env: Environment
) -> Closure:
    """Validate a parameter list and body and build a Closure over `env`."""
    formals = to_list(params, "function parameter list")
    for p in formals:
        if not isinstance(p, Symbol):
            raise LispTypeError("function parameter must be a symbol")
    if not body:
        raise LispArityError("function body must contain at least one expression")
    return Closure(formals, list(body), env)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) body...); multiple body forms run as an implicit progn
    params, *body = tail
    return make_closure(params, body, env)
