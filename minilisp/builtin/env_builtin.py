"""Built-in functions for the minilisp runtime environment.

This module defines the arithmetic, comparison, list processing and output
primitives that receive evaluated arguments, and `register`, which installs
them together with the special forms and the Nil/True atoms into a root frame.
"""
from __future__ import annotations

from minilisp import LispValue
from minilisp.errors import LispTypeError
from minilisp.evaluation.evaluator import evaluate
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.printer import to_str
from minilisp.runtime_context import get_current_output
from minilisp.types.environment import Environment
from minilisp.types.integer import fixnum, is_integer
from minilisp.types.nil import Nil, T, from_bool
from minilisp.types.pair import Pair, from_iterable, proper_length
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol


def _integers(name: str, args: list[LispValue]) -> list[int]:
    for a in args:
        if not is_integer(a):
            raise LispTypeError(f"{name} accepts only integers, got {to_str(a)}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> int:
    """Sum of all arguments; 0 with no arguments."""
    return fixnum(sum(_integers("+", args)))


def sub(env: Environment, args: list[LispValue]) -> int:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    first, *rest = _integers("-", args)
    if not rest:
        return fixnum(-first)
    result = first
    for x in rest:
        result -= x
    return fixnum(result)


def mul(env: Environment, args: list[LispValue]) -> int:
    result = 1
    for x in _integers("*", args):
        result *= x
    return fixnum(result)


# -------------------------------
# Comparison
# -------------------------------
def num_eq(env: Environment, args: list[LispValue]) -> LispValue:
    a, b = _integers("=", args)
    return from_bool(a == b)


def lt(env: Environment, args: list[LispValue]) -> LispValue:
    a, b = _integers("<", args)
    return from_bool(a < b)


def gt(env: Environment, args: list[LispValue]) -> LispValue:
    a, b = _integers(">", args)
    return from_bool(a > b)


def eq(env: Environment, args: list[LispValue]) -> LispValue:
    """Identity comparison. Integers are immediate values and compare by value."""
    a, b = args
    if is_integer(a) and is_integer(b):
        return from_bool(a == b)
    return from_bool(a is b)


# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, args: list[LispValue]) -> Pair:
    car, cdr = args
    return Pair(car, cdr)


def car(env: Environment, args: list[LispValue]) -> LispValue:
    (cell,) = args
    if not isinstance(cell, Pair):
        raise LispTypeError("car accepts single list argument only")
    return cell.car


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    (cell,) = args
    if not isinstance(cell, Pair):
        raise LispTypeError("cdr accepts single list argument only")
    return cell.cdr


def setcar(env: Environment, args: list[LispValue]) -> Pair:
    """Replace the car of a pair in place and return the pair."""
    cell, value = args
    if not isinstance(cell, Pair):
        raise LispTypeError("setcar accepts two arguments only, with first being a cons cell")
    cell.car = value
    return cell


def setcdr(env: Environment, args: list[LispValue]) -> Pair:
    """Replace the cdr of a pair in place and return the pair."""
    cell, value = args
    if not isinstance(cell, Pair):
        raise LispTypeError("setcdr accepts two arguments only, with first being a cons cell")
    cell.cdr = value
    return cell


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return from_iterable(args)


def length(env: Environment, args: list[LispValue]) -> int:
    (xs,) = args
    n = proper_length(xs)
    if n is None:
        raise LispTypeError(f"length accepts a proper list only, got {to_str(xs)}")
    return n


def atom(env: Environment, args: list[LispValue]) -> LispValue:
    """True for every value that is not a pair."""
    return from_bool(not isinstance(args[0], Pair))


def null(env: Environment, args: list[LispValue]) -> LispValue:
    return from_bool(args[0] is Nil)


# -------------------------------
# Evaluation and output
# -------------------------------
def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Evaluate an already-evaluated form again in the caller's environment."""
    return evaluate(args[0], env)


def println(env: Environment, args: list[LispValue]) -> LispValue:
    out = get_current_output()
    out.write(to_str(args[0]))
    out.write("\n")
    return Nil


BUILTINS = {
    "car": (car, 1, 1),
    "cdr": (cdr, 1, 1),
    "cons": (cons, 2, 2),
    "=": (num_eq, 2, 2),
    ">": (gt, 2, 2),
    "<": (lt, 2, 2),
    "eq": (eq, 2, 2),
    "+": (add, 0, None),
    "-": (sub, 1, None),
    "*": (mul, 2, None),
    "println": (println, 1, 1),
    "setcar": (setcar, 2, 2),
    "setcdr": (setcdr, 2, 2),
    "list": (list_builtin, 0, None),
    "length": (length, 1, 1),
    "atom": (atom, 1, 1),
    "null": (null, 1, 1),
    "eval": (eval_builtin, 1, 1),
}


def register(env: Environment) -> None:
    """Register all builtin functions, special forms and constants into `env`."""
    env.define(Symbol("Nil"), Nil)
    env.define(Symbol("True"), T)
    env.update(
        {
            Symbol(name): Primitive(name, fn, special=True, min_args=lo, max_args=hi)
            for name, (fn, lo, hi) in SPECIAL_FORMS.items()
        }
    )
    env.update(
        {
            Symbol(name): Primitive(name, fn, min_args=lo, max_args=hi)
            for name, (fn, lo, hi) in BUILTINS.items()
        }
    )


def make_root_environment() -> Environment:
    env = Environment()
    register(env)
    return env
