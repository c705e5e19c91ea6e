from timeit import timeit

from minilisp.interpreter import Interpreter
from minilisp.reader.parser import read_from_string
from minilisp.types.symbol import Symbol
from minilisp.types.environment import Environment


def time_interpreter(code: str, rounds: int, scoping: str = "lexical") -> float:
    """Time evaluation only: parses once and repeatedly evaluates the same form."""
    itp = Interpreter(scoping=scoping)
    expr = read_from_string(code)
    # Warmup
    itp.eval_expr(expr)
    # Timed
    return timeit(lambda: itp.eval_expr(expr), number=rounds)


def time_reader(code: str, rounds: int) -> float:
    return timeit(lambda: read_from_string(code), number=rounds)


# Environment lookup through a deep frame chain

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = env.child()
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    t = timeit(lambda: env.lookup(key), number=n_lookups)
    return t


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

FACTORIAL_CODE = r"""
(progn
  (defun fact (n)
    (if (< n 2)
        1
        (* n (fact (- n 1)))))
  (fact 12))
"""

# Sum 1..N with a while loop (no recursion)
WHILE_SUM_CODE = r"""
(progn
  (define i 0)
  (define acc 0)
  (while (< i 500)
    (define acc (+ acc i))
    (define i (+ i 1)))
  acc)
"""

LIST_BUILD_CODE = r"""
(progn
  (define xs Nil)
  (define n 200)
  (while (> n 0)
    (define xs (cons n xs))
    (define n (- n 1)))
  xs)
"""


def _print_pair(name: str, code: str, rounds: int) -> None:
    tlex = time_interpreter(code, rounds, "lexical")
    tdyn = time_interpreter(code, rounds, "dynamic")
    print(f"Benchmark: {name}")
    print(f"  lexical: {tlex:.6f}s  |  dynamic: {tdyn:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    # Pure environment benchmark
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    print("Benchmark: reader (factorial source)")
    print(f"  time: {time_reader(FACTORIAL_CODE, 2000):.6f}s")

    _print_pair("lambda application", LAMBDA_APPLY_CODE, rounds=20000)
    _print_pair("recursion (factorial)", FACTORIAL_CODE, rounds=500)
    _print_pair("while loop sum 0..499", WHILE_SUM_CODE, rounds=200)
    _print_pair("list build with cons", LIST_BUILD_CODE, rounds=200)
