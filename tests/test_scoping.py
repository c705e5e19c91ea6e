"""Closure scoping policies.

Lexical (default): a closure's frame chains to the environment where the
closure was created. Dynamic: it chains to the caller's environment.
"""

import pytest

from minilisp.errors import LispUndefinedSymbol
from minilisp.interpreter import Interpreter


def test_free_variable_from_root(any_interp):
    any_interp.eval("(define x 5) (define f (lambda (n) (+ n x)))")
    assert any_interp.eval("(f 10)") == 15


SHADOWED = """
(define x 1)
(defun get-x () x)
(defun shadow (x) (get-x))
(shadow 2)
"""


def test_lexical_ignores_caller_bindings():
    assert Interpreter(scoping="lexical").eval(SHADOWED) == 1


def test_dynamic_sees_caller_bindings():
    assert Interpreter(scoping="dynamic").eval(SHADOWED) == 2


MAKE_ADDER = """
(defun make-adder (n) (lambda (m) (+ n m)))
(define add3 (make-adder 3))
"""


def test_lexical_closures_capture_definition_site():
    itp = Interpreter(scoping="lexical")
    itp.eval(MAKE_ADDER)
    assert itp.eval("(add3 4)") == 7
    assert itp.eval("((make-adder 10) 1)") == 11


def test_dynamic_closures_do_not_capture():
    itp = Interpreter(scoping="dynamic")
    itp.eval(MAKE_ADDER)
    with pytest.raises(LispUndefinedSymbol):
        itp.eval("(add3 4)")


def test_lexical_counter_state():
    itp = Interpreter(scoping="lexical")
    itp.eval("""
        (defun make-counter ()
          (define cell (cons 0 Nil))
          (lambda () (setcar cell (+ (car cell) 1)) (car cell)))
        (define next (make-counter))
    """)
    assert [itp.eval("(next)") for _ in range(3)] == [1, 2, 3]


def test_scoping_from_environment(monkeypatch):
    monkeypatch.setenv("MINILISP_SCOPING", "dynamic")
    itp = Interpreter()
    assert itp.scoping == "dynamic"
    assert itp.eval(SHADOWED) == 2


def test_invalid_scoping_from_environment_falls_back(monkeypatch):
    monkeypatch.setenv("MINILISP_SCOPING", "sideways")
    assert Interpreter().scoping == "lexical"


def test_invalid_scoping_argument():
    with pytest.raises(ValueError):
        Interpreter(scoping="sideways")


def test_interpreters_keep_their_own_policy():
    lexical = Interpreter(scoping="lexical")
    dynamic = Interpreter(scoping="dynamic")
    assert dynamic.eval(SHADOWED) == 2
    assert lexical.eval(SHADOWED) == 1
    assert dynamic.eval("(shadow 3)") == 3
