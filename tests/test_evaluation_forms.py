import pytest

from minilisp.errors import LispArityError, LispTypeError, LispUndefinedSymbol
from minilisp.printer import to_str
from minilisp.types.closure import Closure
from minilisp.types.nil import Nil, T
from minilisp.types.symbol import Symbol


# ------------------ if ------------------

@pytest.mark.parametrize(
    "expr, expected",
    [
        ("(if Nil 1 2)", 2),
        ("(if True 1 2)", 1),
        ("(if True 1)", 1),
        ("(if 0 1 2)", 1),
        ("(if (quote ()) 1 2)", 2),
        ("(if (< 1 2) (+ 1 1) (undefined))", 2),
    ],
)
def test_if(any_interp, expr, expected):
    assert any_interp.eval(expr) == expected


def test_if_without_else_returns_nil(interp):
    assert interp.eval("(if Nil 1)") is Nil


def test_if_only_evaluates_taken_branch(interp, capsys):
    interp.eval("(if True (println 1) (println 2))")
    interp.eval("(if Nil (println 3) (println 4))")
    assert capsys.readouterr().out == "1\n4\n"


@pytest.mark.parametrize("expr", ["(if True)", "(if True 1 2 3)", "(if)"])
def test_if_arity(interp, expr):
    with pytest.raises(LispArityError):
        interp.eval(expr)


# ------------------ and / or ------------------

@pytest.mark.parametrize(
    "expr, expected",
    [
        ("(and)", T),
        ("(and 1 2 3)", T),
        ("(and 1 Nil 3)", Nil),
        ("(or)", Nil),
        ("(or Nil Nil)", Nil),
        ("(or Nil 5)", T),
    ],
)
def test_logic(interp, expr, expected):
    assert interp.eval(expr) is expected


def test_logic_short_circuits(interp):
    assert interp.eval("(and Nil (undefined-fn))") is Nil
    assert interp.eval("(or True (undefined-fn))") is T
    with pytest.raises(LispUndefinedSymbol):
        interp.eval("(and True (undefined-fn))")


# ------------------ quote ------------------

def test_quote(interp):
    assert to_str(interp.eval("(quote (1 2 3))")) == "(1 2 3)"
    assert to_str(interp.eval("'(a (b) c)")) == "(a (b) c)"
    assert interp.eval("'a") is Symbol("a")
    assert interp.eval("(quote ())") is Nil
    assert to_str(interp.eval("''a")) == "(quote a)"


@pytest.mark.parametrize("expr", ["(quote)", "(quote a b)"])
def test_quote_arity(interp, expr):
    with pytest.raises(LispArityError):
        interp.eval(expr)


# ------------------ define / defun ------------------

def test_define_returns_value(interp):
    assert interp.eval("(define x (+ 2 3))") == 5
    assert interp.eval("x") == 5
    assert interp.eval("(define x 6) x") == 6


def test_define_requires_symbol_name(interp):
    with pytest.raises(LispTypeError):
        interp.eval("(define 1 2)")
    with pytest.raises(LispTypeError):
        interp.eval("(define (quote x) 2)")


@pytest.mark.parametrize("expr", ["(define)", "(define x)", "(define x 1 2)"])
def test_define_arity(interp, expr):
    with pytest.raises(LispArityError):
        interp.eval(expr)


def test_define_inside_function_is_local(any_interp):
    any_interp.eval("(define y 1)")
    any_interp.eval("(defun f () (define y 2) (define z 3) y)")
    assert any_interp.eval("(f)") == 2
    assert any_interp.eval("y") == 1
    with pytest.raises(LispUndefinedSymbol):
        any_interp.eval("z")


def test_defun(interp):
    fn = interp.eval("(defun square (x) (* x x))")
    assert isinstance(fn, Closure)
    assert interp.eval("square") is fn
    assert interp.eval("(square 7)") == 49


def test_defun_errors(interp):
    with pytest.raises(LispArityError):
        interp.eval("(defun f (x))")
    with pytest.raises(LispTypeError):
        interp.eval("(defun 1 (x) x)")


# ------------------ lambda ------------------

def test_lambda_errors(interp):
    with pytest.raises(LispTypeError, match="parameter must be a symbol"):
        interp.eval("(lambda (1) 1)")
    with pytest.raises(LispTypeError):
        interp.eval("(lambda (a . b) a)")
    with pytest.raises(LispArityError):
        interp.eval("(lambda (x))")
    with pytest.raises(LispArityError):
        interp.eval("(lambda)")


def test_lambda_prints_as_function(interp):
    assert to_str(interp.eval("(lambda (x) x)")) == "<function>"


# ------------------ progn ------------------

def test_progn(interp, capsys):
    assert interp.eval("(progn (println 1) (println 2) 3)") == 3
    assert capsys.readouterr().out == "1\n2\n"
    assert interp.eval("(progn)") is Nil


# ------------------ while ------------------

def test_while_counts_down(any_interp):
    any_interp.eval("(define x 3)")
    assert any_interp.eval("(while (> x 0) (define x (- x 1)))") is Nil
    assert any_interp.eval("x") == 0


def test_while_runs_every_body_form_each_pass(interp, capsys):
    interp.eval("""
        (define i 0)
        (define total 0)
        (while (< i 3)
          (define total (+ total i))
          (println i)
          (define i (+ i 1)))
    """)
    assert interp.eval("total") == 3
    assert capsys.readouterr().out == "0\n1\n2\n"


def test_while_false_condition_skips_body(interp, capsys):
    assert interp.eval("(while Nil (println 1))") is Nil
    assert capsys.readouterr().out == ""


def test_while_many_iterations_do_not_grow_stack(interp):
    interp.eval("(define n 5000) (while (> n 0) (define n (- n 1)))")
    assert interp.eval("n") == 0


@pytest.mark.parametrize("expr", ["(while)", "(while True)"])
def test_while_arity(interp, expr):
    with pytest.raises(LispArityError):
        interp.eval(expr)
