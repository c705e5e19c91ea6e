# Core type aliases for the minilisp data model.
# Code and data share one representation: integers are Python ints, symbols are
# interned Symbol objects, lists are chains of mutable Pair cells ending in Nil.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type: passed to special forms so they can evaluate their arguments
EvaluatorFn = Callable[..., LispValue]
