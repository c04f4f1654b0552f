# Schemer: a reader and evaluator for a small Scheme-like expression language.
#
# Code and results share one closed family of immutable values (schemer.types).
# The reader turns text into a Value, the evaluator reduces a Value against a
# fixed table of integer primitives, and the printer renders the result.
#
# Naming guidance:
# - read_expr: text -> Value. Never raises on bad input; see schemer.reader.
# - evaluate:  Value -> Value. Raises an EvalError for shapes with no rule.
# - render:    Value -> text, for the variants that have a printed form.

from schemer.reader.parser import read_expr
from schemer.evaluation.evaluator import evaluate
from schemer.printer import render
from schemer.interpreter import Interpreter

__version__ = "0.1.0"

__all__ = ["read_expr", "evaluate", "render", "Interpreter"]
