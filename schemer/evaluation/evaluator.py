"""Core evaluator for Schemer.

There are no bindings: strings, numbers and booleans evaluate to themselves,
(quote x) yields x untouched, and (name arg ...) evaluates the arguments
left to right and applies the named primitive. Every other shape raises an
EvalError.
"""

from __future__ import annotations

from schemer.errors import UnboundSymbol, MalformedForm, SchemerNestingError
from schemer.evaluation.apply import apply
from schemer.limits import recursion_headroom
from schemer.types.values import Value, Atom, List, Number, String, Bool


def evaluate(expr: Value) -> Value:
    try:
        with recursion_headroom():
            return _evaluate(expr)
    except RecursionError:
        raise SchemerNestingError("Form is nested too deeply to evaluate") from None


def _evaluate(expr: Value) -> Value:
    match expr:
        case String() | Number() | Bool():
            return expr
        case List((Atom("quote"), quoted)):
            return quoted
        case List((Atom(name), *args)):
            return apply(name, [_evaluate(arg) for arg in args])
        case Atom(name):
            raise UnboundSymbol(f"Cannot evaluate unbound symbol {name}.")
        case _:
            raise MalformedForm(f"No evaluation rule for {type(expr).__name__} form")
