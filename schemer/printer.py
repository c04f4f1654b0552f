"""Concrete-syntax renderer for Schemer values.

Only the variants the evaluator can hand back to the driver have a concrete
syntax here: strings, atoms, numbers, booleans, lists and dotted lists.
Strings are wrapped in double quotes without escaping, so rendering is not
the inverse of reading.
"""

from __future__ import annotations

from typing import Iterable

from schemer.errors import SchemerRenderError
from schemer.limits import int_to_decimal, recursion_headroom
from schemer.types.values import Value, Atom, List, DottedList, Number, String, Bool


def render(value: Value) -> str:
    return _outermost(_render, value)


def unwords_list(values: Iterable[Value]) -> str:
    return _outermost(_unwords, values)


def _outermost(rule, arg) -> str:
    try:
        with recursion_headroom():
            return rule(arg)
    except RecursionError:
        raise SchemerRenderError("Value is nested too deeply to render") from None


def _render(value: Value) -> str:
    match value:
        case String(contents):
            return f'"{contents}"'
        case Atom(name):
            return name
        case Number(n):
            return int_to_decimal(n)
        case Bool(True):
            return "#t"
        case Bool(False):
            return "#f"
        case List(items):
            return f"({_unwords(items)})"
        case DottedList(items, tail):
            return f"({_unwords(items)} . {_render(tail)})"
        case _:
            raise SchemerRenderError(f"No printed representation for {type(value).__name__}")


def _unwords(values: Iterable[Value]) -> str:
    return " ".join([_render(v) for v in values])
