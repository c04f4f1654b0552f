from __future__ import annotations

import re
from functools import reduce
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from schemer.errors import SchemerArityError, SchemerDivisionByZero
from schemer.limits import decimal_to_int
from schemer.types.values import Value, Number, String, List

Primitive = Callable[[Sequence[Value]], Value]

# Leading integer of a string, read the way Haskell's `reads` reads an Integer:
# a decimal with a fractional part or exponent attached is not an integer at all.
_LEADING_INTEGER = re.compile(
    r"\s*(?P<minus>-\s*)?"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)"
    r"|0[oO](?P<oct>[0-7]+)"
    r"|(?P<dec>[0-9]+)(?P<inexact>\.[0-9]+|[eE][+-]?[0-9]+)?)"
)


def read_leading_integer(text: str) -> int | None:
    m = _LEADING_INTEGER.match(text)
    if m is None or m.group("inexact"):
        return None
    if m.group("hex"):
        n = int(m.group("hex"), 16)
    elif m.group("oct"):
        n = int(m.group("oct"), 8)
    else:
        n = decimal_to_int(m.group("dec"))
    return -n if m.group("minus") else n


def unpack_num(value: Value) -> int:
    """Coerce a primitive argument to an int; anything unreadable is 0."""
    match value:
        case Number(n):
            return n
        case String(s):
            n = read_leading_integer(s)
            return 0 if n is None else n
        case List((single,)):
            return unpack_num(single)
        case _:
            return 0


# -------------------------------
# Integer division family
# -------------------------------
def quot(a: int, b: int) -> int:
    """Division truncated toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def rem(a: int, b: int) -> int:
    """Remainder of quot; takes the sign of the dividend."""
    return a - b * quot(a, b)


def numeric_binop(name: str, op: Callable[[int, int], int]) -> Primitive:
    def fold(args: Sequence[Value]) -> Value:
        if not args:
            raise SchemerArityError(f"{name} requires at least 1 argument")
        try:
            return Number(reduce(op, map(unpack_num, args)))
        except ZeroDivisionError:
            raise SchemerDivisionByZero(f"{name}: division by zero") from None

    fold.__name__ = f"primitive_{name}"
    return fold


PRIMITIVES: Mapping[str, Primitive] = MappingProxyType({
    "+": numeric_binop("+", lambda a, b: a + b),
    "-": numeric_binop("-", lambda a, b: a - b),
    "*": numeric_binop("*", lambda a, b: a * b),
    "/": numeric_binop("/", lambda a, b: a // b),
    "mod": numeric_binop("mod", lambda a, b: a % b),
    "quotient": numeric_binop("quotient", quot),
    "remainder": numeric_binop("remainder", rem),
})
