"""Numeric literal rules for the Schemer reader.

Each rule takes the Reader positioned at the literal and either returns the
parsed value or raises SchemerParseError. Only parse_number is reachable from
the top-level grammar for plain digit strings; parse_float, parse_ratio and
parse_complex are tried after it and can be called directly.
"""

from __future__ import annotations

import math
from fractions import Fraction
from functools import partial
from typing import TYPE_CHECKING

from schemer.errors import SchemerParseError
from schemer.limits import decimal_to_int
from schemer.types.values import Number, Float, Ratio, Complex

if TYPE_CHECKING:
    from schemer.reader.parser import Reader


def _digits(reader: Reader) -> str:
    return "".join(reader.many1(reader.digit))


def binary_to_int(digits: str) -> int:
    """Fold a string of 0/1 digits into an int, most significant digit first."""
    value = 0
    for d in digits:
        value = 2 * value + (0 if d == "0" else 1)
    return value


def parse_decimal(reader: Reader) -> Number:
    return Number(decimal_to_int(_digits(reader)))


def parse_prefixed_decimal(reader: Reader) -> Number:
    reader.attempt(partial(reader.string, "#d"))
    return Number(decimal_to_int(_digits(reader)))


def parse_hex(reader: Reader) -> Number:
    reader.attempt(partial(reader.string, "#x"))
    return Number(int("".join(reader.many1(reader.hex_digit)), 16))


def parse_octal(reader: Reader) -> Number:
    reader.attempt(partial(reader.string, "#o"))
    return Number(int("".join(reader.many1(reader.oct_digit)), 8))


def parse_binary(reader: Reader) -> Number:
    reader.attempt(partial(reader.string, "#b"))
    return Number(binary_to_int("".join(reader.many1(lambda: reader.one_of("10", "binary digit")))))


def parse_number(reader: Reader) -> Number:
    return reader.choice(
        partial(parse_decimal, reader),
        partial(parse_prefixed_decimal, reader),
        partial(parse_hex, reader),
        partial(parse_octal, reader),
        partial(parse_binary, reader),
    )


def parse_float(reader: Reader) -> Float:
    whole = _digits(reader)
    reader.char(".")
    fraction = _digits(reader)
    return Float(float(f"{whole}.{fraction}"))


def parse_ratio(reader: Reader) -> Ratio:
    numerator = _digits(reader)
    reader.char("/")
    start = reader.pos
    denominator = decimal_to_int(_digits(reader))
    if denominator == 0:
        raise SchemerParseError(start, ("non-zero denominator",), repr("0"))
    return Ratio(Fraction(decimal_to_int(numerator), denominator))


def _to_double(value: Number | Float) -> float:
    if isinstance(value, Float):
        return value.value
    try:
        return float(value.value)
    except OverflowError:
        return math.inf


def _complex_part(reader: Reader) -> float:
    part = reader.choice(
        reader.backtracking(partial(parse_float, reader)),
        partial(parse_decimal, reader),
        partial(parse_prefixed_decimal, reader),
    )
    return _to_double(part)


def parse_complex(reader: Reader) -> Complex:
    real = _complex_part(reader)
    reader.char("+")
    imaginary = _complex_part(reader)
    reader.char("i")
    return Complex(complex(real, imaginary))
