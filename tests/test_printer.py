from fractions import Fraction

import pytest

from schemer.errors import SchemerRenderError
from schemer.printer import render, unwords_list
from schemer.reader.parser import read_expr
from schemer.types import (
    Atom, List, DottedList, Number, String, Bool, Character, Float, Ratio, Complex, Vector,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (String("hello"), '"hello"'),
        (String('say "hi"'), '"say "hi""'),
        (String("a\\b"), '"a\\b"'),
        (Atom("foo"), "foo"),
        (Number(42), "42"),
        (Number(-12), "-12"),
        (Number(0), "0"),
        (Bool(True), "#t"),
        (Bool(False), "#f"),
        (List([]), "()"),
        (List([Number(1), Number(2), Number(3)]), "(1 2 3)"),
        (List([Atom("a"), List([String("b")])]), '(a ("b"))'),
        (DottedList([Number(1), Number(2)], Number(3)), "(1 2 . 3)"),
        (DottedList([Atom("a")], List([Atom("b")])), "(a . (b))"),
    ],
)
def test_render(value, expected):
    assert render(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        Character("a"),
        Float(1.5),
        Ratio(Fraction(1, 2)),
        Complex(1 + 2j),
        Vector([Number(1)]),
        List([Number(1), Vector([])]),
    ],
)
def test_render_has_no_form_for_other_variants(value):
    with pytest.raises(SchemerRenderError):
        render(value)


def test_unwords_list():
    assert unwords_list([Number(1), Atom("b"), String("c")]) == '1 b "c"'
    assert unwords_list([]) == ""


@pytest.mark.parametrize("source", ['"hello"', "(1 2 3)", "(a b . c)", "(+ 1 (* 2 3))", "#t", "foo"])
def test_render_round_trips_unescaped_text(source):
    assert render(read_expr(source)) == source


def test_render_reads_canonical_numbers():
    assert render(read_expr("#xFF")) == "255"
    assert render(read_expr("'(1 #b11)")) == "(quote (1 3))"


def test_render_long_numbers():
    assert render(Number(10**5000)) == "1" + "0" * 5000
    assert render(Number(-(10**5000))) == "-1" + "0" * 5000


def test_render_deeply_nested_lists():
    assert render(read_expr("(" * 500 + ")" * 500)) == "(" * 500 + ")" * 500


def test_render_reports_nesting_it_cannot_reach():
    value = List([])
    for _ in range(150_000):
        value = List([value])
    with pytest.raises(SchemerRenderError):
        render(value)
