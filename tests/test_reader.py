import pytest

from schemer.reader.parser import Reader, read_expr
from schemer.types import Atom, List, DottedList, Number, String, Bool, Character, Vector


def q(marker, value):
    return List([Atom(marker), value])


@pytest.mark.parametrize(
    "source, expected",
    [
        # atoms
        ("foo", Atom("foo")),
        ("list->vector", Atom("list->vector")),
        ("+", Atom("+")),
        ("-5", Atom("-5")),
        ("a1b2", Atom("a1b2")),
        ("?!", Atom("?!")),
        # strings
        ('"hello"', String("hello")),
        ('""', String("")),
        (r'"a\"b"', String('a"b')),
        (r'"back\\slash"', String("back\\slash")),
        (r'"tab\tnl\ncr\r"', String("tab\tnl\ncr\r")),
        # numbers
        ("0", Number(0)),
        ("123", Number(123)),
        ("#d42", Number(42)),
        ("#xFF", Number(255)),
        ("#xff", Number(255)),
        ("#o17", Number(15)),
        ("#b1010", Number(10)),
        ("#b0", Number(0)),
        # booleans
        ("#t", Bool(True)),
        ("#f", Bool(False)),
        # characters
        ("#\\a", Character("a")),
        ("#\\Z", Character("Z")),
        ("#\\(", Character("(")),
        ("#\\space", Character(" ")),
        ("#\\newline", Character("\n")),
        ("#\\n", Character("n")),
        ("#\\s", Character("s")),
        # quote forms
        ("'a", q("quote", Atom("a"))),
        ("`a", q("quasiquote", Atom("a"))),
        (",a", q("unquote", Atom("a"))),
        ("'(1 2)", q("quote", List([Number(1), Number(2)]))),
        ("''a", q("quote", q("quote", Atom("a")))),
        # vectors
        ("#()", Vector([])),
        ("#(1 2 3)", Vector([Number(1), Number(2), Number(3)])),
        ("#(a #(b) \"c\")", Vector([Atom("a"), Vector([Atom("b")]), String("c")])),
        # lists
        ("()", List([])),
        ("(1 2 3)", List([Number(1), Number(2), Number(3)])),
        ("(+ 1 (* 2 3))", List([Atom("+"), Number(1), List([Atom("*"), Number(2), Number(3)])])),
        ("(a  b)", List([Atom("a"), Atom("b")])),
        ("(a\nb\tc)", List([Atom("a"), Atom("b"), Atom("c")])),
        ("((a) (b))", List([List([Atom("a")]), List([Atom("b")])])),
        # dotted lists
        ("(1 2 . 3)", DottedList([Number(1), Number(2)], Number(3))),
        ("(a . b)", DottedList([Atom("a")], Atom("b"))),
        ("(a . (b c))", DottedList([Atom("a")], List([Atom("b"), Atom("c")]))),
        ("(. 3)", DottedList([], Number(3))),
    ],
)
def test_read_expr(source, expected):
    assert read_expr(source) == expected


def test_vector_size_matches_element_count():
    vec = read_expr("#(1 2 3 4)")
    assert len(vec) == 4
    assert vec.ref(3) == Number(4)


@pytest.mark.parametrize(
    "source, expected",
    [
        # decimal Number comes first in the grammar and wins on the leading digits
        ("3.14", Number(3)),
        ("1/2", Number(1)),
        ("1+2i", Number(1)),
        # only the first expression is read
        ("(+ 1 2) trailing", List([Atom("+"), Number(1), Number(2)])),
        ("#b102", Number(2)),
        ("#\\spaces", Character(" ")),
    ],
)
def test_ordered_choice_consequences(source, expected):
    assert read_expr(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        '"abc',
        r'"bad \q escape"',
        "",
        " 1",
        "( 1)",
        "(1 2 )",
        "(1 2",
        "(1 . )",
        "#\\ab",
        "#(1 2",
        "#z",
        ")",
        ".",
        "#d",
    ],
)
def test_malformed_input_becomes_no_match_string(source):
    result = read_expr(source)
    assert isinstance(result, String)
    assert result.value.startswith("No match:")


def test_no_match_detail_has_source_and_position():
    result = read_expr('"abc')
    assert result.value.startswith('No match: "lisp" (line 1, column 5):')
    assert "unexpected end of input" in result.value


def test_no_match_detail_reports_lines():
    result = read_expr('(+ 1\n"ab', source_name="repl")
    assert result.value.startswith('No match: "repl" (line 2, column 4):')


def test_reader_rules_are_usable_directly():
    reader = Reader("(a b . c) rest")
    assert reader.parse_expr() == DottedList([Atom("a"), Atom("b")], Atom("c"))
    assert reader.source[reader.pos:] == " rest"


def test_line_column():
    reader = Reader("ab\ncd")
    assert reader.line_column(0) == (1, 1)
    assert reader.line_column(4) == (2, 2)


def test_deeply_nested_lists():
    value = read_expr("(" * 500 + "1" + ")" * 500)
    for _ in range(500):
        assert isinstance(value, List) and len(value.items) == 1
        value = value.items[0]
    assert value == Number(1)


def test_deeply_nested_quotes():
    value = read_expr("'" * 500 + "a")
    for _ in range(500):
        assert isinstance(value, List) and value.items[0] == Atom("quote")
        value = value.items[1]
    assert value == Atom("a")


def test_nesting_past_the_frame_budget_is_a_no_match():
    result = read_expr("'" * 60_000 + "a")
    assert isinstance(result, String)
    assert result.value.startswith('No match: "lisp" (line 1, column ')
    assert result.value.endswith("expression nested too deeply")
