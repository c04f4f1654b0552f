"""
  Schemer Reader

- Hand-written recursive descent over the raw text, no separate lexer
- Ordered choice: alternatives are tried in sequence and the first success wins
- An alternative that fails after consuming input aborts the whole choice,
  unless it was wrapped with Reader.backtracking(), which rewinds the cursor
- Whitespace is a separator between list/vector elements, never skipped

Emits the Value variants from schemer.types:

    - foo, +, list->vector     -> Atom
    - "text"                   -> String
    - 42, #d42, #xFF, #o17, #b101 -> Number
    - #t, #f                   -> Bool
    - #\\a, #\\space, #\\newline -> Character
    - 'x, `x, ,x               -> List [Atom quote|quasiquote|unquote, x]
    - #(a b c)                 -> Vector
    - (a b c), (a b . c)       -> List, DottedList

Float, Ratio and Complex literals have their own rules (schemer.reader.numbers)
which come after the decimal Number rule, so at the top level `3.14` reads as
Number 3 with `.14` left over. read_expr() reads one expression and ignores
whatever follows it.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, NoReturn, TypeVar

from schemer.config import get_source_name
from schemer.errors import SchemerParseError
from schemer.limits import recursion_headroom
from schemer.reader import numbers
from schemer.types.values import Value, Atom, List, DottedList, String, Bool, Character, Vector

logger = logging.getLogger(__name__)

T = TypeVar("T")

SYMBOL_CHARS = "!$%&|*+-/:<=?>@^_~"
DIGITS = "0123456789"
HEX_DIGITS = DIGITS + "abcdefABCDEF"
OCT_DIGITS = "01234567"

ESCAPED_CHARS: dict[str, str] = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
}

QUOTE_FORMS: dict[str, str] = {
    "'": "quote",
    "`": "quasiquote",
    ",": "unquote",
}

TOO_DEEP = "expression nested too deeply"


class Reader:
    """Cursor over one source text with the grammar rules as methods."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    # ------------------------
    # Cursor primitives
    # ------------------------
    def peek(self) -> str | None:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return None

    def unexpected(self) -> str:
        ch = self.peek()
        return "end of input" if ch is None else repr(ch)

    def fail(self, expected: str | None = None) -> NoReturn:
        raise SchemerParseError(self.pos, (expected,) if expected else (), self.unexpected())

    def line_column(self, position: int) -> tuple[int, int]:
        # 1-based, as editors and error messages count
        line = self.source.count("\n", 0, position) + 1
        column = position - (self.source.rfind("\n", 0, position) + 1) + 1
        return line, column

    def satisfy(self, predicate: Callable[[str], bool], expected: str | None) -> str:
        ch = self.peek()
        if ch is None or not predicate(ch):
            self.fail(expected)
        self.pos += 1
        return ch

    def char(self, c: str) -> str:
        return self.satisfy(lambda ch: ch == c, repr(c))

    def one_of(self, chars: str, expected: str | None = None) -> str:
        return self.satisfy(lambda ch: ch in chars, expected)

    def none_of(self, chars: str) -> str:
        return self.satisfy(lambda ch: ch not in chars, None)

    def any_char(self) -> str:
        return self.satisfy(lambda ch: True, "any character")

    def string(self, text: str) -> str:
        # Consumes the matching prefix before failing; wrap in attempt() to rewind.
        start = self.pos
        for c in text:
            if self.peek() != c:
                raise SchemerParseError(start, (repr(text),), self.unexpected())
            self.pos += 1
        return text

    def letter(self) -> str:
        return self.satisfy(str.isalpha, "letter")

    def digit(self) -> str:
        return self.satisfy(lambda ch: ch in DIGITS, "digit")

    def hex_digit(self) -> str:
        return self.satisfy(lambda ch: ch in HEX_DIGITS, "hexadecimal digit")

    def oct_digit(self) -> str:
        return self.satisfy(lambda ch: ch in OCT_DIGITS, "octal digit")

    def symbol(self) -> str:
        return self.one_of(SYMBOL_CHARS, "symbol")

    def space(self) -> str:
        return self.satisfy(str.isspace, "space")

    def spaces(self) -> None:
        """One or more whitespace characters."""
        self.many1(self.space)

    # ------------------------
    # Combinators
    # ------------------------
    def attempt(self, rule: Callable[[], T]) -> T:
        start = self.pos
        try:
            return rule()
        except SchemerParseError:
            self.pos = start
            raise

    def backtracking(self, rule: Callable[[], T]) -> Callable[[], T]:
        return lambda: self.attempt(rule)

    def choice(self, *rules: Callable[[], T]) -> T:
        start = self.pos
        error: SchemerParseError | None = None
        for rule in rules:
            try:
                return rule()
            except SchemerParseError as exc:
                error = exc.merge(error)
                if self.pos != start:
                    raise error
        raise error

    def optional(self, rule: Callable[[], T]) -> T | None:
        start = self.pos
        try:
            return rule()
        except SchemerParseError:
            if self.pos != start:
                raise
            return None

    def many(self, rule: Callable[[], T]) -> list[T]:
        results = []
        while True:
            start = self.pos
            try:
                results.append(rule())
            except SchemerParseError:
                if self.pos != start:
                    raise
                return results

    def many1(self, rule: Callable[[], T]) -> list[T]:
        first = rule()
        return [first] + self.many(rule)

    def sep_by(self, rule: Callable[[], T], sep: Callable[[], object]) -> list[T]:
        def next_item() -> T:
            sep()
            return rule()

        first = self.optional(rule)
        if first is None:
            return []
        return [first] + self.many(next_item)

    def end_by(self, rule: Callable[[], T], sep: Callable[[], object]) -> list[T]:
        def item_then_sep() -> T:
            item = rule()
            sep()
            return item

        return self.many(item_then_sep)

    def not_followed_by(self, predicate: Callable[[str], bool]) -> None:
        ch = self.peek()
        if ch is not None and predicate(ch):
            raise SchemerParseError(self.pos, (), repr(ch))

    # ------------------------
    # Grammar
    # ------------------------
    def parse_expr(self) -> Value:
        return self.choice(
            self.parse_atom,
            self.parse_string,
            self.backtracking(lambda: numbers.parse_number(self)),
            self.backtracking(self.parse_bool),
            self.backtracking(self.parse_character),
            self.backtracking(lambda: numbers.parse_float(self)),
            self.backtracking(lambda: numbers.parse_ratio(self)),
            self.backtracking(lambda: numbers.parse_complex(self)),
            self.backtracking(self.parse_quoted),
            self.parse_quasi_quoted,
            self.parse_unquoted,
            self.backtracking(self.parse_vector),
            self.parse_parenthesized,
        )

    def parse_atom(self) -> Value:
        first = self.choice(self.letter, self.symbol)
        rest = self.many(lambda: self.choice(self.letter, self.digit, self.symbol))
        atom = first + "".join(rest)
        match atom:
            case "#t":
                return Bool(True)
            case "#f":
                return Bool(False)
            case _:
                return Atom(atom)

    def parse_escaped_char(self) -> str:
        self.char("\\")
        return ESCAPED_CHARS[self.one_of("".join(ESCAPED_CHARS), "escape character")]

    def parse_string(self) -> String:
        self.char('"')
        body = self.many(lambda: self.choice(self.parse_escaped_char, partial(self.none_of, '"\\')))
        self.char('"')
        return String("".join(body))

    def parse_bool(self) -> Bool:
        self.char("#")
        return Bool(self.one_of("tf", "#t or #f") == "t")

    def parse_character(self) -> Character:
        self.attempt(partial(self.string, "#\\"))
        value = self.choice(
            self.backtracking(
                lambda: self.choice(partial(self.string, "newline"), partial(self.string, "space"))
            ),
            self._lone_char,
        )
        return Character(NAMED_CHARS.get(value, value))

    def _lone_char(self) -> str:
        ch = self.any_char()
        self.not_followed_by(str.isalnum)
        return ch

    def _quote_form(self, marker: str) -> List:
        self.char(marker)
        return List([Atom(QUOTE_FORMS[marker]), self.parse_expr()])

    def parse_quoted(self) -> List:
        return self._quote_form("'")

    def parse_quasi_quoted(self) -> List:
        return self._quote_form("`")

    def parse_unquoted(self) -> List:
        return self._quote_form(",")

    def parse_vector(self) -> Vector:
        self.string("#(")
        values = self.sep_by(self.parse_expr, self.spaces)
        self.char(")")
        return Vector.from_array((0, len(values) - 1), values)

    def parse_list(self) -> List:
        return List(self.sep_by(self.parse_expr, self.spaces))

    def parse_dotted_list(self) -> DottedList:
        head = self.end_by(self.parse_expr, self.spaces)
        self.char(".")
        self.spaces()
        return DottedList(head, self.parse_expr())

    def parse_parenthesized(self) -> Value:
        self.char("(")
        return self.choice(
            self.backtracking(self._closed_list),
            self._closed_dotted_list,
        )

    def _closed_list(self) -> List:
        value = self.parse_list()
        self.char(")")
        return value

    def _closed_dotted_list(self) -> DottedList:
        value = self.parse_dotted_list()
        self.char(")")
        return value


def read_expr(source: str, source_name: str | None = None) -> Value:
    """Read one expression from the start of `source`.

    A parse failure is not raised: it comes back as a String value whose text
    starts with "No match: ", followed by the position and what was expected.
    """
    reader = Reader(source)
    try:
        with recursion_headroom():
            return reader.parse_expr()
    except SchemerParseError as err:
        position, reason = err.position, err.describe()
    except RecursionError:
        position, reason = reader.pos, TOO_DEEP
    line, column = reader.line_column(position)
    name = source_name if source_name is not None else get_source_name()
    logger.debug("read failed at offset %d: %s", position, reason)
    return String(f'No match: "{name}" (line {line}, column {column}):\n{reason}')
