from __future__ import annotations

"""
Static analysis of Schemer buffers for the language server.

Nothing here evaluates code. A buffer is run through the Reader only, and the
results are plain dataclasses so the server module can turn them into LSP
types:
- diagnostics: a parse failure, or text left over after the first expression
- primitive signatures for hover and completion
- word lookup at a (line, character) position
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from schemer.errors import SchemerParseError
from schemer.limits import recursion_headroom
from schemer.reader.parser import TOO_DEEP, Reader


PRIMITIVE_SIGNATURES: Dict[str, str] = {
    "+": "(+ n1 n2 ...): sum, folded left",
    "-": "(- n1 n2 ...): n1 minus each following argument",
    "*": "(* n1 n2 ...): product, folded left",
    "/": "(/ n1 n2 ...): integer division rounding toward negative infinity",
    "mod": "(mod n1 n2 ...): modulo, sign of the divisor",
    "quotient": "(quotient n1 n2 ...): integer division truncated toward zero",
    "remainder": "(remainder n1 n2 ...): remainder of quotient, sign of the dividend",
}

WORD_BREAKS = " \t()\n\r'`,\""


@dataclass
class BufferDiagnostic:
    line: int  # 0-based
    col: int  # 0-based
    message: str
    severity: str  # "error" | "information"


def collect_diagnostics(text: str) -> List[BufferDiagnostic]:
    reader = Reader(text)
    try:
        with recursion_headroom():
            reader.parse_expr()
    except SchemerParseError as err:
        line, col = reader.line_column(err.position)
        return [BufferDiagnostic(line - 1, col - 1, err.describe() or "No match", "error")]
    except RecursionError:
        line, col = reader.line_column(reader.pos)
        return [BufferDiagnostic(line - 1, col - 1, TOO_DEEP, "error")]

    if text[reader.pos:].strip():
        line, col = reader.line_column(reader.pos)
        return [
            BufferDiagnostic(
                line - 1, col - 1, "Input after the first expression is ignored", "information"
            )
        ]
    return []


def word_at(text: str, line: int, character: int) -> Optional[str]:
    lines = text.splitlines(True)
    if line >= len(lines):
        return None
    line_text = lines[line]
    start = min(character, len(line_text))
    while start > 0 and line_text[start - 1] not in WORD_BREAKS:
        start -= 1
    end = start
    while end < len(line_text) and line_text[end] not in WORD_BREAKS:
        end += 1
    word = line_text[start:end]
    return word or None


def hover_text(word: Optional[str]) -> Optional[str]:
    if word is None:
        return None
    return PRIMITIVE_SIGNATURES.get(word)
