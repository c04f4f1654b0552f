from schemer.reader.parser import read_expr
from schemer.evaluation.evaluator import evaluate
from schemer.printer import render
from schemer.types.values import Value


class Interpreter:
    """
    Reads, evaluates and renders single Schemer expressions.
    Holds no state between calls; each expression is read and reduced on its own.
    """
    def __init__(self, source_name: str | None = None):
        self.source_name = source_name

    def read(self, code: str) -> Value:
        """Parse one expression; a failed parse comes back as a "No match: ..." String."""
        return read_expr(code, self.source_name)

    def eval(self, code: str) -> Value:
        return evaluate(self.read(code))

    def run(self, code: str) -> str:
        """Evaluate and render, as the command line driver prints it."""
        return render(self.eval(code))
