

class SchemerError(Exception):
    """ Base class for all Schemer errors"""
    pass

class SchemerParseError(SchemerError):
    """ Raised by the reader when no grammar alternative matches"""

    def __init__(self, position: int, expected=(), unexpected: str | None = None):
        self.position = position
        self.expected = tuple(dict.fromkeys(expected))
        self.unexpected = unexpected
        super().__init__(self.describe())

    def merge(self, other: "SchemerParseError | None") -> "SchemerParseError":
        # The furthest failure wins; failures at the same position pool their expectations.
        if other is None or self.position > other.position:
            return self
        if other.position > self.position:
            return other
        return SchemerParseError(
            self.position, other.expected + self.expected, self.unexpected or other.unexpected
        )

    def describe(self) -> str:
        lines = []
        if self.unexpected:
            lines.append(f"unexpected {self.unexpected}")
        if self.expected:
            if len(self.expected) == 1:
                lines.append(f"expecting {self.expected[0]}")
            else:
                lines.append(f"expecting {', '.join(self.expected[:-1])} or {self.expected[-1]}")
        return "\n".join(lines)

class SchemerValueError(SchemerError):
    """ Raised when a value is constructed with an invalid payload"""

class SchemerRenderError(SchemerError):
    """ Raised when a value has no concrete syntax to render to"""

class EvalError(SchemerError):
    """ Base class for evaluation failures"""

class UnboundSymbol(EvalError):
    """ Raised when a bare symbol is evaluated; there are no bindings to look it up in"""

class MalformedForm(EvalError):
    """ Raised when a form has no evaluation rule"""

class SchemerArityError(EvalError):
    """ Raised when a primitive receives no arguments to fold"""

class SchemerDivisionByZero(EvalError):
    """ Raised when a division primitive meets a zero divisor"""

class SchemerNestingError(EvalError):
    """ Raised when a form is nested too deeply to evaluate"""
