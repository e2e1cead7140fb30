"""Error taxonomy for ghl. Every stage raises a subclass of GhlError; the driver is the only place
that turns them into diagnostics and exit statuses.
"""

from termcolor import colored


class GhlError(Exception):
    category = "Error"

    def __init__(self, kind, message, line=None, column=None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.line = line
        self.column = column

    def at(self, line, column):
        """Fills in a missing position (the parser only learns the EOF position afterwards)."""
        if self.line is None:
            self.line = line
            self.column = column
        return self

    def label(self):
        if self.kind == self.category:
            return self.category
        return f"{self.category}({self.kind})"

    def format(self, filename="<input>", color=False):
        """Single diagnostic line: file:line:column: error: Category(Kind): message"""
        where = f"{filename}:{self.line or 0}:{self.column or 0}: "
        head = "error: "
        if color:
            where = colored(where, attrs=["bold"])
            head = colored(head, "red", attrs=["bold"])
        return f"{where}{head}{self.label()}: {self.message}"

    def __str__(self):
        if self.line is None:
            return f"{self.label()}: {self.message}"
        return f"{self.label()}: {self.message} (line {self.line}, column {self.column})"


class LexError(GhlError):
    category = "LexError"

    def __init__(self, char, line, column):
        super().__init__("UnrecognizedCharacter", f"illegal character {char!r}", line, column)
        self.char = char


class ParseError(GhlError):
    category = "SyntaxError"

    def __init__(self, kind, message, token=None, line=None, column=None):
        if token is not None:
            line, column = token.line, token.column
        super().__init__(kind, message, line, column)
        self.token = token

    @classmethod
    def unexpected(cls, token):
        return cls("UnexpectedToken", f"unexpected token {token.text!r}", token)

    @classmethod
    def end_of_input(cls):
        return cls("UnexpectedEndOfInput", "unexpected end of input")


class BindingError(GhlError):
    category = "NameError"


class TypeMismatch(GhlError):
    category = "TypeMismatch"

    def __init__(self, message, line=None, column=None):
        super().__init__("TypeMismatch", message, line, column)


class ArithmeticOverflow(GhlError):
    category = "ArithmeticOverflow"

    def __init__(self, message, line=None, column=None):
        super().__init__("ArithmeticOverflow", message, line, column)
