"""ghl: lexer, parser, checker and evaluator for a small language of typed 'let' bindings and 'exit'."""

from .Errors import GhlError, LexError, ParseError, BindingError, TypeMismatch, ArithmeticOverflow
from .Pipeline import compile, execute, run

__version__ = "0.1.0"
