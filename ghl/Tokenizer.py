from dataclasses import dataclass

import ply.lex as lex

from .Errors import LexError

reserved = {
   'let' : 'LET',
   'exit' : 'EXIT',
}

tokens = [
   'NUMBER',
   'PLUS',
   'MINUS',
   'TIMES',
   'LPAREN',
   'RPAREN',
   'EQ',
   'SEMI_COLON',
   'COLON',
   'ID',
] + list(reserved.values())


t_PLUS    = r'\+'
t_MINUS   = r'-'
t_TIMES   = r'\*'
t_LPAREN  = r'\('
t_RPAREN  = r'\)'
t_EQ = r'='
t_SEMI_COLON = r';'
t_COLON = r':'

t_ignore  = ' \t\r\f\v'

def t_NUMBER(t):
    r'[0-9]+'
    return t

def t_ID(t):
    r'[a-zA-Z_][a-zA-Z_0-9]*'
    t.type = reserved.get(t.value,'ID')
    return t

def t_newline(t):
    r'\n+'
    t.lexer.lineno += len(t.value)

def t_error(t):
    raise LexError(t.value[0], t.lexer.lineno, find_column(t.lexer.lexdata, t.lexpos))


@dataclass(frozen=True)
class Token:
    kind: str   # one of tokens, or EOF
    text: str
    offset: int
    line: int
    column: int

    def __str__(self):
        return f"{self.line}:{self.column} {self.kind} {self.text!r}"


def find_column(input, offset):
    line_start = input.rfind('\n', 0, offset) + 1
    return (offset - line_start) + 1


_lexer = lex.lex()


def tokenize(source):
    """Lazily yields the Tokens of source, finishing with an EOF token.

    Each call lexes with its own clone of the module lexer, so iterating twice over the same
    text always produces the same tokens (or raises the same LexError at the same place).
    """
    lexer = _lexer.clone()
    lexer.lineno = 1
    lexer.input(source)
    for tok in lexer:
        yield Token(tok.type, tok.value, tok.lexpos, tok.lineno, find_column(source, tok.lexpos))
    end = len(source)
    yield Token('EOF', '', end, lexer.lineno, find_column(source, end))
