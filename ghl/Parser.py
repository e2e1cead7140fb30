import copy

import ply.lex as lex
import ply.yacc as yacc

from .Tokenizer import tokens, tokenize
from .AST import *
from .Errors import ParseError


# One level, left-associative: 2 + 3 * 4 groups as (2 + 3) * 4.
precedence = (
    ('left', 'PLUS', 'MINUS', 'TIMES'),
)

def p_prog(p):
    '''prog : stmt_list'''
    p[0] = ProgramNode(p[1])

def p_stmt_list(p):
    '''stmt_list : stmt stmt_list
                 | empty'''
    if len(p) == 3:
        p[0] = [p[1]] + p[2]
    else:
        p[0] = []

def p_stmt(p):
    '''stmt : let_stmt
            | exit_stmt'''
    p[0] = p[1]

def p_let_stmt(p):
    '''let_stmt : LET ID COLON ID EQ expr SEMI_COLON'''
    p[0] = LetNode(p[2].text, p[4].text, p[6]).at(p[2])

def p_exit_stmt(p):
    '''exit_stmt : EXIT LPAREN expr RPAREN SEMI_COLON'''
    p[0] = ExitNode(p[3]).at(p[1])

# =============== EXPRESSION GRAMMAR ===============
def p_binary_expr(p):
    '''expr : expr PLUS expr
            | expr MINUS expr
            | expr TIMES expr'''
    p[0] = BinaryOperation(p[1], p[2].text, p[3]).at(p[2])

def p_primary_expr(p):
    '''expr : NUMBER
            | ID
            | LPAREN expr RPAREN'''
    if len(p) == 4:
        p[0] = p[2]
    elif p[1].kind == 'NUMBER':
        p[0] = NumberNode(int(p[1].text), p[1].text).at(p[1])
    else:
        p[0] = IdentifierNode(p[1].text).at(p[1])
# =============== END EXPRESSION GRAMMAR ===============

def p_empty(p):
    'empty :'
    pass

def p_error(p):
    if p:
        raise ParseError.unexpected(p.value)
    raise ParseError.end_of_input()


class TokenFeed:
    """Hands our Tokens to ply one at a time. Each LexToken carries the Token as its value so the
    grammar actions and p_error see the source text and position."""

    def __init__(self, toks):
        self._toks = iter(toks)

    def token(self):
        for tok in self._toks:
            if tok.kind == 'EOF':
                return None
            lt = lex.LexToken()
            lt.type = tok.kind
            lt.value = tok
            lt.lineno = tok.line
            lt.lexpos = tok.offset
            return lt
        return None


parser = yacc.yacc(debug=False, write_tables=False)


def parse(toks):
    """Builds a ProgramNode from a token sequence, raising ParseError on a grammar violation."""
    toks = list(toks)
    eof = toks[-1] if toks and toks[-1].kind == 'EOF' else None
    feed = TokenFeed(toks)
    try:
        return copy.copy(parser).parse(lexer=feed, tokenfunc=feed.token)
    except ParseError as err:
        if eof is not None:
            err.at(eof.line, eof.column)
        raise

def parse_source(source):
    return parse(tokenize(source))
