"""Runs the stages in order: tokenize, parse, check, evaluate. Each call builds its own lexer clone
and symbol tables, so nothing carries over from one program to the next."""

import logging

from .AST import dump
from .Tokenizer import tokenize
from .Parser import parse
from .SemanticAnalysis import SemanticChecker
from .Interpreter import Interpreter

log = logging.getLogger("ghl")


def compile(source, allow_rebinding=True, tokens_out=None, ast_out=None):
    """Tokenizes, parses and checks source. tokens_out/ast_out name files to dump the intermediate
    stages into; a dump is written as soon as its stage succeeds."""
    toks = list(tokenize(source))
    log.debug("tokenized %d tokens", len(toks))
    if tokens_out:
        with open(tokens_out, "w") as out:
            out.write("".join(f"{tok}\n" for tok in toks))

    ast = parse(toks)
    log.debug("parsed %d statements", len(ast.children))
    if ast_out:
        with open(ast_out, "w") as out:
            out.write(dump(ast) + "\n")

    SemanticChecker(allow_rebinding).check(ast)
    log.debug("checked")
    return ast

def execute(ast):
    result = Interpreter().run(ast)
    log.debug("result = %d", result)
    return result

def run(source, allow_rebinding=True):
    return execute(compile(source, allow_rebinding))
