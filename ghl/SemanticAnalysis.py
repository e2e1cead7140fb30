from .AST import *
from .Errors import BindingError, TypeMismatch


class SemanticChecker:
    def __init__(self, allow_rebinding=True):
        self.symbol_table = {}
        self.allow_rebinding = allow_rebinding

    # -------------- UTILITY METHODS ------------------
    def _get_type(self, expr):
        if isinstance(expr, NumberNode):
            return "int"
        if isinstance(expr, IdentifierNode):
            if expr.name not in self.symbol_table:
                raise BindingError("UndeclaredUse", f"Variable '{expr.name}' not declared",
                                   expr.line, expr.column)
            return self.symbol_table[expr.name]['var_type']
        if isinstance(expr, BinaryOperation):
            left = self._get_type(expr.left)
            right = self._get_type(expr.right)
            if left == 'int' and right == 'int':
                return 'int'
            raise TypeMismatch(f"operator '{expr.op}' expects int operands, got {left} and {right}",
                               expr.line, expr.column)
        raise TypeError(f"not an expression: {type(expr).__name__}")

    # ---------------------------------------------------

    def visit(self, node):
        # -------- PROGRAM --------
        if isinstance(node, ProgramNode):
            for child in node.children:
                self.visit(child)
            return

        # -------- VARIABLE DECL --------
        if isinstance(node, LetNode):
            valtype = self._get_type(node.value)

            if node.name in self.symbol_table and not self.allow_rebinding:
                raise BindingError("DuplicateBinding", f"Variable '{node.name}' already defined.",
                                   node.line, node.column)

            if node.var_type != valtype:
                raise TypeMismatch(f"Variable '{node.name}': assigned value of wrong type "
                                   f"(expected {node.var_type}, got {valtype})",
                                   node.line, node.column)

            self.symbol_table[node.name] = {"var_type": node.var_type, "line": node.line}
            return

        # -------- EXIT --------
        if isinstance(node, ExitNode):
            self._get_type(node.code)
            return

        raise TypeError(f"not a statement: {type(node).__name__}")

    def check(self, ast):
        self.visit(ast)
        return self.symbol_table


def check_program(ast, allow_rebinding=True):
    return SemanticChecker(allow_rebinding).check(ast)
