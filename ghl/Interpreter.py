from .AST import *
from .Errors import ArithmeticOverflow, BindingError

INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1

OPERATORS = {
    '+': lambda a, b: a + b,
    '-': lambda a, b: a - b,
    '*': lambda a, b: a * b,
}


class ExitProgram(Exception):
    """Unwinds the statement loop when 'exit' runs."""
    def __init__(self, code):
        super().__init__(code)
        self.code = code


class Interpreter:
    """Tree-walking evaluator. Values are signed 64-bit integers; anything outside that range is an
    ArithmeticOverflow rather than silently wrapping."""

    def __init__(self):
        self.env = {}

    def _check_range(self, value, node, what):
        if not INT_MIN <= value <= INT_MAX:
            raise ArithmeticOverflow(f"{what} {value} does not fit in a signed 64-bit integer",
                                     node.line, node.column)
        return value

    def visit(self, node):
        method_name = f'visit_{type(node).__name__}'
        method = getattr(self, method_name, self.generic_visit)
        return method(node)

    def generic_visit(self, node):
        raise TypeError(f"cannot evaluate {type(node).__name__}")

    def visit_ProgramNode(self, node):
        for child in node.children:
            self.visit(child)

    def visit_LetNode(self, node):
        self.env[node.name] = self.visit(node.value)

    def visit_ExitNode(self, node):
        raise ExitProgram(self.visit(node.code))

    def visit_NumberNode(self, node):
        return self._check_range(node.value, node, "literal")

    def visit_IdentifierNode(self, node):
        if node.name not in self.env:
            raise BindingError("UndeclaredUse", f"Variable '{node.name}' not declared",
                               node.line, node.column)
        return self.env[node.name]

    def visit_BinaryOperation(self, node):
        left = self.visit(node.left)
        right = self.visit(node.right)
        result = OPERATORS[node.op](left, right)
        return self._check_range(result, node, f"result of {left} {node.op} {right}")

    def run(self, ast):
        """Executes ast and returns the argument of the first exit reached, or 0 if there is none."""
        try:
            self.visit(ast)
        except ExitProgram as done:
            return done.code
        return 0


def eval_program(ast):
    return Interpreter().run(ast)
