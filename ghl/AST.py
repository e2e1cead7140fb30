class ASTNode:
    line = None
    column = None

    def at(self, token):
        self.line = token.line
        self.column = token.column
        return self

class ProgramNode(ASTNode):
    def __init__(self,children=None):
        self.children = children or []

class LetNode(ASTNode):
    """Represents 'let x: int = 1 + 2;'"""
    def __init__(self, name, var_type, value):
        self.name = name
        self.var_type = var_type
        self.value = value

class ExitNode(ASTNode):
    """Represents 'exit(x);'"""
    def __init__(self, code):
        self.code = code

class NumberNode(ASTNode):
    def __init__(self, value, text=None):
        self.value = value
        self.text = text if text is not None else str(value)

class IdentifierNode(ASTNode):
    def __init__(self, name):
        self.name = name

class BinaryOperation(ASTNode):
    def __init__(self,left,op,right):
        self.left = left
        self.right = right
        self.op = op


def dump(node, indent=0):
    """Renders an indented, one-node-per-line view of the tree."""
    pad = "  " * indent
    if isinstance(node, ProgramNode):
        lines = [pad + "Program"]
        lines += [dump(child, indent + 1) for child in node.children]
        return "\n".join(lines)
    if isinstance(node, LetNode):
        return f"{pad}Let {node.name}: {node.var_type}\n" + dump(node.value, indent + 1)
    if isinstance(node, ExitNode):
        return f"{pad}Exit\n" + dump(node.code, indent + 1)
    if isinstance(node, BinaryOperation):
        return "\n".join([f"{pad}BinaryOperation {node.op}",
                          dump(node.left, indent + 1),
                          dump(node.right, indent + 1)])
    if isinstance(node, NumberNode):
        return f"{pad}Number {node.text}"
    if isinstance(node, IdentifierNode):
        return f"{pad}Identifier {node.name}"
    raise TypeError(f"cannot dump {type(node).__name__}")
