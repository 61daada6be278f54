"""
Module defining AST visitors that render a tree for humans and for JSON.
"""

from typing import Any, Callable, Dict

from .ast_nodes import ASTVisitor, Program, Function, Variable, Expression, Literal, Node


class ASTPrinter(ASTVisitor):
    """
    Ast visitor that pretty prints the nodes it visits, one node per line.
    """

    def __init__(self, printer: Callable[[str], None] = print) -> None:
        self.indent = 0
        self.printer = printer

    def emit(self, text: str) -> None:
        self.printer("    " * self.indent + text)

    def visit_program(self, node: Program) -> None:
        self.emit(f"Program ({len(node.statements)} statements)")
        self._nested(node.statements)

    def visit_function(self, node: Function) -> None:
        self.emit(f"Function {node.name}({', '.join(node.parameters)})")
        self._nested(node.body)

    def visit_variable(self, node: Variable) -> None:
        self.emit(f"Variable {node.name} =")
        self._nested((node.value,))

    def visit_expression(self, node: Expression) -> None:
        self.emit(f"Expression {node.operator}")
        self._nested((node.left, node.right))

    def visit_literal(self, node: Literal) -> None:
        self.emit(f"Literal {node.value}")

    def _nested(self, nodes) -> None:
        self.indent += 1
        for child in nodes:
            child.accept(self)
        self.indent -= 1


def format_tree(node: Node) -> str:
    """Render ``node`` and its children as an indented outline."""
    lines = []
    node.accept(ASTPrinter(lines.append))
    return "\n".join(lines)


class DictConverter(ASTVisitor):
    """Convert nodes into JSON-ready dicts tagged with their type."""

    def visit_program(self, node: Program) -> Dict[str, Any]:
        return {
            "type": node.node_type.value,
            "statements": [child.accept(self) for child in node.statements],
        }

    def visit_function(self, node: Function) -> Dict[str, Any]:
        return {
            "type": node.node_type.value,
            "name": node.name,
            "parameters": list(node.parameters),
            "body": [child.accept(self) for child in node.body],
        }

    def visit_variable(self, node: Variable) -> Dict[str, Any]:
        return {
            "type": node.node_type.value,
            "name": node.name,
            "value": node.value.accept(self),
        }

    def visit_expression(self, node: Expression) -> Dict[str, Any]:
        return {
            "type": node.node_type.value,
            "left": node.left.accept(self),
            "operator": node.operator,
            "right": node.right.accept(self),
        }

    def visit_literal(self, node: Literal) -> Dict[str, Any]:
        return {"type": node.node_type.value, "value": node.value}


def to_dict(node: Node) -> Dict[str, Any]:
    return node.accept(DictConverter())
