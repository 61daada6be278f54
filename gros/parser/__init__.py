"""
GROS Parser Package

Implements a recursive descent parser over the lexer's token list. Produces
an immutable tree of function declarations.

Key Features:
- One method per grammar rule, nested functions by recursion
- Whitespace and comments filtered before the grammar sees them
- Closed, immutable AST node family with a dispatching visitor
- First-error abort with diagnostics pointing at the offending token
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor,
    Program, Function, Variable, Expression, Literal, Node
)
from .parser import Parser, parse, parse_string, parse_file
from .errors import ParseError
from .printer import ASTPrinter, format_tree, to_dict

__all__ = [
    # Core parser
    "Parser",
    "parse",
    "parse_string",
    "parse_file",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "Node",
    "Program", "Function", "Variable", "Expression", "Literal",

    # Rendering
    "ASTPrinter", "format_tree", "to_dict",

    # Error handling
    "ParseError",
]
