"""
Abstract Syntax Tree node definitions for GROS.

The tree is a closed family of five node types. Nodes are frozen dataclasses
holding tuples, so a finished tree is immutable and strictly owned top-down:
no parent pointers, no shared children.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Tuple, Union


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    PROGRAM = "Program"
    FUNCTION = "Function"
    VARIABLE = "Variable"
    EXPRESSION = "Expression"
    LITERAL = "Literal"


class ASTVisitor(ABC):
    """
    Visitor interface for traversing AST nodes.

    Subclasses implement one method per node type; ``visit`` dispatches on
    ``node_type`` so a missing case fails loudly instead of being skipped.
    """

    def visit(self, node: 'ASTNode') -> Any:
        """Dispatch ``node`` to the matching visit_* method."""
        if not isinstance(node, ASTNode):
            raise TypeError(f"Not an AST node: {node!r}")
        handler = getattr(self, f"visit_{node.node_type.name.lower()}")
        return handler(node)

    @abstractmethod
    def visit_program(self, node: 'Program') -> Any:
        pass

    @abstractmethod
    def visit_function(self, node: 'Function') -> Any:
        pass

    @abstractmethod
    def visit_variable(self, node: 'Variable') -> Any:
        pass

    @abstractmethod
    def visit_expression(self, node: 'Expression') -> Any:
        pass

    @abstractmethod
    def visit_literal(self, node: 'Literal') -> Any:
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> Tuple['ASTNode', ...]:
        """Get all child nodes."""
        pass


# ============================================================================
# Top-level nodes
# ============================================================================

@dataclass(frozen=True)
class Program(ASTNode):
    """Root AST node: the ordered top-level statements."""
    statements: Tuple['Node', ...] = ()

    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM

    def __post_init__(self):
        object.__setattr__(self, "statements", tuple(self.statements))

    def children(self) -> Tuple[ASTNode, ...]:
        return self.statements


@dataclass(frozen=True)
class Function(ASTNode):
    """
    Named function declaration.

    Parameters are plain identifier names; duplicates are kept as written.
    """
    name: str
    parameters: Tuple[str, ...] = ()
    body: Tuple['Node', ...] = ()

    node_type: ClassVar[ASTNodeType] = ASTNodeType.FUNCTION

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "body", tuple(self.body))

    def children(self) -> Tuple[ASTNode, ...]:
        return self.body


# ============================================================================
# Reserved nodes (not produced by the statement grammar yet)
# ============================================================================

@dataclass(frozen=True)
class Variable(ASTNode):
    """Variable binding: name = value."""
    name: str
    value: 'Node'

    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.value,)


@dataclass(frozen=True)
class Expression(ASTNode):
    """Binary expression: left operator right."""
    left: 'Node'
    operator: str
    right: 'Node'

    node_type: ClassVar[ASTNodeType] = ASTNodeType.EXPRESSION

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.left, self.right)


@dataclass(frozen=True)
class Literal(ASTNode):
    """Literal value, kept as its raw source text."""
    value: str

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    def children(self) -> Tuple[ASTNode, ...]:
        return ()


Node = Union[Program, Function, Variable, Expression, Literal]
