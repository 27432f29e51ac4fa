"""AST node definitions for the expression language.

This module defines the concrete AST node dataclasses produced by the parser
and consumed by the evaluator and the printing/serialization helpers. Each
node is a dataclass carrying the `Token` it originated from plus the
information specific to that node kind (an operator, child nodes, a literal
value). The `NodeType` enum identifies node kinds.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the node
    kind (`NodeType`) and the originating token.
- `token_literal()` returns the literal text of that token.
- `str(node)` renders source-like text with every prefix and infix
    expression fully parenthesized, e.g. `((-a) * b)`. Tests compare these
    renderings to check how expressions were grouped.
- A child may be `None` when the parser recorded an error while building the
    node; such children render as the empty string.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union, List
from tokens import Token, TokenType


class NodeType(Enum):
    PROGRAM = auto()
    LET_STMT = auto()
    RETURN_STMT = auto()
    EXPR_STMT = auto()
    IDENTIFIER = auto()
    INT_LITERAL = auto()
    BOOL_LITERAL = auto()
    PREFIX = auto()
    INFIX = auto()

    def __str__(self) -> str:
        return self.name


def _str(node: Optional[ASTNode]) -> str:
    return "" if node is None else str(node)


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    token: Token = field(default_factory=lambda: Token(TokenType.ILLEGAL, ""))

    def token_literal(self) -> str:
        return self.token.literal


# Expression Nodes
@dataclass
class IdentifierNode(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass
class IntegerLiteralNode(ASTNode):
    type: NodeType = NodeType.INT_LITERAL
    value: int = 0

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class BooleanLiteralNode(ASTNode):
    type: NodeType = NodeType.BOOL_LITERAL
    value: bool = False

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class PrefixExpressionNode(ASTNode):
    type: NodeType = NodeType.PREFIX
    operator: str = ""
    right: Optional[Expression] = None

    def __str__(self) -> str:
        return f"({self.operator}{_str(self.right)})"


@dataclass
class InfixExpressionNode(ASTNode):
    type: NodeType = NodeType.INFIX
    left: Optional[Expression] = None
    operator: str = ""
    right: Optional[Expression] = None

    def __str__(self) -> str:
        return f"({_str(self.left)} {self.operator} {_str(self.right)})"


# Statement Nodes
@dataclass
class LetStatementNode(ASTNode):
    type: NodeType = NodeType.LET_STMT
    name: IdentifierNode = field(default_factory=IdentifierNode)
    value: Optional[Expression] = None

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {_str(self.value)};"


@dataclass
class ReturnStatementNode(ASTNode):
    type: NodeType = NodeType.RETURN_STMT
    return_value: Optional[Expression] = None

    def __str__(self) -> str:
        return f"{self.token_literal()} {_str(self.return_value)};"


@dataclass
class ExpressionStatementNode(ASTNode):
    type: NodeType = NodeType.EXPR_STMT
    expression: Optional[Expression] = None

    def __str__(self) -> str:
        return _str(self.expression)


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: List[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


Expression = Union[
    IdentifierNode,
    IntegerLiteralNode,
    BooleanLiteralNode,
    PrefixExpressionNode,
    InfixExpressionNode,
]

Statement = Union[LetStatementNode, ReturnStatementNode, ExpressionStatementNode]
