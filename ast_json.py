"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node type,
the originating token literal and the key fields of each node.
"""

from typing import Any, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    # literals
    if t == NodeType.INT_LITERAL and isinstance(node, IntegerLiteralNode):
        return {"node_type": "IntegerLiteral", "value": node.value}
    if t == NodeType.BOOL_LITERAL and isinstance(node, BooleanLiteralNode):
        return {"node_type": "BooleanLiteral", "value": node.value}
    if t == NodeType.IDENTIFIER and isinstance(node, IdentifierNode):
        return {"node_type": "Identifier", "value": node.value}
    # expressions
    if t == NodeType.PREFIX and isinstance(node, PrefixExpressionNode):
        return {
            "node_type": "PrefixExpression",
            "operator": node.operator,
            "right": ast_to_json(node.right),
        }
    if t == NodeType.INFIX and isinstance(node, InfixExpressionNode):
        return {
            "node_type": "InfixExpression",
            "operator": node.operator,
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
        }
    # statements and higher-level nodes
    if t == NodeType.LET_STMT and isinstance(node, LetStatementNode):
        return {
            "node_type": "LetStatement",
            "token": node.token_literal(),
            "name": ast_to_json(node.name),
            "value": ast_to_json(node.value),
        }
    if t == NodeType.RETURN_STMT and isinstance(node, ReturnStatementNode):
        return {
            "node_type": "ReturnStatement",
            "token": node.token_literal(),
            "return_value": ast_to_json(node.return_value),
        }
    if t == NodeType.EXPR_STMT and isinstance(node, ExpressionStatementNode):
        return {
            "node_type": "ExpressionStatement",
            "expression": ast_to_json(node.expression),
        }
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "statements": [ast_to_json(s) for s in node.statements],
        }

    raise TypeError(f"Cannot serialize AST node: {node!r}")
