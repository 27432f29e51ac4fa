"""Graphviz visualization helpers for ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: every AST node becomes a box labelled with its kind and its
one-line surface rendering; edges point from a node to its children and are
labelled with the field they come from (`left`, `right`, `value`, ...).
Children the parser could not build are drawn as a dashed `(missing)` node.
"""

from typing import Iterator, List, Optional, Tuple
from graphviz import Digraph
from ast_nodes import *
from pretty_printer import PrettyPrinter


_KIND_NAMES = {
    NodeType.PROGRAM: "Program",
    NodeType.LET_STMT: "LetStatement",
    NodeType.RETURN_STMT: "ReturnStatement",
    NodeType.EXPR_STMT: "ExpressionStatement",
    NodeType.IDENTIFIER: "Identifier",
    NodeType.INT_LITERAL: "IntegerLiteral",
    NodeType.BOOL_LITERAL: "BooleanLiteral",
    NodeType.PREFIX: "PrefixExpression",
    NodeType.INFIX: "InfixExpression",
}


def _children(node: ASTNode) -> Iterator[Tuple[str, Optional[ASTNode]]]:
    match node:
        case ProgramNode(statements=stmts):
            for i, stmt in enumerate(stmts):
                yield f"stmt[{i}]", stmt
        case LetStatementNode(name=name, value=value):
            yield "name", name
            yield "value", value
        case ReturnStatementNode(return_value=value):
            yield "return_value", value
        case ExpressionStatementNode(expression=expr):
            yield "expression", expr
        case PrefixExpressionNode(right=right):
            yield "right", right
        case InfixExpressionNode(left=left, right=right):
            yield "left", left
            yield "right", right
        case _:
            return


def _label(node: ASTNode) -> str:
    kind = _KIND_NAMES.get(node.type, str(node.type))
    match node:
        case ProgramNode():
            return kind
        case PrefixExpressionNode(operator=op) | InfixExpressionNode(operator=op):
            return f"{kind}\\n{op}\\n{PrettyPrinter.print_surface(node)}"
        case _:
            return f"{kind}\\n{PrettyPrinter.print_surface(node)}"


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="Helvetica", fontsize="10")

    counter = 0
    stack: List[Tuple[Optional[str], str, Optional[ASTNode]]] = [(None, "", node)]
    while stack:
        parent_id, edge_label, current = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        if current is None:
            dot.node(node_id, label="(missing)", style="dashed")
        else:
            dot.node(node_id, label=_label(current))
            # Push in reverse so children are emitted left to right.
            for child_label, child in reversed(list(_children(current))):
                stack.append((node_id, child_label, child))

        if parent_id is not None:
            dot.edge(parent_id, node_id, label=edge_label)

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension). Returns when rendered.

    Example: write_and_render(program, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
