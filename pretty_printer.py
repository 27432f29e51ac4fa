"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line tree, and `PrettyPrinter.print_surface(node)`
which renders a node back to one line of source-like text. The printer is
intended for debugging, tests and the command-line driver rather than for
producing final source code.

Examples:
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from typing import Optional
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: Optional[ASTNode], indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if node is None:
            lines.append(f"{indent_str}{prefix}<missing>")
            return "\n".join(lines)

        match node:
            case IntegerLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}IntegerLiteral({v})")

            case BooleanLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}BooleanLiteral({'true' if v else 'false'})")

            case IdentifierNode(value=n):
                lines.append(f"{indent_str}{prefix}Identifier({n})")

            case PrefixExpressionNode(operator=op, right=right):
                lines.append(f"{indent_str}{prefix}PrefixExpression({op})")
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case InfixExpressionNode(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}InfixExpression({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case LetStatementNode(name=name, value=value):
                lines.append(f"{indent_str}{prefix}LetStatement({name.value})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ReturnStatementNode(return_value=value):
                lines.append(f"{indent_str}{prefix}ReturnStatement")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ExpressionStatementNode(expression=expr):
                lines.append(f"{indent_str}{prefix}ExpressionStatement")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: Optional[ASTNode]) -> str:
        """Return a compact one-line source rendering of an AST node.

        Unlike `str(node)`, redundant parentheses are left out: only nested
        operators get wrapped, e.g. `a + (b * c)` instead of `(a + (b * c))`.
        Used for node labels in the Graphviz view.
        """
        if node is None:
            return ""

        def _p(n: Optional[ASTNode]) -> str:
            s = PrettyPrinter.print_surface(n)
            if isinstance(n, (PrefixExpressionNode, InfixExpressionNode)):
                return f"({s})"
            return s

        match node:
            case IntegerLiteralNode(value=v):
                return str(v)
            case BooleanLiteralNode(value=v):
                return "true" if v else "false"
            case IdentifierNode(value=n):
                return n
            case PrefixExpressionNode(operator=op, right=right):
                return f"{op}{_p(right)}"
            case InfixExpressionNode(left=l, operator=op, right=r):
                return f"{_p(l)} {op} {_p(r)}"
            case LetStatementNode(name=name, value=value):
                return f"let {name.value} = {PrettyPrinter.print_surface(value)}"
            case ReturnStatementNode(return_value=value):
                if value is not None:
                    return f"return {PrettyPrinter.print_surface(value)}"
                return "return"
            case ExpressionStatementNode(expression=expr):
                return PrettyPrinter.print_surface(expr)
            case ProgramNode():
                return "<program>"
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
