"""Tree-walking evaluator.

`evaluate(node)` reduces an AST node to a runtime value from `objects.py`.
It handles `ProgramNode`, `ExpressionStatementNode`, `IntegerLiteralNode`,
`BooleanLiteralNode`, `PrefixExpressionNode` and `InfixExpressionNode`.
A program evaluates to the value of its last statement.

Nothing here raises. Two kinds of "no useful value" come back instead:
- `NULL` for an operator applied to a type pair it is not defined for
    (e.g. `true + 1`, `true < false`).
- `None` for nodes with no runtime meaning (`let`, `return`, identifiers),
    for `-` applied to a non-integer, for division by zero, and for any
    expression whose operand produced `None`.

Integer division truncates toward zero: `-7 / 2` is `-3`.
"""

from typing import List, Optional
from ast_nodes import *
from objects import (
    FALSE,
    NULL,
    TRUE,
    BooleanObject,
    EvalObject,
    IntegerObject,
    NullObject,
    native_bool_to_boolean_object,
)


def evaluate(node: Optional[ASTNode]) -> Optional[EvalObject]:
    try:
        return _eval_node(node)
    except RecursionError:
        # Nesting deeper than the interpreter stack has no value.
        return None


def _eval_node(node: Optional[ASTNode]) -> Optional[EvalObject]:
    match node:
        case ProgramNode(statements=stmts):
            return _eval_statements(stmts)
        case ExpressionStatementNode(expression=expr):
            return _eval_node(expr)
        case IntegerLiteralNode(value=v):
            return IntegerObject(value=v)
        case BooleanLiteralNode(value=v):
            return native_bool_to_boolean_object(v)
        case PrefixExpressionNode(operator=op, right=right):
            rv = _eval_node(right)
            if rv is None:
                return None
            return _eval_prefix(op, rv)
        case InfixExpressionNode(left=left, operator=op, right=right):
            lv = _eval_node(left)
            rv = _eval_node(right)
            if lv is None or rv is None:
                return None
            return _eval_infix(op, lv, rv)
        case _:
            # LetStatementNode, ReturnStatementNode, IdentifierNode and None.
            return None


def _eval_statements(statements: List[Statement]) -> Optional[EvalObject]:
    result = None
    for stmt in statements:
        result = _eval_node(stmt)
    return result


def _eval_prefix(operator: str, operand: EvalObject) -> Optional[EvalObject]:
    match operator:
        case "!":
            return _eval_bang(operand)
        case "-":
            return _eval_minus(operand)
        case _:
            return NULL


def _eval_bang(operand: EvalObject) -> BooleanObject:
    # Anything that is not false or null counts as true.
    match operand:
        case BooleanObject(value=v):
            return native_bool_to_boolean_object(not v)
        case NullObject():
            return TRUE
        case _:
            return FALSE


def _eval_minus(operand: EvalObject) -> Optional[IntegerObject]:
    if not isinstance(operand, IntegerObject):
        return None
    return IntegerObject(value=-operand.value)


def _eval_infix(
    operator: str, left: EvalObject, right: EvalObject
) -> Optional[EvalObject]:
    match (left, right):
        case (IntegerObject(value=lv), IntegerObject(value=rv)):
            return _eval_integer_infix(operator, lv, rv)
        case (BooleanObject(value=lv), BooleanObject(value=rv)):
            return _eval_boolean_infix(operator, lv, rv)
        case _:
            return NULL


def _eval_integer_infix(operator: str, lv: int, rv: int) -> Optional[EvalObject]:
    match operator:
        case "+":
            return IntegerObject(value=lv + rv)
        case "-":
            return IntegerObject(value=lv - rv)
        case "*":
            return IntegerObject(value=lv * rv)
        case "/":
            if rv == 0:
                return None
            return IntegerObject(value=_truncating_div(lv, rv))
        case "<":
            return native_bool_to_boolean_object(lv < rv)
        case ">":
            return native_bool_to_boolean_object(lv > rv)
        case "==":
            return native_bool_to_boolean_object(lv == rv)
        case "!=":
            return native_bool_to_boolean_object(lv != rv)
        case _:
            return NULL


def _eval_boolean_infix(operator: str, lv: bool, rv: bool) -> EvalObject:
    match operator:
        case "==":
            return native_bool_to_boolean_object(lv == rv)
        case "!=":
            return native_bool_to_boolean_object(lv != rv)
        case _:
            return NULL


def _truncating_div(lv: int, rv: int) -> int:
    # Python's // floors; round toward zero instead.
    quotient = abs(lv) // abs(rv)
    return quotient if (lv < 0) == (rv < 0) else -quotient
