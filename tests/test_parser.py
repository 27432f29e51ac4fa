import pytest

from tests.utils import parse_text
from ast_nodes import *
from parser import Parser, Precedence
from lexer import Lexer


def _single_expression(program):
    assert len(program.statements) == 1
    stmt = program.statements[0]
    assert isinstance(stmt, ExpressionStatementNode)
    return stmt.expression


def test_parser_parses_let_statements(parse):
    src = """
    let x = 5;
    let y = 10;
    let foobar = 10000;
    """
    program = parse(src)
    assert len(program.statements) == 3

    for stmt, name in zip(program.statements, ["x", "y", "foobar"]):
        assert isinstance(stmt, LetStatementNode)
        assert stmt.token_literal() == "let"
        assert stmt.name.value == name
        assert stmt.name.token_literal() == name


def test_parser_let_statement_values(parse):
    program = parse("let x = 5; let y = true; let z = a + 1")
    values = [str(stmt.value) for stmt in program.statements]
    assert values == ["5", "true", "(a + 1)"]


def test_parser_parses_return_statements(parse):
    src = """
    return 5;
    return 10;
    return 10000;
    """
    program = parse(src)
    assert len(program.statements) == 3
    for stmt in program.statements:
        assert isinstance(stmt, ReturnStatementNode)
        assert stmt.token_literal() == "return"
    assert program.statements[2].return_value.value == 10000


def test_parser_reports_cascading_errors():
    _, errors = parse_text("let 123; let a;")
    assert errors == [
        "expected next token to be IDENT, got INT instead",
        "expected next token to be =, got ; instead",
        "no prefix parse function for ; found",
    ]


def test_parser_stays_on_unexpected_token():
    program, errors = parse_text("let x 5;")
    assert errors == ["expected next token to be =, got INT instead"]
    # The let is dropped and `5` is picked up as its own statement.
    assert len(program.statements) == 1
    assert isinstance(program.statements[0].expression, IntegerLiteralNode)


def test_parser_keeps_let_with_missing_value():
    program, errors = parse_text("let x = ;")
    assert errors == ["no prefix parse function for ; found"]
    assert len(program.statements) == 1
    stmt = program.statements[0]
    assert isinstance(stmt, LetStatementNode)
    assert stmt.value is None


def test_parser_identifier_expression(parse):
    ident = _single_expression(parse("foobar;"))
    assert isinstance(ident, IdentifierNode)
    assert ident.value == "foobar"
    assert ident.token_literal() == "foobar"


def test_parser_integer_literal_expression(parse):
    literal = _single_expression(parse("10;"))
    assert isinstance(literal, IntegerLiteralNode)
    assert literal.value == 10
    assert literal.token_literal() == "10"


@pytest.mark.parametrize("src,expected", [("true;", True), ("false;", False)])
def test_parser_boolean_expression(parse, src, expected):
    literal = _single_expression(parse(src))
    assert isinstance(literal, BooleanLiteralNode)
    assert literal.value is expected


@pytest.mark.parametrize(
    "src,operator,value",
    [("!5;", "!", 5), ("-15;", "-", 15)],
)
def test_parser_prefix_expressions(parse, src, operator, value):
    expr = _single_expression(parse(src))
    assert isinstance(expr, PrefixExpressionNode)
    assert expr.operator == operator
    assert isinstance(expr.right, IntegerLiteralNode)
    assert expr.right.value == value
    assert expr.right.token_literal() == str(value)


@pytest.mark.parametrize("operator", ["+", "-", "*", "/", ">", "<", "==", "!="])
def test_parser_infix_expressions(parse, operator):
    expr = _single_expression(parse(f"5 {operator} 5;"))
    assert isinstance(expr, InfixExpressionNode)
    assert expr.operator == operator
    for operand in (expr.left, expr.right):
        assert isinstance(operand, IntegerLiteralNode)
        assert operand.value == 5
        assert operand.token_literal() == "5"


@pytest.mark.parametrize(
    "src,expected",
    [
        ("-a * b", "((-a) * b)"),
        ("!-a", "(!(-a))"),
        ("a + b + c", "((a + b) + c)"),
        ("a + b - c", "((a + b) - c)"),
        ("a * b * c", "((a * b) * c)"),
        ("a * b / c", "((a * b) / c)"),
        ("a + b / c", "(a + (b / c))"),
        ("a + b * c + d / e - f", "(((a + (b * c)) + (d / e)) - f)"),
        ("3 + 4; -5 * 5", "(3 + 4)((-5) * 5)"),
        ("5 > 4 == 3 < 4", "((5 > 4) == (3 < 4))"),
        ("5 < 4 != 3 > 4", "((5 < 4) != (3 > 4))"),
        ("3 + 4 * 5 == 3 * 1 + 4 * 5", "((3 + (4 * 5)) == ((3 * 1) + (4 * 5)))"),
        ("true", "true"),
        ("3 > 5 == false", "((3 > 5) == false)"),
        ("!true", "(!true)"),
    ],
)
def test_parser_operator_precedence(parse, src, expected):
    assert str(parse(src)) == expected


@pytest.mark.parametrize(
    "src,expected",
    [
        ("1 + (2 + 3) + 4", "((1 + (2 + 3)) + 4)"),
        ("(5 + 5) * 2", "((5 + 5) * 2)"),
        ("2 / (5 + 5)", "(2 / (5 + 5))"),
        ("-(5 + 5)", "(-(5 + 5))"),
        ("!(true == true)", "(!(true == true))"),
    ],
)
def test_parser_grouped_expressions(parse, src, expected):
    assert str(parse(src)) == expected


def test_parser_unclosed_group():
    program, errors = parse_text("(1 + 2")
    assert errors == ["expected next token to be ), got EOF instead"]
    assert program.statements == []


def test_parser_illegal_token():
    program, errors = parse_text("5 @ 3")
    assert errors == ["no prefix parse function for @ found"]
    assert [str(s) for s in program.statements] == ["5", "3"]


def test_parser_reserved_keyword_has_no_rule():
    _, errors = parse_text("if")
    assert errors == ["no prefix parse function for if found"]


def test_parser_integer_out_of_range():
    _, errors = parse_text("99999999999999999999;")
    assert errors == ["could not parse 99999999999999999999 as integer"]

    program, errors = parse_text("9223372036854775807;")
    assert errors == []
    assert program.statements[0].expression.value == 2**63 - 1

    # Too many digits for int() to convert; still just a diagnostic.
    digits = "1" * 5000
    program, errors = parse_text(digits + ";")
    assert errors == [f"could not parse {digits} as integer"]
    assert program.statements == []

    # Leading zeros do not count against the width.
    program, errors = parse_text("0" * 30 + "42;")
    assert errors == []
    assert program.statements[0].expression.value == 42


def test_parser_deep_nesting_is_a_diagnostic():
    program, errors = parse_text("!" * 5000 + "true")
    assert errors == ["expression nested too deeply"]
    assert program.statements == []

    program, errors = parse_text("(" * 5000 + "1" + ")" * 5000)
    assert errors == ["expression nested too deeply"]


def test_parser_get_errors_returns_copy():
    parser = Parser(Lexer(";"))
    parser.parse_program()
    errors = parser.get_errors()
    errors.clear()
    assert parser.get_errors() == ["no prefix parse function for ; found"]


def test_precedence_order():
    assert (
        Precedence.LOWEST
        < Precedence.EQUALS
        < Precedence.LESSGREATER
        < Precedence.SUM
        < Precedence.PRODUCT
        < Precedence.PREFIX
        < Precedence.CALL
    )
