from tests.utils import parse_text
from pretty_printer import PrettyPrinter


def test_print_ast_tree(parse):
    program = parse("let x = -a * 2; return true;")
    out = PrettyPrinter.print_ast(program)
    assert out.splitlines() == [
        "Program",
        "    stmt[0]: LetStatement(x)",
        "      value: InfixExpression(*)",
        "        left: PrefixExpression(-)",
        "          right: Identifier(a)",
        "        right: IntegerLiteral(2)",
        "    stmt[1]: ReturnStatement",
        "      value: BooleanLiteral(true)",
    ]


def test_print_ast_marks_missing_children():
    program, errors = parse_text("let x = ;")
    assert errors
    out = PrettyPrinter.print_ast(program)
    assert "value: <missing>" in out


def test_print_surface_drops_outer_parentheses(parse):
    program = parse("a + b * c; -(1 + 2); let y = !true; return x")
    rendered = [PrettyPrinter.print_surface(s) for s in program.statements]
    assert rendered == ["a + (b * c)", "-(1 + 2)", "let y = !true", "return x"]
    assert PrettyPrinter.print_surface(program) == "<program>"
    assert PrettyPrinter.print_surface(None) == ""
