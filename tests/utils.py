from lexer import Lexer
from parser import Parser
from evaluator import evaluate


def parse_text(text: str):
    """Lex+parse a source text, returning the program and the parser errors."""
    parser = Parser(Lexer(text))
    program = parser.parse_program()
    return program, parser.get_errors()


def parse_checked(text: str):
    """Like parse_text, but fail on parser errors and return only the program."""
    program, errors = parse_text(text)
    assert errors == [], "parser had errors:\n" + "\n".join(errors)
    return program


def eval_text(text: str):
    """Parse (checked) and evaluate a source text."""
    return evaluate(parse_checked(text))
