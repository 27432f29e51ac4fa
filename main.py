from __future__ import annotations
import json
import logging
import sys
from typing import List, Optional, Tuple
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from evaluator import evaluate
from objects import EvalObject
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render


PROMPT = ">> "

logger = logging.getLogger("monkey")


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_source(text: str) -> Tuple[ProgramNode, List[str]]:
    """Parse source text into a program plus the parser's error messages."""
    parser = Parser(Lexer(text))
    program = parser.parse_program()
    return program, parser.get_errors()


def run_source(text: str) -> Tuple[Optional[EvalObject], List[str]]:
    """Lex, parse and evaluate source text.

    Returns the evaluation result and the parser errors. When there are
    parser errors the program is not evaluated and the result is None.
    """
    program, errors = parse_source(text)
    if errors:
        return None, errors
    return evaluate(program), errors


def print_parser_errors(errors: List[str]) -> None:
    print("Parser errors:")
    for msg in errors:
        print(f"\t{msg}")


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    print_result: bool = True,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single program: lex, parse, evaluate and optionally print stages.

    Flags control which parts are printed. Returns False if the parser
    reported errors, True otherwise.
    """
    if print_tokens:
        tokens = lex(text)
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens):
            print(f"  {i:3}: {token}")

    program, errors = parse_source(text)
    logger.debug(
        "parsed %d statement(s) with %d error(s)", len(program.statements), len(errors)
    )
    if errors:
        print_parser_errors(errors)
        return False

    if print_ast:
        print("AST:")
        print(PrettyPrinter.print_ast(program))

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(program), fh, indent=2)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(program, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    result = evaluate(program)
    logger.debug("evaluated to %r", result)
    if print_result and result is not None:
        print(result.inspect())

    return True


def interactive_mode(print_tokens: bool = False, print_ast: bool = False) -> None:
    """Run the read-eval-print loop reading one line at a time from stdin."""
    print("Interactive mode (type 'quit' to exit)")

    while True:
        try:
            text = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break

        if not text:
            continue

        process_program(text, print_tokens=print_tokens, print_ast=print_ast)


def cli(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Evaluate a program from a file, the command line or interactively"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--eval", "-e", dest="source", help="Source text to evaluate"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST tree"
    )
    parser.add_argument(
        "--no-result",
        dest="print_result",
        action="store_false",
        help="Do not print the evaluation result",
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true", help="Log debug output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    elif args.source is not None:
        text = args.source
    else:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        print_result=args.print_result,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(cli())
