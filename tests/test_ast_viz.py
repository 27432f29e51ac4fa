"""Tests for ast_viz: ensure a Digraph is produced with nodes and labelled edges."""

from tests.utils import parse_text
from ast_viz import render_ast_dot


def test_ast_viz_dot_source(parse):
    program = parse("let x = 1 + 2;")
    dot = render_ast_dot(program)
    src = dot.source
    assert "Program" in src
    assert "LetStatement" in src
    assert "InfixExpression" in src
    # Program, let, name, infix, two literals
    assert src.count("label=") >= 6 + 5
    assert "n0 -> n1" in src


def test_ast_viz_draws_missing_children():
    program, errors = parse_text("let x = ;")
    assert errors
    src = render_ast_dot(program).source
    assert "(missing)" in src
    assert "dashed" in src
