"""Tests for ast_viz: ensure a Digraph is produced and mirrors the tree."""

from ast_viz import render_ast_dot
from tests.utils import parse_text


def test_ast_viz_dot_source():
    dot = render_ast_dot(parse_text("int x; 42;"))
    src = dot.source
    assert "Program" in src
    assert "Declaration" in src
    assert "Symbol" in src and "x" in src
    assert "Number" in src and "42" in src
    # Program, 2 statements, declaration, type ref, symbol, number.
    assert src.count("->") == 6


def test_ast_viz_keeps_statement_order():
    src = render_ast_dot(parse_text("first; second;")).source
    assert src.index("first") < src.index("second")


def test_ast_viz_empty_program():
    src = render_ast_dot(parse_text("")).source
    assert "Program" in src
    assert "->" not in src
