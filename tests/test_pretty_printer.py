from dataclasses import dataclass

import pytest

from ast_nodes import *
from errors import InternalDefect
from pretty_printer import PrettyPrinter
from tests.utils import parse_text, print_text
from tokens import PrimitiveType


def test_declaration_round_trip():
    assert print_text("int x;") == "int x;\n"


def test_multiple_statements_preserve_order():
    assert print_text("int a; int b; 5;") == "int a;\nint b;\n5;\n"


def test_numeric_literal_fidelity():
    assert print_text("42;") == "42;\n"


def test_empty_program_prints_nothing():
    assert print_text("") == ""
    assert print_text("\n\n   \t") == ""


def test_whitespace_is_normalized():
    assert print_text("  int\n\tvalue  ;x;\n\n  7 ;") == "int value;\nx;\n7;\n"


def test_octal_literal_prints_in_decimal():
    assert print_text("010;") == "8;\n"


@pytest.mark.parametrize(
    "src",
    [
        "",
        "int x;",
        "int a; int b; 5;",
        "  int   _tmp1 ;\n0;007;x;",
        "int a;a;1;int b;b;2;",
    ],
)
def test_printing_is_a_fixed_point(src):
    once = print_text(src)
    twice = print_text(once)
    assert twice == once


def test_print_source_of_individual_nodes():
    decl = DeclarationNode(
        type_ref=TypeRefNode(primitive=PrimitiveType.INT),
        symbol=SymbolNode(name="n"),
    )
    assert PrettyPrinter.print_source(decl) == "int n"
    assert PrettyPrinter.print_source(StatementNode(body=decl)) == "int n;\n"
    assert PrettyPrinter.print_source(NumberNode(value=12)) == "12"
    assert PrettyPrinter.print_type(PrimitiveType.INT) == "int"


@dataclass(frozen=True)
class _UnknownNode(ASTNode):
    type: NodeType = NodeType.SYMBOL


def test_unknown_node_is_an_internal_defect():
    with pytest.raises(InternalDefect):
        PrettyPrinter.print_source(_UnknownNode())
    program = ProgramNode(statements=(StatementNode(body=_UnknownNode()),))
    with pytest.raises(InternalDefect):
        PrettyPrinter.print_source(program)
    with pytest.raises(InternalDefect):
        PrettyPrinter.print_ast(program)


def test_unknown_primitive_type_is_an_internal_defect():
    with pytest.raises(InternalDefect):
        PrettyPrinter.print_source(TypeRefNode(primitive="float"))


def test_print_ast_outputs_structure():
    s = PrettyPrinter.print_ast(parse_text("int x; 42;"))
    assert s.splitlines() == [
        "Program",
        "    stmt[0]: Statement",
        "      Declaration",
        "        type: TypeRef(int)",
        "        name: Symbol(x)",
        "    stmt[1]: Statement",
        "      Number(42)",
    ]
