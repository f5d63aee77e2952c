from ast_nodes import *
from tests.utils import parse_text

SRC = "int a; a; 1; int b; 020; b;"


def _walk(node):
    yield node
    match node:
        case ProgramNode(statements=stmts):
            for s in stmts:
                yield from _walk(s)
        case StatementNode(body=body):
            yield from _walk(body)
        case DeclarationNode(type_ref=t, symbol=s):
            yield from _walk(t)
            yield from _walk(s)


def test_program_holds_only_statements():
    ast = parse_text(SRC)
    assert isinstance(ast.statements, tuple)
    assert all(isinstance(s, StatementNode) for s in ast.statements)


def test_statement_wraps_declaration_or_expression():
    ast = parse_text(SRC)
    for stmt in ast.statements:
        assert isinstance(stmt.body, (DeclarationNode, SymbolNode, NumberNode))


def test_declaration_children_are_typed():
    ast = parse_text(SRC)
    decls = [s.body for s in ast.statements if isinstance(s.body, DeclarationNode)]
    assert len(decls) == 2
    for decl in decls:
        assert decl.type_ref.type == NodeType.TYPE_REF
        assert decl.symbol.type == NodeType.SYMBOL


def test_node_type_tags_match_classes():
    expected = {
        ProgramNode: NodeType.PROGRAM,
        StatementNode: NodeType.STATEMENT,
        DeclarationNode: NodeType.DECLARATION,
        TypeRefNode: NodeType.TYPE_REF,
        SymbolNode: NodeType.SYMBOL,
        NumberNode: NodeType.NUMBER,
    }
    nodes = list(_walk(parse_text(SRC)))
    # Program, six statements, two declarations of three nodes, four expressions.
    assert len(nodes) == 1 + 6 + 2 * 3 + 4
    for node in nodes:
        assert node.type == expected[type(node)]
