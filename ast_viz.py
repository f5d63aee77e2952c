"""Graphviz visualization helpers for syntax trees.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered), and `write_and_render` which writes and renders it to disk.

Layout: one graph node per syntax node, labelled with the node kind and its
payload (type name, identifier or value). Edges run from parent to child in
child order, so a program's statements appear left to right in source order.
"""

from typing import Iterator, Tuple
from graphviz import Digraph
from ast_nodes import *
from errors import InternalDefect
from pretty_printer import PrettyPrinter


def _label(node: ASTNode) -> str:
    match node:
        case ProgramNode():
            return "Program"
        case StatementNode():
            return "Statement"
        case DeclarationNode():
            return "Declaration"
        case TypeRefNode(primitive=p):
            return f"TypeRef\\n{PrettyPrinter.print_type(p)}"
        case SymbolNode(name=n):
            return f"Symbol\\n{n}"
        case NumberNode(value=v):
            return f"Number\\n{v}"
        case _:
            raise InternalDefect(f"unknown node type: {type(node).__name__}")


def _children(node: ASTNode) -> Tuple[ASTNode, ...]:
    match node:
        case ProgramNode(statements=stmts):
            return tuple(stmts)
        case StatementNode(body=body):
            return (body,)
        case DeclarationNode(type_ref=type_ref, symbol=symbol):
            return (type_ref, symbol)
        case _:
            return ()


def _walk(node: ASTNode) -> Iterator[Tuple[str, ASTNode, str]]:
    """Yield (id, node, parent id) in pre-order; the root has parent ""."""
    counter = 0
    stack = [(node, "")]
    while stack:
        current, parent = stack.pop()
        node_id = f"n{counter}"
        counter += 1
        yield node_id, current, parent
        # Push children reversed so they come out in source order.
        for child in reversed(_children(current)):
            stack.append((child, node_id))


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given tree.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB", ordering="out")
    dot.attr("node", shape="box", fontname="monospace")

    for node_id, current, parent in _walk(node):
        dot.node(node_id, label=_label(current))
        if parent:
            dot.edge(parent, node_id)

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> str:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(tree, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
