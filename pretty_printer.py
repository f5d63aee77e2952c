"""Pretty-printer for the AST.

Provides two renderings of a tree:

- `PrettyPrinter.print_source(node)` renders the canonical source text of a
    node. Printing a parsed program and parsing the result again gives a tree
    that prints to the same text.
- `PrettyPrinter.print_ast(node, indent, prefix)` renders a readable
    multi-line structural dump, intended for debugging and tests.

Both raise `InternalDefect` when they meet a node kind or primitive type they
do not know: that means the tree model grew without the printer following.

Examples:
    PrettyPrinter.print_source(program_node)   # "int x;\\n42;\\n"
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from ast_nodes import *
from errors import InternalDefect
from tokens import PrimitiveType


class PrettyPrinter:
    @staticmethod
    def print_type(primitive: PrimitiveType) -> str:
        """Return the canonical spelling of a primitive type."""
        match primitive:
            case PrimitiveType.INT:
                return "int"
            case _:
                raise InternalDefect(f"unknown primitive type {primitive!r}")

    @staticmethod
    def print_source(node: ASTNode) -> str:
        """Render a node as canonical source text."""
        match node:
            case ProgramNode(statements=stmts):
                return "".join(PrettyPrinter.print_source(s) for s in stmts)

            case StatementNode(body=body):
                return f"{PrettyPrinter.print_source(body)};\n"

            case DeclarationNode(type_ref=type_ref, symbol=symbol):
                return (
                    f"{PrettyPrinter.print_source(type_ref)} "
                    f"{PrettyPrinter.print_source(symbol)}"
                )

            case TypeRefNode(primitive=primitive):
                return PrettyPrinter.print_type(primitive)

            case SymbolNode(name=n):
                return n

            case NumberNode(value=v):
                return str(v)

            case _:
                raise InternalDefect(f"unknown node type: {type(node).__name__}")

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        match node:
            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case StatementNode(body=body):
                lines.append(f"{indent_str}{prefix}Statement")
                lines.append(PrettyPrinter.print_ast(body, indent + 2))

            case DeclarationNode(type_ref=type_ref, symbol=symbol):
                lines.append(f"{indent_str}{prefix}Declaration")
                lines.append(PrettyPrinter.print_ast(type_ref, indent + 2, "type: "))
                lines.append(PrettyPrinter.print_ast(symbol, indent + 2, "name: "))

            case TypeRefNode(primitive=primitive):
                tname = PrettyPrinter.print_type(primitive)
                lines.append(f"{indent_str}{prefix}TypeRef({tname})")

            case SymbolNode(name=n):
                lines.append(f"{indent_str}{prefix}Symbol({n})")

            case NumberNode(value=v):
                lines.append(f"{indent_str}{prefix}Number({v})")

            case _:
                raise InternalDefect(f"unknown node type: {type(node).__name__}")

        return "\n".join(line for line in lines if line)
