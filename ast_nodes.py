"""AST node definitions for the tiny declaration language.

This module defines the AST node dataclasses built by the parser and walked
by the printer and the exporters. Each node kind is its own dataclass holding
only the fields that kind needs; the `NodeType` enum identifies node kinds.

Node kinds:
- `ProgramNode`: the ordered statements of a source, in source order.
- `StatementNode`: exactly one child, a declaration or an expression.
- `DeclarationNode`: a `TypeRefNode` followed by a `SymbolNode`.
- `TypeRefNode`: one primitive type, no children.
- `SymbolNode`, `NumberNode`: leaves carrying identifier text or an integer.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and optional source `line`/`column` information.
- Nodes are frozen: once the parser has built a tree it is never modified.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple, Union
from tokens import PrimitiveType


class NodeType(Enum):
    PROGRAM = auto()
    STATEMENT = auto()
    DECLARATION = auto()
    TYPE_REF = auto()
    SYMBOL = auto()
    NUMBER = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType
    line: int = 0
    column: int = 0


# Leaves
@dataclass(frozen=True)
class TypeRefNode(ASTNode):
    type: NodeType = NodeType.TYPE_REF
    primitive: PrimitiveType = PrimitiveType.INT


@dataclass(frozen=True)
class SymbolNode(ASTNode):
    type: NodeType = NodeType.SYMBOL
    name: str = ""


@dataclass(frozen=True)
class NumberNode(ASTNode):
    type: NodeType = NodeType.NUMBER
    value: int = 0


ExpressionNode = Union[SymbolNode, NumberNode]


@dataclass(frozen=True)
class DeclarationNode(ASTNode):
    type: NodeType = NodeType.DECLARATION
    type_ref: TypeRefNode = field(default_factory=TypeRefNode)
    symbol: SymbolNode = field(default_factory=SymbolNode)


@dataclass(frozen=True)
class StatementNode(ASTNode):
    type: NodeType = NodeType.STATEMENT
    body: Union[DeclarationNode, SymbolNode, NumberNode] = field(
        default_factory=NumberNode
    )


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: Tuple[StatementNode, ...] = ()
