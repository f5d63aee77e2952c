"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. Every dict carries a
`node_type` key plus the node's own fields; source positions are included
so a dump can be traced back to the input.
"""

from typing import Any, Dict, Optional
from ast_nodes import *
from errors import InternalDefect


def _position(node: ASTNode) -> Dict[str, int]:
    return {"line": node.line, "column": node.column}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    # leaves
    if t == NodeType.TYPE_REF and isinstance(node, TypeRefNode):
        return {"node_type": "TypeRef", "primitive": str(node.primitive), **_position(node)}
    if t == NodeType.SYMBOL and isinstance(node, SymbolNode):
        return {"node_type": "Symbol", "name": node.name, **_position(node)}
    if t == NodeType.NUMBER and isinstance(node, NumberNode):
        return {"node_type": "Number", "value": node.value, **_position(node)}
    # statements and higher-level nodes
    if t == NodeType.DECLARATION and isinstance(node, DeclarationNode):
        return {
            "node_type": "Declaration",
            "type_ref": ast_to_json(node.type_ref),
            "symbol": ast_to_json(node.symbol),
            **_position(node),
        }
    if t == NodeType.STATEMENT and isinstance(node, StatementNode):
        return {"node_type": "Statement", "body": ast_to_json(node.body), **_position(node)}
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "statements": [ast_to_json(s) for s in node.statements],
        }

    raise InternalDefect(f"cannot serialize node type: {type(node).__name__}")
