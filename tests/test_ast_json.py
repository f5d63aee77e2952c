import json

import pytest

from ast_json import ast_to_json
from ast_nodes import ASTNode, NodeType
from errors import InternalDefect
from tests.utils import parse_text


def test_ast_to_json_shape():
    data = ast_to_json(parse_text("int x;\n42;"))
    assert data["node_type"] == "Program"
    decl = data["statements"][0]["body"]
    assert decl == {
        "node_type": "Declaration",
        "type_ref": {"node_type": "TypeRef", "primitive": "int", "line": 1, "column": 1},
        "symbol": {"node_type": "Symbol", "name": "x", "line": 1, "column": 5},
        "line": 1,
        "column": 1,
    }
    assert data["statements"][1]["body"]["value"] == 42


def test_ast_to_json_is_serializable():
    text = json.dumps(ast_to_json(parse_text("int a; b; 3;")))
    assert '"Symbol"' in text


def test_ast_to_json_none_and_unknown():
    assert ast_to_json(None) is None
    with pytest.raises(InternalDefect):
        ast_to_json(ASTNode(type=NodeType.NUMBER))
