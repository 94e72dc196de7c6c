"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/strings describing the AST node. Each dict carries a
`node_type` key plus the node's fields.
"""

from typing import Any, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    match node:
        case IdentifierNode(name=n):
            return {"node_type": "Identifier", "name": n}
        case StringLiteralNode(value=v):
            return {"node_type": "StringLiteral", "value": v}
        case LetStatementNode(name=name, value=value):
            return {
                "node_type": "Let",
                "name": ast_to_json(name),
                "value": ast_to_json(value),
            }
        case PrintStatementNode(value=value):
            return {"node_type": "Print", "value": ast_to_json(value)}
        case ProgramNode(statements=stmts):
            return {
                "node_type": "Program",
                "statements": [ast_to_json(s) for s in stmts],
            }
        case _:
            raise RuntimeError(f"Unhandled node type: {node}")
