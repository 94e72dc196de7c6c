"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(program)` which returns a `graphviz.Digraph` object
(not rendered). `write_and_render` can write the file to disk.

Layout: every AST node becomes one graph node named `n<k>` in pre-order.
Statements are drawn as boxes labelled with their surface syntax, and
expressions as ellipses. Edges from a parent to a child are labelled with
the field the child lives in (`stmt[0]`, `name`, `value`).
"""

from typing import List, Tuple
from ast_nodes import *
from graphviz import Digraph
from pretty_printer import PrettyPrinter


def _children(node: ASTNode) -> List[Tuple[str, ASTNode]]:
    match node:
        case ProgramNode(statements=stmts):
            return [(f"stmt[{i}]", s) for i, s in enumerate(stmts)]
        case LetStatementNode(name=name, value=value):
            return [("name", name), ("value", value)]
        case PrintStatementNode(value=value):
            return [("value", value)]
        case IdentifierNode() | StringLiteralNode():
            return []
        case _:
            raise RuntimeError(f"Unhandled node type: {node}")


def _escape(text: str) -> str:
    """Escape parsed text for a DOT label; backslash and quote are significant."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _label(node: ASTNode) -> str:
    # `\n` separators are DOT line breaks and are added after escaping.
    match node:
        case IdentifierNode(name=n):
            return "Identifier\\n" + _escape(n)
        case StringLiteralNode(value=v):
            return "StringLiteral\\n" + _escape(f'"{v}"')
        case ProgramNode(statements=stmts):
            return f"Program ({len(stmts)} statements)"
        case _:
            return _escape(PrettyPrinter.print_surface(node))


def render_ast_dot(program: ProgramNode) -> Digraph:
    """Return a graphviz.Digraph for the given program.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")

    counter = 0

    def visit(node: ASTNode) -> str:
        nonlocal counter
        node_id = f"n{counter}"
        counter += 1

        shape = "ellipse" if isinstance(node, (IdentifierNode, StringLiteralNode)) else "box"
        dot.node(node_id, label=_label(node), shape=shape)

        for edge_label, child in _children(node):
            child_id = visit(child)
            dot.edge(node_id, child_id, label=edge_label)
        return node_id

    visit(program)
    return dot


def write_and_render(program: ProgramNode, out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(prog, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(program)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
