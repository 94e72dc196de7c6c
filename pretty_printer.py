"""Pretty-printer for tokens and the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, `PrettyPrinter.print_surface(node)`
which renders a node back into one line of source syntax, and
`PrettyPrinter.print_tokens(tokens)` for token dumps. The printer is meant
for debugging and tests rather than for producing final source code.

Examples:
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from typing import List
from tokens import Token
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: List[Token], limit: int = 50) -> str:
        """Return a numbered listing of at most `limit` tokens."""
        lines = [f"Tokens ({len(tokens)}):"]
        for i, token in enumerate(tokens[:limit]):
            lines.append(f"  {i:3}: {token}")
        if len(tokens) > limit:
            lines.append(f"  ... and {len(tokens) - limit} more")
        return "\n".join(lines)

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case IdentifierNode(name=n):
                lines.append(f"{indent_str}{prefix}Identifier({n})")

            case StringLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}StringLiteral({v!r})")

            case LetStatementNode(name=name, value=value):
                lines.append(f"{indent_str}{prefix}LetStatement({name.name})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case PrintStatementNode(value=value):
                lines.append(f"{indent_str}{prefix}PrintStatement")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, surface-syntax-like one-line representation of a node.

        Used for graph labels, where `let x = "a";` reads better than the
        indented tree form.
        """
        if node is None:
            return ""

        match node:
            case IdentifierNode(name=n):
                return n
            case StringLiteralNode(value=v):
                return f'"{v}"'
            case LetStatementNode(name=name, value=value):
                return f"let {name.name} = {PrettyPrinter.print_surface(value)};"
            case PrintStatementNode(value=value):
                return f"print {PrettyPrinter.print_surface(value)};"
            case ProgramNode(statements=stmts):
                return " ".join(PrettyPrinter.print_surface(s) for s in stmts)
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
