"""AST node definitions for the Tiger scripting language.

The tree is deliberately small: a `ProgramNode` holds an ordered sequence of
statements, each of which is either a `let` binding or a `print`. Expressions
are either an identifier to resolve at evaluation time or a string literal.

Conventions:
- Every node dataclass inherits from `ASTNode`, which records the node kind
    (`NodeType`). The rest of the toolchain pattern-matches on the concrete
    node classes.
- Nodes are frozen and `ProgramNode.statements` is a tuple; a tree is built
    once by the parser and never changed.
- `Statement` and `Expression` name the closed set of variants allowed in
    each position.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple, Union


class NodeType(Enum):
    IDENTIFIER = auto()
    STRING_LITERAL = auto()
    LET_STMT = auto()
    PRINT_STMT = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType


# Expression Nodes
@dataclass(frozen=True)
class IdentifierNode(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    name: str = ""


@dataclass(frozen=True)
class StringLiteralNode(ASTNode):
    type: NodeType = NodeType.STRING_LITERAL
    value: str = ""


Expression = Union[IdentifierNode, StringLiteralNode]


# Statement Nodes
@dataclass(frozen=True)
class LetStatementNode(ASTNode):
    type: NodeType = NodeType.LET_STMT
    name: IdentifierNode = field(default_factory=IdentifierNode)
    value: Expression = field(default_factory=StringLiteralNode)


@dataclass(frozen=True)
class PrintStatementNode(ASTNode):
    type: NodeType = NodeType.PRINT_STMT
    value: Expression = field(default_factory=IdentifierNode)


Statement = Union[LetStatementNode, PrintStatementNode]


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: Tuple[Statement, ...] = ()
