import dataclasses

import pytest

from tests.utils import parse_text
from ast_nodes import *


def test_parser_parses_let_and_print():
    ast = parse_text('let x = "hi"; print x;')
    assert ast.type == NodeType.PROGRAM
    assert ast.statements == (
        LetStatementNode(
            name=IdentifierNode(name="x"), value=StringLiteralNode(value="hi")
        ),
        PrintStatementNode(value=IdentifierNode(name="x")),
    )


def test_empty_program():
    ast = parse_text("")
    assert isinstance(ast, ProgramNode)
    assert ast.statements == ()


def test_let_value_is_literal_text_whatever_its_token_type():
    ast = parse_text("let n = 42; let f = 1.5; let b = true; let i = other;")
    values = [s.value for s in ast.statements]
    assert all(isinstance(v, StringLiteralNode) for v in values)
    assert [v.value for v in values] == ["42", "1.5", "true", "other"]


def test_let_does_not_check_assign_or_name():
    ast = parse_text('let 5 + "v";')
    stmt = ast.statements[0]
    assert stmt.name.name == "5"
    assert stmt.value.value == "v"


def test_print_always_resolves_a_name():
    ast = parse_text('print "hi";')
    stmt = ast.statements[0]
    assert isinstance(stmt, PrintStatementNode)
    assert isinstance(stmt.value, IdentifierNode)
    assert stmt.value.name == "hi"


def test_unrecognized_tokens_are_skipped():
    src = 'if (x) { while } func ; ; @ let y = "z"; else print y;'
    ast = parse_text(src)
    assert [s.type for s in ast.statements] == [NodeType.LET_STMT, NodeType.PRINT_STMT]


def test_semicolons_are_optional():
    ast = parse_text('let a = "1" print a')
    assert len(ast.statements) == 2


def test_truncated_statements_terminate():
    assert parse_text("let").statements[0] == LetStatementNode(
        name=IdentifierNode(name=""), value=StringLiteralNode(value="")
    )
    assert parse_text("let x =").statements[0].value.value == ""
    assert parse_text("print").statements[0].value.name == ""


def test_nodes_are_immutable():
    stmt = parse_text("print x;").statements[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        stmt.value = IdentifierNode(name="y")


def test_program_statements_are_a_tuple():
    ast = parse_text('let a = "1"; print a;')
    assert isinstance(ast.statements, tuple)
    with pytest.raises(AttributeError):
        ast.statements.append(PrintStatementNode())
