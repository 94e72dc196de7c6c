"""Tests for the tree-walking evaluator."""

from ast_nodes import *
from evaluator import eval_program, undefined_variable


def _let(name, value):
    return LetStatementNode(
        name=IdentifierNode(name=name), value=StringLiteralNode(value=value)
    )


def _print(name):
    return PrintStatementNode(value=IdentifierNode(name=name))


def test_let_then_print():
    prog = ProgramNode(statements=[_let("x", "hi"), _print("x")])
    assert eval_program(prog) == "hi"


def test_let_populates_given_environment():
    env = {}
    eval_program(ProgramNode(statements=[_let("a", "1"), _let("a", "2")]), env)
    assert env == {"a": "2"}


def test_environment_persists_between_programs():
    env = {}
    assert eval_program(ProgramNode(statements=[_let("x", "kept")]), env) == ""
    assert eval_program(ProgramNode(statements=[_print("x")]), env) == "kept"


def test_undefined_variable_is_a_value():
    prog = ProgramNode(statements=[_print("nope"), _let("y", "ok"), _print("y")])
    assert eval_program(prog) == "[undefined variable: nope]\nok"
    assert undefined_variable("z") == "[undefined variable: z]"


def test_print_of_string_literal_expression():
    prog = ProgramNode(statements=[PrintStatementNode(value=StringLiteralNode(value="raw"))])
    assert eval_program(prog) == "raw"


def test_let_bound_to_identifier_copies_value():
    prog = ProgramNode(
        statements=[
            _let("a", "first"),
            LetStatementNode(name=IdentifierNode(name="b"), value=IdentifierNode(name="a")),
            _print("b"),
        ]
    )
    assert eval_program(prog) == "first"


def test_only_one_trailing_newline_is_trimmed():
    prog = ProgramNode(statements=[_let("s", "line\n"), _print("s")])
    assert eval_program(prog) == "line\n"


def test_empty_value_prints_empty_lines():
    prog = ProgramNode(statements=[_let("e", ""), _print("e"), _print("e")])
    assert eval_program(prog) == "\n"


def test_empty_program_outputs_nothing():
    assert eval_program(ProgramNode()) == ""
