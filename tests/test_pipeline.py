"""End-to-end checks of `run` over source text."""

import pytest

from main import run


def test_empty_source():
    assert run("") == ""


def test_let_and_print():
    assert run('let x = "hi"; print x;') == "hi"


def test_missing_variable():
    assert run("print missing;") == "[undefined variable: missing]"


def test_rebinding_last_write_wins():
    assert run('let x = "a"; let x = "b"; print x;') == "b"


def test_multiple_prints_are_newline_joined():
    assert run('let a = "1"; let b = "2"; print a; print b;') == "1\n2"


@pytest.mark.parametrize(
    "src, expected",
    [
        ("let n = 42; print n;", "42"),
        ("let f = 3.50; print f;", "3.50"),
        ("let t = true; print t;", "true"),
        ("let v = 1.2.3; print v;", "1.2"),
    ],
)
def test_literals_are_stored_as_surface_text(src, expected):
    assert run(src) == expected


def test_unterminated_string():
    assert run('let s = "open') == ""
    assert run('print s; let s = "open') == "[undefined variable: s]"


def test_print_string_treats_it_as_name():
    assert run('let hi = "there"; print "hi";') == "there"


def test_control_keywords_are_ignored():
    src = 'let x = "a"; if (x == "a") { print x; } while false { }'
    assert run(src) == "a"


def test_multiline_program():
    src = """
    let greeting = "hello";
    let name = "world";
    print greeting;
    print name;
    print nobody;
    """
    assert run(src) == "hello\nworld\n[undefined variable: nobody]"


def test_runs_are_independent():
    assert run('let x = "1";') == ""
    assert run("print x;") == "[undefined variable: x]"


@pytest.mark.parametrize(
    "src",
    ["!", "let", "print", '"', "let = ;", "1.2.3.4", "{{{{", "é ü ∑", "let let let", "\0"],
)
def test_run_is_total(src):
    assert isinstance(run(src), str)
