"""Tree-walking evaluator for Tiger programs.

`eval_program` runs the statements of a `ProgramNode` in order against an
environment mapping variable names to text values:

- `let <name> = <expr>` stores the value of `<expr>` under `<name>`,
  replacing any previous binding.
- `print <expr>` appends the value of `<expr>` and a newline to the output.

An identifier with no binding evaluates to the placeholder text
`[undefined variable: <name>]`; this is an ordinary value and evaluation
continues with the next statement. Exactly one trailing newline is removed
from the collected output before it is returned.
"""

from typing import Dict, List, Optional
from ast_nodes import *

Environment = Dict[str, str]


def undefined_variable(name: str) -> str:
    return f"[undefined variable: {name}]"


def _eval_expr(node: Expression, env: Environment) -> str:
    match node:
        case StringLiteralNode(value=v):
            return v
        case IdentifierNode(name=n):
            if n in env:
                return env[n]
            return undefined_variable(n)
        case _:
            raise RuntimeError(f"Unhandled expression node type: {node}")


def _exec_stmt(stmt: Statement, env: Environment, output: List[str]) -> None:
    match stmt:
        case LetStatementNode(name=IdentifierNode(name=n), value=value):
            env[n] = _eval_expr(value, env)
        case PrintStatementNode(value=value):
            output.append(_eval_expr(value, env))
            output.append("\n")
        case _:
            raise RuntimeError(f"Unhandled statement node: {stmt}")


def eval_program(prog: ProgramNode, env: Optional[Environment] = None) -> str:
    """Evaluate a ProgramNode and return everything it printed.

    A fresh environment is used unless `env` is given; passing one in lets a
    caller such as the REPL keep bindings between programs.
    """
    if env is None:
        env = {}
    output: List[str] = []
    for s in prog.statements:
        _exec_stmt(s, env, output)

    text = "".join(output)
    if text.endswith("\n"):
        text = text[:-1]
    return text
