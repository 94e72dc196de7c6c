from __future__ import annotations
import argparse
import json
import sys
from typing import Dict, List, Optional

from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from evaluator import eval_program
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()


def parse(text: str) -> ProgramNode:
    """Parse source text into a ProgramNode."""
    return Parser(Lexer(text)).parse_program()


def run(text: str) -> str:
    """Run a program against a fresh environment and return its output."""
    return eval_program(parse(text), {})


def process_program(
    text: str,
    env: Optional[Dict[str, str]] = None,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> str:
    """Process a single program: lex, parse, optionally dump stages, then evaluate.

    Inspection flags only print; they never change what the program outputs.
    """
    if print_tokens:
        print(PrettyPrinter.print_tokens(lex(text)))

    program = parse(text)
    if print_ast:
        print("\nAST:")
        print(PrettyPrinter.print_ast(program))

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(program), fh, indent=2)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(program, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return eval_program(program, env)


def interactive_mode(**options) -> None:
    """Run the REPL, keeping one environment for the whole session."""
    print("Tiger Language REPL")
    print("Type 'exit' to quit")

    env: Dict[str, str] = {}
    while True:
        try:
            text = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if text.lower() in ("exit", "quit", "q"):
            break
        if not text:
            continue

        result = process_program(text, env, **options)
        if result:
            print(result)

    print("Goodbye!")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiger",
        description="Run a Tiger program from a file or interactively from stdin",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to run"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # inspection options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    options = dict(
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )

    if args.interactive:
        interactive_mode(**options)
    elif args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1

        result = process_program(text, **options)
        if result:
            print(result)
    else:
        arg_parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
