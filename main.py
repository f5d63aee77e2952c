from __future__ import annotations
import argparse
import json
import os
import sys
from typing import List, Optional, TextIO

import graphviz

from ast_json import ast_to_json
from ast_nodes import ProgramNode
from ast_viz import write_and_render
from errors import CompileError
from lexer import Lexer
from parser import Parser
from pretty_printer import PrettyPrinter
from source import SourceContext, open_source, string_source
from tokens import Token


def lex(text: str, name: str = "<string>") -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(string_source(text, name))
    return lexer.tokenize()


def parse_tokens(tokens: List[Token], source_name: Optional[str] = None) -> ProgramNode:
    """Parse tokens into AST."""
    parser = Parser(tokens, source_name=source_name)
    return parser.parse()


def parse_source(context: SourceContext) -> ProgramNode:
    """Lex and parse a whole source, pulling tokens on demand."""
    return Parser(Lexer(context)).parse()


def compile_source(context: SourceContext) -> str:
    """Run the pipeline on one source and return its canonical rendering."""
    return PrettyPrinter.print_source(parse_source(context))


def process_program(
    context: SourceContext,
    *,
    out: TextIO,
    print_tokens: bool = False,
    print_ast: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> None:
    """Process a single source: lex, parse, print and optionally dump stages.

    Nothing is written to `out` unless the whole source parsed. Errors are
    left to the caller.
    """
    if print_tokens:
        # The listing needs every token up front, so lex eagerly here.
        tokens = Lexer(context).tokenize()
        print(f"Tokens ({len(tokens)}):", file=sys.stderr)
        for i, token in enumerate(tokens):
            print(f"  {i:3}: {token} @ {token.line}:{token.column}", file=sys.stderr)
        ast = parse_tokens(tokens, source_name=context.name)
    else:
        ast = parse_source(context)

    if print_ast:
        print(PrettyPrinter.print_ast(ast), file=sys.stderr)

    rendered = PrettyPrinter.print_source(ast)

    if dump_ast_path:
        with open(dump_ast_path, "w", encoding="utf-8") as fh:
            json.dump(ast_to_json(ast), fh, indent=2)
        print(f"Wrote AST JSON to {dump_ast_path}", file=sys.stderr)

    if viz_path:
        rendered_path = write_and_render(ast, viz_path, fmt=viz_format)
        print(f"Wrote AST visualization to {rendered_path}", file=sys.stderr)

    out.write(rendered)


def interactive_mode(progname: str, out: TextIO) -> None:
    """Run an interactive REPL reading one program per line from stdin."""
    print("\nInteractive Mode (type 'quit' to exit)", file=sys.stderr)

    while True:
        try:
            text = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("", file=sys.stderr)
            break

        if text.lower() in ("quit", "exit", "q"):
            break
        if not text:
            continue

        try:
            out.write(compile_source(string_source(text, "<stdin>")))
        except CompileError as e:
            print(e.describe(progname), file=sys.stderr)


def build_arg_parser(progname: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=progname,
        description="Parse sources and print them back in canonical form",
    )
    parser.add_argument("files", nargs="*", help="Source files to process")
    parser.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens",
        dest="print_tokens",
        action="store_true",
        help="Print tokens to stderr",
    )
    parser.add_argument(
        "--print-ast",
        dest="print_ast",
        action="store_true",
        help="Print the syntax tree to stderr",
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the syntax tree as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the tree",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    return parser


def run(
    argv: Optional[List[str]] = None,
    progname: Optional[str] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Run the command line and return the process exit status."""
    progname = progname or os.path.basename(sys.argv[0]) or "cc-front"
    out = out if out is not None else sys.stdout
    args = build_arg_parser(progname).parse_args(argv)

    if args.interactive:
        interactive_mode(progname, out)
        return 0

    if not args.files:
        print(f"usage: {progname} files", file=sys.stderr)
        return 1

    for path in args.files:
        try:
            with open_source(path) as context:
                process_program(
                    context,
                    out=out,
                    print_tokens=args.print_tokens,
                    print_ast=args.print_ast,
                    dump_ast_path=args.dump_ast,
                    viz_path=args.viz_ast,
                    viz_format=args.viz_format,
                )
        except CompileError as e:
            print(e.describe(progname), file=sys.stderr)
            return 1
        except (OSError, graphviz.ExecutableNotFound, graphviz.CalledProcessError) as e:
            # Writing a --dump-ast/--viz-ast artifact failed.
            print(f"{progname}: {path}: {e}", file=sys.stderr)
            return 1

    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
