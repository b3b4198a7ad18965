"""Command line interface for infixcalc."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from infixcalc.engine import evaluate, preview
from infixcalc.formatting import as_operand
from infixcalc.log import get_logger
from infixcalc.settings import FormatSettings, settings_from_env

QUIT_COMMANDS = frozenset({"quit", "exit"})
CHAIN_PREFIXES = frozenset("+-*/^×÷²")


def _strip_whitespace(line: str) -> str:
    return "".join(line.split())


def chain_onto(previous: str | None, line: str) -> str:
    """Prefix ``line`` with the previous result when it starts with an operator."""
    if previous is not None and line and line[0] in CHAIN_PREFIXES:
        return as_operand(previous) + line
    return line


def command_eval(args: argparse.Namespace, settings: FormatSettings) -> int:
    status = 0
    for expression in args.expressions:
        result = evaluate(expression, settings)
        if result.ok:
            print(result.text)
        else:
            print(f"error: {result}")
            status = 1
    return status


def command_preview(args: argparse.Namespace, settings: FormatSettings) -> int:
    text = preview(args.expression, settings)
    if text is not None:
        print(text)
    return 0


def run_repl(settings: FormatSettings, stdin: TextIO = sys.stdin, prompt: str = "> ") -> int:
    previous: str | None = None
    while True:
        if prompt and stdin.isatty():
            print(prompt, end="", flush=True)
        raw = stdin.readline()
        if not raw:
            break
        line = _strip_whitespace(raw)
        if line in QUIT_COMMANDS:
            break
        if not line:
            continue

        result = evaluate(chain_onto(previous, line), settings)
        if result.ok:
            previous = result.text
            print(result.text)
        else:
            print(f"error: {result}")
    return 0


def command_repl(args: argparse.Namespace, settings: FormatSettings) -> int:
    return run_repl(settings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="infixcalc", description="Arithmetic expression calculator")
    parser.add_argument("--verbose", action="store_true", help="Log pipeline stages at DEBUG level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    eval_parser = subparsers.add_parser("eval", help="Evaluate expressions")
    eval_parser.add_argument("expressions", nargs="+", metavar="EXPRESSION", help="Expression, e.g. '2(3+4)'")
    eval_parser.set_defaults(func=command_eval)

    preview_parser = subparsers.add_parser("preview", help="Preview an expression, printing nothing on failure")
    preview_parser.add_argument("expression", metavar="EXPRESSION")
    preview_parser.set_defaults(func=command_preview)

    repl_parser = subparsers.add_parser("repl", help="Interactive read-eval-print loop")
    repl_parser.set_defaults(func=command_repl)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        settings = settings_from_env()
    except ValueError as e:
        parser.error(str(e))
    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
