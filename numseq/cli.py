"""numseq CLI: expand number-sequence shorthand from the command line.

Usage:
    numseq expand [--json] [--output <output_path>] [--] <shorthand>
    numseq validate [--] <shorthand>
    numseq ast [--] <shorthand>
    numseq format [--] <shorthand>

Pass ``-`` as the shorthand to read it from standard input. Shorthand that
starts with a minus sign, such as ``-1x3``, must follow ``--`` so it is not
taken for an option.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from numseq import __version__
from numseq.core.config import get_config
from numseq.core.types import Severity, ShorthandError

BANNER = "numseq: number sequence shorthand expander"

_SHORTHAND_HELP = "Shorthand text, or - for stdin (put -- first if it starts with '-')"


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numseq",
        description="numseq: expand compact number-sequence shorthand",
        epilog="Examples: numseq expand '(1, 2)x2, 42x3' | numseq expand -- -1x3",
    )
    parser.add_argument("--version", action="version", version=f"numseq {__version__}")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- expand ---
    expand_parser = subparsers.add_parser("expand", help="Expand shorthand into values")
    expand_parser.add_argument("shorthand", type=str, help=_SHORTHAND_HELP)
    expand_parser.add_argument(
        "--json", action="store_true", help="Print the expansion result as JSON"
    )
    expand_parser.add_argument(
        "--output", "-o", type=str, default=None, help="Write the expansion result JSON here"
    )

    # --- validate ---
    validate_parser = subparsers.add_parser(
        "validate", help="Check shorthand is well-formed without evaluating it"
    )
    validate_parser.add_argument("shorthand", type=str, help=_SHORTHAND_HELP)

    # --- ast ---
    ast_parser = subparsers.add_parser("ast", help="Print the parsed syntax tree as JSON")
    ast_parser.add_argument("shorthand", type=str, help=_SHORTHAND_HELP)

    # --- format ---
    format_parser = subparsers.add_parser("format", help="Print canonical shorthand")
    format_parser.add_argument("shorthand", type=str, help=_SHORTHAND_HELP)

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Route log records through rich on stderr."""
    level = logging.DEBUG if verbose else get_config().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def format_value(value: float) -> str:
    """Integral floats print without a fractional part."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _read_source(shorthand: str) -> str:
    if shorthand == "-":
        return sys.stdin.read().strip()
    return shorthand


def _print_banner(console: Console) -> None:
    if get_config().show_banner:
        console.rule(BANNER)


def cmd_expand(args: argparse.Namespace) -> int:
    """Expand shorthand and print the values."""
    from numseq.pipeline import expand

    console = Console()
    err_console = Console(stderr=True)
    source = _read_source(args.shorthand)

    if not args.json:
        _print_banner(err_console)

    try:
        result = expand(source)
    except ShorthandError as exc:
        err_console.print(f"Error: {exc}", markup=False, highlight=False)
        return 1

    if args.output:
        Path(args.output).write_text(result.to_json(), encoding="utf-8")
        err_console.print(f"Written to: {args.output}", markup=False, highlight=False)

    if args.json:
        console.print(result.to_json(), markup=False, highlight=False, soft_wrap=True)
    else:
        text = ", ".join(format_value(v) for v in result.values)
        console.print(text, markup=False, highlight=False, soft_wrap=True)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate shorthand without evaluating it."""
    from numseq.pipeline import validate

    console = Console()
    err_console = Console(stderr=True)
    source = _read_source(args.shorthand)
    _print_banner(err_console)

    issues = validate(source)
    if any(e.severity == Severity.ERROR for e in issues):
        for e in issues:
            err_console.print(str(e), markup=False, highlight=False)
        return 1

    console.print("valid", markup=False, highlight=False)
    for e in issues:
        console.print(str(e), markup=False, highlight=False)
    return 0


def cmd_ast(args: argparse.Namespace) -> int:
    """Print the parsed syntax tree as JSON."""
    from numseq.dsl.lexer import lex
    from numseq.dsl.parser import Parser

    console = Console()
    err_console = Console(stderr=True)
    source = _read_source(args.shorthand)

    try:
        tree = Parser(lex(source)).parse()
    except ShorthandError as exc:
        err_console.print(f"Error: {exc}", markup=False, highlight=False)
        return 1

    console.print(json.dumps(tree.to_dict(), indent=2), markup=False, highlight=False, soft_wrap=True)
    return 0


def cmd_format(args: argparse.Namespace) -> int:
    """Print canonical shorthand for the input."""
    from numseq.dsl.formatter import format_node
    from numseq.dsl.lexer import lex
    from numseq.dsl.parser import Parser

    console = Console()
    err_console = Console(stderr=True)
    source = _read_source(args.shorthand)

    try:
        tree = Parser(lex(source)).parse()
    except ShorthandError as exc:
        err_console.print(f"Error: {exc}", markup=False, highlight=False)
        return 1

    console.print(format_node(tree), markup=False, highlight=False, soft_wrap=True)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    dispatch = {
        "expand": cmd_expand,
        "validate": cmd_validate,
        "ast": cmd_ast,
        "format": cmd_format,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
