"""Minimal command-line front end for the namedargs parser.

Everything after the first ``--`` is handed to the parser untouched; the
options before it configure the parse. The parsed mapping is printed as JSON
so shell scripts can consume it, e.g.::

    namedargs --multi name --command run -- run --name phil --name matt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from ..colors import color
from ..config import ParserOptions, get_settings
from ..core import parse
from ..errors import NamedArgsError
from ..version import __version__

_LOGGER = logging.getLogger("namedargs.cli")

SEPARATOR = "--"
EXIT_PARSE_ERROR = 2


def _split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    items = list(argv)
    if SEPARATOR in items:
        idx = items.index(SEPARATOR)
        return items[:idx], items[idx + 1 :]
    return items, []


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namedargs",
        description="Parse strict '--name value' tokens (given after '--') and print them as JSON.",
    )
    parser.add_argument(
        "--multi",
        action="append",
        default=[],
        metavar="NAME",
        help="Option name (e.g. tag for --tag) that always collects a list. Repeatable.",
    )
    parser.add_argument(
        "--command",
        action="append",
        default=[],
        metavar="NAME",
        help="Allowed leading command. Repeatable; enables command mode.",
    )
    parser.add_argument(
        "--basic",
        action="store_true",
        help="Disable the --help/--version short-circuit and command handling.",
    )
    parser.add_argument(
        "--strict-names",
        action="store_true",
        default=None,
        help="Reject single-letter option names such as --n.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parser decisions to stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[Sequence[str]]) -> Tuple[argparse.Namespace, List[str]]:
    own, tokens = _split_argv(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(own)
    return args, tokens


def _report_error(exc: NamedArgsError, *, use_color: bool) -> None:
    stream = sys.stderr
    if use_color:
        header = color("error:", fg="red", bold=True, stream=stream)
        kind = color(f"kind: {exc.kind.value}", fg="yellow", stream=stream)
    else:
        header, kind = "error:", f"kind: {exc.kind.value}"
    print(header, file=stream)
    print(exc.message, file=stream)
    print(kind, file=stream)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args, tokens = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    options = ParserOptions(
        allow_multiple=tuple(args.multi),
        commands=tuple(args.command),
        full=not args.basic,
        reject_single_letter=args.strict_names,
    )
    _LOGGER.debug("parsing %d token(s) with %r", len(tokens), options)
    try:
        result = parse(tokens, options)
    except NamedArgsError as exc:
        _report_error(exc, use_color=get_settings().color)
        return EXIT_PARSE_ERROR

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


__all__ = ["build_parser", "parse_args", "main"]
