"""Single-pass tokenizer/validator for strict ``--name value`` arguments.

Rules enforced by :func:`parse`:

* ``--help`` anywhere wins over everything else, then ``--version`` (full
  mode only); the remaining tokens are not validated.
* with ``commands`` configured (full mode only) the first token must be one of
  them and is stored as ``result.command``.
* every other token pair is ``--name value``; values are kept verbatim, so
  commas and other punctuation are never split.
* names listed in ``allow_multiple`` always collect a list, even for a single
  occurrence; any other repeated name keeps its last value.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..config import ParserOptions
from ..errors import NamedArgsError
from .casing import to_camel_case
from .values import ParseResult

__all__ = ["parse", "parse_named", "parse_named_basic", "NAME_PREFIX"]

NAME_PREFIX = "--"
HELP_TOKEN = "--help"
VERSION_TOKEN = "--version"

_LOGGER = logging.getLogger("namedargs.parser")


def _short_circuit(tokens: Sequence[str]) -> Optional[ParseResult]:
    if HELP_TOKEN in tokens:
        _LOGGER.debug("--help present; ignoring %d other token(s)", len(tokens) - 1)
        return ParseResult.help_requested()
    if VERSION_TOKEN in tokens:
        _LOGGER.debug("--version present; ignoring %d other token(s)", len(tokens) - 1)
        return ParseResult.version_requested()
    return None


def _extract_command(tokens: Sequence[str], commands: Sequence[str]) -> str:
    if not tokens:
        raise NamedArgsError.no_command_given(commands)
    candidate = tokens[0]
    if candidate not in commands:
        raise NamedArgsError.unknown_command(candidate, commands)
    return candidate


def _seed_result(allow_multiple: Iterable[str]) -> ParseResult:
    result = ParseResult()
    for name in allow_multiple:
        result.seed_multi(to_camel_case(name))
    return result


def parse(tokens: Sequence[str], options: Optional[ParserOptions] = None) -> ParseResult:
    """Parse ``tokens`` according to ``options`` and return a fresh result.

    Raises :class:`NamedArgsError` describing the first problem found. The
    input sequence is never modified.
    """

    opts = options or ParserOptions()
    tokens = tuple(tokens)

    if opts.full:
        early = _short_circuit(tokens)
        if early is not None:
            return early

    result = _seed_result(opts.allow_multiple)
    strict = opts.strict_names()

    start = 0
    try:
        if opts.command_mode:
            result.command = _extract_command(tokens, opts.commands)
            start = 1

        last = len(tokens) - 1
        i = start
        while i <= last:
            arg = tokens[i]
            if not arg.startswith(NAME_PREFIX):
                raise NamedArgsError.expected_named(arg, tokens)
            if i == last:
                raise NamedArgsError.missing_value(arg, tokens)
            if strict and len(arg) - len(NAME_PREFIX) <= 1:
                raise NamedArgsError.single_letter(arg, tokens)
            i += 1
            result.assign(to_camel_case(arg), tokens[i])
            i += 1
    except NamedArgsError as exc:
        _LOGGER.debug("parse failed (%s): %r", exc.kind.value, exc.arg)
        raise

    if result.command is not None:
        _LOGGER.debug("command %r extracted", result.command)
    return result


def parse_named(
    tokens: Sequence[str],
    *,
    allow_multiple: Iterable[str] = (),
    commands: Iterable[str] = (),
    reject_single_letter: Optional[bool] = None,
) -> ParseResult:
    """Full variant: help/version short-circuit plus optional command."""

    options = ParserOptions(
        allow_multiple=tuple(allow_multiple),
        commands=tuple(commands),
        full=True,
        reject_single_letter=reject_single_letter,
    )
    return parse(tokens, options)


def parse_named_basic(
    tokens: Sequence[str],
    *,
    allow_multiple: Iterable[str] = (),
    reject_single_letter: Optional[bool] = None,
) -> ParseResult:
    """Basic variant: only ``--name value`` pairs and multi-value options."""

    options = ParserOptions(
        allow_multiple=tuple(allow_multiple),
        full=False,
        reject_single_letter=reject_single_letter,
    )
    return parse(tokens, options)
