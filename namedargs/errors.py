"""Failure kinds raised by the named-argument parser."""

from __future__ import annotations

import json
from enum import Enum
from textwrap import dedent
from typing import Iterable, Optional, Sequence, Tuple

__all__ = ["ErrorKind", "NamedArgsError", "ERROR_GROUP"]

ERROR_GROUP = "cannot parse"

_UNKNOWN_COMMAND = dedent(
    """\
    the command you passed '{arg}' doesn't exist
    commands: {commands}"""
)
_EXPECTED_NAMED = dedent(
    """\
    the following argument was expected to be named: '{arg}'
    (i.e. it should begin with --)

    here are all the arguments passed: {tokens}"""
)
_MISSING_VALUE = dedent(
    """\
    The last argument cannot be named because all named parameters must have values

    last argument: {arg}

    here are all the arguments passed: {tokens}"""
)
_SINGLE_LETTER = dedent(
    """\
    named arguments cannot be a single letter: '{arg}'

    here are all the arguments passed: {tokens}"""
)


class ErrorKind(str, Enum):
    """Stable machine-readable tags for every parse failure."""

    NO_COMMAND_GIVEN = "no command given"
    UNKNOWN_COMMAND = "command given doesn't exist"
    EXPECTED_NAMED_ARGUMENT = "expected to be named"
    MISSING_VALUE = "last arg cannot be named"
    SINGLE_LETTER_NAME = "name cannot be a single letter"


def _format_tokens(tokens: Sequence[str]) -> str:
    return json.dumps(list(tokens), indent=2)


class NamedArgsError(ValueError):
    """Raised when the tokens cannot be parsed.

    Callers should branch on ``kind`` rather than on the message text, which
    is meant for terminal display.
    """

    group: str = ERROR_GROUP

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        arg: Optional[str] = None,
        tokens: Iterable[str] = (),
        commands: Iterable[str] = (),
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.arg = arg
        self.tokens: Tuple[str, ...] = tuple(tokens)
        self.commands: Tuple[str, ...] = tuple(commands)

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def __repr__(self) -> str:
        return f"NamedArgsError(kind={self.kind.name}, arg={self.arg!r})"

    @classmethod
    def no_command_given(cls, commands: Iterable[str] = ()) -> "NamedArgsError":
        return cls(
            ErrorKind.NO_COMMAND_GIVEN,
            "you must pass a command as your first argument",
            commands=commands,
        )

    @classmethod
    def unknown_command(cls, arg: str, commands: Sequence[str]) -> "NamedArgsError":
        message = _UNKNOWN_COMMAND.format(arg=arg, commands=", ".join(commands))
        return cls(ErrorKind.UNKNOWN_COMMAND, message, arg=arg, commands=commands)

    @classmethod
    def expected_named(cls, arg: str, tokens: Sequence[str]) -> "NamedArgsError":
        message = _EXPECTED_NAMED.format(arg=arg, tokens=_format_tokens(tokens))
        return cls(ErrorKind.EXPECTED_NAMED_ARGUMENT, message, arg=arg, tokens=tokens)

    @classmethod
    def missing_value(cls, arg: str, tokens: Sequence[str]) -> "NamedArgsError":
        message = _MISSING_VALUE.format(arg=arg, tokens=_format_tokens(tokens))
        return cls(ErrorKind.MISSING_VALUE, message, arg=arg, tokens=tokens)

    @classmethod
    def single_letter(cls, arg: str, tokens: Sequence[str]) -> "NamedArgsError":
        message = _SINGLE_LETTER.format(arg=arg, tokens=_format_tokens(tokens))
        return cls(ErrorKind.SINGLE_LETTER_NAME, message, arg=arg, tokens=tokens)
