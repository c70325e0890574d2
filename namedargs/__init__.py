"""Strict ``--name value`` command-line token parsing."""

from __future__ import annotations

from .config import ParserOptions, Settings, get_settings, reload_settings
from .core import (
    COMMAND_KEY,
    ArgValue,
    Multi,
    ParseResult,
    Scalar,
    parse,
    parse_named,
    parse_named_basic,
    to_camel_case,
)
from .errors import ErrorKind, NamedArgsError
from .version import __version__

__all__ = [
    "ArgValue",
    "COMMAND_KEY",
    "ErrorKind",
    "Multi",
    "NamedArgsError",
    "ParseResult",
    "ParserOptions",
    "Scalar",
    "Settings",
    "__version__",
    "get_settings",
    "parse",
    "parse_named",
    "parse_named_basic",
    "reload_settings",
    "to_camel_case",
]
