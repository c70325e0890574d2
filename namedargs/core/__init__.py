"""Parsing core: key casing, tagged values and the tokenizer/validator."""

from __future__ import annotations

from .casing import to_camel_case
from .parser import parse, parse_named, parse_named_basic
from .values import COMMAND_KEY, ArgValue, Multi, ParseResult, Scalar

__all__ = [
    "ArgValue",
    "COMMAND_KEY",
    "Multi",
    "ParseResult",
    "Scalar",
    "parse",
    "parse_named",
    "parse_named_basic",
    "to_camel_case",
]
