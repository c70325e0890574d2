"""Dash-to-camel-case key conversion."""

from __future__ import annotations

import re
from typing import List

__all__ = ["to_camel_case"]

_SEPARATORS = re.compile(r"[-_.\s]+")


def _lower_first(segment: str) -> str:
    if segment.isupper():
        return segment.lower()
    return segment[:1].lower() + segment[1:]


def _capitalize(segment: str) -> str:
    tail = segment[1:].lower() if segment.isupper() else segment[1:]
    return segment[:1].upper() + tail


def to_camel_case(name: str) -> str:
    """Return ``name`` camel-cased, e.g. ``--foo-bar`` -> ``fooBar``.

    Leading and trailing separators (dashes, underscores, dots, whitespace)
    are dropped, so ``--`` on its own maps to the empty string.
    """

    parts: List[str] = [part for part in _SEPARATORS.split(name) if part]
    if not parts:
        return ""
    head, rest = parts[0], parts[1:]
    return _lower_first(head) + "".join(_capitalize(part) for part in rest)
