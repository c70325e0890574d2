"""Parser options and runtime settings for namedargs."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

__all__ = [
    "ParserOptions",
    "Settings",
    "get_settings",
    "reload_settings",
]

_CONFIG_ENV = "NAMEDARGS_CONFIG"
_STRICT_ENV = "NAMEDARGS_STRICT_NAMES"
_NO_COLOR_ENV = "NAMEDARGS_NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    return str(value).strip().lower() in _TRUTHY


def _as_names(raw: Any) -> Tuple[str, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple, set, frozenset)):
        return ()
    names = []
    for item in raw:
        text = str(item).strip()
        if text and text not in names:
            names.append(text)
    return tuple(names)


def _exact_names(raw: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(raw, str):
        return (raw,)
    return tuple(dict.fromkeys(raw))


@dataclass(slots=True)
class Settings:
    reject_single_letter: bool = False
    color: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        if not isinstance(data, dict):
            return cls()
        return cls(
            reject_single_letter=_as_bool(data.get("reject_single_letter"), False),
            color=_as_bool(data.get("color"), True),
        )


@dataclass(slots=True)
class ParserOptions:
    """How a token sequence is parsed.

    ``full`` enables the ``--help``/``--version`` short-circuit and the leading
    command check; with ``full=False`` only the named-argument grammar runs and
    ``commands`` is ignored.
    """

    allow_multiple: Tuple[str, ...] = ()
    commands: Tuple[str, ...] = ()
    full: bool = True
    reject_single_letter: Optional[bool] = None

    def __post_init__(self) -> None:
        self.allow_multiple = _exact_names(self.allow_multiple)
        self.commands = _exact_names(self.commands)

    @property
    def command_mode(self) -> bool:
        return self.full and bool(self.commands)

    def strict_names(self) -> bool:
        if self.reject_single_letter is not None:
            return self.reject_single_letter
        return get_settings().reject_single_letter

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserOptions":
        if not isinstance(data, dict):
            return cls()
        strict_raw = data.get("reject_single_letter")
        return cls(
            allow_multiple=_as_names(data.get("allow_multiple", ())),
            commands=_as_names(data.get("commands", ())),
            full=_as_bool(data.get("full"), True),
            reject_single_letter=None if strict_raw is None else _as_bool(strict_raw),
        )


def _load_file(path: Path) -> Optional[Dict[str, Any]]:
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                return data
    except (OSError, json.JSONDecodeError):
        return None
    return None


def _env_overrides(environ: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for key, value in environ:
        if key == _STRICT_ENV:
            overrides["reject_single_letter"] = value
        elif key == _NO_COLOR_ENV:
            overrides["color"] = not _as_bool(value)
    return overrides


def _load_settings(path: Optional[Path] = None) -> Settings:
    data: Dict[str, Any] = {}
    candidate = path
    if candidate is None:
        env_path = os.getenv(_CONFIG_ENV)
        if env_path:
            candidate = Path(env_path).expanduser()
    if candidate is not None:
        data.update(_load_file(candidate) or {})
    data.update(_env_overrides(os.environ.items()))
    return Settings.from_dict(data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached runtime settings."""

    return _load_settings(None)


def reload_settings(path: Optional[Path] = None) -> Settings:
    """Reload settings, bypassing the cache."""

    get_settings.cache_clear()  # type: ignore[attr-defined]
    return get_settings() if path is None else _load_settings(path)
