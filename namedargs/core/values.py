"""Tagged option values and the ordered parse result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

__all__ = ["Scalar", "Multi", "ArgValue", "ParseResult", "COMMAND_KEY"]

COMMAND_KEY = "_command"


@dataclass(slots=True)
class Scalar:
    """A single raw value; a repeated option overwrites it."""

    value: str

    def plain(self) -> str:
        return self.value


@dataclass(slots=True)
class Multi:
    """Values of an option declared multi-valued, in encounter order."""

    values: List[str] = field(default_factory=list)

    def append(self, value: str) -> None:
        self.values.append(value)

    def plain(self) -> List[str]:
        return list(self.values)


ArgValue = Union[Scalar, Multi]


def _plain(entry: Any) -> Any:
    if isinstance(entry, (Scalar, Multi)):
        return entry.plain()
    return entry


class ParseResult(Mapping[str, Any]):
    """Ordered mapping of camel-cased option names to tagged values.

    A short-circuit result holds only ``help`` or ``version`` mapped to
    ``True``. An extracted command is held under ``COMMAND_KEY`` as a plain
    string ahead of the options.
    """

    def __init__(
        self,
        entries: Optional[Dict[str, ArgValue]] = None,
        *,
        command: Optional[str] = None,
        help: bool = False,
        version: bool = False,
    ) -> None:
        self._entries: Dict[str, ArgValue] = dict(entries or {})
        self.command = command
        self.help = help
        self.version = version

    @classmethod
    def help_requested(cls) -> "ParseResult":
        return cls(help=True)

    @classmethod
    def version_requested(cls) -> "ParseResult":
        return cls(version=True)

    @property
    def short_circuited(self) -> bool:
        return self.help or self.version

    def _view(self) -> Dict[str, Any]:
        if self.help:
            return {"help": True}
        if self.version:
            return {"version": True}
        view: Dict[str, Any] = {}
        if self.command is not None:
            view[COMMAND_KEY] = self.command
        view.update(self._entries)
        return view

    def __getitem__(self, key: str) -> Any:
        return self._view()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._view())

    def __len__(self) -> int:
        return len(self._view())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParseResult):
            return (
                self._entries == other._entries
                and self.command == other.command
                and self.help == other.help
                and self.version == other.version
            )
        return NotImplemented

    def __repr__(self) -> str:
        return f"ParseResult({self.to_dict()!r})"

    def seed_multi(self, key: str) -> None:
        self._entries[key] = Multi()

    def assign(self, key: str, value: str) -> None:
        """Append to a multi-valued entry or set/overwrite a scalar one."""

        current = self._entries.get(key)
        if isinstance(current, Multi):
            current.append(value)
        else:
            self._entries[key] = Scalar(value)

    def get_value(self, key: str, default: Any = None) -> Any:
        """Return the plain ``str``/``list`` value for ``key``."""

        view = self._view()
        if key not in view:
            return default
        return _plain(view[key])

    def to_dict(self) -> Dict[str, Any]:
        return {key: _plain(entry) for key, entry in self._view().items()}
