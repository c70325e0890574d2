from __future__ import annotations

import pytest

from namedargs import ErrorKind, NamedArgsError, parse_named


def test_plain_name_value_pairs() -> None:
    result = parse_named(["--name", "phil", "--age", "32"])
    assert result.to_dict() == {"name": "phil", "age": "32"}


def test_repeated_multi_value_option_collects_in_order() -> None:
    result = parse_named(["--name", "phil", "--name", "matt"], allow_multiple=["--name"])
    assert result.to_dict() == {"name": ["phil", "matt"]}


def test_leading_command_is_extracted() -> None:
    result = parse_named(["run", "--force", "x"], commands=["run", "build"])
    assert result.to_dict() == {"_command": "run", "force": "x"}
    assert result.command == "run"
    assert result["_command"] == "run"
    assert list(result) == ["_command", "force"]


def test_unknown_command_fails() -> None:
    with pytest.raises(NamedArgsError) as excinfo:
        parse_named(["deploy"], commands=["run", "build"])
    assert excinfo.value.kind is ErrorKind.UNKNOWN_COMMAND


def test_positional_without_command_mode_fails() -> None:
    with pytest.raises(NamedArgsError) as excinfo:
        parse_named(["positional"])
    assert excinfo.value.kind is ErrorKind.EXPECTED_NAMED_ARGUMENT
    assert excinfo.value.arg == "positional"


def test_name_without_value_fails() -> None:
    with pytest.raises(NamedArgsError) as excinfo:
        parse_named(["--flag"])
    assert excinfo.value.kind is ErrorKind.MISSING_VALUE
    assert excinfo.value.arg == "--flag"
