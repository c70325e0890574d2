from __future__ import annotations

import json

import pytest

from namedargs.cli import main


def test_cli_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--", "--name", "phil", "--age", "32"]) == 0
    out = capsys.readouterr().out
    assert json.loads(out) == {"name": "phil", "age": "32"}


def test_cli_multi_and_command(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--multi", "name", "--command", "run", "--", "run", "--name", "phil"])
    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"_command": "run", "name": ["phil"]}


def test_cli_basic_mode(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--basic", "--", "--help", "x"]) == 0
    assert json.loads(capsys.readouterr().out) == {"help": "x"}


def test_cli_reports_errors(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--command", "run", "--command", "build", "--", "deploy"])
    assert code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err
    assert "'deploy' doesn't exist" in captured.err
    assert "kind: command given doesn't exist" in captured.err
    assert "\x1b[" not in captured.err


def test_cli_without_tokens(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert json.loads(capsys.readouterr().out) == {}


def test_cli_strict_names(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--strict-names", "--", "--n", "x"]) == 2
    assert "single letter" in capsys.readouterr().err
