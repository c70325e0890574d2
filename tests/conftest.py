"""Ensure project root is on sys.path for test imports."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namedargs import reload_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _namedargs_env_defaults(monkeypatch):
    """Start every test from default settings and colourless output."""

    for key in ("NAMEDARGS_CONFIG", "NAMEDARGS_STRICT_NAMES", "NAMEDARGS_NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    reload_settings()
    yield
    reload_settings()
