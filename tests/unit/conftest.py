"""Fixtures shared by the unit tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clear EMPLOYEE_CLIENT_* variables and point XDG_CONFIG_HOME at tmp_path."""
    for key in list(os.environ):
        if key.startswith("EMPLOYEE_CLIENT_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
