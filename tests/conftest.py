"""Shared pytest fixtures for cusiptool tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray cusiptool.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command
    test classes.
    """
    for name in list(os.environ):
        if name.startswith("CUSIPTOOL_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
