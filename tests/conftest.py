"""Shared pytest fixtures for numview tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from numview.config.settings import NumviewSettings
from numview.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no NUMVIEW_* overrides.

    Keeps a stray ``numview.toml`` or env var on the developer machine from
    leaking into settings discovery.
    """
    import os

    for key in list(os.environ):
        if key.startswith("NUMVIEW_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging handlers and telemetry toggled by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    numview = logging.getLogger("numview")
    numview_level = numview.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    numview.setLevel(numview_level)
    disable_telemetry()


@pytest.fixture
def settings(tmp_path: Path) -> NumviewSettings:
    """Default settings with config discovery rooted at an empty directory."""
    return NumviewSettings.from_cli(start=tmp_path)
