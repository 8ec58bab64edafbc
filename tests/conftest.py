"""Shared pytest fixtures for utilkit tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from utilkit.config.discovery import CONFIG_ENV_VAR


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp directory with no utilkit env vars."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for name in ("UTILKIT_QUIET", "UTILKIT_VERBOSE", "UTILKIT_JSON_OUTPUT", "UTILKIT_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo root-logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg_level = logging.getLogger("utilkit").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("utilkit").setLevel(pkg_level)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write *data* as JSON to ``tmp_path / name`` and return the path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


SAMPLE_TREE: dict[str, Any] = {
    "id": "root",
    "children": [
        {"id": "B", "children": [{"id": "D", "children": []}]},
        {"id": "C", "children": []},
    ],
}


@pytest.fixture
def sample_tree() -> dict[str, Any]:
    """root -> [B -> [D], C]."""
    return json.loads(json.dumps(SAMPLE_TREE))
