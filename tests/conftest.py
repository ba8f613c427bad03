"""Shared pytest fixtures for noticegen tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import structlog


@pytest.fixture
def node_modules(tmp_path: Path) -> Path:
    root = tmp_path / "node_modules"
    root.mkdir()
    return root


@pytest.fixture
def make_package():
    """Return a helper that writes ``parent/dirname/package.json``."""

    def _make(parent: Path, dirname: str, **fields) -> Path:
        pkg_dir = parent / dirname
        pkg_dir.mkdir(parents=True, exist_ok=True)
        (pkg_dir / "package.json").write_text(json.dumps(fields), encoding="utf-8")
        return pkg_dir

    return _make


@pytest.fixture(autouse=True)
def captured_logs():
    """Route structlog events into a list instead of stdout."""
    with structlog.testing.capture_logs() as logs:
        yield logs
