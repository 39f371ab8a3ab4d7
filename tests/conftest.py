"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from kiln.drivers.inprocess import InProcessDriver


@pytest.fixture
def inprocess_driver() -> InProcessDriver:
    """Provide an in-process driver for tests that submit builds."""
    return InProcessDriver()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "spacegame"
    (root / "engine").mkdir(parents=True)
    (root / "src").mkdir()
    (root / "src" / "main.jai").write_text("main :: () {}\n", encoding="utf-8")
    return root


@pytest.fixture
def definition(project_root: Path) -> Path:
    path = project_root / "build.jai"
    path.write_text("#run build();\n", encoding="utf-8")
    return path
