"""Shared fixtures for pathprobe tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from pathprobe.app import create_app
from pathprobe.config import Settings

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def settings() -> Settings:
    """Settings with a short CPU loop so /cpu returns quickly."""
    return Settings(cpu_iterations=10_000)


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """TestClient with the lifespan hooks running."""
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory holding a manifest file and a dist/ folder."""
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'demo'\n")
    (tmp_path / "dist").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path
