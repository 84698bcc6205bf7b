"""Shared pytest fixtures for dll-deploy tests."""

from pathlib import Path

import pytest

from dll_deploy import config


@pytest.fixture(autouse=True)
def not_windows(monkeypatch):
    """Keep PATH and C:/Windows out of every search unless a test opts in."""
    monkeypatch.setattr(config, "IS_WINDOWS", False)


@pytest.fixture
def make_dll():
    """Write a placeholder binary ``name`` into ``directory``."""

    def _make(directory: Path, name: str, content: bytes = b"MZ\x90\x00") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    """Deployment directory holding app.exe."""
    d = tmp_path / "app"
    d.mkdir()
    (d / "app.exe").write_bytes(b"MZ\x90\x00")
    return d


@pytest.fixture
def app_exe(app_dir: Path) -> str:
    return str(app_dir / "app.exe")
