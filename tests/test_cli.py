"""Tests for the deploy-dll CLI: objdump replaced by FakeInspector."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog
from click.testing import CliRunner

from dll_deploy import __version__
from dll_deploy.cli import main
from dll_deploy.testing import FakeInspector


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def objdump(tmp_path: Path) -> str:
    """An existing file to satisfy the explicit --objdump-file selector."""
    path = tmp_path / "tools" / "objdump"
    path.parent.mkdir()
    path.write_text("")
    return str(path)


@pytest.fixture
def libs(tmp_path: Path, make_dll) -> Path:
    d = tmp_path / "libs"
    make_dll(d, "liba.dll")
    make_dll(d, "libb.dll")
    return d


def _invoke(inspector: FakeInspector, args: list[str], **kwargs):
    runner = CliRunner()
    with patch("dll_deploy.cli.ObjdumpInspector", return_value=inspector) as factory:
        result = runner.invoke(main, args, **kwargs)
    return result, factory


class TestDeploy:
    def test_copies_closure(self, app_exe: str, app_dir: Path, libs: Path, objdump: str):
        inspector = FakeInspector(imports={"app.exe": ["liba.dll"], "liba.dll": ["libb.dll"]})
        result, factory = _invoke(
            inspector,
            [app_exe, "--objdump-file", objdump, "--shallow-search-dir", str(libs)],
        )

        assert result.exit_code == 0, result.output
        assert (app_dir / "liba.dll").is_file()
        assert (app_dir / "libb.dll").is_file()
        factory.assert_called_once_with(objdump)

    def test_relative_target_made_absolute(
        self, app_dir: Path, libs: Path, objdump: str, monkeypatch
    ):
        monkeypatch.chdir(app_dir)
        inspector = FakeInspector(imports={"app.exe": ["liba.dll"]})
        result, _ = _invoke(
            inspector,
            ["app.exe", "--objdump-file", objdump, "--shallow-search-dir", str(libs), "--verbose"],
        )

        assert result.exit_code == 0, result.output
        assert inspector.import_calls[0] == str(app_dir / "app.exe")
        assert (app_dir / "liba.dll").is_file()

    def test_objdump_from_env(self, app_exe: str, objdump: str):
        result, factory = _invoke(
            FakeInspector(), [app_exe], env={"DLL_DEPLOY_OBJDUMP": objdump}
        )
        assert result.exit_code == 0, result.output
        factory.assert_called_once_with(objdump)

    def test_json_log_format(self, app_exe: str, objdump: str):
        result, _ = _invoke(
            FakeInspector(),
            [app_exe, "--objdump-file", objdump],
            env={"DLL_DEPLOY_LOG_FORMAT": "json"},
        )
        assert result.exit_code == 0, result.output
        assert '"event": "cli.deployed"' in result.stdout
        assert '"logger": "dll_deploy.cli"' in result.stdout

    def test_ignore_option(self, app_exe: str, app_dir: Path, libs: Path, objdump: str):
        inspector = FakeInspector(imports={"app.exe": ["liba.dll", "libb.dll"]})
        result, _ = _invoke(
            inspector,
            [
                app_exe,
                "--objdump-file", objdump,
                "--shallow-search-dir", str(libs),
                "--ignore", "libb.dll",
            ],
        )
        assert result.exit_code == 0, result.output
        assert (app_dir / "liba.dll").is_file()
        assert not (app_dir / "libb.dll").exists()


class TestExitCodes:
    def test_target_not_found(self, tmp_path: Path, objdump: str):
        result, _ = _invoke(
            FakeInspector(), [str(tmp_path / "missing.exe"), "--objdump-file", objdump]
        )
        assert result.exit_code == 5
        assert "is not a file" in result.output

    def test_target_is_directory(self, tmp_path: Path, objdump: str):
        result, _ = _invoke(FakeInspector(), [str(tmp_path), "--objdump-file", objdump])
        assert result.exit_code == 5

    def test_explicit_objdump_missing(self, app_exe: str, tmp_path: Path):
        result, _ = _invoke(
            FakeInspector(), [app_exe, "--objdump-file", str(tmp_path / "nope.exe")]
        )
        assert result.exit_code == 4
        assert "doesn't exist" in result.output

    def test_missing_dependency(self, app_exe: str, app_dir: Path, objdump: str):
        inspector = FakeInspector(imports={"app.exe": ["libmissing.dll"]})
        result, _ = _invoke(inspector, [app_exe, "--objdump-file", objdump])
        assert result.exit_code == 7
        assert 'Failed to find dll "libmissing.dll"' in result.output

    def test_allow_missing(self, app_exe: str, libs: Path, app_dir: Path, objdump: str):
        inspector = FakeInspector(imports={"app.exe": ["libmissing.dll", "liba.dll"]})
        result, _ = _invoke(
            inspector,
            [
                app_exe,
                "--objdump-file", objdump,
                "--shallow-search-dir", str(libs),
                "--allow-missing",
            ],
        )
        assert result.exit_code == 0, result.output
        assert (app_dir / "liba.dll").is_file()
        assert 'Failed to find dll "libmissing.dll"' in result.stdout
        assert "libmissing.dll" not in result.stderr

    def test_allow_missing_reported_at_any_log_level(self, app_exe: str, objdump: str):
        inspector = FakeInspector(imports={"app.exe": ["libmissing.dll"]})
        result, _ = _invoke(
            inspector,
            [app_exe, "--objdump-file", objdump, "--allow-missing"],
            env={"DLL_DEPLOY_LOG_LEVEL": "ERROR"},
        )
        assert result.exit_code == 0, result.output
        assert 'Failed to find dll "libmissing.dll"' in result.stdout

    def test_blank_objdump_is_usage_error(self, app_exe: str):
        result, _ = _invoke(FakeInspector(), [app_exe, "--objdump-file", "  "])
        assert result.exit_code == 2
        assert "objdump_file" in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
