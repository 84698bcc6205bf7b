"""Tests for DllDeployer: closure resolution against a fake inspector."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from dll_deploy.classifier import Classification
from dll_deploy.config import DeployConfig
from dll_deploy.exceptions import CopyError, DependencyNotFoundError, ImportParseError
from dll_deploy.resolver import DllDeployer
from dll_deploy.testing import FakeInspector

X64 = "pei-x86-64"
X86 = "pei-i386"


def _files(directory: Path) -> set[str]:
    return {p.name for p in directory.iterdir()}


@pytest.fixture
def libs(tmp_path: Path, make_dll) -> Path:
    d = tmp_path / "libs"
    for name in ("liba.dll", "libb.dll", "libc.dll", "libd.dll"):
        make_dll(d, name)
    return d


def _deployer(app_exe: str, inspector: FakeInspector, **kwargs) -> DllDeployer:
    cfg = DeployConfig(binary_file=app_exe, **kwargs)
    return DllDeployer(cfg, inspector)


class TestClosure:
    def test_chain_is_fully_copied(self, app_exe: str, app_dir: Path, libs: Path):
        inspector = FakeInspector(
            imports={
                "app.exe": ["liba.dll", "KERNEL32.dll"],
                "liba.dll": ["libb.dll"],
                "libb.dll": ["libc.dll", "msvcrt.dll"],
            }
        )
        report = _deployer(app_exe, inspector, shallow_search_dir=[str(libs)]).deploy(app_exe)

        assert _files(app_dir) == {"app.exe", "liba.dll", "libb.dll", "libc.dll"}
        assert report.copied_names == ["liba.dll", "libb.dll", "libc.dll"]
        assert report.is_complete
        assert report.binary_format == X64
        assert report.target_dir == str(app_dir)

    def test_descends_into_the_copy_after_copying(self, app_exe: str, app_dir: Path, libs: Path):
        inspector = FakeInspector(
            imports={"app.exe": ["liba.dll"], "liba.dll": ["libb.dll"], "libb.dll": ["libc.dll"]}
        )
        _deployer(app_exe, inspector, shallow_search_dir=[str(libs)]).deploy(app_exe)

        assert inspector.import_calls == [
            app_exe,
            str(app_dir / "liba.dll"),
            str(app_dir / "libb.dll"),
            str(app_dir / "libc.dll"),
        ]

    def test_depth_first_order(self, app_exe: str, libs: Path):
        inspector = FakeInspector(
            imports={
                "app.exe": ["liba.dll", "libd.dll"],
                "liba.dll": ["libb.dll"],
                "libb.dll": ["libc.dll"],
            }
        )
        report = _deployer(app_exe, inspector, shallow_search_dir=[str(libs)]).deploy(app_exe)
        assert report.copied_names == ["liba.dll", "libb.dll", "libc.dll", "libd.dll"]

    def test_shared_dependency_copied_once(self, app_exe: str, libs: Path):
        inspector = FakeInspector(
            imports={
                "app.exe": ["liba.dll", "libb.dll"],
                "liba.dll": ["libc.dll"],
                "libb.dll": ["libc.dll"],
            }
        )
        report = _deployer(app_exe, inspector, shallow_search_dir=[str(libs)]).deploy(app_exe)

        assert report.copied_names == ["liba.dll", "libc.dll", "libb.dll"]
        present = [s for s in report.skipped if s.classification is Classification.ALREADY_PRESENT]
        assert [(s.name, Path(s.required_by).name) for s in present] == [("libc.dll", "libb.dll")]

    def test_cycle_terminates(self, app_exe: str, app_dir: Path, libs: Path):
        inspector = FakeInspector(
            imports={
                "app.exe": ["liba.dll"],
                "liba.dll": ["libb.dll"],
                "libb.dll": ["liba.dll", "app.exe"],
            }
        )
        report = _deployer(app_exe, inspector, shallow_search_dir=[str(libs)]).deploy(app_exe)
        assert report.copied_names == ["liba.dll", "libb.dll"]
        assert _files(app_dir) == {"app.exe", "liba.dll", "libb.dll"}

    def test_long_chain_does_not_recurse(self, app_exe: str, app_dir: Path, tmp_path: Path, make_dll):
        depth = 1500
        libs = tmp_path / "chain"
        names = [f"link{i}.dll" for i in range(depth)]
        for name in names:
            make_dll(libs, name)
        imports = {"app.exe": [names[0]]}
        imports.update({names[i]: [names[i + 1]] for i in range(depth - 1)})

        report = _deployer(
            app_exe, FakeInspector(imports=imports), shallow_search_dir=[str(libs)]
        ).deploy(app_exe)
        assert len(report.copied) == depth

    def test_copies_are_content_identical(self, app_exe: str, app_dir: Path, tmp_path: Path, make_dll):
        make_dll(tmp_path / "libs", "liba.dll", b"MZ real payload")
        inspector = FakeInspector(imports={"app.exe": ["liba.dll"]})
        _deployer(app_exe, inspector, shallow_search_dir=[str(tmp_path / "libs")]).deploy(app_exe)
        assert (app_dir / "liba.dll").read_bytes() == b"MZ real payload"


class TestIdempotence:
    def test_second_run_copies_nothing(self, app_exe: str, app_dir: Path, libs: Path):
        imports = {"app.exe": ["liba.dll"], "liba.dll": ["libb.dll"]}
        deployer = _deployer(app_exe, FakeInspector(imports=imports), shallow_search_dir=[str(libs)])
        first = deployer.deploy(app_exe)
        before = {p.name: p.stat().st_mtime_ns for p in app_dir.iterdir()}

        second = deployer.deploy(app_exe)

        assert first.copied_names == ["liba.dll", "libb.dll"]
        assert second.copied == []
        assert [s.classification for s in second.skipped] == [Classification.ALREADY_PRESENT]
        assert {p.name: p.stat().st_mtime_ns for p in app_dir.iterdir()} == before

    def test_existing_file_is_never_overwritten(self, app_exe: str, app_dir: Path, libs: Path, make_dll):
        make_dll(app_dir, "liba.dll", b"stale but present")
        inspector = FakeInspector(imports={"app.exe": ["liba.dll"]})
        _deployer(app_exe, inspector, shallow_search_dir=[str(libs)]).deploy(app_exe)
        assert (app_dir / "liba.dll").read_bytes() == b"stale but present"


class TestArchitectureGate:
    def test_wrong_arch_rejected_for_lower_precedence_match(
        self, app_exe: str, app_dir: Path, tmp_path: Path, make_dll
    ):
        wrong = make_dll(tmp_path / "x86", "liba.dll")
        right = make_dll(tmp_path / "x64", "liba.dll")
        inspector = FakeInspector(
            imports={"app.exe": ["liba.dll"]},
            formats={str(wrong): X86},
        )
        report = _deployer(
            app_exe,
            inspector,
            shallow_search_dir=[str(tmp_path / "x86"), str(tmp_path / "x64")],
        ).deploy(app_exe)

        assert report.copied[0].source == str(right)

    def test_only_wrong_arch_available_is_missing(self, app_exe: str, tmp_path: Path, make_dll):
        make_dll(tmp_path / "x86", "liba.dll")
        inspector = FakeInspector(imports={"app.exe": ["liba.dll"]}, formats={"liba.dll": X86})
        deployer = _deployer(app_exe, inspector, shallow_search_dir=[str(tmp_path / "x86")])
        with pytest.raises(DependencyNotFoundError):
            deployer.deploy(app_exe)

    def test_root_format_used_for_whole_closure(self, app_exe: str, tmp_path: Path, make_dll):
        make_dll(tmp_path / "libs", "liba.dll")
        make_dll(tmp_path / "libs", "libb.dll")
        inspector = FakeInspector(
            imports={"app.exe": ["liba.dll"], "liba.dll": ["libb.dll"]},
            formats={"app.exe": X86},
            default_format=X64,
        )
        deployer = _deployer(
            app_exe, inspector, shallow_search_dir=[str(tmp_path / "libs")], allow_missing=True
        )
        report = deployer.deploy(app_exe)

        assert report.binary_format == X86
        assert report.copied == []
        assert [m.name for m in report.missing] == ["liba.dll"]

    def test_format_read_once_for_root_and_per_candidate(
        self, app_exe: str, app_dir: Path, libs: Path
    ):
        inspector = FakeInspector(imports={"app.exe": ["liba.dll"], "liba.dll": ["libb.dll"]})
        _deployer(app_exe, inspector, shallow_search_dir=[str(libs)]).deploy(app_exe)
        assert inspector.format_calls == [
            app_exe,
            str(libs / "liba.dll"),
            str(libs / "libb.dll"),
        ]


class TestSkips:
    def test_skipped_imports_are_recorded(self, app_exe: str, libs: Path):
        inspector = FakeInspector(
            imports={
                "app.exe": [
                    "KERNEL32.dll",
                    "api-ms-win-crt-runtime-l1-1-0.dll",
                    "libd.dll",
                    "liba.dll",
                ]
            }
        )
        report = _deployer(
            app_exe, inspector, shallow_search_dir=[str(libs)], ignore=["libd.dll"]
        ).deploy(app_exe)

        assert report.copied_names == ["liba.dll"]
        assert [(s.name, s.classification) for s in report.skipped] == [
            ("KERNEL32.dll", Classification.SYSTEM_OWNED),
            ("api-ms-win-crt-runtime-l1-1-0.dll", Classification.REDISTRIBUTABLE),
            ("libd.dll", Classification.IGNORED),
        ]

    def test_skipped_imports_are_never_searched(self, app_exe: str, libs: Path):
        inspector = FakeInspector(imports={"app.exe": ["libd.dll"]})
        _deployer(app_exe, inspector, shallow_search_dir=[str(libs)], ignore=["libd.dll"]).deploy(
            app_exe
        )
        assert inspector.format_calls == [app_exe]

    def test_redistributable_copied_when_requested(self, app_exe: str, app_dir: Path, make_dll, tmp_path: Path):
        name = "api-ms-win-crt-runtime-l1-1-0.dll"
        make_dll(tmp_path / "redist", name)
        inspector = FakeInspector(imports={"app.exe": [name]})
        report = _deployer(
            app_exe, inspector, shallow_search_dir=[str(tmp_path / "redist")], copy_vc_redist=True
        ).deploy(app_exe)
        assert report.copied_names == [name]


class TestMissingPolicy:
    IMPORTS = {"app.exe": ["liba.dll", "libmissing.dll", "libc.dll"]}

    def test_missing_is_fatal_by_default(self, app_exe: str, app_dir: Path, libs: Path):
        deployer = _deployer(app_exe, FakeInspector(imports=self.IMPORTS), shallow_search_dir=[str(libs)])
        with pytest.raises(DependencyNotFoundError) as exc_info:
            deployer.deploy(app_exe)

        err = exc_info.value
        assert err.exit_code == 7
        assert err.name == "libmissing.dll"
        assert err.required_by == app_exe
        assert _files(app_dir) == {"app.exe", "liba.dll"}

    def test_allow_missing_continues(self, app_exe: str, app_dir: Path, libs: Path):
        deployer = _deployer(
            app_exe,
            FakeInspector(imports=self.IMPORTS),
            shallow_search_dir=[str(libs)],
            allow_missing=True,
        )
        report = deployer.deploy(app_exe)

        assert _files(app_dir) == {"app.exe", "liba.dll", "libc.dll"}
        assert [(m.name, m.required_by) for m in report.missing] == [("libmissing.dll", app_exe)]
        assert not report.is_complete

    def test_missing_in_transitive_dependency_names_parent(self, app_exe: str, app_dir: Path, libs: Path):
        inspector = FakeInspector(imports={"app.exe": ["liba.dll"], "liba.dll": ["libmissing.dll"]})
        deployer = _deployer(app_exe, inspector, shallow_search_dir=[str(libs)])
        with pytest.raises(DependencyNotFoundError) as exc_info:
            deployer.deploy(app_exe)
        assert exc_info.value.required_by == str(app_dir / "liba.dll")


class TestSearchModes:
    def test_deep_only(self, app_exe: str, app_dir: Path, tmp_path: Path, make_dll):
        make_dll(tmp_path / "shallow", "liba.dll")
        deep = make_dll(tmp_path / "sdk" / "x64" / "bin", "liba.dll")
        inspector = FakeInspector(imports={"app.exe": ["liba.dll"]})
        report = _deployer(
            app_exe,
            inspector,
            shallow_search_dir=[str(tmp_path / "shallow")],
            no_shallow_search=True,
            deep_search_dir=[str(tmp_path / "sdk")],
        ).deploy(app_exe)
        assert report.copied[0].source == str(deep)

    def test_cmake_prefix_bin_is_searched(self, app_exe: str, tmp_path: Path, make_dll):
        dll = make_dll(tmp_path / "qt" / "bin", "Qt6Core.dll")
        inspector = FakeInspector(imports={"app.exe": ["Qt6Core.dll"]})
        report = _deployer(
            app_exe, inspector, cmake_prefix_path=[str(tmp_path / "qt")]
        ).deploy(app_exe)
        assert report.copied[0].source == f"{tmp_path / 'qt'}/bin/Qt6Core.dll"
        assert Path(report.copied[0].source) == dll


class TestFatalErrors:
    def test_copy_failure(self, app_exe: str, libs: Path):
        inspector = FakeInspector(imports={"app.exe": ["liba.dll"]})
        deployer = _deployer(app_exe, inspector, shallow_search_dir=[str(libs)])
        with patch("dll_deploy.resolver.shutil.copy", side_effect=PermissionError("denied")):
            with pytest.raises(CopyError) as exc_info:
                deployer.deploy(app_exe)
        assert exc_info.value.exit_code == 9
        assert "denied" in str(exc_info.value)

    def test_inspector_parse_error_propagates(self, app_exe: str, libs: Path):
        class BrokenInspector(FakeInspector):
            def list_imports(self, path: str) -> list[str]:
                raise ImportParseError("\tDLL Name: truncated")

        deployer = _deployer(app_exe, BrokenInspector(), shallow_search_dir=[str(libs)])
        with pytest.raises(ImportParseError):
            deployer.deploy(app_exe)
