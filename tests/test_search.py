"""Tests for DllSearcher: shallow then deep, first accepted hit wins."""

from __future__ import annotations

import os
from pathlib import Path

from dll_deploy.config import DeployConfig
from dll_deploy.search import DllSearcher


def _searcher(**kwargs) -> DllSearcher:
    return DllSearcher(DeployConfig(binary_file="app.exe", **kwargs))


def _reject(*paths: Path):
    """Validator rejecting the given candidates."""
    rejected = {str(p) for p in paths}

    def validate(path: str) -> str | None:
        return "wrong architecture" if path in rejected else None

    return validate


class TestShallow:
    def test_finds_in_dir(self, tmp_path: Path, make_dll):
        dll = make_dll(tmp_path / "bin", "zlib1.dll")
        searcher = _searcher(shallow_search_dir=[str(tmp_path / "bin")])
        assert searcher.search("zlib1.dll") == str(dll)

    def test_earlier_dir_wins(self, tmp_path: Path, make_dll):
        first = make_dll(tmp_path / "first", "zlib1.dll", b"first")
        make_dll(tmp_path / "second", "zlib1.dll", b"second, bigger and newer")
        searcher = _searcher(
            shallow_search_dir=[str(tmp_path / "first"), str(tmp_path / "second")]
        )
        assert searcher.search("zlib1.dll") == str(first)

    def test_rejected_candidate_falls_through(self, tmp_path: Path, make_dll):
        wrong = make_dll(tmp_path / "x86", "zlib1.dll")
        right = make_dll(tmp_path / "x64", "zlib1.dll")
        searcher = _searcher(shallow_search_dir=[str(tmp_path / "x86"), str(tmp_path / "x64")])
        assert searcher.search("zlib1.dll", _reject(wrong)) == str(right)

    def test_all_rejected(self, tmp_path: Path, make_dll):
        wrong = make_dll(tmp_path / "x86", "zlib1.dll")
        searcher = _searcher(shallow_search_dir=[str(tmp_path / "x86")])
        assert searcher.search("zlib1.dll", _reject(wrong)) is None

    def test_does_not_look_into_subdirs(self, tmp_path: Path, make_dll):
        make_dll(tmp_path / "bin" / "nested", "zlib1.dll")
        searcher = _searcher(shallow_search_dir=[str(tmp_path / "bin")])
        assert searcher.search_shallow("zlib1.dll") is None

    def test_directory_named_like_dll_is_not_a_candidate(self, tmp_path: Path):
        (tmp_path / "bin" / "zlib1.dll").mkdir(parents=True)
        searcher = _searcher(shallow_search_dir=[str(tmp_path / "bin")])
        assert searcher.search("zlib1.dll") is None

    def test_validator_not_called_for_missing_files(self, tmp_path: Path):
        calls = []
        searcher = _searcher(shallow_search_dir=[str(tmp_path)])
        searcher.search("zlib1.dll", lambda p: calls.append(p))
        assert calls == []

    def test_disabled(self, tmp_path: Path, make_dll):
        make_dll(tmp_path / "bin", "zlib1.dll")
        searcher = _searcher(shallow_search_dir=[str(tmp_path / "bin")], no_shallow_search=True)
        assert searcher.search("zlib1.dll") is None


class TestDeep:
    def test_finds_nested(self, tmp_path: Path, make_dll):
        dll = make_dll(tmp_path / "sdk" / "x64" / "bin", "zlib1.dll")
        searcher = _searcher(deep_search_dir=[str(tmp_path / "sdk")])
        assert searcher.search("zlib1.dll") == str(dll)

    def test_root_level_first(self, tmp_path: Path, make_dll):
        top = make_dll(tmp_path / "sdk", "zlib1.dll")
        make_dll(tmp_path / "sdk" / "a", "zlib1.dll")
        searcher = _searcher(deep_search_dir=[str(tmp_path / "sdk")])
        assert searcher.search("zlib1.dll") == str(top)

    def test_siblings_in_name_order(self, tmp_path: Path, make_dll):
        make_dll(tmp_path / "sdk" / "zeta", "zlib1.dll")
        alpha = make_dll(tmp_path / "sdk" / "alpha", "zlib1.dll")
        searcher = _searcher(deep_search_dir=[str(tmp_path / "sdk")])
        assert searcher.search("zlib1.dll") == str(alpha)

    def test_earlier_root_wins(self, tmp_path: Path, make_dll):
        first = make_dll(tmp_path / "one" / "deeply" / "nested", "zlib1.dll")
        make_dll(tmp_path / "two", "zlib1.dll")
        searcher = _searcher(deep_search_dir=[str(tmp_path / "one"), str(tmp_path / "two")])
        assert searcher.search("zlib1.dll") == str(first)

    def test_rejected_candidate_falls_through(self, tmp_path: Path, make_dll):
        wrong = make_dll(tmp_path / "sdk" / "lib32", "zlib1.dll")
        right = make_dll(tmp_path / "sdk" / "lib64", "zlib1.dll")
        searcher = _searcher(deep_search_dir=[str(tmp_path / "sdk")])
        assert searcher.search("zlib1.dll", _reject(wrong)) == str(right)

    def test_missing_root_is_not_fatal(self, tmp_path: Path, make_dll):
        dll = make_dll(tmp_path / "real", "zlib1.dll")
        searcher = _searcher(deep_search_dir=[str(tmp_path / "gone"), str(tmp_path / "real")])
        assert searcher.search("zlib1.dll") == str(dll)

    def test_unreadable_subdir_is_skipped(self, tmp_path: Path, make_dll):
        locked = tmp_path / "sdk" / "locked"
        locked.mkdir(parents=True)
        dll = make_dll(tmp_path / "sdk" / "open", "zlib1.dll")
        os.chmod(locked, 0)
        try:
            searcher = _searcher(deep_search_dir=[str(tmp_path / "sdk")])
            assert searcher.search("zlib1.dll") == str(dll)
        finally:
            os.chmod(locked, 0o755)

    def test_linked_subdir_is_probed(self, tmp_path: Path, make_dll):
        make_dll(tmp_path / "elsewhere" / "bin", "zlib1.dll")
        (tmp_path / "sdk").mkdir()
        os.symlink(tmp_path / "elsewhere" / "bin", tmp_path / "sdk" / "linked")
        searcher = _searcher(deep_search_dir=[str(tmp_path / "sdk")])
        assert searcher.search("zlib1.dll") == str(tmp_path / "sdk" / "linked" / "zlib1.dll")

    def test_linked_subdir_is_not_walked(self, tmp_path: Path, make_dll):
        make_dll(tmp_path / "elsewhere" / "nested", "zlib1.dll")
        (tmp_path / "sdk").mkdir()
        os.symlink(tmp_path / "elsewhere", tmp_path / "sdk" / "linked")
        searcher = _searcher(deep_search_dir=[str(tmp_path / "sdk")])
        assert searcher.search("zlib1.dll") is None

    def test_disabled(self, tmp_path: Path, make_dll):
        make_dll(tmp_path / "sdk" / "bin", "zlib1.dll")
        searcher = _searcher(deep_search_dir=[str(tmp_path / "sdk")], no_deep_search=True)
        assert searcher.search("zlib1.dll") is None


class TestShallowBeforeDeep:
    def test_shallow_hit_wins(self, tmp_path: Path, make_dll):
        shallow = make_dll(tmp_path / "bin", "zlib1.dll")
        make_dll(tmp_path / "sdk", "zlib1.dll")
        searcher = _searcher(
            shallow_search_dir=[str(tmp_path / "bin")],
            deep_search_dir=[str(tmp_path / "sdk")],
        )
        assert searcher.search("zlib1.dll") == str(shallow)

    def test_deep_used_after_shallow_miss(self, tmp_path: Path, make_dll):
        (tmp_path / "bin").mkdir()
        deep = make_dll(tmp_path / "sdk" / "bin", "zlib1.dll")
        searcher = _searcher(
            shallow_search_dir=[str(tmp_path / "bin")],
            deep_search_dir=[str(tmp_path / "sdk")],
        )
        assert searcher.search("zlib1.dll") == str(deep)

    def test_nothing_configured(self):
        assert _searcher().search("zlib1.dll") is None
