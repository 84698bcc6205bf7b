"""Test doubles for dll_deploy: deploy without a real objdump.

Usage::

    from dll_deploy.testing import FakeInspector

    inspector = FakeInspector(
        imports={"app.exe": ["a.dll"], "a.dll": ["b.dll"]},
        default_format="pei-x86-64",
    )
    DllDeployer(cfg, inspector).deploy(str(tmp_path / "app.exe"))
"""

from __future__ import annotations

import os

from dll_deploy.exceptions import InspectorError
from dll_deploy.inspector.base import BinaryInspector


class FakeInspector(BinaryInspector):
    """Serves canned answers keyed by file name (not full path).

    Parameters
    ----------
    imports:
        ``{file_name: [dll, ...]}``. Unknown files import nothing.
    formats:
        ``{file_name: format}`` or ``{full_path: format}``; a full path wins
        over a bare name, so two same-named candidates can differ.
    default_format:
        Format for files not listed in ``formats``.
    """

    def __init__(
        self,
        *,
        imports: dict[str, list[str]] | None = None,
        formats: dict[str, str] | None = None,
        default_format: str = "pei-x86-64",
    ) -> None:
        self._imports = imports or {}
        self._formats = formats or {}
        self._default_format = default_format
        self.import_calls: list[str] = []
        self.format_calls: list[str] = []

    def list_imports(self, path: str) -> list[str]:
        self._require_file(path)
        self.import_calls.append(path)
        return list(self._imports.get(os.path.basename(path), []))

    def instruction_set(self, path: str) -> str:
        self._require_file(path)
        self.format_calls.append(path)
        if path in self._formats:
            return self._formats[path]
        return self._formats.get(os.path.basename(path), self._default_format)

    @staticmethod
    def _require_file(path: str) -> None:
        if not os.path.isfile(path):
            raise InspectorError(["fake-objdump", path], "no such file")
