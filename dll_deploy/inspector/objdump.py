"""objdump-backed inspector: imports via ``-x``, file format via ``-f``."""

from __future__ import annotations

import subprocess

import structlog

from dll_deploy.exceptions import FormatParseError, ImportParseError, InspectorError
from dll_deploy.inspector.base import BinaryInspector

log = structlog.get_logger("dll_deploy.inspector")

# objdump -x prints one "\tDLL Name: foo.dll" line per import descriptor
_IMPORT_FILTER = "DLL Name:"
_IMPORT_MARKER = "DLL Name: "
_DLL_SUFFIX = ".dll"

# objdump -f prints "<file>:     file format pei-x86-64"
_FORMAT_LABEL = "file format "


def parse_import_line(line: str) -> str:
    """Extract ``foo.dll`` from a ``DLL Name: foo.dll`` line.

    The suffix is matched case-insensitively; the returned name keeps the case
    objdump reported it with.
    """
    start = line.find(_IMPORT_MARKER)
    if start < 0:
        raise ImportParseError(line)
    start += len(_IMPORT_MARKER)

    end = line.lower().find(_DLL_SUFFIX, start)
    if end < 0 or start + 1 >= end:
        raise ImportParseError(line)

    return line[start : end + len(_DLL_SUFFIX)]


def parse_imports(output: str) -> list[str]:
    """All imported DLL names in an ``objdump -x`` listing, in order."""
    dlls = []
    for line in output.split("\n"):
        if _IMPORT_FILTER not in line:
            continue
        dlls.append(parse_import_line(line))
    return dlls


def parse_file_format(output: str, path: str) -> str:
    """Format tag from the first ``file format`` line of ``objdump -f``."""
    output = output.replace("\r", "")
    for line in output.split("\n"):
        loc = line.rfind(_FORMAT_LABEL)
        if loc >= 0:
            return line[loc + len(_FORMAT_LABEL) :]
    raise FormatParseError(path, output)


class ObjdumpInspector(BinaryInspector):
    """Runs GNU objdump (mingw or binutils) once per query."""

    def __init__(self, objdump_path: str) -> None:
        self._objdump = objdump_path

    def list_imports(self, path: str) -> list[str]:
        output = self._run([self._objdump, path, "-x", "--section=.rdata"])
        return parse_imports(output)

    def instruction_set(self, path: str) -> str:
        output = self._run([self._objdump, "-f", path])
        return parse_file_format(output, path)

    def _run(self, cmd: list[str]) -> str:
        log.debug("inspector.run", cmd=cmd)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise InspectorError(cmd, f"failed to run objdump at {self._objdump}: {e}")

        if result.returncode != 0:
            raise InspectorError(
                cmd, f"exited with error code {result.returncode}", result.stderr
            )
        return result.stdout
