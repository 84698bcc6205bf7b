"""Tests for objdump output parsing and invocation: no real objdump needed."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest
from structlog.testing import capture_logs

from dll_deploy.exceptions import FormatParseError, ImportParseError, InspectorError
from dll_deploy.inspector.objdump import (
    ObjdumpInspector,
    parse_file_format,
    parse_import_line,
    parse_imports,
)

# Trimmed `objdump app.exe -x --section=.rdata` output for a mingw binary
SAMPLE_X_OUTPUT = """
app.exe:     file format pei-x86-64
architecture: i386:x86-64, flags 0x0000013b:

The Import Tables (interpreted .idata section contents)
 vma:            Hint    Time      Forward  DLL       First
                 Table   Stamp     Chain    Name      Thunk
 00012000\t0001203c 00000000 00000000 00012a54 000121b4

\tDLL Name: KERNEL32.dll
\tvma:  Hint/Ord Member-Name Bound-To
\t12340\t  283  CreateFileW

 00012014\t00012094 00000000 00000000 00012b20 0001220c

\tDLL Name: libstdc++-6.dll
\tvma:  Hint/Ord Member-Name Bound-To
\t123a0\t   12  _ZNSt8ios_base4InitC1Ev

 00012028\t000120a4 00000000 00000000 00012b38 0001221c

\tDLL Name: Qt6Core.DLL
"""

SAMPLE_F_OUTPUT = (
    "\r\napp.exe:     file format pei-x86-64\r\n"
    "architecture: i386:x86-64, flags 0x0000013b:\r\n"
    "HAS_RELOC, EXEC_P, HAS_SYMS, HAS_LOCALS, D_PAGED\r\n"
    "start address 0x00000001400014e0\r\n"
)


def _completed(stdout: str = "", stderr: str = "", returncode: int = 0):
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=stderr
    )


class TestParseImportLine:
    def test_basic(self):
        assert parse_import_line("\tDLL Name: KERNEL32.dll") == "KERNEL32.dll"

    def test_uppercase_suffix_keeps_case(self):
        assert parse_import_line("\tDLL Name: MSVCP140.DLL") == "MSVCP140.DLL"

    def test_name_with_dots_and_dashes(self):
        line = "\tDLL Name: api-ms-win-crt-runtime-l1-1-0.dll"
        assert parse_import_line(line) == "api-ms-win-crt-runtime-l1-1-0.dll"

    def test_trailing_carriage_return_ignored(self):
        assert parse_import_line("\tDLL Name: zlib1.dll\r") == "zlib1.dll"

    def test_missing_suffix_is_fatal(self):
        with pytest.raises(ImportParseError) as exc_info:
            parse_import_line("\tDLL Name: KERNEL32")
        assert exc_info.value.exit_code == 8
        assert "KERNEL32" in str(exc_info.value)

    def test_suffix_before_marker_does_not_count(self):
        with pytest.raises(ImportParseError):
            parse_import_line("foo.dll DLL Name: bar")

    def test_too_short_name_is_fatal(self):
        with pytest.raises(ImportParseError):
            parse_import_line("\tDLL Name: a.dll")

    def test_empty_name_is_fatal(self):
        with pytest.raises(ImportParseError):
            parse_import_line("\tDLL Name: .dll")


class TestParseImports:
    def test_sample_output(self):
        assert parse_imports(SAMPLE_X_OUTPUT) == [
            "KERNEL32.dll",
            "libstdc++-6.dll",
            "Qt6Core.DLL",
        ]

    def test_no_imports(self):
        assert parse_imports("app.exe:     file format pei-x86-64\n") == []

    def test_truncated_line_is_fatal_not_skipped(self):
        output = SAMPLE_X_OUTPUT + "\n\tDLL Name: libtrunc"
        with pytest.raises(ImportParseError):
            parse_imports(output)

    def test_marker_without_space_is_fatal(self):
        with pytest.raises(ImportParseError):
            parse_imports("\tDLL Name:zlib1.dll\n")


class TestParseFileFormat:
    def test_sample_output(self):
        assert parse_file_format(SAMPLE_F_OUTPUT, "app.exe") == "pei-x86-64"

    def test_first_matching_line_wins(self):
        output = "a.dll:     file format pei-i386\nb.dll:     file format pei-x86-64\n"
        assert parse_file_format(output, "a.dll") == "pei-i386"

    def test_no_format_line_is_fatal(self):
        with pytest.raises(FormatParseError) as exc_info:
            parse_file_format("objdump: a.dll: file truncated\n", "a.dll")
        assert exc_info.value.exit_code == 6
        assert exc_info.value.path == "a.dll"


class TestObjdumpInspector:
    def test_list_imports_command(self):
        inspector = ObjdumpInspector("/usr/bin/x86_64-w64-mingw32-objdump")
        with patch("dll_deploy.inspector.objdump.subprocess.run") as run:
            run.return_value = _completed(stdout=SAMPLE_X_OUTPUT)
            dlls = inspector.list_imports("/work/app.exe")

        assert dlls[0] == "KERNEL32.dll"
        cmd = run.call_args.args[0]
        assert cmd == [
            "/usr/bin/x86_64-w64-mingw32-objdump",
            "/work/app.exe",
            "-x",
            "--section=.rdata",
        ]

    def test_instruction_set_command(self):
        inspector = ObjdumpInspector("objdump")
        with patch("dll_deploy.inspector.objdump.subprocess.run") as run:
            run.return_value = _completed(stdout=SAMPLE_F_OUTPUT)
            fmt = inspector.instruction_set("/work/app.exe")

        assert fmt == "pei-x86-64"
        assert run.call_args.args[0] == ["objdump", "-f", "/work/app.exe"]

    def test_nonzero_exit_is_fatal(self):
        inspector = ObjdumpInspector("objdump")
        with patch("dll_deploy.inspector.objdump.subprocess.run") as run:
            run.return_value = _completed(stderr="file format not recognized", returncode=1)
            with pytest.raises(InspectorError) as exc_info:
                inspector.instruction_set("/work/readme.txt")

        err = exc_info.value
        assert err.exit_code == 1
        assert err.stderr == "file format not recognized"
        assert "file format not recognized" in str(err)

    def test_unrunnable_tool_is_fatal(self):
        inspector = ObjdumpInspector("/missing/objdump")
        with patch(
            "dll_deploy.inspector.objdump.subprocess.run",
            side_effect=FileNotFoundError("/missing/objdump"),
        ):
            with pytest.raises(InspectorError) as exc_info:
                inspector.list_imports("/work/app.exe")
        assert "/missing/objdump" in str(exc_info.value)

    def test_one_process_per_query(self):
        inspector = ObjdumpInspector("objdump")
        with patch("dll_deploy.inspector.objdump.subprocess.run") as run:
            run.return_value = _completed(stdout=SAMPLE_X_OUTPUT)
            inspector.list_imports("a.dll")
            inspector.list_imports("a.dll")
        assert run.call_count == 2

    def test_each_run_is_logged(self):
        inspector = ObjdumpInspector("objdump")
        with patch("dll_deploy.inspector.objdump.subprocess.run") as run, capture_logs() as logs:
            run.return_value = _completed(stdout=SAMPLE_F_OUTPUT)
            inspector.instruction_set("/work/app.exe")

        assert logs == [
            {
                "event": "inspector.run",
                "cmd": ["objdump", "-f", "/work/app.exe"],
                "log_level": "debug",
            }
        ]
