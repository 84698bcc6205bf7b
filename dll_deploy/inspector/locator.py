"""Locate the objdump executable from the ``--objdump-file`` selector."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

import structlog

from dll_deploy import config
from dll_deploy.exceptions import (
    BuiltinInspectorNotFoundError,
    InspectorFileNotFoundError,
    InspectorNotFoundError,
)

log = structlog.get_logger("dll_deploy.inspector")


def _builtin_name() -> str:
    return "objdump.exe" if config.IS_WINDOWS else "objdump"


def _program_dir() -> Path:
    """Directory of the running entry point (where a bundled objdump lives)."""
    return Path(sys.argv[0]).resolve().parent


def find_system_objdump() -> str | None:
    """First objdump on the process search path, or None."""
    found = shutil.which("objdump")
    if found and Path(found).is_file():
        return found
    return None


def find_builtin_objdump() -> str:
    candidate = _program_dir() / _builtin_name()
    if not candidate.is_file():
        raise BuiltinInspectorNotFoundError(
            f"Builtin objdump executable {candidate} not found"
        )
    return str(candidate)


def locate_objdump(selector: str) -> str:
    """Resolve ``selector`` to an objdump executable path.

    Selectors:
      [system]   objdump found on PATH
      [builtin]  objdump shipped beside this program
      [auto]     [system], falling back to [builtin]
      <path>     an explicit file
    """
    if selector == config.OBJDUMP_SYSTEM:
        found = find_system_objdump()
        if found is None:
            raise InspectorNotFoundError("Failed to find objdump in your system")
        return found

    if selector == config.OBJDUMP_BUILTIN:
        return find_builtin_objdump()

    if selector == config.OBJDUMP_AUTO:
        found = find_system_objdump()
        if found is not None:
            return found
        log.debug("inspector.system_objdump_missing", fallback=config.OBJDUMP_BUILTIN)
        return find_builtin_objdump()

    if not Path(selector).is_file():
        raise InspectorFileNotFoundError(f"Given objdump file {selector} doesn't exist")
    return selector
