"""Run configuration and search-directory derivation."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

IS_WINDOWS = os.name == "nt"

# Entries of PATH and CMAKE_PREFIX_PATH are ';'-separated on Windows
_PATH_LIST_SEPARATOR = ";"

OBJDUMP_AUTO = "[auto]"
OBJDUMP_SYSTEM = "[system]"
OBJDUMP_BUILTIN = "[builtin]"


def existing_env_paths() -> list[str]:
    """Directories listed in PATH that exist."""
    value = os.environ.get("PATH")
    if not value:
        return []
    return [p for p in value.split(_PATH_LIST_SEPARATOR) if os.path.isdir(p)]


class DeployConfig(BaseModel):
    """Options for one deployment run."""

    model_config = ConfigDict(frozen=True)

    binary_file: str
    skip_env_path: bool = False
    copy_vc_redist: bool = False
    verbose: bool = False

    shallow_search_dir: list[str] = Field(default_factory=list)
    no_shallow_search: bool = False

    deep_search_dir: list[str] = Field(default_factory=list)
    no_deep_search: bool = False

    cmake_prefix_path: list[str] = Field(default_factory=list)
    ignore: list[str] = Field(default_factory=list)

    objdump_file: str = OBJDUMP_AUTO
    allow_missing: bool = False

    @field_validator("binary_file", "objdump_file", mode="before")
    @classmethod
    def _strip_whitespace(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @field_validator("objdump_file")
    @classmethod
    def _objdump_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("objdump_file must be [auto], [system], [builtin] or a path")
        return v

    def existing_cmake_prefix_paths(self) -> list[str]:
        """``<prefix>/bin`` for every configured prefix whose bin dir exists."""
        dirs = []
        for value in self.cmake_prefix_path:
            for prefix in value.split(_PATH_LIST_SEPARATOR):
                path = f"{prefix}/bin"
                if os.path.isdir(path):
                    dirs.append(path)
        return dirs

    def _search_dirs(self, explicit: list[str]) -> list[str]:
        dirs = list(explicit)
        dirs.extend(self.existing_cmake_prefix_paths())
        if IS_WINDOWS and not self.skip_env_path:
            dirs.extend(existing_env_paths())
        return dirs

    def shallow_search_dirs(self) -> list[str]:
        """Directories probed at top level only, in precedence order."""
        return self._search_dirs(self.shallow_search_dir)

    def deep_search_dirs(self) -> list[str]:
        """Directories walked recursively, in precedence order."""
        return self._search_dirs(self.deep_search_dir)
