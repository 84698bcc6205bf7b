"""Decide what to do with one imported DLL name."""

from __future__ import annotations

import os
from enum import Enum

from dll_deploy import config
from dll_deploy.config import DeployConfig
from dll_deploy.system_dlls import SYSTEM_DLL_NAMES

# Probed only when running on Windows itself
_SYSTEM_DIRS = (
    "C:/Windows/",
    "C:/Windows/system32/",
    "C:/Windows/System32/Wbem/",
    "C:/Windows/System32/WindowsPowerShell/v1.0/",
    "C:/Windows/System32/OpenSSH/",
)

_VC_REDIST_PREFIX = "api-ms-win"


class Classification(Enum):
    """Outcome of classifying an import. Only UNRESOLVED triggers a search."""

    ALREADY_PRESENT = "already_present"
    IGNORED = "ignored"
    SYSTEM_OWNED = "system_owned"
    REDISTRIBUTABLE = "redistributable"
    UNRESOLVED = "unresolved"


def is_vc_redist_dll(name: str) -> bool:
    return name.startswith(_VC_REDIST_PREFIX)


def is_system_dll(name: str) -> bool:
    if name.lower() in SYSTEM_DLL_NAMES:
        return True
    if config.IS_WINDOWS:
        return any(os.path.isfile(f"{prefix}{name}") for prefix in _SYSTEM_DIRS)
    return False


def classify(name: str, cfg: DeployConfig, target_dir: str) -> Classification:
    """Classify ``name`` for deployment into ``target_dir``.

    Checks run in a fixed order and the first match wins: already deployed,
    ignored by the user, owned by Windows, VC redistributable shim.
    """
    if os.path.exists(os.path.join(target_dir, name)):
        return Classification.ALREADY_PRESENT
    if name in cfg.ignore:
        return Classification.IGNORED
    if is_system_dll(name):
        return Classification.SYSTEM_OWNED
    if not cfg.copy_vc_redist and is_vc_redist_dll(name):
        return Classification.REDISTRIBUTABLE
    return Classification.UNRESOLVED
