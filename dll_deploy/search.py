"""Two-tier DLL search: shallow directory probes, then recursive walks.

The first candidate that exists and passes validation wins; later
directories are never consulted, mirroring the Windows loader's search order.
"""

from __future__ import annotations

import os
from typing import Callable

import structlog

from dll_deploy.config import DeployConfig

log = structlog.get_logger("dll_deploy.search")

# Returns None to accept a candidate, or the reason it was rejected
Validator = Callable[[str], str | None]


class DllSearcher:
    """Find a DLL by name in the directories a DeployConfig names."""

    def __init__(self, cfg: DeployConfig) -> None:
        self._cfg = cfg

    def search(self, name: str, validate: Validator | None = None) -> str | None:
        if not self._cfg.no_shallow_search:
            found = self.search_shallow(name, validate)
            if found is not None:
                return found
        if not self._cfg.no_deep_search:
            found = self.search_deep(name, validate)
            if found is not None:
                return found
        return None

    def search_shallow(self, name: str, validate: Validator | None = None) -> str | None:
        for directory in self._cfg.shallow_search_dirs():
            candidate = os.path.join(directory, name)
            if self._accept(candidate, validate):
                return candidate
        return None

    def search_deep(self, name: str, validate: Validator | None = None) -> str | None:
        for root in self._cfg.deep_search_dirs():
            for dirpath, dirnames, _ in os.walk(root, onerror=self._on_walk_error):
                dirnames.sort()
                candidate = os.path.join(dirpath, name)
                if self._accept(candidate, validate):
                    return candidate
                # Linked directories are probed in place but not walked
                for d in dirnames:
                    linked = os.path.join(dirpath, d)
                    if not os.path.islink(linked):
                        continue
                    candidate = os.path.join(linked, name)
                    if self._accept(candidate, validate):
                        return candidate
        return None

    def _accept(self, candidate: str, validate: Validator | None) -> bool:
        if not os.path.isfile(candidate):
            return False
        if validate is None:
            return True
        reason = validate(candidate)
        if reason is not None:
            log.debug("search.candidate_skipped", path=candidate, reason=reason)
            return False
        return True

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        log.debug("search.walk_failed", path=error.filename, error=str(error))
