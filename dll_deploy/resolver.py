"""Closure resolver: copy every non-system DLL a binary transitively needs.

The deployment directory (the directory holding the root binary) doubles as
the visited set: a name already present there is never searched or copied
again, which is also what terminates cyclic import graphs.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator

import structlog

from dll_deploy.classifier import Classification, classify
from dll_deploy.config import DeployConfig
from dll_deploy.exceptions import CopyError, DependencyNotFoundError
from dll_deploy.inspector.base import BinaryInspector
from dll_deploy.models import CopiedDll, DeployReport, MissingDll, SkippedDll
from dll_deploy.search import DllSearcher, Validator

log = structlog.get_logger("dll_deploy.resolver")


class DllDeployer:
    """
    Deploy DLLs beside a binary:
    1. Read the root binary's format once
    2. For each import: classify, search if unresolved, copy the hit
    3. Descend into each copied DLL before moving on to the next import
    4. Stop when every import in the closure is present, skipped or tolerated
    """

    def __init__(
        self,
        cfg: DeployConfig,
        inspector: BinaryInspector,
        searcher: DllSearcher | None = None,
    ) -> None:
        self._cfg = cfg
        self._inspector = inspector
        self._searcher = searcher or DllSearcher(cfg)

    def deploy(self, binary: str) -> DeployReport:
        """Deploy the closure of ``binary`` into its own directory."""
        target_dir = os.path.dirname(binary)
        binary_format = self._inspector.instruction_set(binary)
        log.debug("deploy.binary_format", binary=binary, format=binary_format)
        return self.deploy_closure(binary, target_dir, binary_format)

    def deploy_closure(
        self, binary: str, target_dir: str, binary_format: str
    ) -> DeployReport:
        """Deploy for ``binary`` into ``target_dir``, checking against ``binary_format``.

        Every DLL in the closure is checked against the same format, so the
        whole deployment is assumed to be one architecture.

        Raises:
            DependencyNotFoundError: a DLL is missing and allow_missing is off.
            CopyError: a found DLL could not be copied.
            InspectorError, ImportParseError, FormatParseError: inspector failures.
        """
        report = DeployReport(binary=binary, target_dir=target_dir, binary_format=binary_format)
        validate = self._format_validator(binary_format)

        # Explicit DFS stack; visiting order matches the recursive definition
        stack: list[tuple[str, Iterator[str]]] = [self._open(binary, target_dir)]
        while stack:
            current, pending = stack[-1]
            dep = next(pending, None)
            if dep is None:
                stack.pop()
                continue

            copied = self._resolve(dep, current, target_dir, validate, report)
            if copied is not None:
                stack.append(self._open(copied, target_dir))

        log.debug(
            "deploy.done",
            binary=binary,
            copied=len(report.copied),
            missing=len(report.missing),
        )
        return report

    def _open(self, binary: str, target_dir: str) -> tuple[str, Iterator[str]]:
        log.debug("deploy.deploying", binary=binary, target_dir=target_dir)
        return binary, iter(self._inspector.list_imports(binary))

    def _resolve(
        self,
        dep: str,
        required_by: str,
        target_dir: str,
        validate: Validator,
        report: DeployReport,
    ) -> str | None:
        """Handle one import. Returns the path of the new copy, if any."""
        classification = classify(dep, self._cfg, target_dir)
        if classification is not Classification.UNRESOLVED:
            log.debug("deploy.skipped", dll=dep, reason=classification.value)
            report.skipped.append(SkippedDll(dep, classification, required_by))
            return None

        log.debug("deploy.searching", dll=dep, required_by=required_by)
        location = self._searcher.search(dep, validate)

        if location is None:
            if not self._cfg.allow_missing:
                raise DependencyNotFoundError(dep, required_by)
            log.debug("deploy.dll_missing", dll=dep, required_by=required_by)
            report.missing.append(MissingDll(dep, required_by))
            return None

        destination = os.path.join(target_dir, dep)
        log.debug("deploy.copying", source=location, target_dir=target_dir)
        try:
            shutil.copy(location, destination)
        except OSError as e:
            raise CopyError(f'Failed to copy "{location}" to "{destination}": {e}') from e

        report.copied.append(CopiedDll(dep, location, required_by))
        return destination

    def _format_validator(self, binary_format: str) -> Validator:
        def validate(path: str) -> str | None:
            found = self._inspector.instruction_set(path)
            if found != binary_format:
                return f"DLL architecture mismatch. Expected {binary_format}, but found {found}"
            return None

        return validate
