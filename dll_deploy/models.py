"""Data models for deployment results."""

from __future__ import annotations

from dataclasses import dataclass, field

from dll_deploy.classifier import Classification


@dataclass
class CopiedDll:
    """A DLL copied into the deployment directory."""

    name: str
    source: str  # where it was found
    required_by: str  # binary whose import caused the copy


@dataclass
class SkippedDll:
    name: str
    classification: Classification
    required_by: str


@dataclass
class MissingDll:
    """A DLL that could not be found (only recorded with allow_missing)."""

    name: str
    required_by: str


@dataclass
class DeployReport:
    """What one deployment run did. Observational only."""

    binary: str
    target_dir: str
    binary_format: str
    copied: list[CopiedDll] = field(default_factory=list)
    skipped: list[SkippedDll] = field(default_factory=list)
    missing: list[MissingDll] = field(default_factory=list)

    @property
    def copied_names(self) -> list[str]:
        return [c.name for c in self.copied]

    @property
    def is_complete(self) -> bool:
        return not self.missing
