"""Abstract interface for binary inspectors."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BinaryInspector(ABC):
    """
    Reads the two facts the resolver needs from a PE binary.
    Backends wrap an external tool; the resolver never sees the tool itself.
    """

    @abstractmethod
    def list_imports(self, path: str) -> list[str]:
        """
        Names of the DLLs imported by ``path``, in the order reported.

        Raises:
            InspectorError: the underlying tool failed.
            ImportParseError: the tool's output is malformed.
        """
        ...

    @abstractmethod
    def instruction_set(self, path: str) -> str:
        """
        Opaque binary format tag of ``path`` (e.g. ``pei-x86-64``).

        Raises:
            InspectorError: the underlying tool failed.
            FormatParseError: no format line in the tool's output.
        """
        ...
