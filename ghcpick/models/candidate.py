"""
Candidate and resolution data models for ghcpick.

A :class:`Candidate` is one toolchain release reported by the registry
listing; a :class:`ResolutionResult` records which one was picked and
under which bound.
"""

from __future__ import annotations

from dataclasses import dataclass

from ghcpick.models.constraint import Constraint


@dataclass(frozen=True)
class Candidate:
    """
    One toolchain release and the library version it bundles.

    Versions keep the exact text the registry reported so the published
    value matches what the installer expects.

    Attributes:
        toolchain_version: Compiler release, e.g. ``"9.6.4"``.
        library_version: Bundled library version, e.g. ``"4.18.2.0"``.
    """

    toolchain_version: str
    library_version: str

    def to_json(self) -> dict:
        """Return a JSON-serializable representation."""
        return {
            "toolchain_version": self.toolchain_version,
            "library_version": self.library_version,
        }


@dataclass(frozen=True)
class ResolutionResult:
    """
    Outcome of a successful resolution.

    Attributes:
        selected: The newest satisfying candidate.
        constraint: The bound that was applied.
        considered: Number of candidates examined.
        satisfying: Number of candidates that met the bound.
    """

    selected: Candidate
    constraint: Constraint
    considered: int
    satisfying: int

    @property
    def toolchain_version(self) -> str:
        """Version to publish."""
        return self.selected.toolchain_version
