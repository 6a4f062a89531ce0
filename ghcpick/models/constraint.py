"""
Constraint data model for ghcpick.

An upper bound on a library version, as extracted from a dependency
declaration such as ``base >=4.14 && <4.19``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Constraint:
    """
    Upper bound on a library version.

    Attributes:
        version: Bound version as written in the manifest (``"4.19"``).
        inclusive: ``True`` for ``<=``, ``False`` for ``<``.
    """

    version: str
    inclusive: bool = False

    @property
    def operator(self) -> str:
        """Relational operator of the bound."""
        return "<=" if self.inclusive else "<"

    def __str__(self) -> str:
        return f"{self.operator} {self.version}"
