"""
Unified data model exports for ghcpick.

Example:
    >>> from ghcpick.models import Candidate, Constraint
"""

from __future__ import annotations

from ghcpick.models.constraint import Constraint
from ghcpick.models.candidate import Candidate, ResolutionResult

__all__ = [
    "Candidate",
    "Constraint",
    "ResolutionResult",
]
