"""
Version ordering utilities for ghcpick.

GHC and ``base`` versions are plain dotted integers (``9.6.4``,
``4.18.2.1``). They are compared after normalizing both sides to a fixed
number of segments: missing trailing segments count as zero and segments
beyond the width are ignored, so ``4.19`` equals ``4.19.0`` and
``4.18.2.1`` equals ``4.18.2``.
"""

from __future__ import annotations

from typing import Tuple

from ghcpick.constants import VERSION_SEGMENTS
from ghcpick.exceptions import InvalidVersionError
from ghcpick.models.constraint import Constraint

Version = Tuple[int, ...]


def normalize_version(version: str, segments: int = VERSION_SEGMENTS) -> Version:
    """Pad or truncate a dotted numeric version to exactly ``segments`` parts.

    Args:
        version: Dotted numeric version, e.g. ``"4.19"``.
        segments: Number of segments in the result.

    Returns:
        Tuple of ``segments`` non-negative integers.

    Raises:
        InvalidVersionError: A segment is empty or not a decimal integer.

    Examples:
        >>> normalize_version("4.19")
        (4, 19, 0)
        >>> normalize_version("4.18.2.1")
        (4, 18, 2)
    """
    parts = [_parse_segment(part, version) for part in version.strip().split(".")]
    while len(parts) < segments:
        parts.append(0)
    return tuple(parts[:segments])


def _parse_segment(part: str, version: str) -> int:
    """Convert one segment, rejecting signs, blanks and non-digits."""
    if not part.isdigit() or not part.isascii():
        raise InvalidVersionError(version)
    return int(part)


def compare_versions(a: str, b: str) -> int:
    """Compare two dotted versions segment by segment.

    Returns:
        ``-1`` if ``a < b``, ``0`` if equal, ``1`` if ``a > b``.

    Raises:
        InvalidVersionError: Either side is malformed.
    """
    pa = normalize_version(a)
    pb = normalize_version(b)

    for left, right in zip(pa, pb):
        if left > right:
            return 1
        if left < right:
            return -1
    return 0


def is_less(a: str, b: str) -> bool:
    """Return True if ``a`` orders strictly before ``b``."""
    return compare_versions(a, b) < 0


def satisfies(library_version: str, constraint: Constraint) -> bool:
    """Return True if ``library_version`` meets an upper-bound constraint.

    Equal versions satisfy only an inclusive (``<=``) bound.
    """
    cmp = compare_versions(library_version, constraint.version)
    return cmp < 0 or (cmp == 0 and constraint.inclusive)
