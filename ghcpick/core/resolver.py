"""
Toolchain resolution for ghcpick.

Given an upper bound on the bundled library version and the candidates
reported by the registry, pick the newest toolchain whose library version
satisfies the bound. Resolution is pure: inputs are never mutated and
nothing outside the arguments is read, so it is safe to call from any
thread.

Typical usage::

    constraint = Constraint(version="4.19")
    result = resolve(constraint, candidates)
    print(result.toolchain_version)
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Optional, Sequence

from ghcpick.models import Candidate, Constraint, ResolutionResult
from ghcpick.exceptions import ListingEmptyError, NoSatisfyingCandidateError
from ghcpick.utils.logger import get_logger
from ghcpick.utils.version_utils import compare_versions, satisfies

logger = get_logger("core.resolver")

_toolchain_key = cmp_to_key(compare_versions)


def filter_satisfying(
    constraint: Constraint,
    candidates: Sequence[Candidate],
) -> List[Candidate]:
    """Return the candidates whose library version meets ``constraint``.

    Each candidate is judged on its own; listing order is preserved.
    """
    return [c for c in candidates if satisfies(c.library_version, constraint)]


def select_newest(candidates: Sequence[Candidate]) -> Candidate:
    """Return the candidate with the highest toolchain version.

    When several candidates share the highest version, the first one
    encountered is returned.

    Raises:
        ValueError: ``candidates`` is empty.
    """
    return max(candidates, key=lambda c: _toolchain_key(c.toolchain_version))


def resolve(
    constraint: Constraint,
    candidates: Sequence[Candidate],
    *,
    toolchain_label: str = "GHC",
    library_label: str = "base",
    skipped: Optional[int] = None,
) -> ResolutionResult:
    """Select the newest toolchain satisfying an upper bound.

    Args:
        constraint: Upper bound on the bundled library version.
        candidates: Toolchain/library pairs from the registry.
        toolchain_label: Toolchain name used in messages.
        library_label: Library name used in messages.
        skipped: Listing lines dropped while producing ``candidates``;
            reported when the listing turns out empty.

    Returns:
        The :class:`ResolutionResult` for the selected candidate.

    Raises:
        ListingEmptyError: ``candidates`` is empty.
        NoSatisfyingCandidateError: No candidate meets ``constraint``.
    """
    if not candidates:
        raise ListingEmptyError(
            f"Failed to get {toolchain_label} versions from the registry "
            f"(needed {library_label} {constraint})",
            skipped=skipped,
        )

    valid = filter_satisfying(constraint, candidates)
    logger.info(
        "%d of %d candidate(s) satisfy %s %s",
        len(valid),
        len(candidates),
        library_label,
        constraint,
    )

    if not valid:
        raise NoSatisfyingCandidateError(
            f"No {toolchain_label} version found with {library_label} {constraint}",
            considered=len(candidates),
        )

    selected = select_newest(valid)
    logger.info(
        "Latest %s under %s %s: %s",
        toolchain_label,
        library_label,
        constraint,
        selected.toolchain_version,
    )

    return ResolutionResult(
        selected=selected,
        constraint=constraint,
        considered=len(candidates),
        satisfying=len(valid),
    )
