"""
Upper-bound extraction from dependency declarations.

Dependency ranges in ``package.yaml`` are free-form Cabal expressions such
as ``>=4.14 && <4.19`` or ``< 4.19.0.0``. Only the upper bound matters for
picking a compiler, so instead of parsing the full grammar this module scans
for the first ``<`` or ``<=`` followed by a dotted version.

If a declaration holds several ``<``/``<=`` clauses (``<4.19 || <5``), the
first one in left-to-right order is used. No attempt is made to compute the
tightest bound.
"""

from __future__ import annotations

import re
from typing import Optional

from ghcpick.models import Constraint
from ghcpick.exceptions import ConstraintNotFoundError
from ghcpick.utils.logger import get_logger

logger = get_logger("core.constraint_parser")

# "<" or "<=" then a version of one to four numeric groups. The trailing
# guard stops "<4.19x" from yielding a truncated "4.19".
_UPPER_BOUND_RE = re.compile(
    r"(?P<op><=|<)\s*(?P<version>[0-9]+(?:\.[0-9]+){0,3})(?![0-9.]*\w)"
)


def parse_upper_bound(raw: str) -> Optional[Constraint]:
    """Extract the upper bound from a dependency declaration.

    Args:
        raw: Dependency string, e.g. ``"base >=4.14 && <4.19"``.

    Returns:
        The :class:`Constraint`, or ``None`` if the string has no
        ``<``/``<=`` clause.

    Examples:
        >>> parse_upper_bound("base >=4.14 && <4.19")
        Constraint(version='4.19', inclusive=False)
        >>> parse_upper_bound("base <= 4.18.2")
        Constraint(version='4.18.2', inclusive=True)
        >>> parse_upper_bound("base") is None
        True
    """
    match = _UPPER_BOUND_RE.search(raw)
    if match is None:
        logger.debug("No upper bound in %r", raw)
        return None

    constraint = Constraint(
        version=match.group("version"),
        inclusive=match.group("op") == "<=",
    )
    logger.debug("Parsed upper bound %s from %r", constraint, raw)
    return constraint


def require_upper_bound(raw: str, *, dependency: Optional[str] = None) -> Constraint:
    """Like :func:`parse_upper_bound` but raise when there is no bound.

    Raises:
        ConstraintNotFoundError: ``raw`` contains no upper-bound clause.
    """
    constraint = parse_upper_bound(raw)
    if constraint is None:
        raise ConstraintNotFoundError(raw, dependency=dependency)
    return constraint
