"""
Core functionality exports for ghcpick.

    from ghcpick.core import parse_upper_bound, resolve
"""

from __future__ import annotations

from ghcpick.core.constraint_parser import parse_upper_bound, require_upper_bound
from ghcpick.core.manifest import find_dependency, load_manifest, read_upper_bound
from ghcpick.core.lister import (
    CandidateLister,
    ListingParseResult,
    parse_listing,
    parse_listing_line,
    run_listing_command,
)
from ghcpick.core.resolver import filter_satisfying, resolve, select_newest

__all__ = [
    "parse_upper_bound",
    "require_upper_bound",
    "load_manifest",
    "find_dependency",
    "read_upper_bound",
    "CandidateLister",
    "ListingParseResult",
    "parse_listing",
    "parse_listing_line",
    "run_listing_command",
    "resolve",
    "filter_satisfying",
    "select_newest",
]
