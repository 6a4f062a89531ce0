"""Candidates command implementation for ghcpick.

Diagnostic view of the registry listing: every parsed toolchain with the
library version it bundles and, when the manifest has a usable bound,
whether it qualifies. Nothing is published.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, IO, List, Optional

import click

from ghcpick.models import Candidate, Constraint
from ghcpick.exceptions import GhcPickError
from ghcpick.context import GhcPickContext, pass_context
from ghcpick.core import read_upper_bound, select_newest
from ghcpick.commands.options import (
    effective_settings,
    listing_options,
    manifest_option,
    obtain_listing,
)
from ghcpick.utils import (
    get_logger,
    print_info,
    print_table,
    print_warning,
    satisfies,
)

logger = get_logger("commands.candidates")


@click.command()
@manifest_option
@listing_options
@pass_context
def candidates(
    ctx: GhcPickContext,
    package_yaml: Optional[Path],
    dependency: Optional[str],
    list_command: Optional[str],
    listing_file: Optional[IO[str]],
) -> None:
    """Show the toolchains the registry offers.

    Lists every GHC release parsed from the registry listing together with
    its bundled ``base`` version. If the manifest declares an upper bound,
    a column marks which releases satisfy it and the one ``resolve`` would
    pick.
    """
    settings = effective_settings(
        ctx.config,
        package_yaml=package_yaml,
        dependency=dependency,
        list_command=list_command,
    )
    config = settings.config

    constraint: Optional[Constraint] = None
    try:
        constraint = read_upper_bound(settings.manifest, config.dependency)
    except GhcPickError as exc:
        print_warning(f"Not filtering by manifest: {exc}")

    listing = obtain_listing(config, listing_file)

    if not listing.candidates:
        print_warning("No toolchains found in the registry listing")
    else:
        rows = _build_rows(listing.candidates, constraint, config.dependency)
        title = f"{config.toolchain.upper()} releases"
        if constraint is not None:
            title += f" ({config.dependency} {constraint})"
        print_table(
            rows,
            title=title,
            row_styler=lambda row: "bold green" if row.get("Pick") else None,
        )

    if listing.skipped:
        print_info(f"Skipped {listing.skipped} unrecognized listing line(s)")


def _build_rows(
    found: List[Candidate],
    constraint: Optional[Constraint],
    library: str,
) -> List[Dict[str, Any]]:
    """Build table rows, marking the candidate ``resolve`` would select."""
    library_col = library.capitalize()
    if constraint is None:
        return [
            {"Toolchain": c.toolchain_version, library_col: c.library_version}
            for c in found
        ]

    ok = [c for c in found if satisfies(c.library_version, constraint)]
    pick = select_newest(ok) if ok else None

    return [
        {
            "Toolchain": c.toolchain_version,
            library_col: c.library_version,
            "Satisfies": "yes" if c in ok else "no",
            "Pick": "*" if c is pick else "",
        }
        for c in found
    ]
