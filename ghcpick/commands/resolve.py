"""Resolve command implementation for ghcpick.

Runs the whole pipeline once:

1. Read the ``base`` upper bound from ``package.yaml``.
2. Obtain the toolchain listing (``ghcup list -t ghc -r``, or a saved copy).
3. Pick the newest GHC whose bundled ``base`` satisfies the bound.
4. Publish ``ghc-version=<version>`` to ``$GITHUB_OUTPUT`` or stdout.

Any failure aborts before step 4, so nothing is ever half-published.

Typical usage::

    # In a GitHub Actions step
    $ ghcpick resolve --package-yaml package.yaml

    # Offline, against a saved listing
    $ ghcup list -t ghc -r > listing.txt
    $ ghcpick resolve --listing-file listing.txt
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Optional

import click

from ghcpick.constants import GITHUB_OUTPUT_ENVVAR
from ghcpick.context import GhcPickContext, pass_context
from ghcpick.core import read_upper_bound
from ghcpick.core import resolve as resolve_toolchain
from ghcpick.commands.options import (
    effective_settings,
    listing_options,
    manifest_option,
    obtain_listing,
)
from ghcpick.utils import get_logger, make_sink, print_info

logger = get_logger("commands.resolve")


@click.command()
@manifest_option
@listing_options
@click.option(
    "--github-output",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=GITHUB_OUTPUT_ENVVAR,
    help="File to append the output line to (default: $GITHUB_OUTPUT, else stdout).",
)
@pass_context
def resolve(
    ctx: GhcPickContext,
    package_yaml: Optional[Path],
    dependency: Optional[str],
    list_command: Optional[str],
    listing_file: Optional[IO[str]],
    github_output: Optional[Path],
) -> None:
    """Resolve the newest compatible GHC and publish it.

    Reads the upper bound of the ``base`` dependency from the manifest,
    filters the GHC releases known to GHCup by the ``base`` version they
    ship, and publishes the newest one as ``ghc-version=<version>``.
    """
    settings = effective_settings(
        ctx.config,
        package_yaml=package_yaml,
        dependency=dependency,
        list_command=list_command,
    )
    config = settings.config

    constraint = read_upper_bound(settings.manifest, config.dependency)
    logger.info("Upper bound: %s %s", config.dependency, constraint)

    listing = obtain_listing(config, listing_file)

    result = resolve_toolchain(
        constraint,
        listing.candidates,
        toolchain_label=config.toolchain.upper(),
        library_label=config.dependency,
        skipped=listing.skipped,
    )

    make_sink(github_output).publish(config.output_key, result.toolchain_version)
    print_info(
        f"Latest {config.toolchain.upper()} under {config.dependency} "
        f"{constraint}: {result.toolchain_version}"
    )
