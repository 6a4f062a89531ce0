"""
Options and helpers shared by the ghcpick subcommands.

Both ``resolve`` and ``candidates`` take the same manifest and listing
inputs; the settings they end up with are the configuration file's,
overridden by whatever was given on the command line.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import IO, Any, Callable, Optional

import click

from ghcpick.config import GhcPickConfig
from ghcpick.core.lister import CandidateLister, ListingParseResult
from ghcpick.constants import DEFAULT_MANIFEST_NAME, MANIFEST_ENVVARS
from ghcpick.utils.logger import get_logger

logger = get_logger("commands.options")

F = Callable[..., Any]


def manifest_option(func: F) -> F:
    return click.option(
        "--package-yaml",
        "-p",
        "package_yaml",
        type=click.Path(dir_okay=False, path_type=Path),
        envvar=list(MANIFEST_ENVVARS),
        help=f"Path to the manifest (default: ./{DEFAULT_MANIFEST_NAME}).",
    )(func)


def listing_options(func: F) -> F:
    func = click.option(
        "--listing-file",
        type=click.File("r"),
        help="Read the registry listing from a file ('-' for stdin) "
        "instead of running the listing command.",
    )(func)
    func = click.option(
        "--list-command",
        help="Command that prints the toolchain listing.",
    )(func)
    func = click.option(
        "--dependency",
        "-d",
        help="Dependency whose upper bound selects the toolchain.",
    )(func)
    return func


@dataclass(frozen=True)
class Settings:
    """Effective settings for one run."""

    manifest: Path
    config: GhcPickConfig


def effective_settings(
    config: GhcPickConfig,
    *,
    package_yaml: Optional[Path],
    dependency: Optional[str],
    list_command: Optional[str],
) -> Settings:
    """Apply command-line overrides on top of the loaded configuration."""
    overrides = {}
    if dependency:
        overrides["dependency"] = dependency
    if list_command:
        overrides["list_command"] = list_command

    merged = replace(config, **overrides) if overrides else config
    manifest = package_yaml or Path.cwd() / DEFAULT_MANIFEST_NAME
    logger.debug("Manifest: %s | Settings: %s", manifest, merged.to_log_dict())
    return Settings(manifest=manifest, config=merged)


def obtain_listing(
    config: GhcPickConfig,
    listing_file: Optional[IO[str]] = None,
) -> ListingParseResult:
    """Parse the registry listing from ``listing_file`` or by running the command."""
    lister = CandidateLister(
        config.list_command,
        toolchain=config.toolchain,
        library=config.dependency,
        timeout=config.list_timeout,
    )
    if listing_file is not None:
        logger.info("Reading listing from %s", getattr(listing_file, "name", "<stream>"))
        return lister.parse(listing_file.read())
    return lister.list_candidates()
