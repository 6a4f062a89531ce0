"""
Command-line interface for ghcpick.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from ghcpick.config import load_config
from ghcpick.__version__ import __version__
from ghcpick.context import GhcPickContext
from ghcpick.exceptions import ConfigError, GhcPickError
from ghcpick.utils.logger import get_logger, setup_logging
from ghcpick.utils.console import print_error, print_warning, reconfigure_console
from ghcpick.utils.output import report_failure

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="GHCPICK_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="GHCPICK_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="ghcpick",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """ghcpick: pick the newest GHC compatible with your base bound.

    \b
    Available commands:
      ghcpick resolve              Resolve and publish the GHC version
      ghcpick candidates           Show what the registry offers

    \b
    Examples:
      ghcpick resolve
      ghcpick resolve --package-yaml app/package.yaml
      ghcpick -v candidates

    Use ``ghcpick COMMAND --help`` for command-specific options.
    """
    # --no-color propagates to Rich and the log formatter through NO_COLOR
    if not color:
        os.environ["NO_COLOR"] = "1"
        reconfigure_console()

    _configure_logging(verbose)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    ghcpick_ctx = GhcPickContext()
    ghcpick_ctx.config_path = config or loaded_config.source_path
    ghcpick_ctx.color = color
    ghcpick_ctx.verbose = verbose
    ghcpick_ctx.config = loaded_config
    ctx.obj = ghcpick_ctx

    logger.debug("ghcpick v%s", __version__)
    logger.debug("Config path: %s", ghcpick_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    level = setup_logging(verbose)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


# Register CLI subcommands
from ghcpick.commands.resolve import resolve  # noqa: E402
from ghcpick.commands.candidates import candidates  # noqa: E402

cli.add_command(resolve)
cli.add_command(candidates)


def main(args: Optional[list] = None) -> int:
    """Main entry point for the ghcpick CLI.

    Returns:
        Exit code:
            0   Success
            1   Resolution or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(args=args, standalone_mode=False)
        return 0

    except click.exceptions.Exit as exc:
        return exc.exit_code

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except GhcPickError as exc:
        print_error(str(exc))
        report_failure(str(exc))
        logger.debug(
            "GhcPickError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except (KeyboardInterrupt, click.Abort):
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        report_failure(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
