"""
Executable module for ghcpick.

Running:
    python -m ghcpick

is equivalent to:
    ghcpick
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report why the CLI could not be imported."""
    sys.stderr.write("ghcpick CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from ghcpick.__version__ import __version__

        sys.stderr.write(f"ghcpick version: {__version__}\n")
    except ImportError:
        sys.stderr.write("ghcpick version: <unknown>\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m ghcpick`.

    Returns:
        Exit code returned by the CLI.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from ghcpick.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
