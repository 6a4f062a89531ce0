"""
Centralized constants for ghcpick.

Immutable defaults for the manifest, the GHCup listing, the output channel,
and logging formats. All values are intended to be treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

#: Manifest file looked up in the current directory when no path is given.
DEFAULT_MANIFEST_NAME: Final[str] = "package.yaml"

#: Dependency whose upper bound selects the compiler.
DEFAULT_DEPENDENCY: Final[str] = "base"

#: Maximum allowed manifest size (in bytes).
MAX_FILE_SIZE: Final[int] = 1024 * 1024  # 1 MB

# ---------------------------------------------------------------------------
# Version ordering
# ---------------------------------------------------------------------------

#: Fixed width every version is normalized to before comparison.
VERSION_SEGMENTS: Final[int] = 3

# ---------------------------------------------------------------------------
# Registry listing
# ---------------------------------------------------------------------------

#: Keyword that starts every toolchain line of the listing.
DEFAULT_TOOLCHAIN: Final[str] = "ghc"

#: Command producing the raw toolchain listing.
DEFAULT_LIST_COMMAND: Final[str] = "ghcup list -t ghc -r"

#: Seconds to wait for the listing command before giving up.
DEFAULT_LIST_TIMEOUT: Final[int] = 300

# ---------------------------------------------------------------------------
# Output channel
# ---------------------------------------------------------------------------

#: Key published with the selected toolchain version.
DEFAULT_OUTPUT_KEY: Final[str] = "ghc-version"

#: Environment variables naming the manifest path (GitHub Actions input last).
MANIFEST_ENVVARS: Final[Sequence[str]] = (
    "GHCPICK_PACKAGE_YAML",
    "INPUT_PACKAGE-YAML-PATH",
)

#: Environment variable holding the GitHub Actions output file.
GITHUB_OUTPUT_ENVVAR: Final[str] = "GITHUB_OUTPUT"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
