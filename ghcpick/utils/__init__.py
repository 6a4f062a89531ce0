"""
Utility helpers for ghcpick.

This package provides reusable utilities used across ghcpick, including:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Filesystem safety helpers
- Output sinks for publishing the result
- Version ordering helpers

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Filesystem utilities
# ---------------------------------------------------------------------------

from ghcpick.utils.filesystem import append_line, safe_read_file

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from ghcpick.utils.logger import get_logger, setup_logging

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from ghcpick.utils.console import (
    print_error,
    print_info,
    print_table,
    print_warning,
    reconfigure_console,
)

# ---------------------------------------------------------------------------
# Output sinks
# ---------------------------------------------------------------------------

from ghcpick.utils.output import (
    GitHubOutputSink,
    MemoryOutputSink,
    OutputSink,
    StreamOutputSink,
    make_sink,
    report_failure,
)

# ---------------------------------------------------------------------------
# Version utilities
# ---------------------------------------------------------------------------

from ghcpick.utils.version_utils import (
    compare_versions,
    is_less,
    normalize_version,
    satisfies,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Console
    "print_error",
    "print_info",
    "print_table",
    "print_warning",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    # Filesystem
    "safe_read_file",
    "append_line",
    # Output
    "OutputSink",
    "GitHubOutputSink",
    "StreamOutputSink",
    "MemoryOutputSink",
    "make_sink",
    "report_failure",
    # Version utilities
    "normalize_version",
    "compare_versions",
    "is_less",
    "satisfies",
]
