"""
Output sinks for ghcpick.

The resolved version leaves the program through a single
``publish(key, value)`` call on an :class:`OutputSink`. The CLI picks the
sink: the GitHub Actions output file when one is configured, stdout
otherwise. Resolution code never touches the environment or files itself.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import IO, Dict, Optional, Union

from ghcpick.exceptions import GhcPickError
from ghcpick.utils.filesystem import append_line
from ghcpick.utils.logger import get_logger

logger = get_logger("output")


class OutputSink:
    """Destination for the published key/value pair."""

    def publish(self, key: str, value: str) -> None:
        raise NotImplementedError

    @staticmethod
    def _render(key: str, value: str) -> str:
        if not key or "=" in key:
            raise GhcPickError(f"Invalid output key: {key!r}")
        if "\n" in value or "\r" in value:
            raise GhcPickError(f"Output value for {key} must be a single line")
        return f"{key}={value}"


class GitHubOutputSink(OutputSink):
    """Append ``key=value`` lines to a GitHub Actions output file.

    Args:
        path: The file named by ``$GITHUB_OUTPUT``.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def publish(self, key: str, value: str) -> None:
        append_line(self.path, self._render(key, value))
        logger.info("Published %s=%s to %s", key, value, self.path)


class StreamOutputSink(OutputSink):
    """Write ``key=value`` lines to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self._stream = stream

    def publish(self, key: str, value: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(self._render(key, value) + "\n")
        stream.flush()


class MemoryOutputSink(OutputSink):
    """Collect published values in a dict."""

    def __init__(self) -> None:
        self.values: Dict[str, str] = {}

    def publish(self, key: str, value: str) -> None:
        self._render(key, value)
        self.values[key] = value


def make_sink(github_output: Optional[Union[str, Path]] = None) -> OutputSink:
    """Return the file sink when an output path is given, else stdout."""
    if github_output:
        return GitHubOutputSink(github_output)
    return StreamOutputSink()


def report_failure(message: str, *, stream: Optional[IO[str]] = None) -> None:
    """Mark the current GitHub Actions step as failed.

    Emits an ``::error::`` workflow command; outside GitHub Actions this is
    a no-op. Percent signs and newlines are escaped as the runner expects.
    """
    if os.environ.get("GITHUB_ACTIONS") != "true":
        return
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    out = stream or sys.stdout
    out.write(f"::error::{escaped}\n")
    out.flush()
