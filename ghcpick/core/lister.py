"""
Candidate lister for ghcpick.

Turns the raw output of ``ghcup list -t ghc -r`` into :class:`Candidate`
objects. Each useful line looks like::

    ghc 9.6.4 recommended,base-4.18.2.0 hls-powered

i.e. the toolchain keyword, the toolchain version, arbitrary tokens, and a
``<library>-<version>`` token. Everything else GHCup prints (headers,
channel markers, non-numeric releases such as ``head``) is skipped. Skipped
lines are counted and logged rather than treated as errors.
"""

from __future__ import annotations

import re
import shlex
import subprocess
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Pattern

from ghcpick.models import Candidate
from ghcpick.exceptions import ListingCommandError
from ghcpick.utils.logger import get_logger
from ghcpick.constants import (
    DEFAULT_DEPENDENCY,
    DEFAULT_LIST_COMMAND,
    DEFAULT_LIST_TIMEOUT,
    DEFAULT_TOOLCHAIN,
)

logger = get_logger("core.lister")

_VERSION = r"[0-9]+(?:\.[0-9]+)*"


@dataclass
class ListingParseResult:
    """
    Candidates parsed from a listing, plus what was dropped.

    Attributes:
        candidates: Parsed candidates in listing order.
        skipped: Number of non-empty lines that did not match.
        skipped_lines: The skipped lines themselves, for diagnostics.
    """

    candidates: List[Candidate] = field(default_factory=list)
    skipped: int = 0
    skipped_lines: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.candidates)


def build_line_pattern(
    toolchain: str = DEFAULT_TOOLCHAIN,
    library: str = DEFAULT_DEPENDENCY,
) -> Pattern[str]:
    """Compile the pattern for one listing line.

    Group ``toolchain`` is the version right after the toolchain keyword;
    group ``library`` is the version in the first ``<library>-<version>``
    token after it.
    """
    return re.compile(
        rf"^{re.escape(toolchain)}\s+(?P<toolchain>{_VERSION})\s"
        rf".*?(?<![\w-]){re.escape(library)}-(?P<library>{_VERSION})"
    )


_DEFAULT_PATTERN = build_line_pattern()


def parse_listing_line(
    line: str,
    pattern: Pattern[str] = _DEFAULT_PATTERN,
) -> Optional[Candidate]:
    """Parse one listing line into a candidate.

    Returns:
        The candidate, or ``None`` if the line does not have the expected
        shape.

    Examples:
        >>> parse_listing_line("ghc 9.6.4 recommended,base-4.18.2.0")
        Candidate(toolchain_version='9.6.4', library_version='4.18.2.0')
        >>> parse_listing_line("ghc head base-4.20") is None
        True
    """
    match = pattern.match(line.strip())
    if match is None:
        return None
    return Candidate(
        toolchain_version=match.group("toolchain"),
        library_version=match.group("library"),
    )


def parse_listing(
    text: str,
    *,
    toolchain: str = DEFAULT_TOOLCHAIN,
    library: str = DEFAULT_DEPENDENCY,
) -> ListingParseResult:
    """Parse a whole listing, dropping lines that do not match.

    Blank lines are ignored and not counted as skipped.
    """
    pattern = build_line_pattern(toolchain, library)
    result = ListingParseResult()

    for line in _non_empty_lines(text.splitlines()):
        candidate = parse_listing_line(line, pattern)
        if candidate is None:
            result.skipped += 1
            result.skipped_lines.append(line)
            logger.debug("Skipping listing line: %r", line)
            continue
        result.candidates.append(candidate)

    logger.info(
        "Parsed %d candidate(s) from listing, skipped %d line(s)",
        len(result.candidates),
        result.skipped,
    )
    return result


def _non_empty_lines(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        if line.strip():
            yield line


def run_listing_command(
    command: str = DEFAULT_LIST_COMMAND,
    *,
    timeout: Optional[int] = DEFAULT_LIST_TIMEOUT,
) -> str:
    """Run the registry listing command and return its standard output.

    The command is split with shell quoting rules and executed without a
    shell.

    Raises:
        ListingCommandError: The command cannot be started, exits non-zero,
            or does not finish within ``timeout`` seconds.
    """
    argv = shlex.split(command)
    if not argv:
        raise ListingCommandError("Listing command is empty", command=command)

    logger.info("Running %s", command)
    try:
        proc = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ListingCommandError(
            f"Listing command not found: {argv[0]}",
            command=command,
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise ListingCommandError(
            f"Listing command timed out after {timeout}s",
            command=command,
        ) from exc
    except OSError as exc:
        raise ListingCommandError(
            f"Failed to run listing command: {exc}",
            command=command,
        ) from exc

    if proc.returncode != 0:
        raise ListingCommandError(
            "Listing command failed",
            command=command,
            returncode=proc.returncode,
            stderr=proc.stderr,
        )

    return proc.stdout.strip()


class CandidateLister:
    """Produce candidates from the external toolchain registry.

    Args:
        command: Listing command line.
        toolchain: Toolchain keyword at the start of each line.
        library: Library keyword of the ``<library>-<version>`` token.
        timeout: Seconds to wait for the command.
        runner: Callable executing the command; injectable for tests.
    """

    def __init__(
        self,
        command: str = DEFAULT_LIST_COMMAND,
        *,
        toolchain: str = DEFAULT_TOOLCHAIN,
        library: str = DEFAULT_DEPENDENCY,
        timeout: Optional[int] = DEFAULT_LIST_TIMEOUT,
        runner: Optional[Callable[..., str]] = None,
    ) -> None:
        self.command = command
        self.toolchain = toolchain
        self.library = library
        self.timeout = timeout
        self._runner = runner or run_listing_command

    def list_candidates(self) -> ListingParseResult:
        """Run the listing command and parse its output."""
        text = self._runner(self.command, timeout=self.timeout)
        return self.parse(text)

    def parse(self, text: str) -> ListingParseResult:
        """Parse listing text captured elsewhere (file, stdin)."""
        return parse_listing(text, toolchain=self.toolchain, library=self.library)
