from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Generator, List

import pytest

from ghcpick.models import Candidate
from ghcpick.utils.console import reconfigure_console

# A trimmed capture of `ghcup list -t ghc -r`, including lines that must be
# skipped: a non-numeric release and a line without a base token.
SAMPLE_LISTING = """\
ghc 9.4.8 base-4.17.2.1 recommended,old
ghc 9.6.4 base-4.18.2.0 hls-powered
ghc 9.8.2 base-4.19.1.0 latest
ghc head base-4.20.0.0 nightly
ghc 9.10.0 prerelease
"""

_ENVVARS = (
    "GITHUB_ACTIONS",
    "GITHUB_OUTPUT",
    "GHCPICK_CONFIG",
    "GHCPICK_COLOR",
    "GHCPICK_PACKAGE_YAML",
    "INPUT_PACKAGE-YAML-PATH",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from CI variables and the console/logging singletons."""
    for name in _ENVVARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    reconfigure_console()

    yield

    reconfigure_console()
    root_logger = logging.getLogger("ghcpick")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_candidates() -> List[Candidate]:
    """The three candidates used throughout the resolution scenarios."""
    return [
        Candidate(toolchain_version="9.4.8", library_version="4.17.2"),
        Candidate(toolchain_version="9.6.4", library_version="4.18.2"),
        Candidate(toolchain_version="9.8.2", library_version="4.19.1"),
    ]


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes a package.yaml into ``tmp_path``."""

    def _write(content: str, name: str = "package.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def listing_file(tmp_path: Path) -> Path:
    """A saved registry listing on disk."""
    path = tmp_path / "listing.txt"
    path.write_text(SAMPLE_LISTING, encoding="utf-8")
    return path


@pytest.fixture
def sample_listing() -> str:
    """Raw registry listing text."""
    return SAMPLE_LISTING
