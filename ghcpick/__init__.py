"""
ghcpick: pick the newest GHC whose bundled ``base`` fits your bounds.

ghcpick reads the ``base`` upper bound declared in a project's
``package.yaml``, asks GHCup which compiler releases exist, and publishes
the newest release whose bundled ``base`` library satisfies that bound.
It is meant to run non-interactively, for example as a CI pipeline step.

Typical usage::

    $ ghcpick resolve --package-yaml package.yaml
    ghc-version=9.6.4
"""

from __future__ import annotations

from ghcpick.__version__ import __version__
from ghcpick.models import Candidate, Constraint, ResolutionResult
from ghcpick.core import parse_upper_bound, resolve

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "ghcpick Contributors"
__license__ = "Apache-2.0"
__description__ = "Resolve the newest GHC release compatible with a base upper bound."

__all__ = [
    "__version__",
    "Candidate",
    "Constraint",
    "ResolutionResult",
    "parse_upper_bound",
    "resolve",
]
