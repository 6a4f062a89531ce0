"""
ghcpick version information.

Single source of truth for the package version, following Semantic
Versioning (``MAJOR.MINOR.PATCH``).
"""

from __future__ import annotations

__version__ = "0.1.0"

#: Human-readable version (for CLI banners and logs).
VERSION_STRING = f"ghcpick {__version__}"
