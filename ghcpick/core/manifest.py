"""
Manifest reader for ghcpick.

Reads an hpack ``package.yaml`` and locates the declaration of one
dependency (``base`` by default). Three declaration shapes are accepted
under the top-level ``dependencies`` key::

    dependencies:                 # list of strings
      - base >=4.14 && <4.19

    dependencies:                 # list of name/version mappings
      - name: base
        version: ">=4.14 && <4.19"

    dependencies:                 # mapping of name to range
      base: ">=4.14 && <4.19"

Only the top-level ``dependencies`` are consulted; per-component
dependency lists are ignored.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ghcpick.models import Constraint
from ghcpick.core.constraint_parser import require_upper_bound
from ghcpick.exceptions import (
    DependencyNotFoundError,
    FileOperationError,
    ManifestError,
)
from ghcpick.utils.filesystem import safe_read_file
from ghcpick.utils.logger import get_logger

logger = get_logger("core.manifest")

PathLike = Union[str, Path]

# Characters that may follow a package name in a bare declaration.
_NAME_END = r"(?=$|[\s<>=^&|(])"


def load_manifest(path: PathLike) -> Dict[str, Any]:
    """Read and parse a YAML manifest.

    Args:
        path: Path to ``package.yaml``.

    Returns:
        The top-level mapping.

    Raises:
        ManifestError: File missing, unreadable, invalid YAML, or not a
            mapping at the top level.
    """
    try:
        text = safe_read_file(path)
    except FileOperationError as exc:
        raise ManifestError(
            f"Cannot read manifest: {exc.message}",
            manifest_path=str(path),
        ) from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(
            f"Invalid YAML in manifest: {exc}",
            manifest_path=str(path),
        ) from exc

    if not isinstance(data, dict):
        raise ManifestError(
            "Manifest must be a YAML mapping",
            manifest_path=str(path),
        )

    logger.debug("Loaded manifest %s", path)
    return data


def find_dependency(
    manifest: Dict[str, Any],
    name: str,
    *,
    manifest_path: Optional[str] = None,
) -> str:
    """Return the version range declared for dependency ``name``.

    For bare string entries the whole declaration is returned
    (``"base >=4.14 && <4.19"``); for structured entries, the range alone.
    A structured entry without a range yields an empty string.

    Raises:
        ManifestError: ``dependencies`` is missing or malformed.
        DependencyNotFoundError: No entry for ``name``.
    """
    deps = manifest.get("dependencies")

    if isinstance(deps, dict):
        if name not in deps:
            raise DependencyNotFoundError(name, manifest_path=manifest_path)
        return _range_text(deps[name])

    if not isinstance(deps, list):
        raise ManifestError(
            "dependencies not found or invalid in manifest",
            manifest_path=manifest_path,
        )

    name_re = re.compile(rf"^\s*{re.escape(name)}{_NAME_END}")
    for dep in deps:
        if isinstance(dep, str) and name_re.match(dep):
            return dep
        if isinstance(dep, dict) and dep.get("name") == name:
            return _range_text(dep.get("version"))

    raise DependencyNotFoundError(name, manifest_path=manifest_path)


def _range_text(value: Any) -> str:
    """Render a structured range value; ``null`` means unconstrained."""
    if value is None:
        return ""
    return str(value)


def read_upper_bound(path: PathLike, name: str) -> Constraint:
    """Load a manifest and extract the upper bound declared for ``name``.

    Raises:
        ManifestError: Manifest unreadable or malformed.
        DependencyNotFoundError: ``name`` is not a dependency.
        ConstraintNotFoundError: The declaration has no upper bound.
    """
    manifest = load_manifest(path)
    raw = find_dependency(manifest, name, manifest_path=str(path))
    logger.info("Found %s dependency: %r", name, raw)
    return require_upper_bound(raw, dependency=name)
