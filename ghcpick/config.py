"""Configuration file loader for ghcpick.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``ghcpick.toml``: settings under ``[ghcpick]`` table
- ``pyproject.toml``: settings under ``[tool.ghcpick]`` table

Discovery order:

1. Explicit path from ``--config`` or ``GHCPICK_CONFIG``
2. ``ghcpick.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.ghcpick]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``ghcpick.toml``)::

    [ghcpick]
    dependency = "base"
    list_command = "ghcup list -t ghc -r"
    list_timeout = 120
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, fields

from ghcpick.exceptions import ConfigError
from ghcpick.utils.logger import get_logger
from ghcpick.constants import (
    DEFAULT_DEPENDENCY,
    DEFAULT_LIST_COMMAND,
    DEFAULT_LIST_TIMEOUT,
    DEFAULT_OUTPUT_KEY,
    DEFAULT_TOOLCHAIN,
)

logger = get_logger("config")


@dataclass
class GhcPickConfig:
    """Parsed and validated ghcpick configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        dependency: Dependency whose upper bound selects the compiler; also
            the library keyword in listing lines (``base-4.18.2``).
        toolchain: Keyword that starts each toolchain line of the listing.
        list_command: Command producing the registry listing.
        output_key: Key the selected version is published under.
        list_timeout: Seconds to wait for ``list_command``.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    dependency: str = DEFAULT_DEPENDENCY
    toolchain: str = DEFAULT_TOOLCHAIN
    list_command: str = DEFAULT_LIST_COMMAND
    output_key: str = DEFAULT_OUTPUT_KEY
    list_timeout: int = DEFAULT_LIST_TIMEOUT

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging.

        Excludes ``source_path`` metadata.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "source_path"
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    ghcpick_toml = cwd / "ghcpick.toml"
    if ghcpick_toml.is_file():
        logger.debug("Found ghcpick.toml: %s", ghcpick_toml)
        return ghcpick_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_ghcpick_section(pyproject_toml):
        logger.debug("Found [tool.ghcpick] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_ghcpick_section(path: Path) -> bool:
    """Check if pyproject.toml contains a [tool.ghcpick] section.

    A pyproject.toml that cannot be parsed is treated as not configuring
    ghcpick.
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    return "ghcpick" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> GhcPickConfig:
    """Load and validate ghcpick configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`GhcPickConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return GhcPickConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("ghcpick", {})
    else:
        section = raw.get("ghcpick", {})

    if not section:
        logger.debug("Config file found but no ghcpick section, using defaults")
        return GhcPickConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


_STRING_OPTIONS = ("dependency", "toolchain", "list_command", "output_key")


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> GhcPickConfig:
    """Parse and validate a ``[ghcpick]`` or ``[tool.ghcpick]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types, or empty/non-positive values.
    """
    config = GhcPickConfig()

    known_top = set(_STRING_OPTIONS) | {"list_timeout"}
    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    for option in _STRING_OPTIONS:
        if option not in section:
            continue
        val = section[option]
        if not isinstance(val, str):
            raise ConfigError(
                f"{option} must be a string, got {type(val).__name__}",
                config_path=config_path,
                option=option,
            )
        if not val.strip():
            raise ConfigError(
                f"{option} must not be empty",
                config_path=config_path,
                option=option,
            )
        setattr(config, option, val.strip())

    if "list_timeout" in section:
        val = section["list_timeout"]
        # bool is a subclass of int; reject it explicitly
        if isinstance(val, bool) or not isinstance(val, int):
            raise ConfigError(
                f"list_timeout must be an integer, got {type(val).__name__}",
                config_path=config_path,
                option="list_timeout",
            )
        if val <= 0:
            raise ConfigError(
                "list_timeout must be positive",
                config_path=config_path,
                option="list_timeout",
            )
        config.list_timeout = val

    return config
