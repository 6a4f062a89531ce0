"""
Custom exception hierarchy for ghcpick.

All exceptions inherit from :class:`GhcPickError` and carry optional
structured metadata via the ``details`` attribute, which is rendered into
the message shown to the user. Every error is terminal for a run: nothing
is retried and nothing is published once one is raised.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class GhcPickError(Exception):
    """Base exception for all ghcpick errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ConfigError(GhcPickError):
    """Raised when a configuration file is missing, unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path of the offending configuration file.
        option: Configuration option that failed validation.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class FileOperationError(GhcPickError):
    """Raised when file system operations fail.

    Args:
        message: Error description.
        file_path: Path to the file involved.
        operation: Operation being performed (read/append).
        original_error: Original exception that triggered this error.
    """

    __slots__ = ("file_path", "operation", "original_error")

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", file_path)
        _add_if(details, "operation", operation)
        _add_if(
            details,
            "original_error",
            str(original_error) if original_error else None,
        )

        super().__init__(message, details)

        self.file_path = file_path
        self.operation = operation
        self.original_error = original_error


class InvalidVersionError(GhcPickError, ValueError):
    """Raised when a version string has an empty or non-numeric segment.

    Args:
        version: The rejected version string.
    """

    __slots__ = ("version",)

    def __init__(self, version: str) -> None:
        super().__init__(f"Invalid version string: {version!r}")
        self.version = version


class ManifestError(GhcPickError):
    """Raised when the manifest is missing or not shaped as expected.

    Args:
        message: Error description.
        manifest_path: Path to the manifest file.
    """

    __slots__ = ("manifest_path",)

    def __init__(
        self,
        message: str,
        *,
        manifest_path: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "manifest", manifest_path)

        super().__init__(message, details)

        self.manifest_path = manifest_path


class DependencyNotFoundError(ManifestError):
    """Raised when the target dependency is absent from the manifest."""

    __slots__ = ("dependency",)

    def __init__(
        self,
        dependency: str,
        *,
        manifest_path: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"No {dependency} dependency found in manifest",
            manifest_path=manifest_path,
        )
        self.dependency = dependency


class ConstraintNotFoundError(GhcPickError):
    """Raised when a dependency declaration has no ``<`` / ``<=`` clause.

    Args:
        raw: The dependency declaration that was searched.
        dependency: Name of the dependency, for the message.
    """

    __slots__ = ("raw", "dependency")

    def __init__(self, raw: str, *, dependency: Optional[str] = None) -> None:
        subject = dependency or "dependency"
        super().__init__(
            f"No upper bound for {subject} found in {_truncate(raw)!r}"
        )
        self.raw = raw
        self.dependency = dependency


class ListingCommandError(GhcPickError):
    """Raised when the registry listing command cannot produce output.

    Args:
        message: Error description.
        command: The command line that was run.
        returncode: Exit status, when the process ran to completion.
        stderr: Captured standard error, truncated for safety.
    """

    __slots__ = ("command", "returncode", "stderr")

    def __init__(
        self,
        message: str,
        *,
        command: Optional[str] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "command", command)
        _add_if(details, "returncode", returncode)
        if stderr:
            details["stderr"] = _truncate(stderr.strip())

        super().__init__(message, details)

        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class ListingEmptyError(GhcPickError):
    """Raised when the registry listing yields no parseable candidates."""

    __slots__ = ("skipped",)

    def __init__(self, message: str, *, skipped: Optional[int] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "skipped_lines", skipped)
        super().__init__(message, details)
        self.skipped = skipped


class NoSatisfyingCandidateError(GhcPickError):
    """Raised when no candidate's library version satisfies the bound.

    Args:
        message: Error description naming the bound.
        considered: Number of candidates that were checked.
    """

    __slots__ = ("considered",)

    def __init__(self, message: str, *, considered: int = 0) -> None:
        super().__init__(message, {"candidates": considered})
        self.considered = considered
