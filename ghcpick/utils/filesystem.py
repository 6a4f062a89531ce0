"""
Filesystem utilities for ghcpick.

Safe helpers for reading the manifest and appending to the pipeline's
output file. All filesystem errors are normalized to ``FileOperationError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ghcpick.constants import MAX_FILE_SIZE
from ghcpick.exceptions import FileOperationError
from ghcpick.utils.logger import get_logger

logger = get_logger("filesystem")

PathLike = Union[str, Path]


def _validated_file(path: Path) -> Path:
    """Ensure ``path`` exists and is a regular file, and resolve it."""
    if not path.exists():
        raise FileOperationError(
            f"File not found: {path}",
            file_path=str(path),
            operation="read",
        )
    if not path.is_file():
        raise FileOperationError(
            f"Not a file: {path}",
            file_path=str(path),
            operation="read",
        )
    return path.resolve()


def safe_read_file(
    file_path: PathLike,
    *,
    max_size: Optional[int] = MAX_FILE_SIZE,
    encoding: str = "utf-8",
) -> str:
    """Safely read a text file with optional size limits.

    Args:
        file_path: Path to the file.
        max_size: Maximum allowed file size in bytes (None disables limit).
        encoding: Text encoding.

    Returns:
        File contents as a string.
    """
    path = _validated_file(Path(file_path))
    size = path.stat().st_size

    if max_size is not None and size > max_size:
        raise FileOperationError(
            f"File too large: {size} bytes (max {max_size})",
            file_path=str(path),
            operation="read",
        )

    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOperationError(
            f"Failed to read file: {exc}",
            file_path=str(path),
            operation="read",
            original_error=exc,
        ) from exc


def append_line(file_path: PathLike, line: str) -> None:
    """Append one newline-terminated line to a file, creating it if needed.

    Args:
        file_path: Destination path.
        line: Text to append; must not contain a newline.
    """
    if "\n" in line or "\r" in line:
        raise FileOperationError(
            "Refusing to append a multi-line value",
            file_path=str(file_path),
            operation="append",
        )

    path = Path(file_path)
    try:
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(f"{line}\n")
    except OSError as exc:
        raise FileOperationError(
            f"Failed to append to file: {exc}",
            file_path=str(path),
            operation="append",
            original_error=exc,
        ) from exc

    logger.debug("Appended %r to %s", line, path)
