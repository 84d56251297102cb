"""File system utilities for safe file operations.

This module provides the small set of file system helpers the project
writer needs:
- Atomic file writes
- Directory creation
- Executable permission handling

File: mcpc/utils/files.py
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

class FileError(Exception):
    """Base exception for file operations."""
    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)

class AtomicWriteError(FileError):
    """Raised when atomic write operations fail."""
    pass

def atomic_write(path: Path, content: Union[str, bytes]) -> None:
    """Write content to file atomically using a temporary file.

    Args:
        path: Target file path
        content: Content to write (string or bytes)

    Raises:
        AtomicWriteError: If write operation fails
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise AtomicWriteError(path, f"Failed to create directory {path.parent}: {e}") from e

    # Temporary file lives in the same directory so the rename stays atomic
    try:
        tmp_fd, tmp_name = tempfile.mkstemp(
            dir=str(path.parent),
            prefix=f'.{path.name}.',
            suffix='.tmp'
        )
    except OSError as e:
        raise AtomicWriteError(path, f"Failed to write {path}: {e}") from e
    tmp_path = Path(tmp_name)

    try:
        try:
            if isinstance(content, str):
                content_bytes = content.encode('utf-8')
            else:
                content_bytes = content

            os.write(tmp_fd, content_bytes)
            os.fsync(tmp_fd)
        finally:
            os.close(tmp_fd)

        tmp_path.chmod(0o644)
        tmp_path.replace(path)

    except OSError as e:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            logger.debug(f"Could not remove temporary file {tmp_path}")
        raise AtomicWriteError(path, f"Failed to write {path}: {e}") from e

def ensure_directory(
    path: Path,
    mode: int = 0o755,
    parents: bool = True
) -> None:
    """Ensure a directory exists with proper permissions.

    Args:
        path: Directory path
        mode: Directory permissions
        parents: Whether to create parent directories

    Raises:
        FileError: If directory cannot be created
    """
    try:
        path.mkdir(mode=mode, parents=parents, exist_ok=True)
    except OSError as e:
        raise FileError(path, f"Failed to create directory {path}: {e}") from e

def make_executable(path: Path) -> None:
    """Make a file executable (rwxr-xr-x style bits are added).

    Args:
        path: Path to file

    Raises:
        FileError: If permissions cannot be set
    """
    try:
        mode = path.stat().st_mode
        path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        raise FileError(path, f"Failed to make {path} executable: {e}") from e
