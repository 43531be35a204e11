"""
FileSystem abstraction for Employee Time Visualizer.

PURPOSE: Injectable file system interface for testability.
Allows tests to exercise artifact writes, including failures, without
touching the disk.

DESIGN:
- Protocol defines the interface
- RealFileSystem uses actual os operations
- MockFileSystem in tests/conftest.py stores data in memory for tests

USAGE:
    # Production
    fs = RealFileSystem()
    store = ArtifactStore(output_dir, filesystem=fs)

    # Tests (MockFileSystem from conftest.py)
    store = ArtifactStore("/out", filesystem=mock_fs)  # pytest fixture
"""

from __future__ import annotations

import os
from typing import Protocol

__all__ = ["FileSystem", "RealFileSystem"]


class FileSystem(Protocol):
    """
    Protocol for file system operations.

    All paths are strings. Implementations include RealFileSystem for
    production and MockFileSystem for testing.

    Business context: Artifact writes must be all-or-nothing. Injecting
    the file system lets tests force a failure on any single call and
    check that nothing partial is left behind.
    """

    def exists(self, path: str) -> bool:
        """
        Check if path exists (file or directory).

        Args:
            path: Path to check.

        Returns:
            True if the path exists, False otherwise. Never raises.
        """
        ...

    def makedirs(self, path: str, exist_ok: bool = False) -> None:
        """
        Create directory and all parent directories.

        Equivalent to shell `mkdir -p` when exist_ok is True.

        Args:
            path: Path of directory to create.
            exist_ok: If True, don't raise if directory exists.

        Raises:
            OSError: If directory exists and exist_ok is False.
        """
        ...

    def write_bytes(self, path: str, content: bytes) -> None:
        """
        Write bytes to file, replacing any existing content.

        Args:
            path: Path of file to write.
            content: Bytes to write.

        Raises:
            PermissionError: If the file or directory is read-only.
            OSError: If the parent directory doesn't exist.
        """
        ...

    def replace(self, src: str, dst: str) -> None:
        """
        Move src onto dst, overwriting dst if it exists.

        Atomic on POSIX when both paths are on the same file system.

        Args:
            src: Existing file.
            dst: Destination path.

        Raises:
            FileNotFoundError: If src doesn't exist.
        """
        ...

    def remove(self, path: str) -> None:
        """
        Remove a file.

        Args:
            path: File to remove.

        Raises:
            FileNotFoundError: If file doesn't exist.
        """
        ...


class RealFileSystem:
    """
    Real file system implementation using the os module.

    This is the production implementation that performs actual I/O.
    Each method delegates directly to the corresponding os function.
    """

    def exists(self, path: str) -> bool:  # pragma: no cover
        return os.path.exists(path)

    def makedirs(self, path: str, exist_ok: bool = False) -> None:  # pragma: no cover
        os.makedirs(path, exist_ok=exist_ok)

    def write_bytes(self, path: str, content: bytes) -> None:  # pragma: no cover
        """
        Write bytes to file on disk.

        Opens the file in binary write mode, so text payloads must be
        encoded by the caller (UTF-8 for the HTML report).
        """
        with open(path, "wb") as f:
            f.write(content)

    def replace(self, src: str, dst: str) -> None:  # pragma: no cover
        os.replace(src, dst)

    def remove(self, path: str) -> None:  # pragma: no cover
        os.remove(path)
