"""
Artifact storage for Employee Time Visualizer.

PURPOSE: Write rendered artifacts to the output directory all-or-nothing.

OUTPUT STRUCTURE:
    <output_dir>/
    ├── employee_table.html     # Ranked report (UTF-8)
    └── employee_pie_chart.png  # 800x600 pie chart

COMMIT PROTOCOL:
1. Stage: write every payload to '<name>.tmp' next to its destination
2. Back up: move each existing destination, and each obsolete file, to
   '<name>.bak'
3. Publish: replace each destination with its staged file
4. On success: delete the backups
5. Roll back on any OSError: remove staged files and destinations
   already published by this commit, move the backups back, then raise
   RenderError

Each run overwrites the previous run's artifacts. A file the run no
longer produces is passed as obsolete and removed in the same commit.

USAGE:
    # Production
    store = ArtifactStore("reports")
    store.commit({"employee_table.html": html_bytes})

    # Testing with MockFileSystem
    store = ArtifactStore("/out", filesystem=mock_fs)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from .errors import RenderError
from .filesystem import RealFileSystem

if TYPE_CHECKING:
    from .filesystem import FileSystem

__all__ = ["ArtifactStore"]

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"
BACKUP_SUFFIX = ".bak"


class ArtifactStore:
    """
    All-or-nothing writer for a run's output files.

    DESIGN PRINCIPLES:
    1. Atomic per file: readers never see a half-written artifact
    2. All-or-nothing per commit: a failed commit leaves the previous
       run's artifacts as they were
    3. Logged: every publish and every rollback is recorded
    4. Testable: FileSystem can be injected for mocking

    THREAD SAFETY:
    Not thread-safe. One pipeline run owns one store.
    """

    def __init__(
        self,
        output_dir: str | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            output_dir: Directory receiving the artifacts. Default: the
                current working directory. Created on first commit.
            filesystem: FileSystem implementation. Default: RealFileSystem
        """
        self.output_dir = output_dir or os.curdir
        self._fs: FileSystem = filesystem or RealFileSystem()

    def path_for(self, filename: str) -> str:
        """
        Destination path of an artifact.

        Args:
            filename: Bare file name, e.g. 'employee_table.html'.

        Returns:
            filename joined onto output_dir.
        """
        return os.path.join(self.output_dir, filename)

    def _discard(self, paths: list[str]) -> None:
        """
        Remove files left by a failed commit.

        Removal failures are logged and do not mask the original error.
        """
        for path in paths:
            if not self._fs.exists(path):
                continue
            try:
                self._fs.remove(path)
            except OSError as e:
                logger.warning(f"Could not remove {path} during rollback: {e}")

    def _restore(self, backups: list[tuple[str, str]]) -> None:
        """
        Move backed-up artifacts of the previous run back into place.

        Restore failures are logged and do not mask the original error.
        """
        for backup_path, destination in backups:
            try:
                self._fs.replace(backup_path, destination)
            except OSError as e:
                logger.warning(f"Could not restore {destination} from {backup_path}: {e}")

    def commit(
        self,
        artifacts: Mapping[str, bytes],
        obsolete: Iterable[str] = (),
    ) -> list[str]:
        """
        Write a set of artifacts so that either all or none are published.

        Business context: A run must never leave a fresh chart next to a
        stale report (or a truncated file) after a disk error, nor a
        previous run's chart next to a report it no longer describes.

        Args:
            artifacts: Mapping of file name to encoded content, published
                in mapping order.
            obsolete: File names from a previous run that this commit
                removes, e.g. the chart when it could not be drawn.
                Names also present in artifacts are ignored.

        Returns:
            Destination paths of the published artifacts, in mapping
            order.

        Raises:
            RenderError: If the output directory cannot be created or any
                write, backup or replace fails. Files staged or published
                by this commit are removed and the previous run's files
                are restored first.

        Example:
            >>> store = ArtifactStore("/out", filesystem=mock_fs)
            >>> store.commit({"a.html": b"<html></html>"}, obsolete=["a.png"])
            ['/out/a.html']
        """
        staged: list[tuple[str, str]] = []
        backups: list[tuple[str, str]] = []
        published: list[str] = []
        try:
            self._fs.makedirs(self.output_dir, exist_ok=True)
            for filename, content in artifacts.items():
                destination = self.path_for(filename)
                temp_path = destination + TEMP_SUFFIX
                staged.append((temp_path, destination))
                self._fs.write_bytes(temp_path, content)

            targets = [destination for _, destination in staged]
            targets += [self.path_for(name) for name in obsolete if name not in artifacts]
            for destination in targets:
                if self._fs.exists(destination):
                    backup_path = destination + BACKUP_SUFFIX
                    self._fs.replace(destination, backup_path)
                    backups.append((backup_path, destination))

            for temp_path, destination in staged:
                self._fs.replace(temp_path, destination)
                published.append(destination)
        except OSError as e:
            logger.error(f"Failed to write artifacts to {self.output_dir}: {e}")
            self._discard([temp for temp, _ in staged] + published)
            self._restore(backups)
            raise RenderError(f"Could not write artifacts: {e}") from e

        self._discard([backup for backup, _ in backups])
        for path in published:
            logger.info(f"Artifact written: {path}")
        for _, destination in backups:
            if destination not in published:
                logger.info(f"Obsolete artifact removed: {destination}")
        return published
