"""
Pytest configuration and shared fixtures for Employee Time Visualizer tests.

This module contains:
- MockFileSystem: In-memory filesystem with injectable failures
- RecordingSurface: DrawingSurface that records every call
- make_entry: Factory for TimeEntry objects on a fixed day
- Shared fixtures available to all test modules
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from employee_time_visualizer.models import TimeEntry

BASE_DAY = datetime(2022, 2, 22, tzinfo=UTC)
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class MockFileSystem:
    """
    In-memory file system for testing.

    Simulates a file system using dictionaries:
    - _files: dict mapping path -> content (bytes)
    - _dirs: set of directory paths
    - _fail: dict mapping (operation, path) -> (OSError message, calls left)

    FEATURES:
    - No actual I/O operations
    - Easy to inspect state
    - Failure injection per operation and path
    """

    def __init__(self) -> None:
        """
        Initialize empty mock file system.

        Business context: Mock filesystem enables testing artifact commits,
        including mid-commit failures, without disk I/O.

        Example:
            >>> fs = MockFileSystem()
            >>> fs.list_files()
            []
        """
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = set()
        self._fail: dict[tuple[str, str], tuple[str, int | None]] = {}

    def fail_on(
        self,
        operation: str,
        path: str,
        message: str = "simulated failure",
        times: int | None = None,
    ) -> None:
        """
        Make one operation on one path raise OSError.

        Args:
            operation: 'write_bytes', 'replace', 'remove' or 'makedirs'.
                For 'replace' the path is the destination.
            path: Path that triggers the failure.
            message: OSError message.
            times: Number of calls that fail before the operation works
                again. Default: every call fails.

        Example:
            >>> fs.fail_on("write_bytes", "/out/chart.png.tmp")
            >>> fs.fail_on("replace", "/out/chart.png", times=1)
        """
        self._fail[(operation, path)] = (message, times)

    def _check(self, operation: str, path: str) -> None:
        key = (operation, path)
        if key not in self._fail:
            return
        message, remaining = self._fail[key]
        if remaining is not None:
            if remaining <= 0:
                return
            self._fail[key] = (message, remaining - 1)
        raise OSError(message)

    def exists(self, path: str) -> bool:
        return path in self._files or path in self._dirs

    def makedirs(self, path: str, exist_ok: bool = False) -> None:
        """
        Create mock directory and parent directories.

        Raises:
            OSError: If directory exists and exist_ok is False, or a
                failure was injected for this path.
        """
        self._check("makedirs", path)
        if path in self._dirs:
            if not exist_ok:
                raise OSError(f"Directory exists: {path}")
            return

        parts = path.rstrip("/").split("/")
        for i in range(1, len(parts) + 1):
            parent = "/".join(parts[:i])
            if parent:
                self._dirs.add(parent)

    def write_bytes(self, path: str, content: bytes) -> None:
        self._check("write_bytes", path)
        self._files[path] = content

    def replace(self, src: str, dst: str) -> None:
        self._check("replace", dst)
        if src not in self._files:
            raise FileNotFoundError(f"No such file: {src}")
        self._files[dst] = self._files.pop(src)

    def remove(self, path: str) -> None:
        self._check("remove", path)
        if path not in self._files:
            raise FileNotFoundError(f"No such file: {path}")
        del self._files[path]

    # =========================================================================
    # TEST HELPERS
    # =========================================================================

    def get_file(self, path: str) -> bytes | None:
        """Return file content, or None when the file doesn't exist."""
        return self._files.get(path)

    def set_file(self, path: str, content: bytes) -> None:
        """Create or overwrite a file directly, bypassing failure injection."""
        self._files[path] = content

    def list_files(self) -> list[str]:
        """Return all file paths, sorted."""
        return sorted(self._files)


class RecordingSurface:
    """
    DrawingSurface that records calls instead of rasterizing.

    Text measurement is deterministic: 6 px per character wide and
    12 px tall regardless of font, so label centering can be asserted
    exactly.

    Attributes:
        calls: List of (method_name, kwargs) tuples in call order.
        closed: True once close() has been called.
    """

    CHAR_WIDTH = 6.0
    LINE_HEIGHT = 12.0

    def __init__(self, width: int = 800, height: int = 600) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.closed = False

    def draw_filled_arc(
        self,
        center: tuple[float, float],
        radius: float,
        start_angle: float,
        sweep_angle: float,
        color: str,
    ) -> None:
        self.calls.append(
            (
                "draw_filled_arc",
                {
                    "center": center,
                    "radius": radius,
                    "start_angle": start_angle,
                    "sweep_angle": sweep_angle,
                    "color": color,
                },
            )
        )

    def draw_arc_outline(
        self,
        center: tuple[float, float],
        radius: float,
        start_angle: float,
        sweep_angle: float,
        color: str,
    ) -> None:
        self.calls.append(
            (
                "draw_arc_outline",
                {
                    "center": center,
                    "radius": radius,
                    "start_angle": start_angle,
                    "sweep_angle": sweep_angle,
                    "color": color,
                },
            )
        )

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        size: float,
        color: str,
        bold: bool = False,
    ) -> None:
        self.calls.append(
            ("draw_text", {"text": text, "x": x, "y": y, "size": size, "color": color, "bold": bold})
        )

    def draw_filled_rect(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        self.calls.append(
            ("draw_filled_rect", {"x": x, "y": y, "width": width, "height": height, "color": color})
        )

    def draw_rect_outline(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        self.calls.append(
            ("draw_rect_outline", {"x": x, "y": y, "width": width, "height": height, "color": color})
        )

    def measure_text(self, text: str, *, size: float, bold: bool = False) -> tuple[float, float]:
        return (len(text) * self.CHAR_WIDTH, self.LINE_HEIGHT)

    def save_png(self) -> bytes:
        self.calls.append(("save_png", {}))
        return PNG_SIGNATURE + b"recorded"

    def close(self) -> None:
        self.closed = True

    def calls_named(self, name: str) -> list[dict[str, Any]]:
        """Return kwargs of every recorded call to the given method."""
        return [kwargs for method, kwargs in self.calls if method == name]

    def texts(self) -> list[str]:
        """Return every drawn text string in call order."""
        return [kwargs["text"] for kwargs in self.calls_named("draw_text")]


def make_entry(
    name: str,
    start_hour: float,
    end_hour: float,
    *,
    deleted: bool = False,
    notes: str = "",
) -> TimeEntry:
    """
    Build a TimeEntry on a fixed day from hour offsets.

    Hours may exceed 24 to span several days; end_hour < start_hour
    produces a malformed (negative) interval.

    Args:
        name: Employee name.
        start_hour: Start, in hours after midnight of BASE_DAY.
        end_hour: End, in hours after midnight of BASE_DAY.
        deleted: Set deleted_on to the end of BASE_DAY.
        notes: Entry notes.

    Returns:
        TimeEntry with UTC-aware timestamps.

    Example:
        >>> make_entry("Alice", 9, 17).duration_hours
        8.0
    """
    return TimeEntry(
        employee_name=name,
        start_utc=BASE_DAY + timedelta(hours=start_hour),
        end_utc=BASE_DAY + timedelta(hours=end_hour),
        notes=notes,
        deleted_on=BASE_DAY + timedelta(hours=23, minutes=59) if deleted else None,
    )


def entry_json(
    name: object,
    start: str | None,
    end: str | None,
    deleted_on: str | None = None,
    notes: str | None = "",
) -> dict[str, Any]:
    """Build a time-source JSON record with the source's field names."""
    return {
        "EmployeeName": name,
        "StarTimeUtc": start,
        "EndTimeUtc": end,
        "EntryNotes": notes,
        "DeletedOn": deleted_on,
    }


@pytest.fixture
def mock_fs() -> MockFileSystem:
    """
    Provide a fresh in-memory filesystem for each test.

    Returns:
        Empty MockFileSystem instance.

    Example:
        >>> def test_store(mock_fs):
        ...     store = ArtifactStore("/out", filesystem=mock_fs)
    """
    return MockFileSystem()


@pytest.fixture
def recording_surface() -> RecordingSurface:
    """Provide a fresh RecordingSurface sized to the default chart."""
    return RecordingSurface()


@pytest.fixture
def alice_bob_entries() -> list[TimeEntry]:
    """
    Alice works 9-17, Bob 9-13, and Alice has a deleted 1-23 entry.

    Aggregates to Alice 8.0h, Bob 4.0h; the deleted 22h never counts.
    """
    return [
        make_entry("Alice", 9, 17),
        make_entry("Bob", 9, 13),
        make_entry("Alice", 1, 23, deleted=True),
    ]
