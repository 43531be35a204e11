"""
Data models for Employee Time Visualizer.

PURPOSE: Type-safe dataclasses representing the core domain entities.

MODEL HIERARCHY:
- TimeEntry: One recorded work interval, as delivered by the time source
- EmployeeSummary: Total hours for one employee, derived by aggregation

SERIALIZATION:
TimeEntry reads and writes the source's JSON field names:
    EmployeeName, StarTimeUtc, EndTimeUtc, EntryNotes, DeletedOn
The source spells the start field "StarTimeUtc"; "StartTimeUtc" is also
accepted when reading. Timestamps are ISO 8601; naive values are UTC.

USAGE:
    entry = TimeEntry.from_dict(raw_json_object)
    entry.duration_hours
    summary = EmployeeSummary(name="Alice", total_hours=8.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

__all__ = ["TimeEntry", "EmployeeSummary", "parse_timestamp"]

SECONDS_PER_HOUR = 3600.0


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an ISO 8601 timestamp into a timezone-aware UTC datetime.

    Accepts a trailing 'Z' as well as explicit offsets. Naive timestamps
    are interpreted as UTC, since the time source reports UTC without
    an offset.

    Args:
        value: ISO 8601 string, e.g. '2022-02-22T10:47:00' or
            '2022-02-22T10:47:00Z'.

    Returns:
        Aware datetime converted to UTC.

    Raises:
        ValueError: If value is not a string or is not ISO 8601.

    Example:
        >>> parse_timestamp('2022-02-22T10:47:00Z').hour
        10
    """
    if not isinstance(value, str) or not value:
        raise ValueError(f"Expected ISO 8601 timestamp, got {value!r}")
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


@dataclass(frozen=True)
class TimeEntry:
    """
    One worked interval for an employee.

    LIFECYCLE:
    1. Fetched from the time source as a JSON object
    2. Parsed once via from_dict()
    3. Read by the aggregator; never mutated

    SOFT DELETE:
    A non-null deleted_on marks the entry as logically removed. Deleted
    entries stay in the fetched list and are skipped by aggregation.

    MALFORMED INTERVALS:
    end_utc < start_utc is not rejected here; duration_hours is then
    negative and aggregation sums it as-is.
    """

    employee_name: str
    start_utc: datetime
    end_utc: datetime
    notes: str = ""
    deleted_on: datetime | None = None

    @property
    def duration_hours(self) -> float:
        """
        Length of the interval in hours, fractional part retained.

        Returns:
            (end_utc - start_utc) in hours. Negative for malformed
            intervals.

        Example:
            >>> entry = TimeEntry('Alice', nine_am, five_pm)
            >>> entry.duration_hours
            8.0
        """
        return (self.end_utc - self.start_utc).total_seconds() / SECONDS_PER_HOUR

    @property
    def is_deleted(self) -> bool:
        """True when the entry carries a soft-delete timestamp."""
        return self.deleted_on is not None

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize entry to a dictionary using the source's field names.

        Returns:
            Dict with EmployeeName, StarTimeUtc, EndTimeUtc, EntryNotes and
            DeletedOn keys; timestamps as ISO 8601 strings, DeletedOn None
            when the entry is not deleted.

        Example:
            >>> TimeEntry.from_dict(entry.to_dict()) == entry
            True
        """
        return {
            "EmployeeName": self.employee_name,
            "StarTimeUtc": self.start_utc.isoformat(),
            "EndTimeUtc": self.end_utc.isoformat(),
            "EntryNotes": self.notes,
            "DeletedOn": self.deleted_on.isoformat() if self.deleted_on else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TimeEntry:
        """
        Deserialize an entry from a time-source JSON object.

        Handles the source's 'StarTimeUtc' spelling and the corrected
        'StartTimeUtc' key. A null EmployeeName or EntryNotes becomes an
        empty string; any other EmployeeName value is converted with str().

        Args:
            data: JSON object as returned by the time source.

        Returns:
            TimeEntry with parsed, UTC-aware timestamps.

        Raises:
            ValueError: If a start or end timestamp is missing or not
                ISO 8601, or DeletedOn is present but unparseable.

        Example:
            >>> entry = TimeEntry.from_dict({
            ...     'EmployeeName': 'Alice',
            ...     'StarTimeUtc': '2022-02-22T09:00:00',
            ...     'EndTimeUtc': '2022-02-22T17:00:00',
            ...     'EntryNotes': '',
            ...     'DeletedOn': None,
            ... })
            >>> entry.duration_hours
            8.0
        """
        start_raw = data.get("StarTimeUtc", data.get("StartTimeUtc"))
        deleted_raw = data.get("DeletedOn")
        name = data.get("EmployeeName")
        return cls(
            employee_name="" if name is None else str(name),
            start_utc=parse_timestamp(start_raw),
            end_utc=parse_timestamp(data.get("EndTimeUtc")),
            notes=data.get("EntryNotes") or "",
            deleted_on=parse_timestamp(deleted_raw) if deleted_raw else None,
        )


@dataclass(frozen=True)
class EmployeeSummary:
    """
    Aggregated hours worked by one employee.

    Computed once per run from the full entry list and consumed read-only
    by both the chart and the report. Within a ranked summary list names
    are unique and totals are in descending order.
    """

    name: str
    total_hours: float
