"""
Statistics engine for Employee Time Visualizer.

PURPOSE: Aggregate time entries into ranked per-employee totals and derive
pie slice shares from them.
Pure data processing - no visualization, no I/O.

AGGREGATION PIPELINE:
1. Filter: drop soft-deleted entries
2. Group: partition by employee name, remembering first-seen order
3. Reduce: sum interval durations in hours (negative durations included)
4. Order: stable sort by total hours, descending

SLICE MODEL:
- percentage = hours / total * 100
- sweep_angle = hours / total * 360
- start_angle runs from 0 and advances by each sweep (no re-normalization)

USAGE:
    engine = StatisticsEngine()
    summaries = engine.aggregate(entries)
    slices = engine.calculate_slices(summaries)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .errors import DegenerateAggregateError
from .models import EmployeeSummary, TimeEntry

__all__ = ["SliceShare", "StatisticsEngine", "aggregate"]

FULL_CIRCLE_DEGREES = 360.0


@dataclass(frozen=True)
class SliceShare:
    """One employee's share of the grand total, in percent and degrees."""

    name: str
    hours: float
    percentage: float
    start_angle: float
    sweep_angle: float

    @property
    def mid_angle(self) -> float:
        """Angle bisecting the slice, where its label is anchored."""
        return self.start_angle + self.sweep_angle / 2


class StatisticsEngine:
    """
    Calculator for per-employee hour totals and pie chart shares.

    DESIGN:
    - Stateless: Each method operates on provided data
    - Pure: No side effects, only data transformation
    - Deterministic: Ties keep first-seen input order

    TIE-BREAK:
    Employees with equal totals are ranked by the order in which their
    name first appears in the input. No secondary key (such as the name)
    is applied.
    """

    def filter_active(self, entries: Iterable[TimeEntry]) -> list[TimeEntry]:
        """
        Drop soft-deleted entries.

        Args:
            entries: Time entries in source order.

        Returns:
            Entries whose deleted_on is unset, in their original order.

        Example:
            >>> engine = StatisticsEngine()
            >>> engine.filter_active([live, deleted])
            [live]
        """
        return [entry for entry in entries if not entry.is_deleted]

    def aggregate(self, entries: Iterable[TimeEntry]) -> list[EmployeeSummary]:
        """
        Group entries by employee, sum hours, and rank the totals.

        Soft-deleted entries never contribute to a total and never create
        a row. Interval durations are summed as-is: a malformed interval
        (end before start) reduces the employee total instead of being
        rejected or clamped.

        Business context: The ranked summary is the single source of
        truth consumed by both the pie chart and the HTML report.

        Args:
            entries: Time entries in source order, possibly empty and
                possibly containing soft-deleted records.

        Returns:
            One EmployeeSummary per distinct non-deleted employee name,
            sorted by total_hours descending. Equal totals keep the
            first-seen order of their names. Empty list when there is
            nothing to aggregate.

        Example:
            >>> engine = StatisticsEngine()
            >>> engine.aggregate([alice_8h, bob_4h, alice_deleted_22h])
            [EmployeeSummary(name='Alice', total_hours=8.0),
             EmployeeSummary(name='Bob', total_hours=4.0)]
        """
        totals: dict[str, float] = {}
        for entry in self.filter_active(entries):
            totals[entry.employee_name] = (
                totals.get(entry.employee_name, 0.0) + entry.duration_hours
            )

        # dict preserves insertion order and sorted() is stable, so ties
        # stay in first-seen order
        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        return [EmployeeSummary(name=name, total_hours=hours) for name, hours in ranked]

    def total_hours(self, summaries: Sequence[EmployeeSummary]) -> float:
        """Sum of all employee totals."""
        return sum(summary.total_hours for summary in summaries)

    def calculate_slices(self, summaries: Sequence[EmployeeSummary]) -> list[SliceShare]:
        """
        Convert ranked totals into pie slice shares.

        Walks the summaries in the given order with a running start angle
        beginning at 0 degrees. Floating-point drift across slices is
        accepted; the last slice is not stretched to close the circle.

        Business context: The same shares drive the slice geometry, the
        on-slice percentage labels and the legend text, so the chart can
        never disagree with itself.

        Args:
            summaries: Ranked employee totals, as returned by aggregate().

        Returns:
            One SliceShare per summary, in the same order. Sweep angles
            sum to 360 within floating-point tolerance.

        Raises:
            DegenerateAggregateError: If summaries is empty, the grand
                total is zero or negative, or any employee total is
                negative. Percentages would otherwise be undefined or
                slices would sweep backwards.

        Example:
            >>> engine = StatisticsEngine()
            >>> shares = engine.calculate_slices([
            ...     EmployeeSummary('A', 50.0),
            ...     EmployeeSummary('B', 30.0),
            ...     EmployeeSummary('C', 20.0),
            ... ])
            >>> [s.sweep_angle for s in shares]
            [180.0, 108.0, 72.0]
        """
        if not summaries:
            raise DegenerateAggregateError("No employee totals to chart")

        negative = [s.name for s in summaries if s.total_hours < 0]
        if negative:
            raise DegenerateAggregateError(
                f"Negative total hours for {', '.join(repr(n) for n in negative)}"
            )

        grand_total = self.total_hours(summaries)
        if grand_total <= 0:
            raise DegenerateAggregateError(
                f"Total hours is {grand_total:g}; cannot compute shares"
            )

        shares: list[SliceShare] = []
        start_angle = 0.0
        for summary in summaries:
            ratio = summary.total_hours / grand_total
            sweep_angle = ratio * FULL_CIRCLE_DEGREES
            shares.append(
                SliceShare(
                    name=summary.name,
                    hours=summary.total_hours,
                    percentage=ratio * 100,
                    start_angle=start_angle,
                    sweep_angle=sweep_angle,
                )
            )
            start_angle += sweep_angle
        return shares


_default_engine = StatisticsEngine()


def aggregate(entries: Iterable[TimeEntry]) -> list[EmployeeSummary]:
    """
    Aggregate entries with a default engine.

    Shorthand for ``StatisticsEngine().aggregate(entries)``.
    """
    return _default_engine.aggregate(entries)
