"""
Employee Time Visualizer.

PURPOSE: Turn raw time-tracking intervals into a ranked HTML report and a
pie chart of each employee's share of total hours.

PACKAGE STRUCTURE:
- client.py: HTTP fetch of raw time entries
- models.py: Data models (TimeEntry, EmployeeSummary)
- statistics.py: Aggregation, ranking and slice math
- palette.py: Deterministic hue-rotation colors
- surface.py: Drawing surface abstraction (matplotlib backend)
- presenters.py: Pie chart layout and report view models
- report.py: HTML report markup
- storage.py: Atomic artifact writes
- cli.py: Pipeline orchestration and console entry point

QUICK START:
    # Generate employee_table.html and employee_pie_chart.png
    python -m employee_time_visualizer
"""

from employee_time_visualizer.__version__ import (
    __author__,
    __copyright__,
    __description__,
    __license__,
    __title__,
    __version__,
    __version_date__,
)

__all__ = [
    "__version__",
    "__version_date__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
    "__copyright__",
]
