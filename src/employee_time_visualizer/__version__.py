"""Version information for employee-time-visualizer."""

__version__ = "1.0.0"
__version_date__ = "2026-10-16"

__title__ = "employee_time_visualizer"
__description__ = "Ranked HTML report and pie chart of hours worked per employee"

__author__ = "Mark Grandau"

__license__ = "MIT"
__copyright__ = "Copyright 2026 Mark Grandau"

__all__ = [
    "__version__",
    "__version_date__",
    "__title__",
    "__description__",
    "__author__",
    "__license__",
    "__copyright__",
]
