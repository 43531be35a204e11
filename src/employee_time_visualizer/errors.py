"""
Error kinds for Employee Time Visualizer.

PURPOSE: Named failures that the pipeline handles at the top level.

ERROR POLICY:
- FetchError: source unreachable or returned unusable data. Run ends, no artifacts.
- DegenerateAggregateError: hours cannot be turned into pie slices. Chart skipped.
- RenderError: an artifact could not be produced or written. Run ends, no artifacts.

An empty dataset is not an error; the pipeline checks for it explicitly.
"""

from __future__ import annotations

__all__ = [
    "VisualizerError",
    "FetchError",
    "DegenerateAggregateError",
    "RenderError",
]


class VisualizerError(Exception):
    """Base class for all pipeline failures."""


class FetchError(VisualizerError):
    """
    Raised when time entries cannot be retrieved from the remote source.

    Covers transport failures, timeouts, non-2xx responses, bodies that
    are not JSON, and records missing required fields.
    """


class DegenerateAggregateError(VisualizerError):
    """
    Raised when aggregated hours cannot be laid out as a pie chart.

    The grand total is zero or negative, or a single employee total is
    negative, so percentages and sweep angles would be undefined.
    """


class RenderError(VisualizerError):
    """Raised when an artifact cannot be rendered or written to disk."""
