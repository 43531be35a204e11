"""Tests for errors module."""

from __future__ import annotations

import pytest

from employee_time_visualizer.errors import (
    DegenerateAggregateError,
    FetchError,
    RenderError,
    VisualizerError,
)


class TestErrorHierarchy:
    """Tests for the pipeline's error kinds."""

    @pytest.mark.parametrize("error_cls", [FetchError, DegenerateAggregateError, RenderError])
    def test_subclasses_share_base(self, error_cls: type[Exception]) -> None:
        """Verifies every error kind can be caught as VisualizerError.

        Business context:
        Callers embedding the pipeline can handle all expected failures
        with one except clause while letting real bugs propagate.

        Arrangement:
        Each concrete error class.

        Action:
        Raise it and catch VisualizerError.

        Assertion Strategy:
        Validates the message survives the round trip.
        """
        with pytest.raises(VisualizerError, match="boom"):
            raise error_cls("boom")

    def test_kinds_are_distinct(self) -> None:
        """Verifies a fetch failure is not mistaken for a render failure."""
        assert not issubclass(FetchError, RenderError)
        assert not issubclass(DegenerateAggregateError, RenderError)
        assert not issubclass(RenderError, FetchError)
