"""
Presenters for Employee Time Visualizer.

PURPOSE: Testable layer between the ranked summary and the rendered
artifacts.

DESIGN PRINCIPLES:
1. Presenters receive ranked summaries, return view models or bytes
2. Layout is pure geometry; drawing goes through a DrawingSurface
3. Layout and report rows are unit-testable without matplotlib
4. Neither presenter re-sorts or re-aggregates the summary

USAGE:
    chart = ChartPresenter()
    png = chart.render_pie_chart(summaries)

    rows = ReportPresenter().get_rows(summaries)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .config import Config
from .errors import RenderError
from .models import EmployeeSummary
from .palette import RGBColor, assign_colors
from .statistics import StatisticsEngine
from .surface import DrawingSurface, MatplotlibSurface

__all__ = [
    "PieSliceViewModel",
    "LegendRowViewModel",
    "PieChartLayout",
    "ChartPresenter",
    "EmployeeRowViewModel",
    "ReportPresenter",
]

logger = logging.getLogger(__name__)

OUTLINE_COLOR = "black"
TEXT_COLOR = "black"
LABEL_COLOR = "white"

# Failures a drawing backend can raise while creating, drawing or encoding
_BACKEND_ERRORS = (ImportError, OSError, RuntimeError, ValueError)


def _format_percentage(percentage: float) -> str:
    """Format a share with one decimal place, e.g. '23.4%'."""
    return f"{percentage:.1f}%"


@dataclass(frozen=True)
class PieSliceViewModel:
    """One pie sector with its color and on-slice label placement."""

    name: str
    hours: float
    percentage: float
    start_angle: float
    sweep_angle: float
    color: RGBColor
    label_x: float
    label_y: float

    @property
    def show_label(self) -> bool:
        """
        Whether the slice is wide enough for a percentage label.

        Slices at or below the threshold would produce overlapping,
        illegible text, so they rely on the legend alone.

        Returns:
            True when percentage is strictly above
            Config.LABEL_MIN_PERCENTAGE (3%).

        Example:
            >>> slice_vm.percentage
            3.0
            >>> slice_vm.show_label
            False
        """
        return self.percentage > Config.LABEL_MIN_PERCENTAGE

    @property
    def label_text(self) -> str:
        """Percentage label, one decimal place."""
        return _format_percentage(self.percentage)


@dataclass(frozen=True)
class LegendRowViewModel:
    """One legend row: color swatch plus description."""

    name: str
    hours: float
    percentage: float
    color: RGBColor
    x: float
    y: float

    @property
    def text(self) -> str:
        """
        Legend description for the row.

        Returns:
            String like 'Alice (8.0h, 66.7%)'.
        """
        return f"{self.name} ({self.hours:.1f}h, {_format_percentage(self.percentage)})"


@dataclass
class PieChartLayout:
    """Complete pie chart geometry, ready to be drawn on any surface."""

    width: int
    height: int
    center: tuple[float, float]
    radius: float
    title: str
    slices: list[PieSliceViewModel] = field(default_factory=list)
    legend: list[LegendRowViewModel] = field(default_factory=list)

    @property
    def total_sweep(self) -> float:
        """Sum of all sweep angles; 360 within floating-point tolerance."""
        return sum(s.sweep_angle for s in self.slices)


def _default_surface_factory(width: int, height: int) -> DrawingSurface:
    return MatplotlibSurface(width, height, dpi=Config.CHART_DPI)


class ChartPresenter:
    """
    Presenter for the employee time pie chart.

    Lays out slices, labels and legend from the ranked summary, then
    replays the layout onto a DrawingSurface and returns PNG bytes.
    """

    def __init__(
        self,
        statistics: StatisticsEngine | None = None,
        surface_factory: Callable[[int, int], DrawingSurface] | None = None,
    ) -> None:
        """
        Initialize chart presenter with its dependencies.

        Args:
            statistics: Engine used for slice shares. Default: new
                StatisticsEngine.
            surface_factory: Callable taking (width, height) and returning
                a fresh DrawingSurface. Default: MatplotlibSurface.
                Tests inject a recording surface here.

        Example:
            >>> presenter = ChartPresenter()
            >>> png = presenter.render_pie_chart(summaries)
        """
        self.statistics = statistics or StatisticsEngine()
        self.surface_factory = surface_factory or _default_surface_factory

    def layout_pie_chart(self, summaries: Sequence[EmployeeSummary]) -> PieChartLayout:
        """
        Compute slice angles, label positions and legend rows.

        Slices follow the ranked order starting at 0 degrees. The label
        of each slice sits at 0.7 x radius from the center along the
        slice's mid angle. Legend rows stack downward from y=100 in
        25-pixel steps, to the right of the pie.

        Business context: Keeping the geometry separate from drawing lets
        the angle and threshold rules be verified exactly, independent of
        font rendering.

        Args:
            summaries: Ranked employee totals, as returned by
                StatisticsEngine.aggregate().

        Returns:
            PieChartLayout with one slice and one legend row per employee,
            colored by hue rotation in ranked order.

        Raises:
            DegenerateAggregateError: If summaries is empty, the grand
                total is not positive, or any total is negative.

        Example:
            >>> layout = presenter.layout_pie_chart([EmployeeSummary('Solo', 150.0)])
            >>> layout.slices[0].sweep_angle
            360.0
        """
        shares = self.statistics.calculate_slices(summaries)
        colors = assign_colors(len(shares))
        center_x, center_y = Config.chart_center()
        radius = Config.chart_radius()
        legend_x = Config.legend_x()

        layout = PieChartLayout(
            width=Config.CHART_WIDTH,
            height=Config.CHART_HEIGHT,
            center=(center_x, center_y),
            radius=radius,
            title=Config.CHART_TITLE,
        )
        for index, (share, color) in enumerate(zip(shares, colors, strict=True)):
            mid = math.radians(share.mid_angle)
            label_distance = radius * Config.LABEL_RADIUS_FACTOR
            layout.slices.append(
                PieSliceViewModel(
                    name=share.name,
                    hours=share.hours,
                    percentage=share.percentage,
                    start_angle=share.start_angle,
                    sweep_angle=share.sweep_angle,
                    color=color,
                    label_x=center_x + math.cos(mid) * label_distance,
                    label_y=center_y + math.sin(mid) * label_distance,
                )
            )
            layout.legend.append(
                LegendRowViewModel(
                    name=share.name,
                    hours=share.hours,
                    percentage=share.percentage,
                    color=color,
                    x=legend_x,
                    y=Config.LEGEND_START_Y + index * Config.LEGEND_ROW_SPACING,
                )
            )
        return layout

    def draw(self, layout: PieChartLayout, surface: DrawingSurface) -> None:
        """
        Replay a layout onto a drawing surface.

        Draw order: title, then per employee the filled slice, its black
        outline, its label (if shown), the legend swatch with outline and
        the legend text. Labels are centered on their anchor point using
        measured text extents.

        Args:
            layout: Geometry from layout_pie_chart().
            surface: Target surface, already sized to the layout.
        """
        title_width, _ = surface.measure_text(layout.title, size=Config.TITLE_FONT_SIZE, bold=True)
        surface.draw_text(
            layout.title,
            (layout.width - title_width) / 2,
            Config.TITLE_Y,
            size=Config.TITLE_FONT_SIZE,
            color=TEXT_COLOR,
            bold=True,
        )

        for slice_vm, row in zip(layout.slices, layout.legend, strict=True):
            surface.draw_filled_arc(
                layout.center,
                layout.radius,
                slice_vm.start_angle,
                slice_vm.sweep_angle,
                slice_vm.color.hex,
            )
            surface.draw_arc_outline(
                layout.center,
                layout.radius,
                slice_vm.start_angle,
                slice_vm.sweep_angle,
                OUTLINE_COLOR,
            )

            if slice_vm.show_label:
                label_width, label_height = surface.measure_text(
                    slice_vm.label_text, size=Config.LABEL_FONT_SIZE, bold=True
                )
                surface.draw_text(
                    slice_vm.label_text,
                    slice_vm.label_x - label_width / 2,
                    slice_vm.label_y - label_height / 2,
                    size=Config.LABEL_FONT_SIZE,
                    color=LABEL_COLOR,
                    bold=True,
                )

            surface.draw_filled_rect(
                row.x,
                row.y,
                Config.LEGEND_SWATCH_WIDTH,
                Config.LEGEND_SWATCH_HEIGHT,
                row.color.hex,
            )
            surface.draw_rect_outline(
                row.x,
                row.y,
                Config.LEGEND_SWATCH_WIDTH,
                Config.LEGEND_SWATCH_HEIGHT,
                OUTLINE_COLOR,
            )
            surface.draw_text(
                row.text,
                row.x + Config.LEGEND_TEXT_OFFSET_X,
                row.y,
                size=Config.LEGEND_FONT_SIZE,
                color=TEXT_COLOR,
            )

    def render_pie_chart(self, summaries: Sequence[EmployeeSummary]) -> bytes:
        """
        Render the employee time distribution as an 800x600 PNG.

        Business context: The chart gives an at-a-glance view of how total
        hours split across employees; the legend carries exact hours for
        slices too small to label.

        Args:
            summaries: Ranked employee totals.

        Returns:
            PNG image as bytes, suitable for file save.

        Raises:
            DegenerateAggregateError: If the totals cannot form a pie.
                Raised before any surface is created.
            RenderError: If the drawing backend cannot be created (for
                example matplotlib is missing) or fails while drawing or
                encoding.

        Example:
            >>> png = ChartPresenter().render_pie_chart(summaries)
            >>> png[:8] == b'\\x89PNG\\r\\n\\x1a\\n'
            True
        """
        layout = self.layout_pie_chart(summaries)

        try:
            surface = self.surface_factory(layout.width, layout.height)
        except _BACKEND_ERRORS as e:
            raise RenderError(f"Failed to create chart surface: {e}") from e

        try:
            self.draw(layout, surface)
            png = surface.save_png()
        except _BACKEND_ERRORS as e:
            raise RenderError(f"Failed to render pie chart: {e}") from e
        finally:
            surface.close()

        logger.info(f"Pie chart rendered: {len(layout.slices)} slices, {len(png)} bytes")
        return png


@dataclass(frozen=True)
class EmployeeRowViewModel:
    """View model for one row of the HTML report."""

    name: str
    total_hours: float

    @property
    def hours_display(self) -> str:
        """
        Total hours with two decimal places.

        Example:
            >>> EmployeeRowViewModel('Alice', 8.0).hours_display
            '8.00'
        """
        return f"{self.total_hours:.2f}"

    @property
    def is_low_hours(self) -> bool:
        """
        Whether the employee is under the fixed low-hours threshold.

        Returns:
            True when total_hours < Config.LOW_HOURS_THRESHOLD (100).
        """
        return self.total_hours < Config.LOW_HOURS_THRESHOLD

    @property
    def row_class(self) -> str:
        """CSS class for the table row; empty when not flagged."""
        return "low-hours" if self.is_low_hours else ""


class ReportPresenter:
    """Presenter for the ranked HTML report."""

    def get_rows(self, summaries: Sequence[EmployeeSummary]) -> list[EmployeeRowViewModel]:
        """
        Build one report row per employee, preserving ranked order.

        Args:
            summaries: Ranked employee totals.

        Returns:
            Row view models in exactly the input order.
        """
        return [EmployeeRowViewModel(s.name, s.total_hours) for s in summaries]
