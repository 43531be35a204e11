"""
Configuration for Employee Time Visualizer.

PURPOSE: Centralized configuration constants.
All tunable values live here - modify this file to change behavior.

CONFIGURATION CATEGORIES:
- API: Source endpoint, static access code, request timeout
- Output: Artifact file names
- Chart: Canvas size, label and legend geometry, fonts
- Palette: Fixed saturation/value for hue rotation
- Report: Low-hours threshold

No environment variables are read; every run behaves identically.

USAGE:
    from employee_time_visualizer.config import Config
    width = Config.CHART_WIDTH
    cx, cy = Config.chart_center()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Config:
    """
    Immutable configuration container for Employee Time Visualizer.

    DESIGN: Frozen dataclass ensures configuration immutability at runtime.
    All values are class-level constants - no instance creation needed.

    CHART LAYOUT (pixels, origin top-left, y grows downward):
        +--------------------------------------------------+
        |        Employee Time Distribution (y=20)         |
        |                                   [#] Alice ...  |  <- y=100
        |            ( pie, r=200 )         [#] Bob ...    |  <- y=125
        |           center (400, 300)                      |
        +--------------------------------------------------+
    """

    # =========================================================================
    # API CONFIGURATION
    # =========================================================================
    API_URL: ClassVar[str] = "https://rc-vault-fap-live-1.azurewebsites.net/api/gettimeentries"
    API_CODE: ClassVar[str] = "vO17RnE8vuzXzPJo5eaLLjXjmRW07law99QTD90zat9FfOQJKKUcgQ=="
    """Static access token, sent as the ``code`` query parameter."""

    REQUEST_TIMEOUT_SECONDS: ClassVar[float] = 30.0

    # =========================================================================
    # OUTPUT CONFIGURATION
    # =========================================================================
    HTML_FILENAME: ClassVar[str] = "employee_table.html"
    CHART_FILENAME: ClassVar[str] = "employee_pie_chart.png"

    # =========================================================================
    # CHART CONFIGURATION
    # =========================================================================
    CHART_WIDTH: ClassVar[int] = 800
    CHART_HEIGHT: ClassVar[int] = 600
    CHART_DPI: ClassVar[int] = 100
    CHART_TITLE: ClassVar[str] = "Employee Time Distribution"
    TITLE_Y: ClassVar[float] = 20.0
    TITLE_FONT_SIZE: ClassVar[float] = 16.0
    LABEL_FONT_SIZE: ClassVar[float] = 10.0
    LEGEND_FONT_SIZE: ClassVar[float] = 10.0

    LABEL_MIN_PERCENTAGE: ClassVar[float] = 3.0
    """Slices at or below this share get no on-slice label (strict >)."""

    LABEL_RADIUS_FACTOR: ClassVar[float] = 0.7

    LEGEND_OFFSET_X: ClassVar[float] = 50.0
    """Gap between the right edge of the pie and the legend column."""

    LEGEND_START_Y: ClassVar[float] = 100.0
    LEGEND_ROW_SPACING: ClassVar[float] = 25.0
    LEGEND_SWATCH_WIDTH: ClassVar[float] = 20.0
    LEGEND_SWATCH_HEIGHT: ClassVar[float] = 15.0
    LEGEND_TEXT_OFFSET_X: ClassVar[float] = 25.0

    # =========================================================================
    # PALETTE CONFIGURATION
    # =========================================================================
    PALETTE_SATURATION: ClassVar[float] = 0.7
    PALETTE_VALUE: ClassVar[float] = 0.9

    # =========================================================================
    # REPORT CONFIGURATION
    # =========================================================================
    LOW_HOURS_THRESHOLD: ClassVar[float] = 100.0
    """Rows with fewer total hours are flagged in the HTML report."""

    REPORT_TITLE: ClassVar[str] = "Employee Time Report"
    REPORT_CAPTION: ClassVar[str] = "Employees ordered by total time worked (descending)"

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @classmethod
    def chart_center(cls) -> tuple[float, float]:
        """
        Calculate the pie chart center point on the canvas.

        The pie is centered on the canvas; the legend sits to its right.

        Returns:
            (x, y) in pixels. With defaults: (400.0, 300.0).

        Example:
            >>> Config.chart_center()
            (400.0, 300.0)
        """
        return (cls.CHART_WIDTH / 2, cls.CHART_HEIGHT / 2)

    @classmethod
    def chart_radius(cls) -> float:
        """
        Calculate the pie radius as a third of the shorter canvas side.

        Integer division keeps the radius on whole pixels, so slice
        outlines land on the same pixels on every run.

        Returns:
            Radius in pixels. With defaults: 200.0.

        Example:
            >>> Config.chart_radius()
            200.0
        """
        return float(min(cls.CHART_WIDTH, cls.CHART_HEIGHT) // 3)

    @classmethod
    def legend_x(cls) -> float:
        """
        Calculate the left edge of the legend column.

        Returns:
            X coordinate in pixels. With defaults: 650.0.
        """
        center_x, _ = cls.chart_center()
        return center_x + cls.chart_radius() + cls.LEGEND_OFFSET_X
