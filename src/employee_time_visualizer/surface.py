"""
Drawing surface abstraction for Employee Time Visualizer.

PURPOSE: Injectable 2D drawing interface so chart layout can be tested
without a raster backend.

DESIGN:
- DrawingSurface Protocol defines the primitives the pie chart needs
- MatplotlibSurface renders them onto an Agg canvas and encodes PNG
- RecordingSurface in tests/conftest.py records calls for assertions

COORDINATES:
Pixels, origin at the top-left corner, y grows downward. Angles are in
degrees, measured from the positive x axis and increasing clockwise on
screen. Text is anchored at its top-left corner. Font sizes are points.

USAGE:
    # Production
    surface = MatplotlibSurface(800, 600)
    surface.draw_filled_arc((400, 300), 200, 0, 90, "#e54444")
    png = surface.save_png()
    surface.close()

    # Tests (RecordingSurface from conftest.py)
    presenter = ChartPresenter(surface_factory=lambda w, h: recording_surface)
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from matplotlib.font_manager import FontProperties

__all__ = ["DrawingSurface", "MatplotlibSurface"]


class DrawingSurface(Protocol):
    """
    Protocol for the drawing operations used by the chart presenter.

    Colors are anything matplotlib accepts as a color spec; the presenter
    passes '#rrggbb' strings and the names 'black' and 'white'.
    """

    def draw_filled_arc(
        self,
        center: tuple[float, float],
        radius: float,
        start_angle: float,
        sweep_angle: float,
        color: str,
    ) -> None:
        """
        Fill a pie sector.

        Args:
            center: (x, y) of the circle center.
            radius: Circle radius in pixels.
            start_angle: Sector start, degrees clockwise from +x.
            sweep_angle: Sector width in degrees. 360 fills the circle.
            color: Fill color.
        """
        ...

    def draw_arc_outline(
        self,
        center: tuple[float, float],
        radius: float,
        start_angle: float,
        sweep_angle: float,
        color: str,
    ) -> None:
        """Stroke the outline of a pie sector (arc plus both radii)."""
        ...

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
        """
        Draw a single line of text with its top-left corner at (x, y).

        Args:
            text: Text to draw.
            x: Left edge in pixels.
            y: Top edge in pixels.
            size: Font size in points.
            color: Text color.
            bold: Use a bold weight.
        """
        ...

    def draw_filled_rect(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        """Fill an axis-aligned rectangle whose top-left corner is (x, y)."""
        ...

    def draw_rect_outline(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        """Stroke an axis-aligned rectangle whose top-left corner is (x, y)."""
        ...

    def measure_text(self, text: str, *, size: float, bold: bool = False) -> tuple[float, float]:
        """
        Measure rendered text.

        Args:
            text: Text to measure.
            size: Font size in points.
            bold: Use a bold weight.

        Returns:
            (width, height) in pixels.
        """
        ...

    def save_png(self) -> bytes:
        """
        Encode the surface as PNG.

        Returns:
            PNG bytes at the surface's pixel dimensions.
        """
        ...

    def close(self) -> None:
        """Release backend resources. The surface is unusable afterwards."""
        ...


class MatplotlibSurface:
    """
    Drawing surface backed by a matplotlib figure on the Agg backend.

    A single axes covers the whole figure with its data limits set to the
    pixel grid and the y axis inverted, so one data unit is one pixel and
    (0, 0) is the top-left corner. In that frame matplotlib's
    counter-clockwise wedge angles appear clockwise on screen.

    Business context: The chart is produced by unattended runs, so it is
    rendered headless on Agg.
    """

    def __init__(
        self,
        width: int,
        height: int,
        dpi: int = 100,
        background: str = "white",
    ) -> None:
        """
        Create a blank canvas.

        Args:
            width: Canvas width in pixels.
            height: Canvas height in pixels.
            dpi: Resolution used to size the figure; the saved PNG is
                exactly width x height pixels.
            background: Canvas fill color.

        Raises:
            ImportError: If matplotlib is not installed.

        Example:
            >>> surface = MatplotlibSurface(800, 600)
            >>> len(surface.save_png()) > 0
            True
        """
        import matplotlib

        matplotlib.use("Agg")  # Non-interactive backend
        import matplotlib.pyplot as plt

        self.width = width
        self.height = height
        self.dpi = dpi
        self.background = background
        self._plt = plt

        self._fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self._fig.patch.set_facecolor(background)
        self._ax = self._fig.add_axes((0.0, 0.0, 1.0, 1.0))
        self._ax.set_xlim(0, width)
        self._ax.set_ylim(height, 0)
        self._ax.axis("off")

    def _font(self, size: float, bold: bool) -> FontProperties:
        from matplotlib.font_manager import FontProperties as Font

        return Font(
            family="sans-serif",
            size=size,
            weight="bold" if bold else "normal",
        )

    def draw_filled_arc(
        self,
        center: tuple[float, float],
        radius: float,
        start_angle: float,
        sweep_angle: float,
        color: str,
    ) -> None:
        from matplotlib.patches import Wedge

        self._ax.add_patch(
            Wedge(
                center,
                radius,
                start_angle,
                start_angle + sweep_angle,
                facecolor=color,
                edgecolor="none",
                antialiased=True,
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
        from matplotlib.patches import Wedge

        self._ax.add_patch(
            Wedge(
                center,
                radius,
                start_angle,
                start_angle + sweep_angle,
                fill=False,
                edgecolor=color,
                linewidth=1.0,
                antialiased=True,
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
        self._ax.text(
            x,
            y,
            text,
            fontproperties=self._font(size, bold),
            color=color,
            ha="left",
            va="top",
        )

    def draw_filled_rect(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        from matplotlib.patches import Rectangle

        self._ax.add_patch(Rectangle((x, y), width, height, facecolor=color, edgecolor="none"))

    def draw_rect_outline(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        from matplotlib.patches import Rectangle

        self._ax.add_patch(
            Rectangle((x, y), width, height, fill=False, edgecolor=color, linewidth=1.0)
        )

    def measure_text(self, text: str, *, size: float, bold: bool = False) -> tuple[float, float]:
        """
        Measure text with the Agg renderer of this figure.

        Returns:
            (width, height) in pixels, height including the descent.
        """
        renderer = self._fig.canvas.get_renderer()
        width, height, _descent = renderer.get_text_width_height_descent(
            text, self._font(size, bold), ismath=False
        )
        return (float(width), float(height))

    def save_png(self) -> bytes:
        buf = io.BytesIO()
        self._fig.savefig(
            buf,
            format="png",
            dpi=self.dpi,
            facecolor=self.background,
            metadata={"Software": None},
        )
        buf.seek(0)
        return buf.read()

    def close(self) -> None:
        self._plt.close(self._fig)
