"""
Color assignment for Employee Time Visualizer.

PURPOSE: Derive N visually distinct, deterministic colors for N employees.

HUE ROTATION:
The hue circle is split into N equal steps. Every color shares the same
saturation (0.7) and value (0.9), so only the hue distinguishes slices.

HSV TO RGB:
Standard six-sector conversion. Channel values are truncated to 8-bit
integers (int(), never round()), so a given count always yields the same
bytes as earlier renderings of the chart.

USAGE:
    colors = assign_colors(len(summaries))
    colors[0].hex  # '#e54444'
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .config import Config

__all__ = ["RGBColor", "assign_colors", "hsv_to_rgb"]

HUE_SECTOR_DEGREES = 60.0


@dataclass(frozen=True)
class RGBColor:
    """8-bit RGB color."""

    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        """
        Color as a CSS/matplotlib hex string.

        Returns:
            Lowercase '#rrggbb' string.

        Example:
            >>> RGBColor(229, 68, 68).hex
            '#e54444'
        """
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def as_unit_tuple(self) -> tuple[float, float, float]:
        """Channels scaled to 0.0-1.0, as matplotlib expects for RGB tuples."""
        return (self.red / 255, self.green / 255, self.blue / 255)


def hsv_to_rgb(hue: float, saturation: float, value: float) -> RGBColor:
    """
    Convert an HSV color to 8-bit RGB using the six-sector formula.

    The sector index is floor(hue / 60) mod 6 and f is the fractional
    position inside the sector. Value is scaled to 0-255 first; every
    channel is then truncated toward zero.

    Args:
        hue: Hue in degrees, expected in [0, 360).
        saturation: Saturation in [0, 1].
        value: Brightness in [0, 1].

    Returns:
        RGBColor with truncated channel values.

    Example:
        >>> hsv_to_rgb(0.0, 0.7, 0.9)
        RGBColor(red=229, green=68, blue=68)
        >>> hsv_to_rgb(120.0, 0.7, 0.9)
        RGBColor(red=68, green=229, blue=68)
    """
    sector_position = hue / HUE_SECTOR_DEGREES
    sector = int(math.floor(sector_position)) % 6
    f = sector_position - math.floor(sector_position)

    scaled = value * 255
    v = int(scaled)
    p = int(scaled * (1 - saturation))
    q = int(scaled * (1 - f * saturation))
    t = int(scaled * (1 - (1 - f) * saturation))

    if sector == 0:
        return RGBColor(v, t, p)
    if sector == 1:
        return RGBColor(q, v, p)
    if sector == 2:
        return RGBColor(p, v, t)
    if sector == 3:
        return RGBColor(p, q, v)
    if sector == 4:
        return RGBColor(t, p, v)
    return RGBColor(v, p, q)


def assign_colors(count: int) -> list[RGBColor]:
    """
    Generate evenly spaced hue-rotation colors.

    Color i belongs to the i-th ranked employee. The sequence depends only
    on count, so repeated calls return identical colors.

    Args:
        count: Number of employees. Must be at least 1.

    Returns:
        List of count colors, hues at i * (360 / count) degrees. Pairwise
        distinct for any count up to 6.

    Raises:
        ValueError: If count is less than 1.

    Example:
        >>> [c.hex for c in assign_colors(3)]
        ['#e54444', '#44e544', '#4444e5']
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    hue_step = 360.0 / count
    return [
        hsv_to_rgb((i * hue_step) % 360, Config.PALETTE_SATURATION, Config.PALETTE_VALUE)
        for i in range(count)
    ]
