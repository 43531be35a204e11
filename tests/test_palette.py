"""Tests for palette module."""

from __future__ import annotations

import pytest

from employee_time_visualizer.palette import RGBColor, assign_colors, hsv_to_rgb


class TestHsvToRgb:
    """Tests for the six-sector HSV conversion."""

    @pytest.mark.parametrize(
        ("hue", "expected"),
        [
            (0.0, RGBColor(229, 68, 68)),
            (60.0, RGBColor(229, 229, 68)),
            (120.0, RGBColor(68, 229, 68)),
            (180.0, RGBColor(68, 229, 229)),
            (240.0, RGBColor(68, 68, 229)),
            (300.0, RGBColor(229, 68, 229)),
        ],
    )
    def test_sector_boundaries(self, hue: float, expected: RGBColor) -> None:
        """Verifies the six primary and secondary hues at s=0.7, v=0.9.

        Business context:
        Chart colors must stay byte-identical across runs and releases,
        so the conversion is pinned at every sector boundary.

        Arrangement:
        Hue at each multiple of 60 degrees.

        Action:
        Convert with the chart's saturation and value.

        Assertion Strategy:
        Validates exact 8-bit channels.
        """
        assert hsv_to_rgb(hue, 0.7, 0.9) == expected

    def test_mid_sector(self) -> None:
        """Verifies interpolation inside a sector (hue 90, f=0.5)."""
        assert hsv_to_rgb(90.0, 0.7, 0.9) == RGBColor(149, 229, 68)

    def test_truncates_instead_of_rounding(self) -> None:
        """Verifies channels are truncated toward zero.

        Business context:
        0.9 * 255 = 229.5. Rounding would give 230 and shift every
        chart color by one step compared with earlier reports.

        Arrangement:
        Pure red hue at value 0.9.

        Action:
        Convert to RGB.

        Assertion Strategy:
        Validates the dominant channel is 229, not 230.
        """
        assert hsv_to_rgb(0.0, 0.7, 0.9).red == 229

    def test_grey_when_unsaturated(self) -> None:
        """Verifies zero saturation gives equal channels."""
        color = hsv_to_rgb(200.0, 0.0, 1.0)

        assert color.red == color.green == color.blue == 255

    def test_black_at_zero_value(self) -> None:
        """Verifies zero value gives black for any hue."""
        assert hsv_to_rgb(45.0, 0.7, 0.0) == RGBColor(0, 0, 0)


class TestRGBColor:
    """Tests for RGBColor helpers."""

    def test_hex_lowercase_padded(self) -> None:
        """Verifies hex output is '#rrggbb' with zero padding."""
        assert RGBColor(229, 68, 68).hex == "#e54444"
        assert RGBColor(0, 10, 255).hex == "#000aff"

    def test_as_unit_tuple(self) -> None:
        """Verifies channels scale to 0.0-1.0."""
        assert RGBColor(255, 0, 51).as_unit_tuple() == pytest.approx((1.0, 0.0, 0.2))


class TestAssignColors:
    """Test suite for assign_colors().

    Categories:
    1. Known outputs for small counts
    2. Determinism and distinctness
    3. Invalid counts
    """

    def test_single_color_is_red(self) -> None:
        """Verifies one employee gets hue 0."""
        assert assign_colors(1) == [RGBColor(229, 68, 68)]

    def test_three_colors(self) -> None:
        """Verifies three employees get red, green, blue.

        Arrangement:
        Count of 3, hue step 120 degrees.

        Action:
        Assign colors.

        Assertion Strategy:
        Validates hex strings in rank order.
        """
        assert [c.hex for c in assign_colors(3)] == ["#e54444", "#44e544", "#4444e5"]

    def test_four_colors(self) -> None:
        """Verifies the 90-degree step hits mid-sector hues."""
        assert assign_colors(4) == [
            RGBColor(229, 68, 68),
            RGBColor(149, 229, 68),
            RGBColor(68, 229, 229),
            RGBColor(149, 68, 229),
        ]

    def test_length_matches_count(self) -> None:
        """Verifies exactly count colors are returned."""
        assert len(assign_colors(17)) == 17

    def test_deterministic(self) -> None:
        """Verifies repeated calls give identical colors.

        Business context:
        The same employees must keep the same colors between runs so
        readers can compare charts.
        """
        assert assign_colors(7) == assign_colors(7)

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 6])
    def test_distinct_for_small_counts(self, count: int) -> None:
        """Verifies colors are pairwise distinct for up to six employees."""
        colors = assign_colors(count)

        assert len(set(colors)) == count

    @pytest.mark.parametrize("count", [0, -1])
    def test_invalid_count_raises(self, count: int) -> None:
        """Verifies counts below one raise ValueError."""
        with pytest.raises(ValueError, match="at least 1"):
            assign_colors(count)
