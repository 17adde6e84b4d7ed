"""Tests for plot geometry, value scaling and palette/angle helpers."""
from __future__ import annotations

import math

import pytest

from dashboard_charts.constants import BAR_PADDING, LINE_PADDING
from dashboard_charts.exceptions import InvalidParameterError
from dashboard_charts.rendering.geometry import (
    START_ANGLE,
    Padding,
    backing_size,
    compute_geometry,
    effective_scale,
    gridline_levels,
    max_value,
    palette_color,
    scale_y,
    sector_angles,
)


def test_compute_geometry_bar_padding() -> None:
    """Plot area is the surface minus the bar chart padding."""
    geometry = compute_geometry(400, 300, Padding.from_tuple(BAR_PADDING))

    assert geometry.plot_width == 320
    assert geometry.plot_height == 200
    assert geometry.plot_left == 60
    assert geometry.plot_top == 20
    assert geometry.plot_right == 380
    assert geometry.baseline == 220


def test_compute_geometry_line_padding() -> None:
    geometry = compute_geometry(400, 300, Padding.from_tuple(LINE_PADDING))

    assert geometry.plot_width == 320
    assert geometry.plot_height == 230
    assert geometry.baseline == 250


def test_compute_geometry_clamps_small_surface() -> None:
    """A surface smaller than its padding has an empty plot area."""
    geometry = compute_geometry(50, 40, Padding.from_tuple(BAR_PADDING))

    assert geometry.plot_width == 0
    assert geometry.plot_height == 0


def test_scale_y_maps_values_into_plot() -> None:
    geometry = compute_geometry(400, 300, Padding.from_tuple(BAR_PADDING))

    assert scale_y(100, 100, geometry) == geometry.plot_top
    assert scale_y(50, 100, geometry) == 120
    assert scale_y(0, 100, geometry) == geometry.baseline


def test_scale_y_degenerate_domain_sits_on_baseline() -> None:
    """With no positive values every point maps to the baseline."""
    geometry = compute_geometry(400, 300, Padding.from_tuple(BAR_PADDING))

    assert scale_y(0, 0, geometry) == geometry.baseline
    assert scale_y(-5, max_value([-5]), geometry) == geometry.baseline


def test_max_value_floor_is_zero() -> None:
    assert max_value([]) == 0
    assert max_value([-3, -1]) == 0
    assert max_value([3, 9, 4]) == 9


def test_gridline_levels_top_to_bottom() -> None:
    geometry = compute_geometry(400, 300, Padding.from_tuple(BAR_PADDING))
    levels = gridline_levels(100, geometry, 5)

    assert len(levels) == 6
    assert levels[0] == (20, 100)
    assert levels[-1] == (220, 0)
    assert [value for _y, value in levels] == pytest.approx([100, 80, 60, 40, 20, 0])


def test_palette_color_cycles() -> None:
    """Palette lookups wrap around: indices 0..4 on 3 colors give 0,1,2,0,1."""
    palette = ["#a", "#b", "#c"]

    colors = [palette_color(palette, i) for i in range(5)]

    assert colors == ["#a", "#b", "#c", "#a", "#b"]


def test_palette_color_empty_palette_raises() -> None:
    with pytest.raises(InvalidParameterError):
        palette_color([], 0)


def test_sector_angles_cover_full_turn() -> None:
    """Sweeps are contiguous, start at 12 o'clock and sum to 2*pi."""
    angles = sector_angles([1, 2, 3, 4])

    assert angles[0][0] == pytest.approx(-math.pi / 2)
    for (_s0, end), (start, _e1) in zip(angles, angles[1:]):
        assert start == pytest.approx(end)
    total_sweep = sum(end - start for start, end in angles)
    assert total_sweep == pytest.approx(2 * math.pi)
    assert angles[-1][1] == pytest.approx(START_ANGLE + 2 * math.pi)


def test_sector_angles_proportional() -> None:
    angles = sector_angles([1, 3])

    assert angles[0][1] - angles[0][0] == pytest.approx(math.pi / 2)
    assert angles[1][1] - angles[1][0] == pytest.approx(3 * math.pi / 2)


def test_sector_angles_zero_total() -> None:
    """A zero total yields zero sweeps rather than a division error."""
    angles = sector_angles([0, 0, 0])

    assert len(angles) == 3
    assert all(start == end == START_ANGLE for start, end in angles)


@pytest.mark.parametrize("scale", [None, 0, -1, "abc", float("nan"), float("inf")])
def test_effective_scale_falls_back_to_one(scale) -> None:
    assert effective_scale(scale) == 1.0


def test_backing_size_multiplies_by_scale() -> None:
    assert backing_size(640, 320, 2) == (1280, 640)
    assert backing_size(100, 50, 1.5) == (150, 75)
    assert backing_size(100, 50, None) == (100, 50)
