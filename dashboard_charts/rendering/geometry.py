"""
Plot geometry and value scaling.

This module turns a surface size and a padding box into the plot area used by
the cartesian renderers, maps values onto the vertical pixel axis, assigns
palette colors, and lays out sector angles for the radial renderers.

Coordinates are logical pixels with the origin at the top-left corner of the
surface and y growing downward. The device-scale factor only affects the
number of backing pixels; it never enters the geometry math.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..exceptions import InvalidParameterError

START_ANGLE = -math.pi / 2
FULL_TURN = 2 * math.pi


@dataclass(frozen=True)
class Padding:
    """Margins between the surface edge and the plot area."""

    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> "Padding":
        """Build from a (top, right, bottom, left) tuple."""
        top, right, bottom, left = values
        return cls(top=top, right=right, bottom=bottom, left=left)


@dataclass(frozen=True)
class Geometry:
    """Surface size, padding, and the resulting plot area."""

    surface_width: float
    surface_height: float
    padding: Padding
    plot_width: float
    plot_height: float

    @property
    def plot_left(self) -> float:
        return self.padding.left

    @property
    def plot_top(self) -> float:
        return self.padding.top

    @property
    def plot_right(self) -> float:
        return self.padding.left + self.plot_width

    @property
    def baseline(self) -> float:
        """Bottom edge of the plot area, where value 0 sits."""
        return self.padding.top + self.plot_height


def compute_geometry(width: float, height: float, padding: Padding) -> Geometry:
    """
    Compute the plot area for a surface.

    Surfaces smaller than their padding yield an empty plot area rather than
    a negative one.
    """
    plot_width = max(0.0, width - padding.left - padding.right)
    plot_height = max(0.0, height - padding.top - padding.bottom)
    return Geometry(
        surface_width=width,
        surface_height=height,
        padding=padding,
        plot_width=plot_width,
        plot_height=plot_height,
    )


def effective_scale(device_scale: Optional[float]) -> float:
    """Device-scale factor, falling back to 1 when unknown or invalid."""
    if device_scale is None:
        return 1.0
    try:
        scale = float(device_scale)
    except (TypeError, ValueError):
        return 1.0
    if not math.isfinite(scale) or scale <= 0:
        return 1.0
    return scale


def backing_size(width: float, height: float, device_scale: Optional[float] = None) -> Tuple[int, int]:
    """Backing pixel dimensions of a logical surface at a device scale."""
    scale = effective_scale(device_scale)
    return int(round(width * scale)), int(round(height * scale))


def max_value(values: Sequence[float]) -> float:
    """Largest value, with the domain floor fixed at 0."""
    return max([0.0, *values])


def value_ratio(value: float, maximum: float) -> float:
    """Share of the axis covered by ``value``; 0 on a degenerate domain."""
    if maximum <= 0:
        return 0.0
    return value / maximum


def scale_y(value: float, maximum: float, geometry: Geometry) -> float:
    """Map a value to its vertical pixel position inside the plot area."""
    return geometry.plot_top + geometry.plot_height - value_ratio(value, maximum) * geometry.plot_height


def gridline_levels(maximum: float, geometry: Geometry, divisions: int) -> List[Tuple[float, float]]:
    """
    Horizontal gridlines from the top of the plot down to the baseline.

    Returns:
        ``divisions + 1`` pairs of (y pixel, axis value)
    """
    step_px = geometry.plot_height / divisions
    step_value = maximum / divisions
    return [
        (geometry.plot_top + step_px * i, maximum - step_value * i)
        for i in range(divisions + 1)
    ]


def palette_color(palette: Sequence[str], index: int) -> str:
    """Color for item ``index``, cycling through the palette."""
    if not palette:
        raise InvalidParameterError("palette must contain at least one color")
    return palette[index % len(palette)]


def sector_angles(values: Sequence[float]) -> List[Tuple[float, float]]:
    """
    Consecutive (start, end) angles in radians, starting at 12 o'clock.

    Angles follow the screen convention (y down), so increasing angles run
    clockwise. A zero total gives every sector a zero sweep at the start
    angle.
    """
    total = sum(values)
    angles = []
    current = START_ANGLE
    for value in values:
        sweep = (value / total) * FULL_TURN if total > 0 else 0.0
        angles.append((current, current + sweep))
        current += sweep
    return angles


def radial_center(width: float, size: float) -> Tuple[float, float]:
    """Center of a square radial chart of side ``size`` drawn at the top of a surface."""
    return width / 2, size / 2
