"""Gridlines and value-axis labels shared by the bar and line charts."""

from typing import List

from ..constants import (
    AXIS_LABEL_COLOR,
    AXIS_LABEL_OFFSET,
    AXIS_LABEL_SIZE,
    GRIDLINE_COLOR,
    GRIDLINE_WIDTH,
)
from ..formatting import round_half_up
from .commands import DrawOp, Line, Text
from .geometry import Geometry, gridline_levels


def gridline_ops(geometry: Geometry, maximum: float, divisions: int) -> List[DrawOp]:
    """
    Horizontal gridlines across the plot, labelled with rounded values.

    All lines come first, then the labels, right-aligned just left of the
    plot area.
    """
    levels = gridline_levels(maximum, geometry, divisions)
    ops: List[DrawOp] = [
        Line(geometry.plot_left, y, geometry.plot_right, y, GRIDLINE_COLOR, GRIDLINE_WIDTH)
        for y, _value in levels
    ]
    ops.extend(
        Text(
            geometry.plot_left - AXIS_LABEL_OFFSET, y,
            str(round_half_up(value)),
            AXIS_LABEL_COLOR, AXIS_LABEL_SIZE,
            ha="right", va="center"
        )
        for y, value in levels
    )
    return ops
