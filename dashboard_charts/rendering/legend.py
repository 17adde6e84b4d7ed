"""
Legend panels drawn onto the surface.

The radial renderers always return their legend entries to the caller. When
asked to annotate, they also paint the legend next to the chart: a column
to the right of the pie, a single row below the donut.
"""

from typing import Callable, List, Sequence

from ..constants import (
    LEGEND_GAP,
    LEGEND_LABEL_COLOR,
    LEGEND_LABEL_SIZE,
    LEGEND_ROW_HEIGHT,
    LEGEND_SWATCH_RADIUS,
    LEGEND_SWATCH_SIZE,
    LEGEND_VALUE_COLOR,
    LEGEND_VALUE_SIZE,
    LABEL_MAX_LENGTH,
    ROW_LEGEND_LABEL_LENGTH,
)
from ..formatting import truncate_label
from ..models import LegendEntry
from .commands import DrawOp, Rect, Text


def column_legend_height(count: int) -> float:
    return count * LEGEND_ROW_HEIGHT


def column_legend_ops(
    legend: Sequence[LegendEntry],
    x: float,
    y: float,
    value_text: Callable[[LegendEntry], str],
    max_length: int = LABEL_MAX_LENGTH
) -> List[DrawOp]:
    """
    One row per entry: swatch, label on top, value line underneath.

    Args:
        legend: Entries to draw
        x: Left edge of the panel
        y: Top edge of the panel
        value_text: Formats the secondary line of an entry
        max_length: Labels longer than this are truncated
    """
    ops: List[DrawOp] = []
    text_x = x + LEGEND_SWATCH_SIZE + LEGEND_GAP
    for i, entry in enumerate(legend):
        row_top = y + i * LEGEND_ROW_HEIGHT
        ops.append(Rect(
            x, row_top + (LEGEND_ROW_HEIGHT - LEGEND_SWATCH_SIZE) / 2,
            LEGEND_SWATCH_SIZE, LEGEND_SWATCH_SIZE,
            entry.color, LEGEND_SWATCH_RADIUS
        ))
        ops.append(Text(
            text_x, row_top + LEGEND_ROW_HEIGHT * 0.3,
            truncate_label(entry.label, max_length),
            LEGEND_LABEL_COLOR, LEGEND_LABEL_SIZE,
            ha="left", va="center", weight="medium"
        ))
        ops.append(Text(
            text_x, row_top + LEGEND_ROW_HEIGHT * 0.75,
            value_text(entry),
            LEGEND_VALUE_COLOR, LEGEND_VALUE_SIZE,
            ha="left", va="center"
        ))
    return ops


def row_legend_ops(
    legend: Sequence[LegendEntry],
    x: float,
    y: float,
    item_width: float,
    value_text: Callable[[LegendEntry], str],
    swatch_size: float = 12.0,
    max_length: int = ROW_LEGEND_LABEL_LENGTH
) -> List[DrawOp]:
    """
    Entries side by side: swatch, muted label, emphasized value below it.

    Args:
        legend: Entries to draw
        x: Left edge of the first item
        y: Top edge of the row
        item_width: Horizontal advance per item, gap included
        value_text: Formats the value line of an entry
        swatch_size: Side of the color swatch
        max_length: Labels longer than this are truncated; capped at the
            width an item can hold
    """
    ops: List[DrawOp] = []
    for i, entry in enumerate(legend):
        left = x + i * item_width
        text_x = left + swatch_size + LEGEND_GAP / 2
        ops.append(Rect(left, y + 4, swatch_size, swatch_size, entry.color, swatch_size / 4))
        ops.append(Text(
            text_x, y,
            truncate_label(entry.label, min(max_length, ROW_LEGEND_LABEL_LENGTH)),
            LEGEND_VALUE_COLOR, LEGEND_VALUE_SIZE,
            ha="left", va="top"
        ))
        ops.append(Text(
            text_x, y + LEGEND_VALUE_SIZE + 6,
            value_text(entry),
            LEGEND_LABEL_COLOR, LEGEND_LABEL_SIZE,
            ha="left", va="top", weight="semibold"
        ))
    return ops
