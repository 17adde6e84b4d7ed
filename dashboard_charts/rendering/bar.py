"""
Vertical bar chart.

One bar per category, each filling 80% of its slot and centered in it, with
rounded top corners and a gradient fading toward the baseline. Values are
printed above the bars and category names below the plot at -45 degrees.
"""

import logging
from typing import Optional, Sequence, Tuple

from ..config import Config
from ..constants import (
    AXIS_LABEL_COLOR,
    AXIS_LABEL_OFFSET,
    BAR_CORNER_RADIUS,
    BAR_GAP_RATIO,
    BAR_GRADIENT_END_ALPHA,
    BAR_PADDING,
    CATEGORY_LABEL_ROTATION,
    CATEGORY_LABEL_SIZE,
    VALUE_LABEL_COLOR,
    VALUE_LABEL_OFFSET,
    VALUE_LABEL_SIZE,
)
from ..formatting import format_value, percentage, truncate_label
from ..models import ChartSummary, LegendEntry, parse_categorical
from .axes import gridline_ops
from .commands import Bar, Clear, RenderResult, Text, vertical_gradient
from .geometry import Padding, compute_geometry, max_value, value_ratio
from .surface import Surface, draw_result, surface_ready

logger = logging.getLogger("dashboard_charts.rendering.bar")


def build_bar_chart(
    data: Sequence,
    color: Optional[str] = None,
    size: Optional[Tuple[float, float]] = None,
    config: Optional[Config] = None
) -> Optional[RenderResult]:
    """
    Lay out a bar chart.

    Args:
        data: CategoricalPoints (or {"key", "value"} dicts)
        color: Base bar color (default: config.bar_color)
        size: Logical (width, height) of the container box
              (default: config.default_width x config.default_height)
        config: Configuration object (default: new Config)

    Returns:
        RenderResult, or None when ``data`` is empty

    Example:
        >>> result = build_bar_chart([{"key": "Acme", "value": 12}], size=(400, 300))
        >>> [op.height for op in result.ops_of(Bar)]
        [200.0]
    """
    config = config if config is not None else Config()
    points = parse_categorical(data)
    if not points:
        logger.debug("Empty bar dataset, nothing to draw")
        return None

    color = color or config.bar_color
    width, height = size if size is not None else (config.default_width, config.default_height)
    geometry = compute_geometry(width, height, Padding.from_tuple(BAR_PADDING))

    values = [p.value for p in points]
    maximum = max_value(values)
    total = sum(values)

    ops = [Clear(width, height, config.background_color)]
    ops.extend(gridline_ops(geometry, maximum, config.gridline_count))

    slot = geometry.plot_width / len(points)
    gap = slot * BAR_GAP_RATIO
    bar_width = slot - gap

    for i, point in enumerate(points):
        x = geometry.plot_left + slot * i + gap / 2
        bar_height = value_ratio(point.value, maximum) * geometry.plot_height
        y = geometry.baseline - bar_height

        ops.append(Bar(
            x=x,
            y=y,
            width=bar_width,
            height=bar_height,
            radius=min(BAR_CORNER_RADIUS, bar_width / 2, bar_height),
            fill=vertical_gradient(color, 1.0, BAR_GRADIENT_END_ALPHA, y, y + bar_height)
        ))
        ops.append(Text(
            x + bar_width / 2, y - VALUE_LABEL_OFFSET,
            format_value(point.value),
            VALUE_LABEL_COLOR, VALUE_LABEL_SIZE,
            ha="center", va="bottom", weight="bold"
        ))

    for i, point in enumerate(points):
        x = geometry.plot_left + slot * i + gap / 2 + bar_width / 2
        ops.append(Text(
            x, geometry.baseline + AXIS_LABEL_OFFSET,
            truncate_label(_category_name(point.key, i), config.label_max_length),
            AXIS_LABEL_COLOR, CATEGORY_LABEL_SIZE,
            ha="right", va="top", rotation=CATEGORY_LABEL_ROTATION
        ))

    legend = [
        LegendEntry(
            label=_category_name(point.key, i),
            value=point.value,
            color=color,
            percentage=percentage(point.value, total)
        )
        for i, point in enumerate(points)
    ]

    if maximum == 0:
        logger.debug("Bar dataset has no positive values, bars drawn at zero height")

    return RenderResult(
        kind="bar",
        width=width,
        height=height,
        ops=ops,
        legend=legend,
        summary=ChartSummary(total=total, max_value=maximum),
        geometry=geometry
    )


def _category_name(key: Optional[str], index: int) -> str:
    return key or f"Item {index + 1}"


class BarRenderer:
    """
    Bar chart renderer bound to a base color.

    The surface is resized to the container box on every render; with no
    box the surface's current logical size is used.
    """

    kind = "bar"

    def __init__(self, color: Optional[str] = None, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.color = color or self.config.bar_color

    def build(self, dataset: Sequence, size: Optional[Tuple[float, float]] = None) -> Optional[RenderResult]:
        return build_bar_chart(dataset, self.color, size, self.config)

    def render(
        self,
        dataset: Sequence,
        surface: Optional[Surface],
        size: Optional[Tuple[float, float]] = None
    ) -> Optional[RenderResult]:
        if not surface_ready(surface, self.kind):
            return None
        return draw_result(surface, self.build(dataset, size or surface.size))
