"""
Donut chart: a true ring with a center metric readout.

Each segment is bounded by an outer and an inner radius, so the middle of
the chart is empty. The first entry is the headline: its share of the total
and its label form the center readout returned in the summary.
"""

import logging
from typing import Optional, Sequence, Tuple

from ..config import Config
from ..constants import (
    DONUT_CENTER_LABEL_COLOR,
    DONUT_CENTER_LABEL_SIZE,
    DONUT_CENTER_PERCENT_COLOR,
    DONUT_CENTER_PERCENT_SIZE,
    DONUT_INNER_RATIO,
    DONUT_LEGEND_HEIGHT,
    DONUT_LEGEND_ITEM_WIDTH,
    RADIAL_MARGIN,
    SECTOR_STROKE_COLOR,
    SECTOR_STROKE_WIDTH,
)
from ..formatting import format_label, format_number, percentage
from ..models import ChartSummary, LegendEntry, parse_categorical
from .commands import Clear, RenderResult, Sector, Text
from .geometry import max_value, palette_color, radial_center, sector_angles
from .legend import row_legend_ops
from .surface import Surface, draw_result, surface_ready

logger = logging.getLogger("dashboard_charts.rendering.donut")


def build_donut_chart(
    data: Sequence,
    palette: Optional[Sequence[str]] = None,
    config: Optional[Config] = None,
    annotate: bool = False
) -> Optional[RenderResult]:
    """
    Lay out a donut chart on its fixed square surface.

    Args:
        data: CategoricalPoints (or {"key", "value"} dicts)
        palette: Cyclic segment colors (default: config.donut_palette)
        config: Configuration object (default: new Config)
        annotate: Also paint the center readout and the legend row below
                  the ring, growing the surface to fit

    Returns:
        RenderResult, or None when ``data`` is empty

    Example:
        >>> result = build_donut_chart([{"key": "true", "value": 30},
        ...                             {"key": "false", "value": 70}])
        >>> result.summary.main_percentage, result.summary.main_label
        (30, 'Yes')
    """
    config = config if config is not None else Config()
    points = parse_categorical(data)
    if not points:
        logger.debug("Empty donut dataset, nothing to draw")
        return None

    palette = list(palette) if palette is not None else list(config.donut_palette)
    values = [p.value for p in points]
    total = sum(values)

    legend = [
        LegendEntry(
            label=format_label(point.key),
            value=point.value,
            color=palette_color(palette, i),
            percentage=percentage(point.value, total)
        )
        for i, point in enumerate(points)
    ]
    summary = ChartSummary(
        total=total,
        max_value=max_value(values),
        main_percentage=percentage(points[0].value, total),
        main_label=format_label(points[0].key)
    )

    size = config.donut_size
    width, height = size, size
    if annotate:
        width = max(size, len(legend) * DONUT_LEGEND_ITEM_WIDTH)
        height = size + DONUT_LEGEND_HEIGHT

    cx, cy = radial_center(width, size)
    outer_radius = size / 2 - RADIAL_MARGIN
    inner_radius = outer_radius * DONUT_INNER_RATIO

    ops = [Clear(width, height, config.background_color)]
    for i, (start, end) in enumerate(sector_angles(values)):
        ops.append(Sector(
            cx, cy, outer_radius, start, end,
            fill=legend[i].color,
            stroke=SECTOR_STROKE_COLOR,
            stroke_width=SECTOR_STROKE_WIDTH,
            inner_radius=inner_radius
        ))

    if annotate:
        ops.append(Text(
            cx, cy + 2, f"{summary.main_percentage}%",
            DONUT_CENTER_PERCENT_COLOR, DONUT_CENTER_PERCENT_SIZE,
            ha="center", va="bottom", weight="bold"
        ))
        ops.append(Text(
            cx, cy + 6, summary.main_label.upper(),
            DONUT_CENTER_LABEL_COLOR, DONUT_CENTER_LABEL_SIZE,
            ha="center", va="top"
        ))
        legend_left = (width - len(legend) * DONUT_LEGEND_ITEM_WIDTH) / 2
        ops.extend(row_legend_ops(
            legend, legend_left, size + 8, DONUT_LEGEND_ITEM_WIDTH,
            lambda entry: format_number(entry.value),
            max_length=config.label_max_length
        ))

    if total <= 0:
        logger.debug("Donut dataset total is zero, segments drawn with zero sweep")

    return RenderResult(
        kind="donut",
        width=width,
        height=height,
        ops=ops,
        legend=legend,
        summary=summary
    )


class DonutRenderer:
    """Donut chart renderer bound to a palette."""

    kind = "donut"

    def __init__(
        self,
        palette: Optional[Sequence[str]] = None,
        config: Optional[Config] = None,
        annotate: bool = False
    ):
        self.config = config if config is not None else Config()
        self.palette = list(palette) if palette is not None else list(self.config.donut_palette)
        self.annotate = annotate

    def build(self, dataset: Sequence, size: Optional[Tuple[float, float]] = None) -> Optional[RenderResult]:
        return build_donut_chart(dataset, self.palette, self.config, self.annotate)

    def render(
        self,
        dataset: Sequence,
        surface: Optional[Surface],
        size: Optional[Tuple[float, float]] = None
    ) -> Optional[RenderResult]:
        if not surface_ready(surface, self.kind):
            return None
        return draw_result(surface, self.build(dataset))
