"""
Pie chart with a decorative center hole.

Slices are full sectors; the hole is a filled circle painted over them, so
the chart only looks like a ring. Use the donut chart for a true ring.
"""

import logging
from typing import Optional, Sequence, Tuple

from ..config import Config
from ..constants import (
    LEGEND_GAP,
    PIE_HOLE_COLOR,
    PIE_HOLE_RATIO,
    PIE_LEGEND_WIDTH,
    RADIAL_MARGIN,
    SECTOR_STROKE_COLOR,
    SECTOR_STROKE_WIDTH,
)
from ..formatting import format_value, percentage
from ..models import ChartSummary, LegendEntry, parse_categorical
from .commands import Circle, Clear, RenderResult, Sector
from .geometry import max_value, palette_color, radial_center, sector_angles
from .legend import column_legend_height, column_legend_ops
from .surface import Surface, draw_result, surface_ready

logger = logging.getLogger("dashboard_charts.rendering.pie")


def build_pie_chart(
    data: Sequence,
    palette: Optional[Sequence[str]] = None,
    config: Optional[Config] = None,
    annotate: bool = False
) -> Optional[RenderResult]:
    """
    Lay out a pie chart on its fixed square surface.

    Args:
        data: CategoricalPoints (or {"key", "value"} dicts)
        palette: Cyclic slice colors (default: config.pie_palette)
        config: Configuration object (default: new Config)
        annotate: Also paint the side legend, widening the surface

    Returns:
        RenderResult, or None when ``data`` is empty

    Raises:
        InvalidParameterError: If the palette is empty
    """
    config = config if config is not None else Config()
    points = parse_categorical(data)
    if not points:
        logger.debug("Empty pie dataset, nothing to draw")
        return None

    palette = list(palette) if palette is not None else list(config.pie_palette)
    values = [p.value for p in points]
    total = sum(values)

    legend = [
        LegendEntry(
            label=point.key or f"Item {i + 1}",
            value=point.value,
            color=palette_color(palette, i),
            percentage=percentage(point.value, total)
        )
        for i, point in enumerate(points)
    ]

    size = config.pie_size
    width, height = size, size
    if annotate:
        width = size + PIE_LEGEND_WIDTH
        height = max(size, column_legend_height(len(legend)))

    cx, cy = radial_center(size, size)
    radius = size / 2 - RADIAL_MARGIN

    ops = [Clear(width, height, config.background_color)]
    for i, (start, end) in enumerate(sector_angles(values)):
        ops.append(Sector(
            cx, cy, radius, start, end,
            fill=legend[i].color,
            stroke=SECTOR_STROKE_COLOR,
            stroke_width=SECTOR_STROKE_WIDTH
        ))
    ops.append(Circle(cx, cy, radius * PIE_HOLE_RATIO, fill=PIE_HOLE_COLOR))

    if annotate:
        legend_top = (height - column_legend_height(len(legend))) / 2
        ops.extend(column_legend_ops(
            legend, size + LEGEND_GAP, legend_top,
            lambda entry: f"{format_value(entry.value)} ({entry.percentage}%)",
            max_length=config.label_max_length
        ))

    if total <= 0:
        logger.debug("Pie dataset total is zero, sectors drawn with zero sweep")

    return RenderResult(
        kind="pie",
        width=width,
        height=height,
        ops=ops,
        legend=legend,
        summary=ChartSummary(total=total, max_value=max_value(values))
    )


class PieRenderer:
    """Pie chart renderer bound to a palette."""

    kind = "pie"

    def __init__(
        self,
        palette: Optional[Sequence[str]] = None,
        config: Optional[Config] = None,
        annotate: bool = False
    ):
        self.config = config if config is not None else Config()
        self.palette = list(palette) if palette is not None else list(self.config.pie_palette)
        self.annotate = annotate

    def build(self, dataset: Sequence, size: Optional[Tuple[float, float]] = None) -> Optional[RenderResult]:
        # The pie has a fixed surface size; a container box is ignored.
        return build_pie_chart(dataset, self.palette, self.config, self.annotate)

    def render(
        self,
        dataset: Sequence,
        surface: Optional[Surface],
        size: Optional[Tuple[float, float]] = None
    ) -> Optional[RenderResult]:
        if not surface_ready(surface, self.kind):
            return None
        return draw_result(surface, self.build(dataset))
