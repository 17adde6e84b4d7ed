"""
Time series line chart.

Draws a gradient area under a straight polyline, a marker dot on every
sample, and thinned date labels along the bottom axis.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from ..config import Config
from ..constants import (
    AREA_GRADIENT_START_ALPHA,
    AXIS_LABEL_COLOR,
    AXIS_LABEL_OFFSET,
    CATEGORY_LABEL_SIZE,
    LINE_PADDING,
    LINE_WIDTH,
    MARKER_FILL,
    MARKER_RADIUS,
    MARKER_STROKE_WIDTH,
)
from ..formatting import format_date
from ..models import ChartSummary, parse_timeseries
from .axes import gridline_ops
from .commands import Area, Circle, Clear, Polyline, RenderResult, Text, vertical_gradient
from .geometry import Geometry, Padding, compute_geometry, max_value, scale_y
from .surface import Surface, draw_result, surface_ready

logger = logging.getLogger("dashboard_charts.rendering.line")


def point_x(index: int, count: int, geometry: Geometry) -> float:
    """Horizontal position of sample ``index``; a lone sample sits at the center."""
    if count <= 1:
        return geometry.plot_left + geometry.plot_width / 2
    return geometry.plot_left + (geometry.plot_width / (count - 1)) * index


def label_indices(count: int, max_labels: int) -> List[int]:
    """
    Indices that get a date label.

    At most ``max_labels`` evenly stepped labels starting at the first
    sample; the last sample is always labelled, even off the step cadence.
    """
    if count <= 0:
        return []
    step = math.ceil(count / min(max_labels, count))
    return [i for i in range(count) if i % step == 0 or i == count - 1]


def build_line_chart(
    data: Sequence,
    color: Optional[str] = None,
    size: Optional[Tuple[float, float]] = None,
    config: Optional[Config] = None
) -> Optional[RenderResult]:
    """
    Lay out a line chart.

    Args:
        data: TimePoints (or {"bucket", "count"} dicts), sorted by bucket
        color: Base line color (default: config.line_color)
        size: Logical (width, height) of the container box
        config: Configuration object (default: new Config)

    Returns:
        RenderResult, or None when ``data`` is empty

    Raises:
        ValueError: If a bucket is not a parseable date
    """
    config = config if config is not None else Config()
    points = parse_timeseries(data)
    if not points:
        logger.debug("Empty time series, nothing to draw")
        return None

    color = color or config.line_color
    width, height = size if size is not None else (config.default_width, config.default_height)
    geometry = compute_geometry(width, height, Padding.from_tuple(LINE_PADDING))

    counts = [p.count for p in points]
    maximum = max_value(counts)
    n = len(points)

    ops = [Clear(width, height, config.background_color)]
    ops.extend(gridline_ops(geometry, maximum, config.gridline_count))

    coords = tuple(
        (point_x(i, n, geometry), scale_y(p.count, maximum, geometry))
        for i, p in enumerate(points)
    )

    baseline = geometry.baseline
    ops.append(Area(
        points=((coords[0][0], baseline),) + coords + ((coords[-1][0], baseline),),
        fill=vertical_gradient(color, AREA_GRADIENT_START_ALPHA, 0.0, geometry.plot_top, baseline)
    ))
    ops.append(Polyline(points=coords, color=color, width=LINE_WIDTH))
    ops.extend(
        Circle(x, y, MARKER_RADIUS, fill=MARKER_FILL, stroke=color, stroke_width=MARKER_STROKE_WIDTH)
        for x, y in coords
    )

    for i in label_indices(n, config.max_line_labels):
        ops.append(Text(
            coords[i][0], baseline + AXIS_LABEL_OFFSET,
            format_date(points[i].bucket),
            AXIS_LABEL_COLOR, CATEGORY_LABEL_SIZE,
            ha="center", va="top"
        ))

    return RenderResult(
        kind="line",
        width=width,
        height=height,
        ops=ops,
        summary=ChartSummary(total=sum(counts), max_value=maximum),
        geometry=geometry
    )


class LineRenderer:
    """Line chart renderer bound to a base color."""

    kind = "line"

    def __init__(self, color: Optional[str] = None, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.color = color or self.config.line_color

    def build(self, dataset: Sequence, size: Optional[Tuple[float, float]] = None) -> Optional[RenderResult]:
        return build_line_chart(dataset, self.color, size, self.config)

    def render(
        self,
        dataset: Sequence,
        surface: Optional[Surface],
        size: Optional[Tuple[float, float]] = None
    ) -> Optional[RenderResult]:
        if not surface_ready(surface, self.kind):
            return None
        return draw_result(surface, self.build(dataset, size or surface.size))
