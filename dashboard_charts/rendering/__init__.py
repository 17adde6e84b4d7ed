"""
Rendering subsystem for DashboardCharts.

This module provides the chart rendering engine: plot geometry and value
scaling, four chart renderers (bar, line, pie, donut), legend layout, and a
matplotlib-backed drawing surface that replays the renderers' draw commands.

Renderers are pure layout functions. Given a dataset, a surface size and a
style they return a RenderResult holding draw operations, legend entries and
a summary. The Surface adapter executes those operations with matplotlib, so
the layout logic can be tested without looking at pixels.

Main Classes:
    Surface: Agg-backed drawing surface with a device-scale factor
    BarRenderer, LineRenderer, PieRenderer, DonutRenderer: Chart renderers
    DashboardChart: A renderer bound to a surface, redrawn on demand

Coordinate System:
    - Logical pixels, origin at the top-left corner, y growing downward
    - Angles in radians, -pi/2 at 12 o'clock, increasing clockwise
    - The device-scale factor only multiplies backing pixels

Example:
    >>> from dashboard_charts.rendering import Surface, BarRenderer
    >>>
    >>> surface = Surface.create(640, 320, device_scale=2)
    >>> result = BarRenderer(color="#0070f3").render(
    ...     [{"key": "Acme", "value": 12}, {"key": "Globex", "value": 7}],
    ...     surface
    ... )
    >>> surface.save("companies.png")
"""

from .geometry import (
    Padding,
    Geometry,
    compute_geometry,
    backing_size,
    scale_y,
    palette_color,
    sector_angles,
)
from .commands import RenderResult
from .surface import Surface
from .bar import BarRenderer, build_bar_chart
from .line import LineRenderer, build_line_chart
from .pie import PieRenderer, build_pie_chart
from .donut import DonutRenderer, build_donut_chart
from .chart import ChartRenderer, DashboardChart, get_renderer, render_chart

__all__ = [
    "Padding",
    "Geometry",
    "compute_geometry",
    "backing_size",
    "scale_y",
    "palette_color",
    "sector_angles",
    "RenderResult",
    "Surface",
    "BarRenderer",
    "LineRenderer",
    "PieRenderer",
    "DonutRenderer",
    "build_bar_chart",
    "build_line_chart",
    "build_pie_chart",
    "build_donut_chart",
    "ChartRenderer",
    "DashboardChart",
    "get_renderer",
    "render_chart",
]
