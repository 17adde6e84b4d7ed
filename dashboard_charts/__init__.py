"""
DashboardCharts - Chart rendering engine for analytics dashboards.

This package turns small pre-aggregated datasets into bar, line, pie and
donut charts. Renderers compute plot geometry, value scaling, palette
assignment and legend/summary data as plain draw commands; a matplotlib
surface executes them at any device-pixel ratio.

Quick Start:
    >>> from dashboard_charts import create_chart
    >>>
    >>> # Save a bar chart
    >>> create_chart(
    ...     kind="bar",
    ...     data=[{"key": "Acme", "value": 12}, {"key": "Globex", "value": 7}],
    ...     output_path="companies.png"
    ... )

    >>> # Legend and summary without drawing anything
    >>> from dashboard_charts import get_legend, get_summary
    >>> get_summary("donut", [{"key": "true", "value": 30},
    ...                       {"key": "false", "value": 70}]).main_percentage
    30

Advanced Usage:
    >>> # Direct access to components
    >>> from dashboard_charts import Config, Surface, BarRenderer, DashboardChart
    >>>
    >>> config = Config(device_scale=2.0, bar_color="#7928ca")
    >>> with Surface(800, 300, device_scale=config.device_scale) as surface:
    ...     result = BarRenderer(config=config).render(data, surface)
    ...     surface.save("bar@2x.png")
"""

__version__ = "0.1.0"

# Initialize logging with default settings
from .logging_config import setup_logging
setup_logging()

# Core constants and configuration
from .constants import CHART_KINDS, CHART_COLORS
from .config import Config

# Dataset records
from .models import CategoricalPoint, TimePoint, LegendEntry, ChartSummary, load_dataset

# Formatting helpers
from . import formatting
from .formatting import format_label, format_date, truncate_label

# Rendering components
from .rendering import (
    Surface,
    RenderResult,
    ChartRenderer,
    BarRenderer,
    LineRenderer,
    PieRenderer,
    DonutRenderer,
    DashboardChart,
    build_bar_chart,
    build_line_chart,
    build_pie_chart,
    build_donut_chart,
    get_renderer,
    render_chart,
)

# User-facing API
from .api import create_chart, build_chart, get_legend, get_summary

# Exceptions
from .exceptions import (
    DashboardChartsError,
    DatasetError,
    RenderError,
    InvalidParameterError
)

__all__ = [
    # Version info
    "__version__",

    # Constants and config
    "CHART_KINDS",
    "CHART_COLORS",
    "Config",

    # Records
    "CategoricalPoint",
    "TimePoint",
    "LegendEntry",
    "ChartSummary",
    "load_dataset",

    # Formatting
    "formatting",
    "format_label",
    "format_date",
    "truncate_label",

    # Rendering
    "Surface",
    "RenderResult",
    "ChartRenderer",
    "BarRenderer",
    "LineRenderer",
    "PieRenderer",
    "DonutRenderer",
    "DashboardChart",
    "build_bar_chart",
    "build_line_chart",
    "build_pie_chart",
    "build_donut_chart",
    "get_renderer",
    "render_chart",

    # User-facing API
    "create_chart",
    "build_chart",
    "get_legend",
    "get_summary",

    # Exceptions
    "DashboardChartsError",
    "DatasetError",
    "RenderError",
    "InvalidParameterError",
]
