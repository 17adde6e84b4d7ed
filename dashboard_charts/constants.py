"""
Constants and fixed parameters for DashboardCharts package.

This module defines chart kinds, plot paddings, palettes, styling constants,
and text metrics used throughout the package. All lengths are logical pixels;
the drawing surface converts them to device pixels using the device-scale
factor.
"""

# ============================================================================
# Chart Kinds
# ============================================================================

CHART_KINDS = ("bar", "line", "pie", "donut")

# ============================================================================
# Dashboard Theme
# ============================================================================

CHART_COLORS = {
    "primary": "#0070f3",
    "success": "#0070f3",
    "warning": "#f5a623",
    "danger": "#ff0080",
    "purple": "#7928ca",
    "cyan": "#50e3c2",
}

DEFAULT_BAR_COLOR = CHART_COLORS["primary"]
DEFAULT_LINE_COLOR = CHART_COLORS["primary"]
DEFAULT_PIE_PALETTE = ("#0070f3", "#7928ca", "#ff0080", "#50e3c2", "#f5a623")
DEFAULT_DONUT_PALETTE = ("#0070f3", "#666666")

BACKGROUND_COLOR = "#000000"

# ============================================================================
# Plot Geometry
# ============================================================================

# (top, right, bottom, left)
BAR_PADDING = (20.0, 20.0, 80.0, 60.0)
LINE_PADDING = (20.0, 20.0, 50.0, 60.0)

GRIDLINE_COUNT = 5

# Fraction of each bar slot left empty, split evenly on both sides
BAR_GAP_RATIO = 0.2
BAR_CORNER_RADIUS = 4.0

# Fixed square surfaces for the radial charts
PIE_SIZE = 200.0
DONUT_SIZE = 180.0
RADIAL_MARGIN = 10.0
PIE_HOLE_RATIO = 0.4
DONUT_INNER_RATIO = 0.6

# Default container box when a bar/line surface has no size yet
DEFAULT_WIDTH = 640.0
DEFAULT_HEIGHT = 320.0

# ============================================================================
# Styling Constants
# ============================================================================

GRIDLINE_COLOR = "#222222"
GRIDLINE_WIDTH = 1.0

AXIS_LABEL_COLOR = "#666666"
AXIS_LABEL_SIZE = 12.0
AXIS_LABEL_OFFSET = 10.0

CATEGORY_LABEL_SIZE = 11.0
CATEGORY_LABEL_ROTATION = -45.0
LABEL_MAX_LENGTH = 20
ELLIPSIS = "..."

VALUE_LABEL_COLOR = "#ffffff"
VALUE_LABEL_SIZE = 11.0
VALUE_LABEL_OFFSET = 5.0

# Gradient end alphas, matching the two-digit hex suffixes used by the
# dashboard stylesheet ("80" for bars, "40" for the line area).
BAR_GRADIENT_END_ALPHA = 0x80 / 255
AREA_GRADIENT_START_ALPHA = 0x40 / 255

LINE_WIDTH = 2.5
MARKER_RADIUS = 5.0
MARKER_FILL = "#000000"
MARKER_STROKE_WIDTH = 2.0
MAX_LINE_LABELS = 8

SECTOR_STROKE_COLOR = "#000000"
SECTOR_STROKE_WIDTH = 2.0
PIE_HOLE_COLOR = "#000000"

# ============================================================================
# Legend Layout
# ============================================================================

LEGEND_SWATCH_SIZE = 16.0
LEGEND_SWATCH_RADIUS = 4.0
LEGEND_GAP = 12.0
LEGEND_ROW_HEIGHT = 36.0
LEGEND_LABEL_COLOR = "#ffffff"
LEGEND_LABEL_SIZE = 14.0
LEGEND_VALUE_COLOR = "#888888"
LEGEND_VALUE_SIZE = 12.0
PIE_LEGEND_WIDTH = 220.0
DONUT_LEGEND_ITEM_WIDTH = 110.0
# longest label a row legend item fits
ROW_LEGEND_LABEL_LENGTH = 12
DONUT_LEGEND_HEIGHT = 48.0

DONUT_CENTER_PERCENT_SIZE = 32.0
DONUT_CENTER_LABEL_SIZE = 12.0
DONUT_CENTER_PERCENT_COLOR = "#0070f3"
DONUT_CENTER_LABEL_COLOR = "#888888"

# ============================================================================
# Text
# ============================================================================

FONT_FAMILY = "sans-serif"

# Locale-independent English month abbreviations
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
