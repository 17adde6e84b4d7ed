"""
Draw commands produced by the chart renderers.

Renderers never touch a live surface while laying out a chart. They return a
``RenderResult`` holding an ordered list of small immutable draw operations,
which ``Surface.execute`` replays with matplotlib. Tests assert on these
operations instead of on pixels.

Conventions:
    - Coordinates are logical pixels, origin top-left, y growing downward.
    - Angles are radians in the same screen convention, so positive sweeps
      run clockwise and -pi/2 points at 12 o'clock.
    - Text rotation is in degrees, positive clockwise.
    - Lengths (line widths, font sizes, radii) are logical pixels.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Type, TypeVar, Union

import matplotlib.colors as mcolors

from ..exceptions import InvalidParameterError
from ..models import ChartSummary, LegendEntry
from .geometry import Geometry

RGBA = Tuple[float, float, float, float]
Point = Tuple[float, float]


@dataclass(frozen=True)
class LinearGradient:
    """Vertical gradient from ``start`` at ``y0`` to ``end`` at ``y1``."""

    y0: float
    y1: float
    start: RGBA
    end: RGBA


@dataclass(frozen=True)
class Clear:
    width: float
    height: float
    color: Optional[str] = None


@dataclass(frozen=True)
class Line:
    x0: float
    y0: float
    x1: float
    y1: float
    color: str
    width: float = 1.0


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    color: str
    size: float
    ha: str = "left"
    va: str = "center"
    rotation: float = 0.0
    weight: str = "normal"


@dataclass(frozen=True)
class Bar:
    """Bar with rounded top corners and a square bottom."""

    x: float
    y: float
    width: float
    height: float
    radius: float
    fill: LinearGradient


@dataclass(frozen=True)
class Area:
    """Closed polygon filled with a gradient."""

    points: Tuple[Point, ...]
    fill: LinearGradient


@dataclass(frozen=True)
class Polyline:
    points: Tuple[Point, ...]
    color: str
    width: float
    join: str = "round"
    cap: str = "round"


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    radius: float
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: float = 0.0


@dataclass(frozen=True)
class Sector:
    """Pie wedge, or a ring segment when ``inner_radius`` is positive."""

    cx: float
    cy: float
    radius: float
    start: float
    end: float
    fill: str
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    inner_radius: float = 0.0

    @property
    def sweep(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str
    radius: float = 0.0


DrawOp = Union[Clear, Line, Text, Bar, Area, Polyline, Circle, Sector, Rect]

OpT = TypeVar("OpT")


@dataclass
class RenderResult:
    """
    Everything a renderer derives from one dataset.

    Attributes:
        kind: Chart kind ("bar", "line", "pie", "donut")
        width: Logical surface width the ops were laid out for
        height: Logical surface height the ops were laid out for
        ops: Draw operations in paint order; the first is always ``Clear``
        legend: Legend entries for the caller to display
        summary: Totals and, for the donut, the main percentage/label pair
        geometry: Plot area for the cartesian charts
    """

    kind: str
    width: float
    height: float
    ops: List[DrawOp] = field(default_factory=list)
    legend: List[LegendEntry] = field(default_factory=list)
    summary: Optional[ChartSummary] = None
    geometry: Optional[Geometry] = None

    def ops_of(self, op_type: Type[OpT]) -> List[OpT]:
        """Operations of one type, in paint order."""
        return [op for op in self.ops if isinstance(op, op_type)]

    def legend_dicts(self) -> List[dict]:
        return [entry.to_dict() for entry in self.legend]


def vertical_gradient(color: str, start_alpha: float, end_alpha: float, y0: float, y1: float) -> LinearGradient:
    """
    Gradient of one base color fading between two opacities.

    Raises:
        InvalidParameterError: If ``color`` is not a matplotlib color spec
    """
    try:
        r, g, b, _a = mcolors.to_rgba(color)
    except ValueError as e:
        raise InvalidParameterError(f"Invalid color: {color!r}") from e
    return LinearGradient(y0=y0, y1=y1, start=(r, g, b, start_alpha), end=(r, g, b, end_alpha))
